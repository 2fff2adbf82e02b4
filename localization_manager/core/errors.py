"""
Exception taxonomy for the localization extractor.

Discovery and configuration errors abort a run. Extraction and catalog
conflict errors are recorded per call site and the run carries on.
"""
from typing import Tuple


class LocalizationError(Exception):
    """Base class for all extractor errors."""


class DiscoveryError(LocalizationError):
    """The file pattern is malformed or the root directory cannot be scanned."""


class ConfigurationError(LocalizationError):
    """Invalid extraction options or settings file."""


class CatalogConflictError(LocalizationError):
    """A key path collides with an existing leaf or nested catalog."""


def format_error_record(file_name: str, line: int, column: int, message: str) -> str:
    """Format one error log line: ``<file>(<line>,<column>): <message>``."""
    return f"{file_name}({line},{column}): {message}"


class ExtractionError(LocalizationError):
    """
    A call site could not be extracted.
    The string form is already a complete error record with the source location.
    """

    def __init__(self, message: str, file_name: str, position: Tuple[int, int]):
        self.message = message
        self.file_name = file_name
        self.line, self.column = position
        super().__init__(format_error_record(file_name, self.line, self.column, message))

    @property
    def position(self) -> Tuple[int, int]:
        return self.line, self.column

