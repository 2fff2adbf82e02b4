"""
Localization Extractor.
Orchestrates a whole extraction run:
- Source file discovery
- Per-file call-site extraction with isolated error handling
- Catalog aggregation and optional merge with the existing output
- Error log and catalog writing
"""
import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from PyQt6.QtCore import QObject, pyqtSignal as Signal

from .call_patterns.base import CallPattern
from .catalog import Localization, count_entries, deep_merge, insert, is_excluded
from .collector import collect
from .constants import JSON_INDENT
from .enums import ExtractionStage
from .errors import CatalogConflictError, ExtractionError, LocalizationError, format_error_record
from .options import ExtractionOptions
from .pattern_registry import get_call_patterns
from .source_unit import SourceUnit
from localization_manager.utils.file_discovery import discover_files, resolve_root
from localization_manager.utils.file_ops import read_json, write_json, write_lines

UTF8_BOM = b'\xef\xbb\xbf'


@dataclass
class ExtractionSummary:
    """Outcome of one extraction run."""
    output_path: str
    files: int = 0
    entries: int = 0
    errors: List[str] = field(default_factory=list)
    merged: bool = False


def _read_source(file_path: str) -> bytes:
    with open(file_path, 'rb') as f:
        content = f.read()
    if content.startswith(UTF8_BOM):
        content = content[len(UTF8_BOM):]
    return content


class LocalizationExtractor(QObject):
    """
    Extracts translation keys and default values from a source tree.
    """

    # Signals for front ends
    stage_changed = Signal(str, str)          # stage_value, message
    progress_updated = Signal(int, int, str)  # current, total, file
    log_message = Signal(str, str)            # level, message
    finished = Signal(bool, str)              # success, message

    def __init__(self, options: ExtractionOptions, patterns: Optional[List[CallPattern]] = None):
        """
        Args:
            options: Extraction options for the run
            patterns: Call patterns to recognize (default: the registry)
        """
        super().__init__()
        self.options = options
        self.patterns = patterns if patterns is not None else get_call_patterns()
        self.logger = logging.getLogger(__name__)

    def run(self) -> Optional[ExtractionSummary]:
        """Synchronous entry point. Returns None when the run failed."""
        try:
            return asyncio.run(self.extract())
        except (LocalizationError, OSError, ValueError) as e:
            self.logger.exception("Extraction Error")
            self.stage_changed.emit(ExtractionStage.ERROR.value, str(e))
            self.finished.emit(False, str(e))
            return None

    async def extract(self) -> ExtractionSummary:
        """
        Execute a full run and write the catalog.

        Raises:
            DiscoveryError: the pattern or root directory is unusable
            OSError: a source file, the existing catalog or an output can't be accessed
            ValueError: the existing catalog is not valid JSON / not an object
        """
        options = self.options
        output = os.path.abspath(options.output)
        summary = ExtractionSummary(output_path=output)

        self.stage_changed.emit(ExtractionStage.DISCOVERING.value, "Scanning sources...")
        cwd = resolve_root(options.root)
        files = await asyncio.to_thread(discover_files, cwd, options.effective_pattern)
        summary.files = len(files)
        self.log_message.emit("info", f"Found {len(files)} files in {cwd}")

        self.stage_changed.emit(ExtractionStage.EXTRACTING.value, "Extracting translations...")
        localization: Localization = {}
        for index, file_path in enumerate(files, start=1):
            self.progress_updated.emit(index, len(files), os.path.relpath(file_path, cwd))
            file_localization = await self.extract_from_file(file_path, summary.errors)
            localization = deep_merge(localization, file_localization)

        if summary.errors and options.logs:
            await asyncio.to_thread(write_lines, options.logs, summary.errors)
            self.log_message.emit("info", f"Wrote {len(summary.errors)} errors to {options.logs}")

        if options.merge and os.path.exists(output):
            self.stage_changed.emit(ExtractionStage.MERGING.value, "Merging with existing translations...")
            existing = await asyncio.to_thread(read_json, output)
            if not isinstance(existing, dict):
                raise ValueError(f"Existing catalog {output} must contain a JSON object")
            localization = deep_merge(existing, localization)
            summary.merged = True

        self.stage_changed.emit(ExtractionStage.SAVING.value, "Saving translations...")
        await asyncio.to_thread(write_json, output, localization, JSON_INDENT)
        summary.entries = count_entries(localization)

        message = (f"Extracted {summary.entries} translations from {summary.files} files "
                   f"({len(summary.errors)} errors)")
        self.logger.info(message)
        self.stage_changed.emit(ExtractionStage.COMPLETED.value, "Done!")
        self.finished.emit(True, message)
        return summary

    async def extract_from_file(self, file_path: str, errors: List[str]) -> Localization:
        """
        Build the catalog fragment of one file.
        Call-site and key conflict errors are appended to `errors`, never raised.
        """
        content = await asyncio.to_thread(_read_source, file_path)
        unit = SourceUnit(file_path, content)
        return self.extract_from_unit(unit, errors)

    def extract_from_unit(self, unit: SourceUnit, errors: List[str]) -> Localization:
        """Run every call pattern over an already parsed file."""
        localization: Localization = {}
        for pattern in self.patterns:
            calls = collect(unit.root, lambda node: pattern.matches(unit, node))
            for call in calls:
                try:
                    result = pattern.try_extract(unit, call)
                except ExtractionError as e:
                    self._record_error(errors, str(e))
                    continue
                for key, value in result.pairs:
                    if is_excluded(key, self.options.exclude):
                        continue
                    try:
                        insert(localization, key, value)
                    except CatalogConflictError as e:
                        line, column = unit.location_of(call)
                        self._record_error(errors, format_error_record(unit.file_name, line, column, str(e)))
        return localization

    def _record_error(self, errors: List[str], record: str):
        errors.append(record)
        self.logger.warning(record)
        self.log_message.emit("warning", record)


async def extract(options: ExtractionOptions) -> ExtractionSummary:
    """Run a full extraction with the registered call patterns."""
    return await LocalizationExtractor(options).extract()


async def extract_from_file(file_path: str, options: ExtractionOptions, errors: List[str]) -> Localization:
    """Catalog fragment of a single file; errors are appended to `errors`."""
    return await LocalizationExtractor(options).extract_from_file(file_path, errors)


def run_extraction(options: ExtractionOptions) -> ExtractionSummary:
    """Blocking variant of extract() for synchronous callers."""
    return asyncio.run(extract(options))
