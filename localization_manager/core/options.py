"""
Extraction options.
One immutable value object per run, built from code, a settings file or the CLI.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .constants import DEFAULT_PATTERN
from .errors import ConfigurationError


@dataclass(frozen=True)
class ExtractionOptions:
    """
    root: directory to scan, resolved against the working directory
    output: destination of the final catalog
    exclude: keys starting with this prefix are dropped silently
    logs: destination of the newline-joined error records
    pattern: glob relative to root (None means DEFAULT_PATTERN)
    merge: layer the new catalog over an existing output file
    """
    root: str
    output: str
    exclude: Optional[str] = None
    logs: Optional[str] = None
    pattern: Optional[str] = None
    merge: bool = False

    @property
    def effective_pattern(self) -> str:
        return self.pattern or DEFAULT_PATTERN

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "ExtractionOptions":
        """
        Build options from a settings mapping (settings file or parsed CLI args).
        Keys with a None value are treated as absent.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(settings) - known)
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")

        values = {k: v for k, v in settings.items() if v is not None}
        for required in ("root", "output"):
            if not values.get(required):
                raise ConfigurationError(f"Missing required option '{required}'")

        for name in ("root", "output", "exclude", "logs", "pattern"):
            if name in values and not isinstance(values[name], str):
                raise ConfigurationError(f"Option '{name}' must be a string")
        if "merge" in values and not isinstance(values["merge"], bool):
            raise ConfigurationError("Option 'merge' must be a boolean")

        return cls(**values)
