import json
import logging
import os
from typing import Any, Dict

from localization_manager.core.constants import DEFAULT_CONFIG_FILE
from localization_manager.core.errors import ConfigurationError


class SettingsStore:
    """
    JSON settings file holding default extraction options, e.g.

        {"root": "packages", "output": "i18n/nls.json", "exclude": "vscode/", "merge": true}
    """

    def __init__(self, filename: str = DEFAULT_CONFIG_FILE):
        self.logger = logging.getLogger(__name__)
        self.path = os.path.abspath(filename)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def load(self) -> Dict[str, Any]:
        """Return the stored settings, or an empty dict when the file does not exist."""
        if not self.exists():
            self.logger.debug(f"No settings file at {self.path}")
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load settings from {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {self.path} must contain a JSON object")
        self.logger.debug(f"Loaded {len(data)} settings from {self.path}")
        return data
