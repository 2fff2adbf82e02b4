"""Extract localization keys and default values from TypeScript sources.

Usage:
    nls-extract
    nls-extract --root packages --output i18n/nls.json
    nls-extract -r packages -o i18n/nls.json --exclude vscode/ --logs nls-errors.log --merge
    nls-extract --config nls-extract.json --verbose

Options not given on the command line are read from the settings file
(default: ./nls-extract.json, when present).
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from localization_manager.core.constants import DEFAULT_CONFIG_FILE, DEFAULT_OUTPUT, DEFAULT_PATTERN
from localization_manager.core.errors import LocalizationError
from localization_manager.core.extractor import LocalizationExtractor
from localization_manager.core.options import ExtractionOptions
from localization_manager.utils.logger import setup_logger
from localization_manager.utils.settings_store import SettingsStore

OPTION_DEFAULTS = {
    "root": ".",
    "output": DEFAULT_OUTPUT,
    "merge": False,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nls-extract",
        description="Extract translation keys from nls.localize and Command.toLocalizedCommand calls.",
    )
    parser.add_argument("-r", "--root", default=None,
                        help="Directory to scan. Default: current directory.")
    parser.add_argument("-o", "--output", default=None,
                        help=f"Output JSON catalog. Default: ./{DEFAULT_OUTPUT}")
    parser.add_argument("-e", "--exclude", default=None,
                        help="Drop every key starting with this prefix.")
    parser.add_argument("-l", "--logs", default=None,
                        help="Write extraction errors to this file.")
    parser.add_argument("-p", "--pattern", default=None,
                        help=f"Glob pattern of source files relative to root. Default: {DEFAULT_PATTERN}")
    parser.add_argument("-m", "--merge", action="store_true", default=None,
                        help="Merge into the existing output catalog instead of overwriting it.")
    parser.add_argument("-c", "--config", default=None,
                        help=f"JSON settings file. Default: ./{DEFAULT_CONFIG_FILE} if it exists.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show debug output.")
    return parser


def resolve_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Defaults, then the settings file, then command line flags."""
    store = SettingsStore(args.config or DEFAULT_CONFIG_FILE)
    if args.config and not store.exists():
        raise LocalizationError(f"Settings file not found: {args.config}")

    settings = dict(OPTION_DEFAULTS)
    settings.update(store.load())
    for name in ("root", "output", "exclude", "logs", "pattern", "merge"):
        value = getattr(args, name)
        if value is not None:
            settings[name] = value
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger(verbose=args.verbose)

    try:
        options = ExtractionOptions.from_settings(resolve_settings(args))
    except LocalizationError as e:
        logger.error(str(e))
        return 1

    def forward(level: str, message: str):
        # Warnings are logged by the extractor itself
        if level == "info":
            logger.info(message)

    extractor = LocalizationExtractor(options)
    extractor.log_message.connect(forward)

    summary = extractor.run()
    if summary is None:
        return 1

    logger.info(f"Catalog written to {summary.output_path}")
    if summary.errors and not options.logs:
        logger.warning(f"{len(summary.errors)} call sites could not be extracted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
