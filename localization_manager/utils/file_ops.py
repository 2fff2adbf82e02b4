import json
import os
import re
from contextlib import contextmanager
import logging
from typing import Any, Iterable

logger = logging.getLogger(__name__)

# Surrogates left unpaired by string decoding; UTF-8 cannot encode them
_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")

@contextmanager
def safe_write(filepath, mode='w', encoding='utf-8', **kwargs):
    """
    Write to a temporary file next to `filepath` and move it into place on success.
    If anything fails, the original file is untouched and the temporary file removed.

    Args:
        filepath: Path to the target file
        mode: Open mode ('w', 'wb', etc.)
        encoding: Encoding for text mode (default: utf-8)
        **kwargs: Additional arguments passed to open()
    """
    dir_name = os.path.dirname(os.path.abspath(filepath))
    file_name = os.path.basename(filepath)
    os.makedirs(dir_name, exist_ok=True)

    # Same directory as the target so os.replace stays atomic
    temp_path = os.path.join(dir_name, f".{file_name}.tmp")

    f = None
    try:
        if 'b' in mode:
            f = open(temp_path, mode, **kwargs)
        else:
            f = open(temp_path, mode, encoding=encoding, **kwargs)

        yield f

        f.flush()
        os.fsync(f.fileno())
        f.close()
        f = None

        os.replace(temp_path, filepath)

    except Exception as e:
        logger.error(f"Failed to write {filepath}: {e}")
        if f:
            try:
                f.close()
            except OSError as close_err:
                logger.debug(f"Error closing temp file: {close_err}")

        if os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError as os_err:
                logger.warning(f"Failed to remove temp file {temp_path}: {os_err}")
        raise


def write_json(filepath: str, data: Any, indent: int = 4) -> None:
    """
    Write `data` as UTF-8 JSON with a trailing newline, replacing the file atomically.
    Unpaired surrogates are written as \\uXXXX escapes.
    """
    with safe_write(filepath, 'w', encoding='utf-8') as f:
        text = json.dumps(data, ensure_ascii=False, indent=indent)
        f.write(_SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text))
        f.write('\n')


def read_json(filepath: str) -> Any:
    """Load a UTF-8 JSON file. A byte order mark is tolerated."""
    with open(filepath, 'r', encoding='utf-8-sig') as f:
        return json.load(f)


def write_lines(filepath: str, lines: Iterable[str]) -> None:
    """Write lines joined by the platform line separator (no trailing separator)."""
    with safe_write(filepath, 'w', encoding='utf-8', newline='') as f:
        f.write(os.linesep.join(lines))
