"""
Source file discovery for the extractor.
"""
import logging
import os
from pathlib import PurePath
from typing import List, Optional

from wcmatch import glob

from localization_manager.core.constants import DEFAULT_PATTERN
from localization_manager.core.errors import DiscoveryError

logger = logging.getLogger(__name__)

# '**' crosses directories, '{a,b}' alternates, dot entries need an explicit '.'
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.NODIR


def resolve_root(root: str) -> str:
    """Resolve the scan root against the current working directory."""
    return os.path.abspath(os.path.join(os.getcwd(), root))


def discover_files(root: str, pattern: Optional[str] = None) -> List[str]:
    """
    Find the files matching a glob pattern below `root`.

    Args:
        root: Directory to scan, relative paths are resolved against the cwd
        pattern: Glob relative to root, '**' crosses directories and
                 '{ts,tsx}' expands to alternatives
                 (default: every .ts file below a 'src' directory)

    Returns:
        Sorted absolute file paths. An empty list is not an error.

    Raises:
        DiscoveryError: malformed pattern, or root missing / not readable
    """
    pattern = DEFAULT_PATTERN if pattern is None else pattern
    base = resolve_root(root)

    if not pattern.strip():
        raise DiscoveryError("File pattern must not be empty")
    if PurePath(pattern).is_absolute():
        raise DiscoveryError(f"File pattern must be relative to the root: '{pattern}'")
    if not os.path.isdir(base):
        raise DiscoveryError(f"Root directory not found: {base}")

    try:
        matches = glob.glob(pattern, flags=GLOB_FLAGS, root_dir=base)
    except ValueError as e:
        raise DiscoveryError(f"Invalid file pattern '{pattern}': {e}") from e
    except OSError as e:
        raise DiscoveryError(f"Cannot scan {base}: {e}") from e

    # Sort for consistent ordering; brace alternatives may overlap
    files = sorted({os.path.normpath(os.path.join(base, match)) for match in matches})
    logger.debug(f"Pattern '{pattern}' matched {len(files)} files below {base}")
    return files
