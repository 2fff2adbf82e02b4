"""
Registry of the call patterns the extractor recognizes.
Patterns run in registry order, each over the whole file.
"""
from typing import List

from .call_patterns.base import CallPattern
from .call_patterns.command_wrapper import CommandWrapperCall
from .call_patterns.direct_call import DirectCall

# --- REGISTRY ---

_CALL_PATTERNS: List[CallPattern] = [
    DirectCall(),
    CommandWrapperCall(),
]


def get_call_patterns() -> List[CallPattern]:
    """All registered patterns, direct localize calls first."""
    return list(_CALL_PATTERNS)
