"""
Base classes for translation call patterns.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Tuple

from tree_sitter import Node

from ..source_unit import SourceUnit
from ..string_literals import decode_literal

# (translation key, default value)
ExtractedPair = Tuple[str, str]


@dataclass
class ExtractionResult:
    """Pairs extracted from one call site, in the order they should be inserted."""
    pairs: List[ExtractedPair] = field(default_factory=list)


class CallPattern(ABC):
    """
    Abstract base class for a recognized call shape.
    A call expression matches when its callee reads exactly `call_name`.
    """

    def __init__(self, call_name: str):
        self.call_name = call_name

    @property
    def short_name(self) -> str:
        """Last segment of the callee, used in error messages."""
        return self.call_name.rsplit('.', 1)[-1]

    def matches(self, unit: SourceUnit, node: Node) -> bool:
        if node.type != 'call_expression':
            return False
        arguments = node.child_by_field_name('arguments')
        # Tagged templates are call_expressions too, but without an argument list
        if arguments is None or arguments.type != 'arguments':
            return False
        callee = node.child_by_field_name('function')
        return callee is not None and unit.text_of(callee) == self.call_name

    @abstractmethod
    def try_extract(self, unit: SourceUnit, node: Node) -> ExtractionResult:
        """
        Extract translation pairs from a matched call site.

        Args:
            unit: Source file the node belongs to
            node: A call_expression accepted by matches()

        Returns:
            ExtractionResult with at least one pair

        Raises:
            ExtractionError: the call does not have the expected shape
        """
        pass


def call_arguments(node: Node) -> List[Node]:
    """Argument expressions of a call, comments left out."""
    arguments = node.child_by_field_name('arguments')
    if arguments is None:
        return []
    return [child for child in arguments.named_children if child.type != 'comment']


def extract_string(unit: SourceUnit, node: Node) -> str:
    """Decoded value of a plain string literal; anything else is an extraction error."""
    if node.type != 'string':
        raise unit.error(f"'{unit.text_of(node)}' is not a string constant", node)
    return decode_literal(unit.text_of(node))
