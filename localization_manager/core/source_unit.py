"""
Single-file syntax analysis for TypeScript/JavaScript sources.

A SourceUnit wraps the text of one file and its tree-sitter syntax tree.
Nothing outside the file is resolved (imports, types, declarations), so a
broken file elsewhere in the project never blocks extraction from this one,
and tests can build a unit straight from a string.
"""
import bisect
import logging
import os
import re
from typing import Dict, List, Optional, Tuple

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .constants import TSX_SUFFIXES, TYPESCRIPT_SUFFIXES
from .errors import ExtractionError

logger = logging.getLogger(__name__)

GRAMMAR_TYPESCRIPT = "typescript"
GRAMMAR_TSX = "tsx"

# Cached parsers, one per grammar
_PARSERS: Dict[str, Parser] = {}


def grammar_for(file_name: str) -> str:
    """Pick the grammar for a file name; unknown suffixes are parsed as TypeScript."""
    ext = os.path.splitext(file_name)[1].lower()
    if ext in TSX_SUFFIXES:
        return GRAMMAR_TSX
    if ext not in TYPESCRIPT_SUFFIXES:
        logger.debug(f"Unknown suffix '{ext}' for {file_name}, parsing as TypeScript")
    return GRAMMAR_TYPESCRIPT


def get_parser(grammar: str) -> Parser:
    """Lazy-load the tree-sitter parser for a grammar."""
    parser = _PARSERS.get(grammar)
    if parser is None:
        if grammar == GRAMMAR_TSX:
            language = Language(tree_sitter_typescript.language_tsx())
        else:
            language = Language(tree_sitter_typescript.language_typescript())
        parser = Parser(language)
        _PARSERS[grammar] = parser
    return parser


class SourceUnit:
    """One in-memory source file and its syntax tree."""

    def __init__(self, file_name: str, content: bytes, grammar: Optional[str] = None):
        """
        Args:
            file_name: Path reported in error records
            content: UTF-8 encoded source text
            grammar: Force a grammar instead of picking one from the suffix
        """
        self.file_name = file_name
        self.content = content
        self.grammar = grammar or grammar_for(file_name)
        self.tree = get_parser(self.grammar).parse(content)
        self._line_starts = self._compute_line_starts(content)

        if self.has_syntax_errors:
            logger.debug(f"{file_name} has syntax errors, extracting what can be parsed")

    @classmethod
    def from_text(cls, file_name: str, text: str, grammar: Optional[str] = None) -> "SourceUnit":
        return cls(file_name, text.encode("utf-8"), grammar)

    @staticmethod
    def _compute_line_starts(content: bytes) -> List[int]:
        return [0] + [match.end() for match in re.finditer(rb"\n", content)]

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_syntax_errors(self) -> bool:
        return self.tree.root_node.has_error

    def text_of(self, node: Node) -> str:
        """Exact source text covered by a node."""
        return self.content[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def position_of(self, offset: int) -> Tuple[int, int]:
        """Map a byte offset to a 1-based (line, column); columns count characters."""
        offset = max(0, min(offset, len(self.content)))
        line_index = bisect.bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line_index]
        column = len(self.content[line_start:offset].decode("utf-8", errors="replace"))
        return line_index + 1, column + 1

    def location_of(self, node: Node) -> Tuple[int, int]:
        return self.position_of(node.start_byte)

    def error(self, message: str, node: Node) -> ExtractionError:
        """Build an ExtractionError pointing at a node of this file."""
        return ExtractionError(message, self.file_name, self.location_of(node))
