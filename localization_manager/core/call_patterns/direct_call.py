from tree_sitter import Node

from ..constants import LOCALIZE_CALL_NAME
from ..source_unit import SourceUnit
from .base import CallPattern, ExtractionResult, call_arguments, extract_string


class DirectCall(CallPattern):
    """
    nls.localize('key', 'Default value', ...args)
    The key and the default value must both be string constants.
    """

    def __init__(self, call_name: str = LOCALIZE_CALL_NAME):
        super().__init__(call_name)

    def try_extract(self, unit: SourceUnit, node: Node) -> ExtractionResult:
        args = call_arguments(node)
        if len(args) < 2:
            raise unit.error(f"'{self.short_name}' call needs at least 2 arguments", node)

        key = extract_string(unit, args[0])
        value = extract_string(unit, args[1])
        return ExtractionResult(pairs=[(key, value)])
