"""
Localized command definitions:

    Command.toLocalizedCommand({ id: 'core.save', label: 'Save', category: 'File' },
                               'theia/core/save', 'theia/core/file')

The label key is the command id unless an explicit key is given as the second
argument. The category is only translated when a category key is given as the
third argument and the command object has a category.
"""
import logging
from typing import Dict, Optional

from tree_sitter import Node

from ..constants import COMMAND_RELEVANT_PROPERTIES, LOCALIZED_COMMAND_CALL_NAME
from ..source_unit import SourceUnit
from .base import CallPattern, ExtractionResult, call_arguments, extract_string

logger = logging.getLogger(__name__)

# Object members without a name, ignored like comments
_UNNAMED_MEMBERS = {'spread_element', 'comment'}


class CommandWrapperCall(CallPattern):
    """Command.toLocalizedCommand(command, labelKey?, categoryKey?)"""

    def __init__(self, call_name: str = LOCALIZED_COMMAND_CALL_NAME):
        super().__init__(call_name)

    def try_extract(self, unit: SourceUnit, node: Node) -> ExtractionResult:
        args = call_arguments(node)
        if len(args) < 1:
            raise unit.error(f"'{self.short_name}' call needs at least 1 argument", node)

        command = args[0]
        if command.type != 'object':
            raise unit.error(
                f"First argument of '{self.short_name}' needs to be an object literal", node)

        properties = self._read_properties(unit, command)

        label_key = properties.get('id')
        category_key: Optional[str] = None

        # Explicit label key; an empty string falls back to the command id
        if len(args) > 1:
            label_key = extract_string(unit, args[1]) or label_key

        # Explicit category key
        if len(args) > 2:
            category_key = extract_string(unit, args[2])

        if not label_key:
            raise unit.error("No label key found", node)

        label = properties.get('label')
        if not label:
            raise unit.error("No default label found", node)

        result = ExtractionResult(pairs=[(label_key, label)])

        category = properties.get('category')
        if category_key and category:
            result.pairs.append((category_key, category))
        elif category_key or category:
            logger.debug(f"{unit.file_name}: category of '{label_key}' skipped, "
                         f"key={category_key!r} value={category!r}")
        return result

    def _read_properties(self, unit: SourceUnit, command: Node) -> Dict[str, str]:
        """Collect the relevant string properties of the command object literal."""
        properties: Dict[str, str] = {}
        for member in command.named_children:
            if member.type in _UNNAMED_MEMBERS:
                continue
            if member.type != 'pair':
                raise unit.error(
                    f"Only property assignments in '{self.short_name}' are allowed", member)

            name_node = member.child_by_field_name('key')
            if name_node is None or name_node.type != 'property_identifier':
                raise unit.error(
                    f"Only identifiers are allowed in '{self.short_name}'", member)

            name = unit.text_of(name_node)
            if name not in COMMAND_RELEVANT_PROPERTIES:
                continue

            properties[name] = extract_string(unit, member.child_by_field_name('value'))
        return properties
