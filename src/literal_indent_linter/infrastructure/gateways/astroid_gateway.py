"""Astroid Structure Gateway - builds the structural index of list and dict literals."""

import logging
from typing import Iterable, Optional, Union

import astroid  # type: ignore[import-untyped]
from astroid.builder import AstroidBuilder  # type: ignore[import-untyped]

from literal_indent_linter.domain.entities import StructureKind, StructureNode
from literal_indent_linter.domain.protocols import ModuleStructureProtocol
from literal_indent_linter.domain.text_index import SourceBuffer

logger = logging.getLogger(__name__)

LiteralNode = Union[astroid.nodes.List, astroid.nodes.Dict]


class AstroidStructureGateway(ModuleStructureProtocol):
    """
    Parse Python source with astroid and expose list/dict literals as structure nodes.

    Astroid reports `col_offset`/`end_col_offset` as UTF-8 byte columns, so
    (line, byte column) pairs map directly onto byte offsets of the buffer.
    Only literal nodes are kept in the tree: the root's substructure holds the
    outermost literals and every literal holds the literals nested inside it.
    """

    def __init__(self) -> None:
        # astroid.parse() dedents its input, which would shift every column.
        self._builder = AstroidBuilder(astroid.MANAGER, apply_transforms=False)

    def build_module(self, buffer: SourceBuffer) -> Optional[astroid.nodes.Module]:
        """Build an astroid module for the buffer; None when it does not parse."""
        try:
            return self._builder.string_build(buffer.code_text)
        except (astroid.AstroidBuildingError, ValueError, RecursionError) as exc:
            logger.debug("Structure unavailable: %s", exc)
            return None

    def parse(self, text: str) -> Optional[StructureNode]:
        """Parse source text; None when astroid cannot build a module from it."""
        buffer = SourceBuffer(text)
        module = self.build_module(buffer)
        if module is None:
            return None
        return self.from_module(module, buffer)

    def from_module(self, module: astroid.nodes.Module, buffer: SourceBuffer) -> StructureNode:
        """Build the structure tree for an already parsed module."""
        return StructureNode(
            kind=StructureKind.MODULE.value,
            offset=0,
            length=len(buffer),
            substructure=self._collect(module, buffer),
        )

    def _collect(self, node: astroid.nodes.NodeNG, buffer: SourceBuffer) -> tuple[StructureNode, ...]:
        """Literals directly below `node`, looking through non-literal nodes."""
        found: list[StructureNode] = []
        for child in node.get_children():
            if isinstance(child, (astroid.nodes.List, astroid.nodes.Dict)):
                found.append(self._literal(child, buffer))
            else:
                found.extend(self._collect(child, buffer))
        return tuple(found)

    def _literal(self, node: LiteralNode, buffer: SourceBuffer) -> StructureNode:
        offset = self._offset(buffer, node.lineno, node.col_offset)
        end = self._offset(buffer, node.end_lineno, node.end_col_offset)
        length = end - offset if offset is not None and end is not None else None
        kind = StructureKind.ARRAY if isinstance(node, astroid.nodes.List) else StructureKind.DICTIONARY
        elements = tuple(
            StructureNode(
                kind=StructureKind.ELEMENT.value,
                offset=self._offset(buffer, element.lineno, element.col_offset),
            )
            for element in self._element_nodes(node)
        )
        return StructureNode(
            kind=kind.value,
            offset=offset,
            length=length,
            elements=elements,
            substructure=self._collect(node, buffer),
        )

    @staticmethod
    def _element_nodes(node: LiteralNode) -> Iterable[astroid.nodes.NodeNG]:
        if isinstance(node, astroid.nodes.List):
            return list(node.elts)
        # `**mapping` entries carry a DictUnpack marker as key; position on the value.
        return [
            value if isinstance(key, astroid.nodes.DictUnpack) else key
            for key, value in node.items
        ]

    @staticmethod
    def _offset(buffer: SourceBuffer, lineno: Optional[int], col_offset: Optional[int]) -> Optional[int]:
        if lineno is None or col_offset is None:
            return None
        if lineno == 1:
            # astroid columns on the first line do not count the byte order mark.
            col_offset += buffer.bom_width
        return buffer.byte_offset(lineno, col_offset)
