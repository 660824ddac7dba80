"""Unit tests for AstroidStructureGateway."""

import astroid

from literal_indent_linter.domain.entities import StructureKind
from literal_indent_linter.domain.text_index import SourceBuffer
from literal_indent_linter.infrastructure.gateways.astroid_gateway import AstroidStructureGateway


class TestParse:
    """Structure trees built from source text."""

    def test_root_spans_whole_buffer(self, structure_gateway: AstroidStructureGateway) -> None:
        text = "x = 1\n"
        root = structure_gateway.parse(text)
        assert root is not None
        assert root.kind == StructureKind.MODULE.value
        assert (root.offset, root.length) == (0, len(text))
        assert root.substructure == ()

    def test_list_offsets_cover_brackets(self, structure_gateway: AstroidStructureGateway) -> None:
        root = structure_gateway.parse("x = [\n   1,\n   2\n   ]")
        assert root is not None
        (literal,) = root.substructure
        assert literal.kind == StructureKind.ARRAY.value
        assert (literal.offset, literal.length) == (4, 17)
        assert [e.offset for e in literal.elements] == [9, 15]
        assert all(e.kind == StructureKind.ELEMENT.value for e in literal.elements)

    def test_dict_elements_are_keys(self, structure_gateway: AstroidStructureGateway) -> None:
        root = structure_gateway.parse("d = {\n    'a': 1,\n    **rest,\n}\n")
        assert root is not None
        (literal,) = root.substructure
        assert literal.kind == StructureKind.DICTIONARY.value
        # 'a' key at line 2, `rest` value at line 3 (after the two stars).
        assert [e.offset for e in literal.elements] == [10, 24]

    def test_nested_literals_become_substructure(self, structure_gateway: AstroidStructureGateway) -> None:
        root = structure_gateway.parse("x = {'k': [1, [2]]}\n")
        assert root is not None
        (outer,) = root.substructure
        (middle,) = outer.substructure
        (inner,) = middle.substructure
        assert [n.kind for n in (outer, middle, inner)] == ["dictionary", "array", "array"]

    def test_literals_found_inside_functions_and_calls(self, structure_gateway: AstroidStructureGateway) -> None:
        text = "def f():\n    return g([1], {'a': 2})\n"
        root = structure_gateway.parse(text)
        assert root is not None
        assert [n.kind for n in root.substructure] == ["array", "dictionary"]

    def test_tuples_sets_and_comprehensions_ignored(self, structure_gateway: AstroidStructureGateway) -> None:
        root = structure_gateway.parse("a = (1, 2)\nb = {1, 2}\nc = [i for i in a]\n")
        assert root is not None
        assert root.substructure == ()

    def test_source_is_not_dedented(self, structure_gateway: AstroidStructureGateway) -> None:
        text = "if True:\n    x = [1]\n"
        root = structure_gateway.parse(text)
        assert root is not None
        (literal,) = root.substructure
        assert literal.offset == 17

    def test_multibyte_prefix_uses_byte_offsets(self, structure_gateway: AstroidStructureGateway) -> None:
        root = structure_gateway.parse("é = [1]\n")
        assert root is not None
        (literal,) = root.substructure
        assert literal.offset == 5

    def test_syntax_error_returns_none(self, structure_gateway: AstroidStructureGateway) -> None:
        assert structure_gateway.parse("x = [\n") is None


class TestFromModule:
    """Reuse of a module astroid already built."""

    def test_from_module_matches_parse(self, structure_gateway: AstroidStructureGateway) -> None:
        text = "x = [\n   1,\n   2\n   ]"
        module = astroid.parse(text)
        built = structure_gateway.from_module(module, SourceBuffer(text))
        assert built == structure_gateway.parse(text)

    def test_module_built_without_bom_maps_onto_bom_buffer(self, structure_gateway: AstroidStructureGateway) -> None:
        # pylint hands over a module decoded with utf-8-sig while the raw bytes keep the BOM.
        module = astroid.parse("x = [\n    1,\n    ]\n")
        built = structure_gateway.from_module(module, SourceBuffer("\ufeffx = [\n    1,\n    ]\n"))
        (literal,) = built.substructure
        assert (literal.offset, literal.length) == (7, 14)
        assert [e.offset for e in literal.elements] == [13]


class TestByteOrderMark:
    """Sources saved with a leading UTF-8 BOM."""

    def test_bom_prefixed_text_parses(self, structure_gateway: AstroidStructureGateway) -> None:
        text = "\ufeffx = [\n    1,\n    ]\n"
        root = structure_gateway.parse(text)
        assert root is not None
        assert (root.offset, root.length) == (0, len(text.encode("utf-8")))
        (literal,) = root.substructure
        assert (literal.offset, literal.length) == (7, 14)
        assert [e.offset for e in literal.elements] == [13]

    def test_build_module_strips_bom(self, structure_gateway: AstroidStructureGateway) -> None:
        module = structure_gateway.build_module(SourceBuffer("\ufeffx = 1\n"))
        assert module is not None
        assert module.body[0].col_offset == 0
