from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from i18nscan.extractor import tscore
from i18nscan.extractor.callee import (
    MAX_DEPTH,
    OtherExpr,
    QualifiedAccess,
    SimpleName,
    classify_callee,
    resolve_identifier,
)

if TYPE_CHECKING:
    from tree_sitter import Node


def _callee(expression: str) -> Node:
    """Parse ``expression`` as a statement and return the outermost call's function node."""
    source = f"package main\n\nfunc main() {{\n\t{expression}\n}}\n".encode()
    tree = tscore.parse_go_source(source)
    for node in tscore.iter_nodes(tree.root_node):
        if node.type == "call_expression":
            function = node.child_by_field_name("function")
            assert function is not None
            return function
    pytest.fail(f"no call expression in {expression!r}")


def _qualified(depth: int) -> str:
    qualifiers = ".".join(chr(ord("a") + i) for i in range(depth))
    return f'{qualifiers}.T("x")'


class TestClassifyCallee:
    """Tests for the callee shape variant."""

    def test_bare_identifier(self) -> None:
        assert classify_callee(_callee('T("x")')) == SimpleName("T")

    def test_selector(self) -> None:
        shape = classify_callee(_callee('i18n.T("x")'))
        assert isinstance(shape, QualifiedAccess)
        assert shape.field.type == "field_identifier"

    @pytest.mark.parametrize(
        "expression",
        [
            'get()("x")',
            'fns["t"]("x")',
        ],
    )
    def test_other_shapes(self, expression: str) -> None:
        assert isinstance(classify_callee(_callee(expression)), OtherExpr)


class TestResolveIdentifier:
    """Tests for bounded identifier resolution."""

    def test_simple_name(self) -> None:
        assert resolve_identifier(_callee('T("x")')) == "T"

    def test_single_qualifier(self) -> None:
        assert resolve_identifier(_callee('fmt.Println("x")')) == "Println"

    @pytest.mark.parametrize("depth", range(1, MAX_DEPTH + 1))
    def test_resolves_up_to_max_depth(self, depth: int) -> None:
        assert resolve_identifier(_callee(_qualified(depth))) == "T"

    def test_sixth_level_does_not_resolve(self) -> None:
        assert resolve_identifier(_callee(_qualified(MAX_DEPTH + 1))) is None

    def test_very_deep_chain_does_not_crash(self) -> None:
        assert resolve_identifier(_callee(_qualified(20))) is None

    def test_operand_call_resolves_trailing_name(self) -> None:
        assert resolve_identifier(_callee('locale().T("x")')) == "T"

    @pytest.mark.parametrize(
        "expression",
        [
            'get()("x")',
            'fns["t"]("x")',
        ],
    )
    def test_other_shapes_resolve_to_none(self, expression: str) -> None:
        assert resolve_identifier(_callee(expression)) is None

    def test_starting_depth_counts_against_limit(self) -> None:
        assert resolve_identifier(_callee('a.T("x")'), depth=MAX_DEPTH) is None
        assert resolve_identifier(_callee('T("x")'), depth=MAX_DEPTH) == "T"
