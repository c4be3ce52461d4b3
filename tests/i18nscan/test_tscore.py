from __future__ import annotations

import pytest
from tree_sitter import Language

from i18nscan.extractor import tscore
from i18nscan_common.errors import ErrorCode, SourceParseError

VALID = b'package main\n\nfunc main() {\n\tT("hello")\n}\n'


def test_load_go_language_is_cached() -> None:
    lang = tscore.load_go_language()
    assert isinstance(lang, Language)
    assert tscore.load_go_language() is lang


def test_parse_bytes_produces_tree() -> None:
    tree = tscore.parse_bytes(tscore.load_go_language(), VALID)
    assert tree.root_node.type == "source_file"
    assert not tree.root_node.has_error


def test_parse_go_source_rejects_unbalanced_braces() -> None:
    source = b'package main\n\nfunc main() {\n\tT("hello")\n'
    with pytest.raises(SourceParseError) as excinfo:
        tscore.parse_go_source(source, "broken.go")
    error = excinfo.value
    assert error.code == ErrorCode.SOURCE_PARSE_ERROR
    assert error.path == "broken.go"
    assert error.line is not None
    assert error.line >= 1
    assert "broken.go" in error.message


def test_parse_go_source_reports_error_location() -> None:
    source = b"package main\n\nfunc main() {\n\tx := )\n}\n"
    with pytest.raises(SourceParseError) as excinfo:
        tscore.parse_go_source(source, "bad.go")
    assert excinfo.value.line == 4


def test_first_syntax_error_is_none_for_clean_tree() -> None:
    tree = tscore.parse_bytes(tscore.load_go_language(), VALID)
    assert tscore.first_syntax_error(tree.root_node) is None


def test_iter_nodes_is_preorder_and_complete() -> None:
    tree = tscore.parse_bytes(tscore.load_go_language(), VALID)
    nodes = list(tscore.iter_nodes(tree.root_node))
    assert nodes[0].type == "source_file"
    kinds = [node.type for node in nodes]
    assert kinds.index("function_declaration") < kinds.index("call_expression")
    assert kinds.index("call_expression") < kinds.index("interpreted_string_literal")

    def count(node: object) -> int:
        return 1 + sum(count(child) for child in node.children)  # type: ignore[attr-defined]

    assert len(nodes) == count(tree.root_node)


def test_format_tree_lists_every_node() -> None:
    tree = tscore.parse_bytes(tscore.load_go_language(), VALID)
    dump = tscore.format_tree(tree.root_node)
    lines = dump.splitlines()
    assert lines[0].split()[1] == "source_file"
    assert len(lines) == len(list(tscore.iter_nodes(tree.root_node)))
    assert "call_expression" in dump
    assert "'T'" in dump
    assert dump.endswith("\n")
