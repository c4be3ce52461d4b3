"""Tree-sitter parser adapter for Go sources."""

from __future__ import annotations

from collections.abc import Iterator
from functools import cache
from importlib import import_module
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

from tree_sitter import Language, Parser

from i18nscan_common.errors import ConfigurationError, SourceParseError

if TYPE_CHECKING:
    from tree_sitter import Node, Tree

__all__ = [
    "GO_LANGUAGE_PACKAGE",
    "first_syntax_error",
    "format_tree",
    "iter_nodes",
    "load_go_language",
    "parse_bytes",
    "parse_go_source",
]

GO_LANGUAGE_PACKAGE: Final[str] = "tree_sitter_go"
"""Importable package providing the Go grammar."""

_DUMP_TEXT_LIMIT: Final[int] = 60


@cache
def _load_language(package: str) -> Language:
    """Load a Tree-sitter language from its Python package.

    Parameters
    ----------
    package : str
        Importable package name that exposes a ``language`` factory returning a
        pointer to a ``TSLanguage``.

    Returns
    -------
    Language
        Instantiated Tree-sitter ``Language`` ready for parsing.

    Raises
    ------
    ConfigurationError
        If the package is missing or does not implement the expected ``language``
        callable.
    """
    try:
        module = import_module(package)
    except ModuleNotFoundError as exc:
        message = f"Tree-sitter package '{package}' is not installed."
        raise ConfigurationError(message, cause=exc) from exc
    try:
        factory = module.language
    except AttributeError as exc:
        message = f"Tree-sitter package '{package}' does not expose a 'language()' factory."
        raise ConfigurationError(message, cause=exc) from exc
    return Language(factory())


def load_go_language() -> Language:
    """Return the cached Go grammar.

    Returns
    -------
    Language
        Tree-sitter language for Go source files.
    """
    return _load_language(GO_LANGUAGE_PACKAGE)


def parse_bytes(lang: Language, data: bytes) -> Tree:
    """Parse a byte buffer with the supplied Tree-sitter language.

    Tree-sitter always produces a tree; syntax errors show up as ``ERROR`` or missing nodes.

    Parameters
    ----------
    lang : Language
        Instantiated Tree-sitter grammar.
    data : bytes
        UTF-8 encoded source code to parse.

    Returns
    -------
    Tree
        Parsed syntax tree for the provided source buffer.
    """
    parser = Parser()
    cast("Any", parser).language = lang
    return parser.parse(data)


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and every descendant in depth-first pre-order.

    Parameters
    ----------
    root : Node
        Node to start from.

    Yields
    ------
    Node
        Nodes in document order, parents before children.
    """
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def first_syntax_error(root: Node) -> Node | None:
    """Return the first ``ERROR`` or missing node under ``root``.

    Parameters
    ----------
    root : Node
        Root of a parsed tree.

    Returns
    -------
    Node | None
        Offending node in document order, or ``None`` for a clean tree.
    """
    if not root.has_error:
        return None
    for node in iter_nodes(root):
        if node.is_error or node.is_missing:
            return node
    return root


def _require_utf8(data: bytes, path: str | Path) -> None:
    """Raise :class:`SourceParseError` at the first byte that is not valid UTF-8."""
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line = data.count(b"\n", 0, exc.start) + 1
        column = exc.start - (data.rfind(b"\n", 0, exc.start) + 1) + 1
        message = f"illegal UTF-8 encoding in {path} at {line}:{column}"
        raise SourceParseError(message, path=path, line=line, column=column, cause=exc) from exc


def parse_go_source(data: bytes, path: str | Path = "<memory>") -> Tree:
    """Parse Go source, failing on any syntax error.

    Parameters
    ----------
    data : bytes
        Source text.
    path : str | Path, optional
        Name reported in errors. Defaults to ``"<memory>"``.

    Returns
    -------
    Tree
        Syntax tree without error nodes.

    Raises
    ------
    SourceParseError
        If the source is not valid UTF-8 or contains a syntax error. Partial trees are never
        returned.
    """
    _require_utf8(data, path)
    tree = parse_bytes(load_go_language(), data)
    error_node = first_syntax_error(tree.root_node)
    if error_node is None:
        return tree
    line = error_node.start_point[0] + 1
    column = error_node.start_point[1] + 1
    if error_node.is_missing:
        problem = f"missing '{error_node.type}'"
    else:
        problem = "syntax error"
    message = f"{problem} in {path} at {line}:{column}"
    raise SourceParseError(message, path=path, line=line, column=column)


def format_tree(root: Node) -> str:
    """Render an indented dump of every node under ``root``.

    Each line shows the node type and its 1-based span; leaves also show their source text.
    Anonymous tokens (punctuation, keywords) are included so the dump covers the whole tree.

    Parameters
    ----------
    root : Node
        Node to dump.

    Returns
    -------
    str
        Newline-terminated dump.
    """
    lines: list[str] = []
    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        label = node.type if node.is_named else repr(node.type)
        line = (
            f"{len(lines):6d}  {'.  ' * depth}{label} "
            f"[{start_row + 1}:{start_col + 1}-{end_row + 1}:{end_col + 1}]"
        )
        if node.child_count == 0 and node.is_named and node.text is not None:
            text = node.text.decode("utf-8", "replace")
            if len(text) > _DUMP_TEXT_LIMIT:
                text = text[:_DUMP_TEXT_LIMIT] + "..."
            line += f" {text!r}"
        lines.append(line)
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return "\n".join(lines) + "\n"
