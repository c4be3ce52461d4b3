"""Syntax-tree walker that finds translation calls and their literal keys."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Final

from i18nscan.extractor.callee import resolve_identifier
from i18nscan.extractor.tscore import iter_nodes

if TYPE_CHECKING:
    from tree_sitter import Node

    from i18nscan.extractor.records import RecordCollection

__all__ = [
    "CALL_KINDS",
    "STRING_LITERAL_DELIMITERS",
    "collect_message_ids",
    "first_argument",
    "iter_message_ids",
    "literal_text",
]

CALL_KINDS: Final[frozenset[str]] = frozenset({"call_expression"})

STRING_LITERAL_DELIMITERS: Final[dict[str, str]] = {
    "interpreted_string_literal": '"',
    "raw_string_literal": "`",
}
"""String literal node kinds mapped to their delimiter character."""

_NON_ARGUMENT_KINDS: Final[frozenset[str]] = frozenset({"comment"})


def first_argument(call: Node) -> Node | None:
    """Return the first positional argument of ``call``, skipping comments."""
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    for child in arguments.named_children:
        if child.type not in _NON_ARGUMENT_KINDS:
            return child
    return None


def literal_text(node: Node) -> str | None:
    """Return the text of a string literal without its delimiters.

    One leading and one trailing delimiter are stripped; escape sequences are kept verbatim.

    Parameters
    ----------
    node : Node
        Candidate argument node.

    Returns
    -------
    str | None
        Literal contents, or ``None`` when ``node`` is not a string literal.
    """
    delimiter = STRING_LITERAL_DELIMITERS.get(node.type)
    if delimiter is None or node.text is None:
        return None
    text = node.text.decode("utf-8")
    text = text.removeprefix(delimiter)
    return text.removesuffix(delimiter)


def iter_message_ids(root: Node, func_name: str) -> Iterator[str]:
    """Yield the literal key of every matching call, in document order.

    The walk is pre-order over the whole tree and never stops early. Calls whose callee does not
    resolve, resolves to another name, or whose first argument is not a string literal are
    skipped silently. Duplicates are yielded as often as they occur.

    Parameters
    ----------
    root : Node
        Root of a parsed source tree.
    func_name : str
        Translation function name, compared case-sensitively.

    Yields
    ------
    str
        Message IDs.
    """
    for node in iter_nodes(root):
        if node.type not in CALL_KINDS:
            continue
        function = node.child_by_field_name("function")
        if function is None or resolve_identifier(function) != func_name:
            continue
        argument = first_argument(node)
        if argument is None:
            continue
        message_id = literal_text(argument)
        if message_id is not None:
            yield message_id


def collect_message_ids(root: Node, func_name: str, records: RecordCollection) -> int:
    """Append the keys found under ``root`` to ``records``.

    Parameters
    ----------
    root : Node
        Root of a parsed source tree.
    func_name : str
        Translation function name.
    records : RecordCollection
        Shared accumulator; keys already present are not added again.

    Returns
    -------
    int
        Number of matching calls seen, including ones whose key was already present.
    """
    matches = 0
    for message_id in iter_message_ids(root, func_name):
        matches += 1
        records.add_id(message_id)
    return matches
