"""Callee classification and bounded identifier resolution.

A call's function expression is reduced to one of three shapes before resolution:

* :class:`SimpleName` - a bare identifier such as ``T``;
* :class:`QualifiedAccess` - a selector ``operand.field`` such as ``i18n.T``;
* :class:`OtherExpr` - anything else (calls, index expressions, parenthesised expressions...).

:func:`resolve_identifier` turns a callee into the trailing simple name, following selector chains
at most :data:`MAX_DEPTH` levels deep.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from tree_sitter import Node

__all__ = [
    "MAX_DEPTH",
    "CalleeExpr",
    "OtherExpr",
    "QualifiedAccess",
    "SimpleName",
    "classify_callee",
    "resolve_identifier",
]

MAX_DEPTH: Final[int] = 5
"""Maximum number of selector levels followed when resolving a callee."""

SIMPLE_NAME_KINDS: Final[frozenset[str]] = frozenset({"identifier", "field_identifier"})
QUALIFIED_KINDS: Final[frozenset[str]] = frozenset({"selector_expression"})


@dataclass(frozen=True, slots=True)
class SimpleName:
    """Bare identifier."""

    name: str


@dataclass(frozen=True, slots=True)
class QualifiedAccess:
    """Selector expression ``operand.field``."""

    operand: Node
    field: Node


@dataclass(frozen=True, slots=True)
class OtherExpr:
    """Any callee shape that cannot name the translation function."""

    kind: str


type CalleeExpr = SimpleName | QualifiedAccess | OtherExpr


def classify_callee(node: Node) -> CalleeExpr:
    """Classify a syntax node into a :data:`CalleeExpr` variant.

    Parameters
    ----------
    node : Node
        Function expression of a call (or a sub-expression of one).

    Returns
    -------
    CalleeExpr
        The matching variant. Selectors missing either part are treated as :class:`OtherExpr`.
    """
    if node.type in SIMPLE_NAME_KINDS and node.text is not None:
        return SimpleName(node.text.decode("utf-8"))
    if node.type in QUALIFIED_KINDS:
        operand = node.child_by_field_name("operand")
        field = node.child_by_field_name("field")
        if operand is not None and field is not None:
            return QualifiedAccess(operand=operand, field=field)
    return OtherExpr(node.type)


def resolve_identifier(node: Node, depth: int = 0) -> str | None:
    """Reduce a callee expression to its trailing simple name.

    Every selector level consumes one unit of depth, counting the whole chain: ``a.T`` uses one
    level and ``a.b.c.d.e.T`` uses five. A chain longer than :data:`MAX_DEPTH` does not resolve.

    Parameters
    ----------
    node : Node
        Callee expression.
    depth : int, optional
        Selector levels already followed. Defaults to 0.

    Returns
    -------
    str | None
        Trailing simple name, or ``None`` when the callee has another shape or the chain is too
        deep. ``None`` is a non-match, never an error.
    """
    match classify_callee(node):
        case SimpleName(name=name):
            return name
        case QualifiedAccess(operand=operand, field=field):
            if depth >= MAX_DEPTH:
                return None
            # The operand chain must itself fit within the remaining depth.
            if isinstance(classify_callee(operand), QualifiedAccess) and (
                resolve_identifier(operand, depth + 1) is None
            ):
                return None
            return resolve_identifier(field, depth + 1)
        case OtherExpr():
            return None
