"""Builder for the assertion clause."""

from lark import Tree

from guarding.errors import GrammarDriftError
from guarding.models import (
    ArrayStringAssert,
    IntAssert,
    LeveledAssert,
    RuleAssert,
    StringAssert,
)

from .level import build_level
from .nodes import BuildContext, describe_span, node_kind
from .unescape import decode_string


def _children_of(node: Tree, data: str) -> list[Tree]:
    return [child for child in node.children if isinstance(child, Tree) and child.data == data]


def build_assertion(node: Tree, context: BuildContext) -> RuleAssert:
    """Build the value a rule's operator is compared against.

    ``contains("x")`` and ``contains "x"`` produce the same assertion.
    """
    value = node.children[0]
    kind = node_kind(value)
    if not isinstance(value, Tree):
        raise GrammarDriftError(kind, describe_span(value))

    if kind == "string":
        return StringAssert(decode_string(value, context))
    if kind == "number":
        return IntAssert(int(value.children[0]))
    if kind == "leveled":
        level = build_level(_children_of(value, "rule_level")[0])
        return LeveledAssert(level, decode_string(_children_of(value, "string")[0], context))
    if kind == "string_array":
        return ArrayStringAssert(tuple(decode_string(s, context) for s in _children_of(value, "string")))

    raise GrammarDriftError(kind, describe_span(value))
