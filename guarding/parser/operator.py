"""Builder for the operator clause."""

from lark import Token, Tree

from guarding.errors import GrammarDriftError
from guarding.models import Operator

from .nodes import describe_span, node_kind

NEGATION_KINDS = frozenset({"OP_NOT", "OP_NOT_SYMBOL"})

OPERATOR_KINDS: dict[str, Operator] = {
    "OP_LTE": Operator.LTE,
    "OP_GTE": Operator.GTE,
    "OP_LT": Operator.LT,
    "OP_GT": Operator.GT,
    "OP_EQ": Operator.EQ,
    "OP_CONTAINS": Operator.CONTAINS,
    "OP_ENDS_WITH": Operator.ENDS_WITH,
    "OP_STARTS_WITH": Operator.STARTS_WITH,
    "OP_RESIDE_IN": Operator.RESIDE_IN,
    "OP_ACCESSED": Operator.ACCESSED,
    "OP_DEPEND_BY": Operator.DEPEND_BY,
}


def build_operator(node: Tree) -> tuple[Operator, ...]:
    """
    Build the operator sequence of a rule.

    Returns ``(op,)`` for a bare operator or ``(Operator.NOT, op)`` when the
    operator is negated with ``not`` or ``!``.
    """
    children: list[Tree | Token] = list(node.children)
    if not children:
        raise GrammarDriftError("operator", describe_span(node), "operator clause is empty")

    operators: list[Operator] = []
    current = children[0]
    if node_kind(current) in NEGATION_KINDS:
        operators.append(Operator.NOT)
        if len(children) < 2:
            raise GrammarDriftError(node_kind(current), describe_span(current), "negation without operator")
        current = children[1]

    kind = node_kind(current)
    if kind not in OPERATOR_KINDS:
        raise GrammarDriftError(kind, describe_span(current))

    operators.append(OPERATOR_KINDS[kind])
    return tuple(operators)
