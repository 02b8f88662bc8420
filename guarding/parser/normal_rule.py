"""Builder for ordinary rule declarations."""

import logging
from typing import Any, Callable, Optional

from lark import Tree

from guarding.models import GuardRule

from .assertion import build_assertion
from .expression import build_expression
from .level import build_level
from .nodes import BuildContext, describe_span, node_kind
from .operator import build_operator
from .scope import build_scope

logger = logging.getLogger(__name__)

# Handlers receive the child node and return (field name, value), or None for
# markers such as "::" and "should" that carry no payload.
FieldHandler = Callable[[Tree, BuildContext], Optional[tuple[str, Any]]]


def _ignore(node: Tree, context: BuildContext) -> None:
    return None


FIELD_HANDLERS: dict[str, FieldHandler] = {
    "rule_level": lambda node, context: ("level", build_level(node)),
    "scope": lambda node, context: ("scope", build_scope(node, context)),
    "use_symbol": _ignore,
    "expression": lambda node, context: ("expr", build_expression(node, context)),
    "should": _ignore,
    "operator": lambda node, context: ("ops", build_operator(node)),
    "assertion": lambda node, context: ("assertion", build_assertion(node, context)),
}


def build_normal_rule(node: Tree, context: BuildContext) -> GuardRule:
    """
    Build a GuardRule from a ``normal_rule`` node.

    Each child is dispatched on its own production name, so the result does not
    depend on clause order. A child without a handler is logged and leaves the
    corresponding field at its default.

    Raises:
        UnsupportedFormError: For an unknown child in strict mode
    """
    fields: dict[str, Any] = {}

    for child in node.children:
        kind = node_kind(child)
        handler = FIELD_HANDLERS.get(kind)
        if handler is None or not isinstance(child, Tree):
            text = context.check_unsupported(kind, child)
            logger.warning(f"No builder for '{kind}' in rule at {describe_span(child)}: {text!r}")
            continue

        result = handler(child, context)
        if result is not None:
            name, value = result
            fields[name] = value

    return GuardRule(**fields)
