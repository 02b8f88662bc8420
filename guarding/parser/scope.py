"""Builder for the scope clause."""

import logging
from typing import Callable

from lark import Tree

from guarding.errors import GrammarDriftError
from guarding.models import (
    AssignableScope,
    ExtendsScope,
    MatchScope,
    PathScope,
    RuleScope,
    UnsupportedScope,
)

from .nodes import BuildContext, describe_span, node_kind
from .unescape import decode_string

logger = logging.getLogger(__name__)


def _first_string(node: Tree) -> Tree:
    """Find the string literal inside a scope form."""
    for child in node.children:
        if isinstance(child, Tree) and child.data == "string":
            return child
    raise GrammarDriftError(str(node.data), describe_span(node), "scope form has no string literal")


def _path(node: Tree, context: BuildContext) -> RuleScope:
    return PathScope(decode_string(node, context))


def _extends(node: Tree, context: BuildContext) -> RuleScope:
    return ExtendsScope(decode_string(_first_string(node), context))


def _assignable(node: Tree, context: BuildContext) -> RuleScope:
    return AssignableScope(decode_string(_first_string(node), context))


def _match(node: Tree, context: BuildContext) -> RuleScope:
    return MatchScope(decode_string(_first_string(node), context))


SCOPE_BUILDERS: dict[str, Callable[[Tree, BuildContext], RuleScope]] = {
    "string": _path,
    "scope_extends": _extends,
    "scope_assignable": _assignable,
    "scope_match": _match,
}


def build_scope(node: Tree, context: BuildContext) -> RuleScope:
    """
    Build a rule scope from a ``scope`` node.

    A plain string literal restricts the rule to a path pattern; ``extends``,
    ``assignable`` and ``match(...)`` have their own variants. Forms without a
    builder produce an UnsupportedScope marker rather than widening the rule.

    Raises:
        StringLiteralError: If the scope literal has an invalid escape
        UnsupportedFormError: For unmodeled forms in strict mode
    """
    inner = node.children[0]
    kind = node_kind(inner)

    builder = SCOPE_BUILDERS.get(kind)
    if builder is not None and isinstance(inner, Tree):
        return builder(inner, context)

    text = context.check_unsupported(kind, inner)
    logger.warning(f"Unsupported scope '{kind}' at {describe_span(inner)}: {text!r}")
    return UnsupportedScope(kind=kind, text=text)
