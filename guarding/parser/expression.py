"""Builder for the expression clause."""

import logging

from lark import Token, Tree

from guarding.models import Expr, PropertyChain, UnsupportedExpr

from .nodes import BuildContext, describe_span, node_kind

logger = logging.getLogger(__name__)


def _build_property_chain(node: Tree) -> PropertyChain:
    segments = [
        str(child)
        for child in node.children
        if isinstance(child, Token) and child.type == "IDENTIFIER"
    ]
    return PropertyChain(tuple(segments))


def build_expression(node: Tree, context: BuildContext) -> Expr:
    """Build the expression a rule asserts on.

    Only property chains (``function.name``) are modeled; any other form yields
    an UnsupportedExpr marker.
    """
    inner = node.children[0]
    kind = node_kind(inner)

    if kind == "property_chain" and isinstance(inner, Tree):
        return _build_property_chain(inner)

    text = context.check_unsupported(kind, inner)
    logger.warning(f"Unsupported expression '{kind}' at {describe_span(inner)}: {text!r}")
    return UnsupportedExpr(kind=kind, text=text)
