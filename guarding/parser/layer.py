"""Builder for layer declarations."""

from lark import Token, Tree

from guarding.models import LayerBinding, LayerRule

from .nodes import BuildContext
from .unescape import decode_string


def _strings(node: Tree) -> list[Tree]:
    return [child for child in node.children if isinstance(child, Tree) and child.data == "string"]


def _build_binding(node: Tree, context: BuildContext) -> LayerBinding:
    role = next(
        str(child)
        for child in node.children
        if isinstance(child, Token) and child.type == "IDENTIFIER"
    )
    patterns = tuple(decode_string(s, context) for s in _strings(node))
    return LayerBinding(role=role, patterns=patterns)


def build_layer_rule(node: Tree, context: BuildContext) -> LayerRule:
    """Build a LayerRule: the layer name and its role bindings in source order."""
    name = decode_string(_strings(node)[0], context)
    bindings = tuple(
        _build_binding(child, context)
        for child in node.children
        if isinstance(child, Tree) and child.data == "layer_binding"
    )
    return LayerRule(name=name, bindings=bindings)
