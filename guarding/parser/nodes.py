"""Helpers shared by the parse-tree builders."""

from dataclasses import dataclass

from lark import Token, Tree

from guarding.config import ParserSettings
from guarding.errors import UnsupportedFormError

Node = Tree | Token


def node_kind(node: Node) -> str:
    """Grammar production (for trees) or terminal name (for tokens)."""
    if isinstance(node, Token):
        return node.type
    return str(node.data)


def describe_span(node: Node) -> str:
    """Human-readable source span of a node."""
    if isinstance(node, Token):
        return f"line {node.line}, column {node.column}"
    meta = node.meta
    if meta.empty:
        return "unknown position"
    return f"line {meta.line}, column {meta.column} to line {meta.end_line}, column {meta.end_column}"


@dataclass(frozen=True)
class BuildContext:
    """Per-call state handed to every builder: the source text and parser settings."""

    source: str
    settings: ParserSettings

    def text_of(self, node: Node) -> str:
        """Source text covered by a node."""
        if isinstance(node, Token):
            return str(node)
        if node.meta.empty:
            return ""
        return self.source[node.meta.start_pos : node.meta.end_pos]

    def check_unsupported(self, kind: str, node: Node) -> str:
        """Return the node text, or raise if unsupported forms are not allowed."""
        text = self.text_of(node)
        if self.settings.strict_unsupported:
            raise UnsupportedFormError(kind, text)
        return text
