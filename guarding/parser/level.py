"""Rule-level keyword mapping."""

from lark import Tree

from guarding.errors import GrammarDriftError
from guarding.models import RuleLevel

from .nodes import describe_span


def build_level(node: Tree) -> RuleLevel:
    """Map a ``rule_level`` node to its RuleLevel.

    The grammar only admits the five level keywords, so anything else means the
    grammar and this mapping have drifted apart.
    """
    keyword = str(node.children[0])
    try:
        return RuleLevel(keyword)
    except ValueError:
        raise GrammarDriftError("rule_level", describe_span(node), f"unknown level {keyword!r}")
