"""Grammar of the guarding rule language."""

from lark import Lark

GRAMMAR = r"""

start: declaration*

declaration: normal_rule ";"
           | layer_rule ";"?

normal_rule: rule_level scope? (use_symbol expression)? should? operator assertion?

rule_level: RULE_LEVEL
use_symbol: "::" | "->"
should: SHOULD

scope: "(" (string | scope_extends | scope_assignable | scope_match | scope_reside_in) ")"
scope_extends: "extends" string
scope_assignable: "assignable" string
scope_match: "match" "(" string ")"
scope_reside_in: "resideIn" string

expression: property_chain
property_chain: IDENTIFIER ("." IDENTIFIER)*

operator: (OP_NOT | OP_NOT_SYMBOL)? _comparison
_comparison: OP_LTE | OP_GTE | OP_LT | OP_GT | OP_EQ
           | OP_CONTAINS | OP_ENDS_WITH | OP_STARTS_WITH
           | OP_RESIDE_IN | OP_ACCESSED | OP_DEPEND_BY

assertion: _assert_value
         | "(" _assert_value ")"
_assert_value: string | number | leveled | string_array
number: INT
leveled: rule_level "(" string ")"
string_array: "[" string ("," string)* "]"

layer_rule: "layer" "(" string ")" layer_binding+
layer_binding: use_symbol IDENTIFIER "(" string ("," string)* ")"

string: STRING

RULE_LEVEL: /(module|package|function|file|class)\b/
IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
STRING: /"(?:[^"\\]|\\.)*"/s

SHOULD: /should\b/

OP_NOT: /not\b/
OP_NOT_SYMBOL: "!"
OP_LTE: "<="
OP_GTE: ">="
OP_LT: "<"
OP_GT: ">"
OP_EQ: "=="
OP_CONTAINS: /contains\b/
OP_ENDS_WITH: /endsWith\b/
OP_STARTS_WITH: /startsWith\b/
OP_RESIDE_IN: /resideIn\b/
OP_ACCESSED: /accessed\b/
OP_DEPEND_BY: /dependBy\b/

COMMENT: /\/\/[^\n]*/

%import common.INT
%import common.WS
%ignore WS
%ignore COMMENT

"""


def build_parser() -> Lark:
    """Create a fresh parser for the rule language."""
    return Lark(GRAMMAR, start="start", parser="earley", propagate_positions=True)
