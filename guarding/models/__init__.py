"""Rule records and code-model records."""

from .code_model import CodeClass, CodeFile, CodeFunction, CodeVariable, Location
from .rule import (
    AllScope,
    ArrayStringAssert,
    AssignableScope,
    Declaration,
    EmptyAssert,
    Expr,
    ExtendsScope,
    GuardRule,
    IntAssert,
    LayerBinding,
    LayerRule,
    LeveledAssert,
    MatchScope,
    Operator,
    PathScope,
    PropertyChain,
    RuleAssert,
    RuleLevel,
    RuleScope,
    StringAssert,
    UnsupportedExpr,
    UnsupportedScope,
)

__all__ = [
    "AllScope",
    "ArrayStringAssert",
    "AssignableScope",
    "CodeClass",
    "CodeFile",
    "CodeFunction",
    "CodeVariable",
    "Declaration",
    "EmptyAssert",
    "Expr",
    "ExtendsScope",
    "GuardRule",
    "IntAssert",
    "LayerBinding",
    "LayerRule",
    "LeveledAssert",
    "Location",
    "MatchScope",
    "Operator",
    "PathScope",
    "PropertyChain",
    "RuleAssert",
    "RuleLevel",
    "RuleScope",
    "StringAssert",
    "UnsupportedExpr",
    "UnsupportedScope",
]
