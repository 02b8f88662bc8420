"""Data models for parsed rule declarations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class RuleLevel(Enum):
    """Granularity of code entity a rule applies to."""

    MODULE = "module"
    PACKAGE = "package"
    FUNCTION = "function"
    FILE = "file"
    CLASS = "class"


class Operator(Enum):
    """Comparison and string predicates, plus the leading negation marker."""

    NOT = "not"
    LTE = "<="
    GTE = ">="
    LT = "<"
    GT = ">"
    EQ = "=="
    CONTAINS = "contains"
    ENDS_WITH = "endsWith"
    STARTS_WITH = "startsWith"
    RESIDE_IN = "resideIn"
    ACCESSED = "accessed"
    DEPEND_BY = "dependBy"


# Scopes


@dataclass(frozen=True)
class AllScope:
    """Applies to every entity at the rule's level."""


@dataclass(frozen=True)
class PathScope:
    """Applies to entities whose path or name matches the pattern."""

    pattern: str


@dataclass(frozen=True)
class ExtendsScope:
    """Applies to classes extending the named type."""

    pattern: str


@dataclass(frozen=True)
class AssignableScope:
    """Applies to classes assignable to the named type."""

    pattern: str


@dataclass(frozen=True)
class MatchScope:
    """Applies to entities whose path matches a regular expression."""

    pattern: str


@dataclass(frozen=True)
class UnsupportedScope:
    """A scope form the grammar accepts but that has no model yet."""

    kind: str  # Grammar production name
    text: str  # Source text of the scope clause


RuleScope = Union[AllScope, PathScope, ExtendsScope, AssignableScope, MatchScope, UnsupportedScope]


# Expressions


@dataclass(frozen=True)
class PropertyChain:
    """Dotted property access such as ``function.name`` or ``vars.len``."""

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("PropertyChain requires at least one segment")

    def __str__(self) -> str:
        return ".".join(self.segments)


@dataclass(frozen=True)
class UnsupportedExpr:
    """An expression form the grammar accepts but that has no model yet."""

    kind: str
    text: str


Expr = Union[PropertyChain, UnsupportedExpr]


# Assertions


@dataclass(frozen=True)
class EmptyAssert:
    """No assertion payload was given."""


@dataclass(frozen=True)
class StringAssert:
    value: str


@dataclass(frozen=True)
class IntAssert:
    value: int


@dataclass(frozen=True)
class LeveledAssert:
    """Assertion naming an entity at a level, e.g. ``package("..persistence..")``."""

    level: RuleLevel
    value: str


@dataclass(frozen=True)
class ArrayStringAssert:
    values: tuple[str, ...]


RuleAssert = Union[EmptyAssert, StringAssert, IntAssert, LeveledAssert, ArrayStringAssert]


@dataclass(frozen=True)
class GuardRule:
    """One parsed rule declaration.

    ``ops`` holds the comparison operator, preceded by ``Operator.NOT`` when the
    rule is negated.
    """

    level: RuleLevel = RuleLevel.CLASS
    scope: RuleScope = AllScope()
    expr: Expr | None = None
    ops: tuple[Operator, ...] = ()
    assertion: RuleAssert = EmptyAssert()

    @property
    def negated(self) -> bool:
        """True if the rule's operator is negated."""
        return bool(self.ops) and self.ops[0] is Operator.NOT

    @property
    def operator(self) -> Operator | None:
        """The comparison operator without the negation marker."""
        return self.ops[-1] if self.ops else None


@dataclass(frozen=True)
class LayerBinding:
    """A named role inside a layer declaration and the patterns that identify it."""

    role: str
    patterns: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LayerRule:
    """A named layer architecture, e.g. ``layer("onion")::domainModel("")``."""

    name: str
    bindings: tuple[LayerBinding, ...] = field(default_factory=tuple)

    def roles(self) -> list[str]:
        """Role names in declaration order."""
        return [binding.role for binding in self.bindings]


Declaration = Union[GuardRule, LayerRule]
