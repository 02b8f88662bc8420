"""Front end for the guarding architecture rule language."""

from guarding.errors import (
    GrammarDriftError,
    GuardingError,
    RuleSyntaxError,
    StringLiteralError,
    UnsupportedFormError,
)
from guarding.identify import identify_file, identify_source
from guarding.parser import parse, parse_file

__all__ = [
    "GrammarDriftError",
    "GuardingError",
    "RuleSyntaxError",
    "StringLiteralError",
    "UnsupportedFormError",
    "identify_file",
    "identify_source",
    "parse",
    "parse_file",
]
