"""Parser for the guarding rule language."""

from .scanner import parse, parse_file, parse_tree
from .unescape import unescape

__all__ = [
    "parse",
    "parse_file",
    "parse_tree",
    "unescape",
]
