"""Base interface for language-specific code-model extraction."""

from abc import ABC, abstractmethod
from pathlib import Path

from tree_sitter import Node

from guarding.models import CodeFile, Location


class LanguageIdent(ABC):
    """Base class for building a CodeFile from one compilation unit."""

    @abstractmethod
    def get_language_name(self) -> str:
        """Return the tree-sitter language name."""
        pass

    @abstractmethod
    def identify(self, source: bytes, path: Path | None = None) -> CodeFile:
        """Build the code model of one source file."""
        pass


def node_text(node: Node, source: bytes) -> str:
    """Source text of a node."""
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


def node_location(node: Node) -> Location:
    """Span of a node with 1-indexed lines."""
    return Location(
        start_line=node.start_point.row + 1,
        start_column=node.start_point.column,
        end_line=node.end_point.row + 1,
        end_column=node.end_point.column,
    )
