"""Code-model extraction for source files."""

import logging
from pathlib import Path

from guarding.config import IdentifySettings
from guarding.models import CodeFile

from .base import LanguageIdent
from .java import JavaIdent

logger = logging.getLogger(__name__)

# Mapping of file extensions to identifier language names
LANGUAGE_MAP: dict[str, str] = {
    ".java": "java",
}


def get_ident(language: str, settings: IdentifySettings | None = None) -> LanguageIdent:
    """Create the identifier for a language."""
    if language == "java":
        return JavaIdent(settings)
    raise ValueError(f"No code-model identifier for language: {language}")


def detect_language(file_path: Path) -> str | None:
    """Detect the source language from a file extension."""
    return LANGUAGE_MAP.get(file_path.suffix.lower())


def identify_source(
    source: str | bytes, language: str = "java", settings: IdentifySettings | None = None
) -> CodeFile:
    """
    Build the code model of one compilation unit.

    Raises:
        ValueError: If no identifier exists for the language
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    return get_ident(language, settings).identify(source)


def identify_file(file_path: str | Path, settings: IdentifySettings | None = None) -> CodeFile:
    """
    Build the code model of a source file.

    Raises:
        ValueError: If the language cannot be detected from the extension
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(file_path)
    language = detect_language(path)
    if not language:
        raise ValueError(f"Cannot detect language for file: {path}")

    logger.debug(f"Identifying {path} as {language}")
    return get_ident(language, settings).identify(path.read_bytes(), path)


__all__ = [
    "JavaIdent",
    "LANGUAGE_MAP",
    "LanguageIdent",
    "detect_language",
    "get_ident",
    "identify_file",
    "identify_source",
]
