"""Entry point of the rule parser: grammar parse plus per-declaration dispatch."""

import logging
from pathlib import Path
from typing import Callable

from lark import Tree
from lark.exceptions import UnexpectedEOF, UnexpectedInput

from guarding.config import ParserSettings, get_settings
from guarding.errors import GrammarDriftError, RuleSyntaxError
from guarding.models import Declaration

from .grammar import build_parser
from .layer import build_layer_rule
from .nodes import BuildContext, describe_span, node_kind
from .normal_rule import build_normal_rule

logger = logging.getLogger(__name__)

DECLARATION_BUILDERS: dict[str, Callable[[Tree, BuildContext], Declaration]] = {
    "normal_rule": build_normal_rule,
    "layer_rule": build_layer_rule,
}


def _position(value: int | None) -> int | None:
    """Lark reports -1 for positions it does not know (e.g. at end of input)."""
    if value is None or value < 0:
        return None
    return value


def _end_of_input_error(error: UnexpectedEOF, code: str) -> RuleSyntaxError:
    """Lark gives no position for a premature end, so point just past the last character."""
    last_line = code[code.rfind("\n") + 1 :]
    line = code.count("\n") + 1
    column = len(code) - code.rfind("\n")
    expected = ", ".join(sorted({str(name) for name in getattr(error, "expected", None) or []}))
    message = "Unexpected end of rule text"
    if expected:
        message = f"{message}, expected one of: {expected}"
    context = f"{last_line}\n{' ' * (column - 1)}^"
    return RuleSyntaxError(message, line=line, column=column, context=context)


def _syntax_error(error: UnexpectedInput, code: str) -> RuleSyntaxError:
    if isinstance(error, UnexpectedEOF):
        return _end_of_input_error(error, code)

    context = error.get_context(code)
    message = str(error).splitlines()[0] if str(error) else "Invalid rule text"
    return RuleSyntaxError(
        message,
        line=_position(getattr(error, "line", None)),
        column=_position(getattr(error, "column", None)),
        context=context,
    )


def parse_tree(code: str) -> Tree:
    """
    Run the grammar over rule text.

    Raises:
        RuleSyntaxError: If the text does not conform to the grammar
    """
    parser = build_parser()
    try:
        return parser.parse(code)
    except UnexpectedInput as e:
        raise _syntax_error(e, code) from e


def _build_declaration(node: Tree, context: BuildContext) -> Declaration:
    inner = node.children[0]
    kind = node_kind(inner)
    builder = DECLARATION_BUILDERS.get(kind)
    if builder is None or not isinstance(inner, Tree):
        raise GrammarDriftError(kind, describe_span(inner))
    return builder(inner, context)


def parse(code: str, settings: ParserSettings | None = None) -> list[Declaration]:
    """
    Parse rule-language text into rule records.

    Args:
        code: Full text of one rule file
        settings: Parser settings (defaults to the global settings)

    Returns:
        One GuardRule or LayerRule per declaration, in source order

    Raises:
        RuleSyntaxError: If the text does not conform to the grammar
        StringLiteralError: If a string literal has an invalid escape
        GrammarDriftError: If the grammar produced a node no builder handles
        UnsupportedFormError: For unmodeled forms when strict mode is enabled
    """
    if settings is None:
        settings = get_settings().parser

    tree = parse_tree(code)
    context = BuildContext(source=code, settings=settings)

    declarations = [
        _build_declaration(node, context)
        for node in tree.children
        if isinstance(node, Tree) and node.data == "declaration"
    ]

    logger.debug(f"Parsed {len(declarations)} declaration(s)")
    return declarations


def parse_file(file_path: str | Path, settings: ParserSettings | None = None) -> list[Declaration]:
    """
    Parse a rule file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        RuleSyntaxError: If the file does not conform to the grammar
    """
    path = Path(file_path)
    logger.debug(f"Parsing rule file: {path}")
    return parse(path.read_text(encoding="utf-8"), settings)
