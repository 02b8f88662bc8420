"""Exceptions raised while parsing rule files."""


class GuardingError(Exception):
    """Base class for all errors raised by guarding."""

    pass


class RuleSyntaxError(GuardingError):
    """Raised when rule text does not conform to the rule-language grammar."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None, context: str = ""):
        self.line = line
        self.column = column
        self.context = context
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        if context:
            message = f"{message}\n{context}"
        super().__init__(message)


class StringLiteralError(GuardingError, ValueError):
    """Raised when a quoted literal contains an invalid escape sequence."""

    def __init__(self, literal: str, offset: int, reason: str):
        self.literal = literal
        self.offset = offset
        self.reason = reason
        super().__init__(f"incorrect string literal {literal!r}: {reason} at offset {offset}")


class GrammarDriftError(GuardingError):
    """Raised when the grammar produces a node that no builder knows about.

    This signals a defect in the parser itself, never bad user input.
    """

    def __init__(self, kind: str, span: str, detail: str = ""):
        self.kind = kind
        self.span = span
        message = f"no builder for grammar node '{kind}' at {span}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnsupportedFormError(GuardingError):
    """Raised in strict mode for a valid form that has no model yet."""

    def __init__(self, kind: str, text: str):
        self.kind = kind
        self.text = text
        super().__init__(f"unsupported {kind}: {text!r}")
