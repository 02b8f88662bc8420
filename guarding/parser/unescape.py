"""Decoding of escape sequences inside quoted string literals.

Supported escapes::

    \\"  \\\\  \\r  \\n  \\t  \\0  \\'
    \\xHH        exactly two hex digits, one byte value
    \\u{H..H}    two to six hex digits, one Unicode scalar value

Any other character is copied through unchanged. An invalid escape fails the
whole literal; no partial string is ever returned.
"""

from lark import Tree

from guarding.errors import StringLiteralError

from .nodes import BuildContext

_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "r": "\r",
    "n": "\n",
    "t": "\t",
    "0": "\0",
    "'": "'",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

MIN_UNICODE_DIGITS = 2
MAX_UNICODE_DIGITS = 6


def _is_hex(digits: str) -> bool:
    return bool(digits) and all(c in _HEX_DIGITS for c in digits)


def _is_scalar_value(value: int) -> bool:
    """Unicode scalar values exclude surrogates and anything past U+10FFFF."""
    return value <= 0x10FFFF and not 0xD800 <= value <= 0xDFFF


def _decode_byte(text: str, start: int) -> tuple[str, int]:
    """Decode ``\\xHH`` whose digits begin at ``start``."""
    digits = text[start : start + 2]
    if len(digits) != 2:
        raise StringLiteralError(text, start - 2, "\\x escape needs two hex digits")
    if not _is_hex(digits):
        raise StringLiteralError(text, start - 2, f"invalid hex digits {digits!r} in \\x escape")
    return chr(int(digits, 16)), start + 2


def _decode_unicode(text: str, start: int) -> tuple[str, int]:
    """Decode ``\\u{...}`` whose opening brace is expected at ``start``."""
    escape_offset = start - 2
    if text[start : start + 1] != "{":
        raise StringLiteralError(text, escape_offset, "\\u escape must be followed by '{'")

    close = text.find("}", start + 1)
    if close == -1:
        raise StringLiteralError(text, escape_offset, "unterminated \\u escape")

    digits = text[start + 1 : close]
    if not MIN_UNICODE_DIGITS <= len(digits) <= MAX_UNICODE_DIGITS:
        raise StringLiteralError(
            text,
            escape_offset,
            f"\\u escape needs {MIN_UNICODE_DIGITS} to {MAX_UNICODE_DIGITS} hex digits, got {len(digits)}",
        )
    if not _is_hex(digits):
        raise StringLiteralError(text, escape_offset, f"invalid hex digits {digits!r} in \\u escape")

    value = int(digits, 16)
    if not _is_scalar_value(value):
        raise StringLiteralError(text, escape_offset, f"U+{value:X} is not a Unicode scalar value")
    return chr(value), close + 1


def unescape(text: str) -> str:
    """
    Resolve every escape sequence in ``text``.

    Args:
        text: Literal text, with or without its delimiting quotes

    Returns:
        The decoded string

    Raises:
        StringLiteralError: If any escape sequence is invalid
    """
    result: list[str] = []
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        if char != "\\":
            result.append(char)
            index += 1
            continue

        if index + 1 >= length:
            raise StringLiteralError(text, index, "backslash at end of literal")

        escape = text[index + 1]
        if escape in _SIMPLE_ESCAPES:
            result.append(_SIMPLE_ESCAPES[escape])
            index += 2
        elif escape == "x":
            decoded, index = _decode_byte(text, index + 2)
            result.append(decoded)
        elif escape == "u":
            decoded, index = _decode_unicode(text, index + 2)
            result.append(decoded)
        else:
            raise StringLiteralError(text, index, f"unknown escape '\\{escape}'")

    return "".join(result)


def decode_string(node: Tree, context: BuildContext) -> str:
    """Decode a ``string`` node, keeping its quotes unless configured otherwise."""
    raw = str(node.children[0])
    if not context.settings.keep_literal_quotes:
        raw = raw[1:-1]
    return unescape(raw)
