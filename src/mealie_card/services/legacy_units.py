"""Decoder for units serialized as Python dictionary literals.

Older recipe-service releases stored ingredient units as the ``repr`` of a
Python dict (``"{'name': 'cup', 'fraction': True}"``) instead of a JSON object.
This module recovers a flat mapping from that text. Only the literal subset
below is accepted; anything else decodes to ``None``::

    mapping := "{" [entry ("," entry)* [","]] "}"
    entry   := key ":" value
    key     := quoted-string | identifier
    value   := quoted-string | number | None | True | False
"""

import logging
import math
import re

LegacyScalar = str | int | float | bool

_logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<punct>[{}:,])
    |(?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
    |(?P<number>[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?(?![\w.]))
    |(?P<name>[^\W\d]\w*)
    """,
    re.VERBOSE | re.DOTALL,
)
_ESCAPE_PATTERN = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"\\": "\\", "'": "'", '"': '"', "n": "\n", "t": "\t", "r": "\r"}
_CONSTANTS: dict[str, LegacyScalar | None] = {
    "None": None,
    "True": True,
    "False": False,
}


class _DecodeError(ValueError):
    """Raised internally when the text falls outside the literal grammar."""


def looks_like_legacy_unit(value: object) -> bool:
    """Return True when a unit field holds dict-shaped text."""
    return isinstance(value, str) and value.strip().startswith("{")


def decode_legacy_unit(text: str) -> dict[str, LegacyScalar] | None:
    """Decode dictionary-literal text into a mapping, or None if malformed."""
    if not isinstance(text, str):
        return None
    try:
        return _parse(_tokenize(text))
    except _DecodeError as exc:
        _logger.debug("Legacy unit decode failed: %s", exc)
        return None


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    position = 0
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if match is None:
            raise _DecodeError(f"unexpected character at offset {position}")
        kind = match.lastgroup or ""
        if kind != "ws":
            tokens.append((kind, match.group()))
        position = match.end()
    return tokens


def _parse(tokens: list[tuple[str, str]]) -> dict[str, LegacyScalar]:
    if not tokens or tokens[0] != ("punct", "{"):
        raise _DecodeError("expected '{'")
    result: dict[str, LegacyScalar] = {}
    index = 1
    while True:
        if index >= len(tokens):
            raise _DecodeError("unbalanced braces")
        if tokens[index] == ("punct", "}"):
            index += 1
            break
        key = _parse_key(tokens[index])
        if index + 2 >= len(tokens) or tokens[index + 1] != ("punct", ":"):
            raise _DecodeError(f"expected ':' after key {key!r}")
        value = _parse_value(tokens[index + 2])
        if value is None:
            result.pop(key, None)
        else:
            result[key] = value
        index += 3
        if index < len(tokens) and tokens[index] == ("punct", ","):
            index += 1
        elif index < len(tokens) and tokens[index] != ("punct", "}"):
            raise _DecodeError("expected ',' or '}'")
    if index != len(tokens):
        raise _DecodeError("trailing content after '}'")
    return result


def _parse_key(token: tuple[str, str]) -> str:
    kind, lexeme = token
    if kind == "string":
        return _unquote(lexeme)
    if kind == "name" and lexeme not in _CONSTANTS:
        return lexeme
    raise _DecodeError(f"invalid key {lexeme!r}")


def _parse_value(token: tuple[str, str]) -> LegacyScalar | None:
    kind, lexeme = token
    if kind == "string":
        return _unquote(lexeme)
    if kind == "number":
        return _parse_number(lexeme)
    if kind == "name" and lexeme in _CONSTANTS:
        return _CONSTANTS[lexeme]
    raise _DecodeError(f"invalid value {lexeme!r}")


def _parse_number(lexeme: str) -> int | float:
    """Convert a numeric lexeme, rejecting values Python cannot represent."""
    try:
        if any(marker in lexeme for marker in ".eE"):
            number = float(lexeme)
        else:
            return int(lexeme)
    except ValueError as exc:
        raise _DecodeError(f"numeric literal out of range: {exc}") from exc
    if math.isinf(number):
        raise _DecodeError("numeric literal out of range")
    return number


def _unquote(lexeme: str) -> str:
    return _ESCAPE_PATTERN.sub(
        lambda match: _ESCAPES.get(match.group(1), match.group(0)), lexeme[1:-1]
    )
