"""Lexical analysis of upper-cased WKT text."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from ..exceptions import WKTLexicalError

_TOKEN_RE = re.compile(
    r"""
    (?P<number>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:E[+-]?[0-9]+)?(?![0-9A-Z.+-]))
    |(?P<malformed>[+-]?[0-9.][0-9A-Z.+-]*)
    |(?P<word>[A-Z]+)
    |(?P<punctuation>[(),])
    |(?P<whitespace>\s+)
    |(?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)


class TokenKind(Enum):
    NUMBER = "number"
    WORD = "word"
    PUNCTUATION = "punctuation"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: str | float
    position: int

    @property
    def text(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return repr(self.value)
        return str(self.value)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, skipping whitespace.

    Raises :class:`WKTLexicalError` on the first character that cannot start a
    token, on malformed numeric literals such as ``1.5.3`` or ``1-2``, and on
    literals too large to be represented.
    """

    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(text):
        group = match.lastgroup
        position = match.start()
        if group == "whitespace":
            continue
        if group == "number":
            value = float(match.group())
            if not math.isfinite(value):
                raise WKTLexicalError(match.group(), position, "Number out of range")
            tokens.append(Token(TokenKind.NUMBER, value, position))
        elif group == "word":
            tokens.append(Token(TokenKind.WORD, match.group(), position))
        elif group == "punctuation":
            tokens.append(Token(TokenKind.PUNCTUATION, match.group(), position))
        elif group == "malformed":
            raise WKTLexicalError(match.group(), position, "Malformed number")
        else:
            raise WKTLexicalError(match.group(), position)
    return tokens


class WKTTokenizer:
    """Cursor over the tokens of a WKT string.

    The whole text is scanned on construction, so lexical errors surface
    before any grammar rule runs.
    """

    def __init__(self, text: str):
        self._text = text
        self._tokens = tokenize(text)
        self._index = 0

    def peek(self) -> Token | None:
        """Return the next token without consuming it, or ``None`` at the end."""

        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def next(self) -> Token | None:
        token = self.peek()
        if token is not None:
            self._index += 1
        return token

    def is_end_of_stream(self) -> bool:
        return self._index >= len(self._tokens)

    @property
    def position(self) -> int:
        token = self.peek()
        return token.position if token is not None else len(self._text)


__all__ = ["Token", "TokenKind", "WKTTokenizer", "tokenize"]
