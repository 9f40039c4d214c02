"""Token-level primitives used by the WKT grammar."""

from __future__ import annotations

from ..exceptions import ExtraCoordinateError, WKTSyntaxError
from .tokenizer import Token, TokenKind, WKTTokenizer


class WKTParser:
    """Wrap a :class:`WKTTokenizer` with the checks the grammar relies on.

    Every ``get_*`` / ``match_*`` method consumes exactly the token it
    documents, or raises :class:`WKTSyntaxError` without consuming anything.
    """

    def __init__(self, text: str):
        self._tokenizer = WKTTokenizer(text)

    @property
    def position(self) -> int:
        return self._tokenizer.position

    def _unexpected(self, expected: str) -> WKTSyntaxError:
        token = self._tokenizer.peek()
        if token is None:
            return WKTSyntaxError(
                f"Expected {expected} in WKT, found end of stream",
                position=self._tokenizer.position,
            )
        return WKTSyntaxError(
            f"Expected {expected} in WKT, found {token.text!r} at position {token.position}",
            token=token.text,
            position=token.position,
        )

    def _next_of_kind(self, kind: TokenKind, expected: str) -> Token:
        token = self._tokenizer.peek()
        if token is None or token.kind is not kind:
            raise self._unexpected(expected)
        self._tokenizer.next()
        return token

    def _extra_coordinate(self, token: Token) -> ExtraCoordinateError:
        return ExtraCoordinateError(
            f"Unexpected extra coordinate {token.text} at position {token.position}; "
            "coordinate dimensions are set by the Z, M or ZM marker",
            token=token.text,
            position=token.position,
        )

    def _match(self, punctuation: str, after_coordinates: bool = False) -> None:
        token = self._tokenizer.peek()
        if token is None or token.kind is not TokenKind.PUNCTUATION or token.value != punctuation:
            if after_coordinates and token is not None and token.kind is TokenKind.NUMBER:
                raise self._extra_coordinate(token)
            raise self._unexpected(repr(punctuation))
        self._tokenizer.next()

    def get_next_word(self) -> str:
        return self._next_of_kind(TokenKind.WORD, "a word").value

    def get_optional_next_word(self) -> str | None:
        """Consume and return the next token if it is a word, else return ``None``."""

        token = self._tokenizer.peek()
        if token is None or token.kind is not TokenKind.WORD:
            return None
        self._tokenizer.next()
        return token.value

    def get_next_number(self) -> float:
        return self._next_of_kind(TokenKind.NUMBER, "a number").value

    def match_opener(self) -> None:
        self._match("(")

    def match_closer(self, after_coordinates: bool = False) -> None:
        """Consume a closing parenthesis.

        With ``after_coordinates``, a number found instead is reported as an
        :class:`ExtraCoordinateError`: the preceding point is already complete.
        """

        self._match(")", after_coordinates)

    def get_next_closer_or_comma(self, after_coordinates: bool = False) -> str:
        token = self._tokenizer.peek()
        if token is None or token.kind is not TokenKind.PUNCTUATION or token.value not in (")", ","):
            if after_coordinates and token is not None and token.kind is TokenKind.NUMBER:
                raise self._extra_coordinate(token)
            raise self._unexpected("')' or ','")
        self._tokenizer.next()
        return token.value

    def is_end_of_stream(self) -> bool:
        return self._tokenizer.is_end_of_stream()

    def peek(self) -> Token | None:
        return self._tokenizer.peek()


__all__ = ["WKTParser"]
