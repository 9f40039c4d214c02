"""Reading geometries from Well-Known Text."""

from .parser import WKTParser
from .reader import WKTReader, read
from .tokenizer import Token, TokenKind, WKTTokenizer

__all__ = [
    "Token",
    "TokenKind",
    "WKTParser",
    "WKTReader",
    "WKTTokenizer",
    "read",
]
