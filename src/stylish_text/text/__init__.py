"""Styled text objects with string-like structural operations."""

from .painter import PLAIN, AnsiStyle, Painter, Tag
from .ranges import byte_length, char_to_byte, resolve_byte_range
from .span import Span, Split, StyledText
from .spans import Spans

__all__ = [
    "AnsiStyle",
    "PLAIN",
    "Painter",
    "Span",
    "Spans",
    "Split",
    "StyledText",
    "Tag",
    "byte_length",
    "char_to_byte",
    "resolve_byte_range",
]
