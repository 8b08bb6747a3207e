"""Styled text runs with structural operations and width-constrained layout."""

import logging

from .config import LayoutConfig
from .errors import (
    ConfigError,
    InvalidBoundary,
    InvalidRange,
    SliceError,
    StyleError,
    StylishError,
)
from .text import AnsiStyle, Painter, Span, Spans, Split, Tag
from .widget import Fitable, HBox, Repeat, TextWidget, TruncationKind, TruncationStyle

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnsiStyle",
    "ConfigError",
    "Fitable",
    "HBox",
    "InvalidBoundary",
    "InvalidRange",
    "LayoutConfig",
    "Painter",
    "Repeat",
    "SliceError",
    "Span",
    "Spans",
    "Split",
    "StyleError",
    "StylishError",
    "Tag",
    "TextWidget",
    "TruncationKind",
    "TruncationStyle",
]
