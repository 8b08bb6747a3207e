"""Width-constrained layout of styled text."""

from .hbox import HBox, allocate_widths
from .repeat import Repeat
from .text_widget import Fitable, TextWidget
from .truncation import TruncationKind, TruncationStyle

__all__ = [
    "Fitable",
    "HBox",
    "Repeat",
    "TextWidget",
    "TruncationKind",
    "TruncationStyle",
    "allocate_widths",
]
