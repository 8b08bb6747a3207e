"""Truncation policies for fitting styled text into a fixed width.

Width is measured in characters: every character counts as one column.
Character cut points are converted to byte offsets before slicing, so cuts
always land on character boundaries and run styles inside the kept text are
preserved exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..logging_utils import log_event
from ..text.ranges import char_to_byte
from ..text.span import Span, StyledText, styled_runs
from ..text.spans import Spans

logger = logging.getLogger(__name__)


class TruncationKind(str, Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    INNER = "inner"


def _assemble(*pieces: Optional[StyledText]) -> Spans:
    result = Spans()
    for piece in pieces:
        if piece is None:
            continue
        for run in styled_runs(piece):
            if run.text:
                result.push(run)
    return result


@dataclass(frozen=True)
class TruncationStyle:
    """How to elide text that does not fit.

    NONE hard-clips the end. RIGHT keeps the start and appends the marker,
    LEFT keeps the end behind the marker, and INNER keeps both ends around
    the marker.
    """

    kind: TruncationKind = TruncationKind.NONE
    marker: Optional[StyledText] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TruncationKind(self.kind))

    @classmethod
    def none(cls) -> "TruncationStyle":
        return cls(TruncationKind.NONE)

    @classmethod
    def left(cls, marker: Optional[StyledText] = None) -> "TruncationStyle":
        return cls(TruncationKind.LEFT, marker)

    @classmethod
    def right(cls, marker: Optional[StyledText] = None) -> "TruncationStyle":
        return cls(TruncationKind.RIGHT, marker)

    @classmethod
    def inner(cls, marker: Optional[StyledText] = None) -> "TruncationStyle":
        return cls(TruncationKind.INNER, marker)

    @property
    def marker_width(self) -> int:
        if self.kind is TruncationKind.NONE or self.marker is None:
            return 0
        return self.marker.width()

    def truncate(self, content: StyledText, width: int) -> Union[Span, Spans]:
        """Fit ``content`` into ``width`` characters.

        Content that already fits is returned unchanged. Zero width yields
        an empty Spans with no runs. When the marker alone is wider than
        ``width`` it is still emitted in full. Results that contain the
        marker are Spans; otherwise the result has the content's type.
        """
        if width < 0:
            raise ValueError("width must be non-negative")
        length = content.width()
        if length <= width:
            return content
        if width == 0:
            return Spans()

        text = content.raw()
        marker = None if self.kind is TruncationKind.NONE else self.marker
        budget = max(width - self.marker_width, 0)
        log_event(
            logger,
            logging.DEBUG,
            "stylish.truncate.applied",
            kind=self.kind.value,
            width=width,
            length=length,
            marker_width=self.marker_width,
        )

        if self.kind is TruncationKind.NONE:
            return content.slice(None, char_to_byte(text, width))
        if self.kind is TruncationKind.RIGHT:
            head = content.slice(None, char_to_byte(text, budget))
            return head if marker is None else _assemble(head, marker)
        if self.kind is TruncationKind.LEFT:
            tail = content.slice(char_to_byte(text, length - budget), None)
            return tail if marker is None else _assemble(marker, tail)

        # Odd budgets give the extra column to the tail.
        head_width = budget // 2
        tail_width = budget - head_width
        head = content.slice(None, char_to_byte(text, head_width))
        tail = content.slice(char_to_byte(text, length - tail_width), None)
        return _assemble(head, marker, tail)
