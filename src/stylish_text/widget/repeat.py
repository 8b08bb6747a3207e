from __future__ import annotations

from dataclasses import dataclass

from ..text.ranges import char_to_byte
from ..text.span import StyledText, styled_runs
from ..text.spans import Spans


@dataclass(frozen=True)
class Repeat:
    """Fills any width by repeating its content, clipping the last copy."""

    content: StyledText

    def truncate(self, width: int) -> Spans:
        if width < 0:
            raise ValueError("width must be non-negative")
        unit = self.content.width()
        result = Spans()
        if unit == 0 or width == 0:
            return result
        copies, remainder = divmod(width, unit)
        for _ in range(copies):
            for run in styled_runs(self.content):
                result.push(run)
        if remainder:
            text = self.content.raw()
            clipped = self.content.slice(None, char_to_byte(text, remainder))
            for run in styled_runs(clipped):
                if run.text:
                    result.push(run)
        return result

    def paint(self) -> str:
        return self.content.paint()
