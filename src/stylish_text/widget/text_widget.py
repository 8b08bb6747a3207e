from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union, runtime_checkable

from ..text.span import Span, StyledText
from ..text.spans import Spans
from .truncation import TruncationStyle


@runtime_checkable
class Fitable(Protocol):
    """Anything that can render itself untruncated or fitted to a width."""

    def truncate(self, width: int) -> Any:
        """Return a paintable value (or a painted ``str``) fitted to ``width``."""

    def paint(self) -> str:
        """Render without truncation."""


@dataclass(frozen=True)
class TextWidget:
    """Styled text paired with the policy used to fit it."""

    content: StyledText
    policy: TruncationStyle = field(default_factory=TruncationStyle.none)

    def truncate(self, width: int) -> Union[Span, Spans]:
        return self.policy.truncate(self.content, width)

    def paint(self) -> str:
        return self.content.paint()

    def width(self) -> int:
        return self.content.width()
