from __future__ import annotations

import logging
from typing import Iterable, Iterator

from ..logging_utils import log_event
from .text_widget import Fitable

logger = logging.getLogger(__name__)


def allocate_widths(total_width: int, count: int) -> list[int]:
    """Split ``total_width`` into ``count`` near-equal shares.

    The remainder goes one column at a time to the earliest shares.
    """
    if count <= 0:
        return []
    share, remainder = divmod(total_width, count)
    return [share + 1 if index < remainder else share for index in range(count)]


class HBox:
    """Lays out fitable children left to right within a shared width."""

    def __init__(self, children: Iterable[Fitable] = ()) -> None:
        self._children: list[Fitable] = []
        for child in children:
            self.push(child)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Fitable]:
        return iter(tuple(self._children))

    def push(self, child: Fitable) -> None:
        if not isinstance(child, Fitable):
            raise TypeError(
                "HBox children must provide truncate() and paint(), "
                f"got {type(child).__name__}"
            )
        self._children.append(child)

    def truncate(self, width: int) -> str:
        if width < 0:
            raise ValueError("width must be non-negative")
        widths = allocate_widths(width, len(self._children))
        log_event(
            logger,
            logging.DEBUG,
            "stylish.hbox.allocated",
            width=width,
            children=len(self._children),
            shares=widths,
        )
        parts: list[str] = []
        for child, share in zip(self._children, widths):
            fitted = child.truncate(share)
            parts.append(fitted if isinstance(fitted, str) else fitted.paint())
        return "".join(parts)

    def paint(self) -> str:
        return "".join(child.paint() for child in self._children)
