"""Composite styled text: an ordered sequence of runs.

The logical text of a Spans is the concatenation of its runs' text and its
rendering is the concatenation of each run's paint output. Adjacent runs
are never merged, even when they share a style.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Iterator, Optional, Sequence, Union

from ..logging_utils import log_event
from .painter import PLAIN, Painter
from .ranges import byte_length, byte_to_char, resolve_byte_range
from .span import (
    Regex,
    Span,
    Split,
    StyledText,
    compile_regex,
    find_literal,
    styled_runs,
)

logger = logging.getLogger(__name__)

RunBounds = Sequence[tuple[int, int, Span]]


def _copy_range(
    bounds: RunBounds, cursor: int, lo: int, hi: int, out: list[Span]
) -> int:
    """Append runs overlapping the character interval ``[lo, hi)``, clipped to it.

    Empty runs sitting at either bound are kept. Scanning starts at
    ``cursor``; the returned cursor is the first run not yet fully consumed,
    so consecutive ascending intervals share one walk over the runs.
    """
    while cursor < len(bounds):
        start, end, run = bounds[cursor]
        if start > hi or (start == hi and end > start):
            break
        if start == end:
            if lo <= start:
                out.append(run)
        else:
            cut_start, cut_end = max(lo, start), min(hi, end)
            if cut_start == start and cut_end == end:
                out.append(run)
            elif cut_start < cut_end:
                out.append(
                    Span(run.style, run.text[cut_start - start : cut_end - start])
                )
        if end > hi:
            break
        cursor += 1
    return cursor


class Spans:
    def __init__(self, runs: Iterable[Span] = ()) -> None:
        self._runs: list[Span] = []
        for run in runs:
            self.push(run)

    @classmethod
    def from_text(cls, style: Painter, text: str) -> "Spans":
        return cls([Span(style, text)])

    @property
    def runs(self) -> tuple[Span, ...]:
        return tuple(self._runs)

    def __iter__(self) -> Iterator[Span]:
        return iter(tuple(self._runs))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spans):
            return NotImplemented
        return self._runs == other._runs

    def __hash__(self) -> int:
        return hash(tuple(self._runs))

    def __repr__(self) -> str:
        return f"Spans({self._runs!r})"

    def __str__(self) -> str:
        return self.paint()

    def push(self, span: Span) -> None:
        if not isinstance(span, Span):
            raise TypeError(f"Spans.push expects a Span, got {type(span).__name__}")
        self._runs.append(span)

    def paint(self) -> str:
        return "".join(run.paint() for run in self._runs)

    def raw(self) -> str:
        return "".join(run.text for run in self._runs)

    def width(self) -> int:
        return sum(run.width() for run in self._runs)

    def join(self, other: StyledText) -> "Spans":
        return Spans([*self._runs, *styled_runs(other)])

    def _bounds(self) -> list[tuple[int, int, Span]]:
        bounds: list[tuple[int, int, Span]] = []
        offset = 0
        for run in self._runs:
            end = offset + len(run.text)
            bounds.append((offset, end, run))
            offset = end
        return bounds

    def _clip(self, lo: int, hi: int) -> list[Span]:
        """Runs overlapping the character interval ``[lo, hi)``, clipped to it."""
        clipped: list[Span] = []
        _copy_range(self._bounds(), 0, lo, hi, clipped)
        return clipped

    def _rebuild(
        self,
        matches: Sequence[tuple[int, int]],
        render: Callable[[int, Painter], Sequence[Span]],
    ) -> "Spans":
        """Reassemble runs around sorted, non-overlapping character intervals.

        ``render(index, style)`` supplies the runs for the ``index``-th interval,
        given the style of the run holding its first character. Runs are walked
        once.
        """
        bounds = self._bounds()
        total = bounds[-1][1] if bounds else 0
        result = Spans()
        cursor = 0
        last = 0
        for index, (start, end) in enumerate(matches):
            cursor = _copy_range(bounds, cursor, last, start, result._runs)
            style = self._style_from(bounds, cursor, start)
            result._runs.extend(render(index, style))
            last = end
        _copy_range(bounds, cursor, last, total, result._runs)
        return result

    def _style_from(self, bounds: RunBounds, cursor: int, offset: int) -> Painter:
        for start, end, run in (bounds[index] for index in range(cursor, len(bounds))):
            if start <= offset < end:
                return run.style
            if start > offset:
                break
        if self._runs:
            # An empty match at the end of the text belongs to the last run.
            return self._runs[-1].style
        return PLAIN

    def replace(self, pattern: str, replacement: Union[str, StyledText]) -> "Spans":
        """Replace literal occurrences of ``pattern`` in the logical text.

        Matches may straddle runs. Unmatched text keeps its original run
        styles. A plain-text replacement takes the style of the run holding
        the match's first character (unstyled when there are no runs); a
        styled replacement contributes its own runs unchanged.
        """
        matches = find_literal(self.raw(), pattern)
        if not matches:
            return Spans(self._runs)
        if isinstance(replacement, str):

            def render(index: int, style: Painter) -> Sequence[Span]:
                return [Span(style, replacement)] if replacement else []

        else:
            inserted = styled_runs(replacement)

            def render(index: int, style: Painter) -> Sequence[Span]:
                return inserted

        result = self._rebuild(matches, render)
        log_event(
            logger,
            logging.DEBUG,
            "stylish.replace.applied",
            matches=len(matches),
            runs_in=len(self._runs),
            runs_out=len(result._runs),
        )
        return result

    def replace_regex(
        self, pattern: Regex, replacement: Union[str, StyledText]
    ) -> "Spans":
        """Like ``replace`` but matching a regular expression.

        Group references (``\\1``, ``\\g<name>``) in the replacement are
        expanded per match. A styled replacement is expanded run by run, so
        each reference keeps the style of the run it appears in.
        """
        regex = compile_regex(pattern)
        found = list(regex.finditer(self.raw()))
        if not found:
            return Spans(self._runs)
        if isinstance(replacement, str):

            def render(index: int, style: Painter) -> Sequence[Span]:
                text = found[index].expand(replacement)
                return [Span(style, text)] if text else []

        else:
            template = Spans(styled_runs(replacement))

            def render(index: int, style: Painter) -> Sequence[Span]:
                return template.expand(found[index]).runs

        result = self._rebuild([match.span() for match in found], render)
        log_event(
            logger,
            logging.DEBUG,
            "stylish.replace.applied",
            matches=len(found),
            regex=regex.pattern,
            runs_in=len(self._runs),
            runs_out=len(result._runs),
        )
        return result

    def expand(self, match: "re.Match[str]") -> "Spans":
        """Fill group references in every run's text from ``match``."""
        return Spans(run.expand(match) for run in self._runs)

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> "Spans":
        """Restrict to the half-open byte interval ``[start, end)`` of the logical text.

        Runs outside the interval are dropped and runs straddling a bound are
        clipped. Raises InvalidRange or InvalidBoundary for the first bad bound.
        """
        text = self.raw()
        lo, hi = resolve_byte_range(text, start, end)
        if lo == 0 and hi == byte_length(text):
            return Spans(self._runs)
        return Spans(self._clip(byte_to_char(text, lo), byte_to_char(text, hi)))

    def split(self, pattern: str) -> Iterator[Split["Spans"]]:
        if not pattern:
            raise ValueError("empty separator")
        text = self.raw()
        bounds = self._bounds()
        cursor = 0
        last = 0
        for start, end in find_literal(text, pattern):
            segment: list[Span] = []
            delim: list[Span] = []
            cursor = _copy_range(bounds, cursor, last, start, segment)
            cursor = _copy_range(bounds, cursor, start, end, delim)
            yield Split(Spans(segment) if start > last else None, Spans(delim))
            last = end
        if last < len(text):
            tail: list[Span] = []
            _copy_range(bounds, cursor, last, len(text), tail)
            yield Split(Spans(tail), None)
