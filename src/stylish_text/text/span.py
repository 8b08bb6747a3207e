"""A single styled run of text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Generic,
    Iterator,
    Optional,
    TypeVar,
    Union,
)

from .painter import Painter
from .ranges import resolve_byte_range, slice_bytes

if TYPE_CHECKING:
    from .spans import Spans

T = TypeVar("T")
StyledText = Union["Span", "Spans"]
Regex = Union[str, "re.Pattern[str]"]


@dataclass(frozen=True)
class Split(Generic[T]):
    """One piece of a split: the text before a delimiter and the delimiter.

    ``segment`` is None when nothing precedes the delimiter and ``delim`` is
    None for the trailing segment.
    """

    segment: Optional[T]
    delim: Optional[T]


def find_literal(text: str, pattern: str) -> list[tuple[int, int]]:
    """Character spans of every non-overlapping, leftmost-first occurrence."""
    if not pattern:
        # Mirrors str.replace, which matches the empty string at every position.
        return [(index, index) for index in range(len(text) + 1)]
    matches: list[tuple[int, int]] = []
    start = text.find(pattern)
    while start != -1:
        end = start + len(pattern)
        matches.append((start, end))
        start = text.find(pattern, end)
    return matches


def compile_regex(pattern: Regex) -> "re.Pattern[str]":
    return re.compile(pattern) if isinstance(pattern, str) else pattern


def styled_runs(value: StyledText) -> tuple["Span", ...]:
    if isinstance(value, Span):
        return (value,)
    return value.runs


@dataclass(frozen=True)
class Span:
    """Text painted with one style. Never mutated after construction."""

    style: Painter
    text: str = ""

    def __str__(self) -> str:
        return self.paint()

    def paint(self) -> str:
        return self.style.paint(self.text)

    def raw(self) -> str:
        return self.text

    def width(self) -> int:
        return len(self.text)

    def join(self, other: StyledText) -> "Spans":
        from .spans import Spans

        return Spans([self, *styled_runs(other)])

    def replace(
        self, pattern: str, replacement: Union[str, StyledText]
    ) -> Union["Span", "Spans"]:
        """Replace every literal occurrence of ``pattern``.

        Plain-text replacements keep this span's style and return a Span.
        Styled replacements return Spans where matched regions carry the
        replacement's own runs and the rest keeps this span's style.
        """
        if pattern not in self.text:
            return self
        if isinstance(replacement, str):
            return Span(self.style, self.text.replace(pattern, replacement))

        from .spans import Spans

        inserted = styled_runs(replacement)
        result = Spans()
        last = 0
        for start, end in find_literal(self.text, pattern):
            if start > last:
                result.push(Span(self.style, self.text[last:start]))
            for run in inserted:
                result.push(run)
            last = end
        if last < len(self.text):
            result.push(Span(self.style, self.text[last:]))
        return result

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> "Span":
        """Restrict to the half-open byte interval ``[start, end)``."""
        lo, hi = resolve_byte_range(self.text, start, end)
        return Span(self.style, slice_bytes(self.text, lo, hi))

    def split(self, pattern: str) -> Iterator[Split["Span"]]:
        if not pattern:
            raise ValueError("empty separator")
        last = 0
        for start, end in find_literal(self.text, pattern):
            segment = Span(self.style, self.text[last:start]) if start > last else None
            yield Split(segment, Span(self.style, self.text[start:end]))
            last = end
        if last < len(self.text):
            yield Split(Span(self.style, self.text[last:]), None)

    def expand(self, match: "re.Match[str]") -> "Span":
        """Fill ``\\1``/``\\g<name>`` references in this span's text from ``match``."""
        return Span(self.style, match.expand(self.text))

    def replace_regex(
        self, pattern: Regex, replacement: Union[str, StyledText]
    ) -> Union["Span", "Spans"]:
        """Like ``replace`` but matching a regular expression.

        Group references in the replacement are expanded per match; a styled
        replacement is expanded run by run.
        """
        regex = compile_regex(pattern)
        matches = list(regex.finditer(self.text))
        if not matches:
            return self
        if isinstance(replacement, str):
            text = regex.sub(lambda match: match.expand(replacement), self.text)
            return Span(self.style, text)

        from .spans import Spans

        inserted = styled_runs(replacement)
        result = Spans()
        last = 0
        for match in matches:
            if match.start() > last:
                result.push(Span(self.style, self.text[last : match.start()]))
            for run in inserted:
                result.push(run.expand(match))
            last = match.end()
        if last < len(self.text):
            result.push(Span(self.style, self.text[last:]))
        return result
