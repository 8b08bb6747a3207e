from __future__ import annotations

import logging

import pytest

from stylish_text.text import Span, Spans, Tag
from stylish_text.widget import (
    HBox,
    Repeat,
    TextWidget,
    TruncationStyle,
    allocate_widths,
)

ITALIC = Tag("<i>", "</i>")
BOLD = Tag("<b>", "</b>")
UNDERLINE = Tag("<u>", "</u>")
RED = Tag("<r>", "</r>")
GREEN = Tag("<g>", "</g>")


def test_allocate_widths_left_biased_remainder() -> None:
    assert allocate_widths(10, 2) == [5, 5]
    assert allocate_widths(11, 3) == [4, 4, 3]
    assert allocate_widths(2, 3) == [1, 1, 0]
    assert allocate_widths(7, 0) == []


def test_scenario_inner_truncation_in_two_widgets() -> None:
    truncation = TruncationStyle.inner(Span(UNDERLINE, "…"))
    hbox = HBox()
    hbox.push(TextWidget(Spans.from_text(ITALIC, "abcdefg"), truncation))
    hbox.push(TextWidget(Spans.from_text(BOLD, "12345678"), truncation))
    expected = "<i>ab</i><u>…</u><i>fg</i><b>12</b><u>…</u><b>78</b>"
    assert hbox.truncate(10) == expected


def test_two_widgets_right_truncation() -> None:
    truncation = TruncationStyle.right(Span(UNDERLINE, "…"))
    hbox = HBox(
        [
            TextWidget(Spans.from_text(RED, "01234"), truncation),
            TextWidget(Spans.from_text(GREEN, "56789"), truncation),
        ]
    )
    assert hbox.truncate(8) == "<r>012</r><u>…</u><g>567</g><u>…</u>"


def test_remainder_goes_to_earlier_children() -> None:
    truncation = TruncationStyle.none()
    hbox = HBox(
        [
            TextWidget(Span(RED, "aaaa"), truncation),
            TextWidget(Span(GREEN, "bbbb"), truncation),
        ]
    )
    assert hbox.truncate(5) == "<r>aaa</r><g>bb</g>"


def test_fitting_children_render_unchanged() -> None:
    truncation = TruncationStyle.right(Span(UNDERLINE, "…"))
    hbox = HBox([TextWidget(Span(RED, "0123456"), truncation)])
    assert hbox.truncate(7) == "<r>0123456</r>"


def test_empty_hbox_renders_nothing() -> None:
    assert HBox().truncate(10) == ""
    assert HBox().paint() == ""


def test_zero_share_child_renders_nothing() -> None:
    truncation = TruncationStyle.inner(Span(UNDERLINE, "…"))
    hbox = HBox(
        [
            TextWidget(Span(RED, "abc"), truncation),
            TextWidget(Span(GREEN, "def"), truncation),
        ]
    )
    assert hbox.truncate(1) == "<u>…</u>"


def test_mixed_content_types_and_repeat() -> None:
    hbox = HBox(
        [
            TextWidget(Span(RED, "abcdef"), TruncationStyle.none()),
            Repeat(Span(UNDERLINE, "=")),
            TextWidget(Spans([Span(GREEN, "x"), Span(BOLD, "y")])),
        ]
    )
    assert hbox.truncate(8) == "<r>abc</r><u>=</u><u>=</u><u>=</u><g>x</g><b>y</b>"


def test_nested_hbox() -> None:
    inner = HBox([TextWidget(Span(RED, "abcd")), TextWidget(Span(GREEN, "efgh"))])
    outer = HBox([inner, TextWidget(Span(BOLD, "ijkl"))])
    assert outer.truncate(8) == "<r>ab</r><g>ef</g><b>ijkl</b>"
    assert outer.paint() == "<r>abcd</r><g>efgh</g><b>ijkl</b>"


def test_truncate_does_not_mutate() -> None:
    hbox = HBox([TextWidget(Span(RED, "abcd"))])
    hbox.truncate(2)
    assert len(hbox) == 1
    assert hbox.paint() == "<r>abcd</r>"


def test_push_rejects_non_fitable() -> None:
    with pytest.raises(TypeError):
        HBox().push("text")  # type: ignore[arg-type]


def test_negative_width_rejected() -> None:
    with pytest.raises(ValueError):
        HBox().truncate(-1)


def test_logs_allocation(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="stylish_text.widget.hbox")
    HBox([TextWidget(Span(RED, "a")), TextWidget(Span(RED, "b"))]).truncate(3)
    assert "stylish.hbox.allocated width=3 children=2 shares=2,1" in caplog.text
