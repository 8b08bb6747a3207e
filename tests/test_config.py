from __future__ import annotations

import pytest

from stylish_text.config import LayoutConfig
from stylish_text.errors import ConfigError
from stylish_text.text import Span, Spans, Tag
from stylish_text.widget import TruncationKind

MARK = Tag("<u>", "</u>")


def test_defaults() -> None:
    cfg = LayoutConfig.from_raw(None, env={})
    assert cfg.ellipsis == "…"
    assert cfg.truncation == "inner"


def test_mapping_values_are_normalized() -> None:
    cfg = LayoutConfig.from_raw({"ellipsis": "...", "truncation": " Right "}, env={})
    assert cfg == LayoutConfig(ellipsis="...", truncation="right")


def test_env_overrides_mapping() -> None:
    cfg = LayoutConfig.from_raw(
        {"truncation": "right"},
        env={"STYLISH_TEXT_TRUNCATION": "left", "STYLISH_TEXT_ELLIPSIS": "~"},
    )
    assert cfg.truncation == "left"
    assert cfg.ellipsis == "~"


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STYLISH_TEXT_TRUNCATION", "none")
    monkeypatch.delenv("STYLISH_TEXT_ELLIPSIS", raising=False)
    assert LayoutConfig.from_raw({}).truncation == "none"


def test_rejects_unknown_truncation() -> None:
    with pytest.raises(ConfigError, match="layout.truncation must be one of"):
        LayoutConfig.from_raw({"truncation": "outer"}, env={})


def test_rejects_non_string_ellipsis() -> None:
    with pytest.raises(ConfigError):
        LayoutConfig.from_raw({"ellipsis": 3}, env={})


def test_from_yaml_layout_section() -> None:
    document = "layout:\n  ellipsis: '..'\n  truncation: left\n"
    cfg = LayoutConfig.from_yaml(document, env={})
    assert cfg == LayoutConfig(ellipsis="..", truncation="left")


def test_from_yaml_top_level_mapping() -> None:
    assert LayoutConfig.from_yaml("truncation: right\n", env={}).truncation == "right"


def test_from_yaml_empty_document() -> None:
    assert LayoutConfig.from_yaml("", env={}) == LayoutConfig()


def test_from_yaml_rejects_invalid_documents() -> None:
    with pytest.raises(ConfigError):
        LayoutConfig.from_yaml("- a\n- b\n", env={})
    with pytest.raises(ConfigError):
        LayoutConfig.from_yaml("layout: [unclosed\n", env={})


def test_truncation_style_uses_configured_marker() -> None:
    style = LayoutConfig(ellipsis="…", truncation="inner").truncation_style(MARK)
    assert style.kind is TruncationKind.INNER
    assert style.marker == Span(MARK, "…")
    truncated = style.truncate(Spans.from_text(Tag("<i>", "</i>"), "abcdefg"), 5)
    assert truncated.paint() == "<i>ab</i><u>…</u><i>fg</i>"


def test_truncation_style_without_ellipsis_has_no_marker() -> None:
    style = LayoutConfig(ellipsis="", truncation="right").truncation_style(MARK)
    assert style.marker is None
    none_style = LayoutConfig(truncation="none").truncation_style(MARK)
    assert none_style.kind is TruncationKind.NONE
