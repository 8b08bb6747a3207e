from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping, Optional

import yaml

from .errors import ConfigError
from .text.painter import Painter
from .text.span import Span
from .widget.truncation import TruncationKind, TruncationStyle

DEFAULT_ELLIPSIS = "…"
DEFAULT_TRUNCATION = TruncationKind.INNER.value
ELLIPSIS_ENV = "STYLISH_TEXT_ELLIPSIS"
TRUNCATION_ENV = "STYLISH_TEXT_TRUNCATION"
TRUNCATION_OPTIONS = {kind.value for kind in TruncationKind}


@dataclass(frozen=True)
class LayoutConfig:
    ellipsis: str = DEFAULT_ELLIPSIS
    truncation: str = DEFAULT_TRUNCATION

    @classmethod
    def from_raw(
        cls,
        raw: Optional[Mapping[str, Any]],
        env: Optional[Mapping[str, str]] = None,
    ) -> "LayoutConfig":
        """
        Build a normalized LayoutConfig from a `layout` mapping and env overrides.
        Environment values win over the mapping.
        """
        env = os.environ if env is None else env
        merged: MutableMapping[str, Any] = {
            "ellipsis": DEFAULT_ELLIPSIS,
            "truncation": DEFAULT_TRUNCATION,
        }
        if isinstance(raw, Mapping):
            merged.update(raw)
        merged["ellipsis"] = env.get(ELLIPSIS_ENV, merged["ellipsis"])
        merged["truncation"] = env.get(TRUNCATION_ENV, merged["truncation"])

        ellipsis = merged["ellipsis"]
        if ellipsis is None:
            ellipsis = ""
        if not isinstance(ellipsis, str):
            raise ConfigError("layout.ellipsis must be a string")
        truncation = str(merged["truncation"]).strip().lower()
        if truncation not in TRUNCATION_OPTIONS:
            options = ", ".join(sorted(TRUNCATION_OPTIONS))
            raise ConfigError(f"layout.truncation must be one of: {options}")
        return cls(ellipsis=ellipsis, truncation=truncation)

    @classmethod
    def from_yaml(
        cls, text: str, env: Optional[Mapping[str, str]] = None
    ) -> "LayoutConfig":
        try:
            data = yaml.safe_load(text) if text else None
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid layout YAML: {exc}") from exc
        if data is not None and not isinstance(data, Mapping):
            raise ConfigError("layout YAML must be a mapping")
        section = data.get("layout", data) if isinstance(data, Mapping) else None
        if section is not None and not isinstance(section, Mapping):
            raise ConfigError("layout section must be a mapping")
        return cls.from_raw(section, env=env)

    def truncation_style(self, marker_style: Painter) -> TruncationStyle:
        kind = TruncationKind(self.truncation)
        marker = Span(marker_style, self.ellipsis) if self.ellipsis else None
        if kind is TruncationKind.NONE:
            return TruncationStyle.none()
        return TruncationStyle(kind, marker)
