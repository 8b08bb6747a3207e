from __future__ import annotations

import logging
from typing import Any, Optional


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return repr(value) if (not value or " " in value) else value
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def format_event(event: str, **fields: Any) -> str:
    parts = [event]
    for key, value in fields.items():
        if value is None:
            continue
        parts.append(f"{key}={_format_value(value)}")
    return " ".join(parts)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc: Optional[BaseException] = None,
    **fields: Any,
) -> None:
    """Emit a structured ``event key=value ...`` record.

    Formatting is skipped entirely when ``level`` is disabled for ``logger``.
    """
    if not logger.isEnabledFor(level):
        return
    message = format_event(event, **fields)
    if exc is not None:
        logger.log(level, message, exc_info=(type(exc), exc, exc.__traceback__))
        return
    logger.log(level, message)
