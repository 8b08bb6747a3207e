"""Error hierarchy for styled-text operations.

Only slicing can fail on well-typed input; every other operation is total.
Style and config errors report invalid construction arguments.
"""

from __future__ import annotations

from typing import Optional


class StylishError(Exception):
    """Base styled-text error."""

    def __init__(self, message: str, *, user_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.user_message = user_message


class StyleError(StylishError, ValueError):
    """Style could not be constructed from the given arguments."""


class ConfigError(StylishError, ValueError):
    """Layout configuration is invalid."""


class SliceError(StylishError, ValueError):
    """Byte range cannot be applied to a text object."""

    def __init__(
        self,
        message: str,
        *,
        offset: int,
        length: int,
        user_message: Optional[str] = None,
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.offset = offset
        self.length = length


class InvalidRange(SliceError):
    """A slice bound falls outside ``[0, length]``."""


class InvalidBoundary(SliceError):
    """A slice bound splits a multi-byte character."""
