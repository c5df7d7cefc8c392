"""Exceptions raised while decoding chip labels."""

from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Raised when a label fits a grammar but carries an invalid fragment.

    ``field`` names the record field the fragment was destined for and
    ``fragment`` is the offending text. ``matcher`` and ``text`` are filled
    in by the matcher set once the error leaves a conversion function.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        fragment: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.fragment = fragment
        self.matcher: Optional[str] = None
        self.text: Optional[str] = None

    def __str__(self) -> str:
        if self.matcher is None:
            return self.message
        return f"{self.message} (matcher {self.matcher!r}, label {self.text!r})"


__all__ = ["DecodeError"]
