"""Base class for label decoders."""

from __future__ import annotations

from typing import Callable, Generic, Optional, Sequence, TypeVar

from ..matcher import LazyMatcherSet, Matcher, MatcherSet

T = TypeVar("T")


class Decoder(Generic[T]):
    """Decodes labels of one record kind through its own matcher set."""

    def __init__(self, name: str, build: Callable[[], Sequence[Matcher[T]]]) -> None:
        self.name = name
        self._matchers: LazyMatcherSet[T] = LazyMatcherSet(lambda: MatcherSet(build()))

    @property
    def matcher_set(self) -> MatcherSet[T]:
        return self._matchers.get()

    def decode(self, text: str) -> Optional[T]:
        """Return the decoded record, or ``None`` when no grammar fits ``text``."""
        return self._matchers.get().apply(text)

    def __call__(self, text: str) -> Optional[T]:
        return self.decode(text)

    def __repr__(self) -> str:
        state = "compiled" if self._matchers.built else "pending"
        return f"{type(self).__name__}({self.name!r}, {state})"
