"""Ordered grammar dispatch for label decoding.

A :class:`Matcher` pairs one anchored grammar with a conversion function.
A :class:`MatcherSet` tries its matchers strictly in the order they were
given and stops at the first grammar that fits the whole label, so more
specific grammars must be listed before looser ones that would also fit.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from re import Match, Pattern
from typing import Callable, Generic, Optional, Sequence, Tuple, TypeVar

from .errors import DecodeError
from .logging import get_logger

T = TypeVar("T")

logger = get_logger("matcher")


@dataclass(frozen=True)
class Matcher(Generic[T]):
    """One label grammar and the function turning its captures into a record."""

    name: str
    pattern: Pattern[str]
    convert: Callable[[Match[str]], T]

    @classmethod
    def compile(
        cls, name: str, grammar: str, convert: Callable[[Match[str]], T]
    ) -> "Matcher[T]":
        """Compile ``grammar`` in verbose mode; literal spaces must be escaped."""
        return cls(name=name, pattern=re.compile(grammar, re.VERBOSE), convert=convert)

    def match(self, text: str) -> Optional[Match[str]]:
        return self.pattern.fullmatch(text)


class MatcherSet(Generic[T]):
    """Priority list of matchers for one record kind."""

    def __init__(self, matchers: Sequence[Matcher[T]]) -> None:
        names = [matcher.name for matcher in matchers]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate matcher names: {', '.join(duplicates)}")
        self._matchers: Tuple[Matcher[T], ...] = tuple(matchers)

    @property
    def matchers(self) -> Tuple[Matcher[T], ...]:
        return self._matchers

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(matcher.name for matcher in self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def first_match(self, text: str) -> Optional[str]:
        """Return the name of the grammar that would handle ``text``."""
        for matcher in self._matchers:
            if matcher.match(text) is not None:
                return matcher.name
        return None

    def apply(self, text: str) -> Optional[T]:
        """Decode ``text`` with the first grammar that fits it.

        Returns ``None`` when no grammar fits. A :class:`DecodeError` raised
        by the conversion is re-raised with the matcher name attached; later
        matchers are not consulted.
        """
        for matcher in self._matchers:
            match = matcher.match(text)
            if match is None:
                continue
            try:
                record = matcher.convert(match)
            except DecodeError as exc:
                exc.matcher = matcher.name
                exc.text = text
                raise
            logger.debug("Label %r decoded by %s", text, matcher.name)
            return record
        return None


class LazyMatcherSet(Generic[T]):
    """Builds a matcher set on first use, exactly once per process."""

    def __init__(self, factory: Callable[[], MatcherSet[T]]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: Optional[MatcherSet[T]] = None

    @property
    def built(self) -> bool:
        return self._value is not None

    def get(self) -> MatcherSet[T]:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = self._factory()
                logger.debug("Compiled %d grammars", len(self._value))
            return self._value


__all__ = ["LazyMatcherSet", "Matcher", "MatcherSet"]
