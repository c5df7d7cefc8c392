"""Tests for the ordered matcher engine."""

from __future__ import annotations

import threading
from typing import List

import pytest

from chipmark.errors import DecodeError
from chipmark.matcher import LazyMatcherSet, Matcher, MatcherSet


def _tagging(name: str, grammar: str) -> Matcher[str]:
    return Matcher.compile(name, grammar, lambda m: name)


def _failing(name: str, grammar: str) -> Matcher[str]:
    def convert(match):
        raise DecodeError(f"bad suffix: {match['suffix']}", field="kind", fragment=match["suffix"])

    return Matcher.compile(name, grammar, convert)


def test_first_structural_match_wins() -> None:
    matchers = MatcherSet(
        [
            _tagging("specific", r"DMG-CPU\ [AB]"),
            _tagging("loose", r"DMG-CPU\ [A-Z]"),
        ]
    )
    for _ in range(50):
        assert matchers.apply("DMG-CPU A") == "specific"
    assert matchers.apply("DMG-CPU C") == "loose"
    assert matchers.first_match("DMG-CPU A") == "specific"


def test_reordering_changes_the_winner() -> None:
    matchers = MatcherSet(
        [
            _tagging("loose", r"DMG-CPU\ [A-Z]"),
            _tagging("specific", r"DMG-CPU\ [AB]"),
        ]
    )
    assert matchers.apply("DMG-CPU A") == "loose"
    assert matchers.names == ("loose", "specific")


def test_no_match_returns_none() -> None:
    matchers = MatcherSet([_tagging("only", r"ABC")])
    assert matchers.apply("XYZ") is None
    assert matchers.first_match("XYZ") is None


def test_grammars_must_match_the_whole_label() -> None:
    matchers = MatcherSet([_tagging("only", r"ABC\ 12")])
    assert matchers.apply("ABC 12") == "only"
    assert matchers.apply("ABC 123") is None
    assert matchers.apply("xABC 12") is None
    assert matchers.apply("ABC 12 ") is None
    assert matchers.apply("ABC 1") is None


def test_conversion_error_propagates_without_fallthrough() -> None:
    matchers = MatcherSet(
        [
            _failing("strict", r"PART-(?P<suffix>[A-Z])"),
            _tagging("fallback", r"PART-[A-Z]"),
        ]
    )
    with pytest.raises(DecodeError) as excinfo:
        matchers.apply("PART-Q")
    error = excinfo.value
    assert error.matcher == "strict"
    assert error.text == "PART-Q"
    assert error.field == "kind"
    assert error.fragment == "Q"
    assert "strict" in str(error)


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(ValueError):
        MatcherSet([_tagging("same", "A"), _tagging("same", "B")])


def test_lazy_matcher_set_builds_once_across_threads() -> None:
    calls: List[int] = []
    barrier = threading.Barrier(8)

    def factory() -> MatcherSet[str]:
        calls.append(1)
        return MatcherSet([_tagging("only", "A")])

    lazy = LazyMatcherSet(factory)
    assert not lazy.built
    seen: List[MatcherSet[str]] = []

    def worker() -> None:
        barrier.wait()
        seen.append(lazy.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert lazy.built
    assert all(item is seen[0] for item in seen)
