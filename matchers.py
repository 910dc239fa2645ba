"""
Composable value matchers built on PyHamcrest.

The four variants (Equals, AnyOf, AllOf, Not) are plain hamcrest matchers, so
besides `evaluate()` they describe themselves and work with
`hamcrest.assert_that`.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Iterable

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.string_description import StringDescription


def structurally_equal(expected: Any, actual: Any) -> bool:
    # bool is an int subclass in Python but not a number in JSON
    if isinstance(expected, bool) or isinstance(actual, bool):
        return isinstance(expected, bool) and isinstance(actual, bool) and expected == actual

    if isinstance(expected, numbers.Number) or isinstance(actual, numbers.Number):
        if not (isinstance(expected, numbers.Number) and isinstance(actual, numbers.Number)):
            return False
        return expected == actual

    if isinstance(expected, (str, bytes)) or isinstance(actual, (str, bytes)):
        return type(expected) is type(actual) and expected == actual

    if isinstance(expected, Mapping) or isinstance(actual, Mapping):
        if not (isinstance(expected, Mapping) and isinstance(actual, Mapping)):
            return False
        if set(expected.keys()) != set(actual.keys()):
            return False
        return all(structurally_equal(expected[key], actual[key]) for key in expected)

    if isinstance(expected, Sequence) or isinstance(actual, Sequence):
        if not (isinstance(expected, Sequence) and isinstance(actual, Sequence)):
            return False
        if len(expected) != len(actual):
            return False
        return all(structurally_equal(e, a) for e, a in zip(expected, actual))

    return expected is actual or expected == actual


class Matcher(BaseMatcher):
    """Base of the closed matcher family."""

    def evaluate(self, actual: Any) -> bool:
        return bool(self._matches(actual))

    def describe(self) -> str:
        return str(StringDescription().append_description_of(self))


class Equals(Matcher):
    def __init__(self, expected: Any):
        self.expected = expected

    def _matches(self, item: Any) -> bool:
        return structurally_equal(self.expected, item)

    def describe_to(self, description) -> None:
        description.append_description_of(self.expected)


class AnyOf(Matcher):
    def __init__(self, matchers: Iterable[Any]):
        self.matchers = [wrap_matcher(m) for m in matchers]

    def _matches(self, item: Any) -> bool:
        return any(m.evaluate(item) for m in self.matchers)

    def describe_to(self, description) -> None:
        description.append_list("(", " or ", ")", self.matchers)


class AllOf(Matcher):
    def __init__(self, matchers: Iterable[Any]):
        self.matchers = [wrap_matcher(m) for m in matchers]

    def _matches(self, item: Any) -> bool:
        return all(m.evaluate(item) for m in self.matchers)

    def describe_to(self, description) -> None:
        description.append_list("(", " and ", ")", self.matchers)


class Not(Matcher):
    def __init__(self, matcher: Any):
        self.matcher = wrap_matcher(matcher)

    def _matches(self, item: Any) -> bool:
        return not self.matcher.evaluate(item)

    def describe_to(self, description) -> None:
        description.append_text("not ").append_description_of(self.matcher)


def wrap_matcher(value: Any) -> Matcher:
    """Plain values become Equals; matchers pass through."""
    if isinstance(value, Matcher):
        return value
    return Equals(value)


# hamcrest-style factories

def equal_to(expected: Any) -> Equals:
    return Equals(expected)


def any_of(*matchers: Any) -> AnyOf:
    return AnyOf(matchers)


def all_of(*matchers: Any) -> AllOf:
    return AllOf(matchers)


def is_not(matcher: Any) -> Not:
    return Not(matcher)
