"""
Declarative expectations evaluated against a Response.

Every expectation is evaluated, even after an earlier one fails, so a
single run reports every mismatch for a response. Body path lookup errors
become failed results instead of exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Union

from errors import PathError, ResponseAssertionError
from http_executor import Response
from json_path import extract
from logging_helper import log_status
from matchers import Matcher, wrap_matcher


class _Missing:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class StatusCode:
    def describe(self) -> str:
        return "status code"


@dataclass(frozen=True)
class Header:
    name: str

    def describe(self) -> str:
        return f"header {self.name!r}"


@dataclass(frozen=True)
class BodyPath:
    path: str

    def describe(self) -> str:
        return f"body path {self.path!r}"


Target = Union[StatusCode, Header, BodyPath]


@dataclass(frozen=True)
class Expectation:
    target: Target
    matcher: Matcher


@dataclass(frozen=True)
class AssertionResult:
    passed: bool
    target: str
    expected: str
    actual: Any = MISSING
    error: Optional[str] = None

    def describe(self) -> str:
        mark = "PASS" if self.passed else "FAIL"
        line = f"[{mark}] {self.target}: expected {self.expected}, actual {self.actual!r}"
        if self.error:
            line += f" ({self.error})"
        return line


def status_code(matcher: Any) -> Expectation:
    return Expectation(StatusCode(), wrap_matcher(matcher))


def header(name: str, matcher: Any) -> Expectation:
    return Expectation(Header(name), wrap_matcher(matcher))


def body(path: str, matcher: Any) -> Expectation:
    return Expectation(BodyPath(path), wrap_matcher(matcher))


def _evaluate_one(response: Response, expectation: Expectation) -> AssertionResult:
    target = expectation.target
    matcher = expectation.matcher
    expected = matcher.describe()

    if isinstance(target, StatusCode):
        actual = response.status_code
    elif isinstance(target, Header):
        actual = response.header(target.name, MISSING)
    elif isinstance(target, BodyPath):
        try:
            actual = extract(response.parsed_body, target.path)
        except PathError as e:
            return AssertionResult(False, target.describe(), expected, MISSING, f"{type(e).__name__}: {e}")
    else:
        raise TypeError(f"Unknown expectation target {target!r}")

    return AssertionResult(matcher.evaluate(actual), target.describe(), expected, actual)


def evaluate(response: Response, expectations: Iterable[Expectation]) -> List[AssertionResult]:
    return [_evaluate_one(response, expectation) for expectation in expectations]


def passed(results: Sequence[AssertionResult]) -> bool:
    return all(r.passed for r in results)


def assert_response(response: Response, expectations: Iterable[Expectation]) -> List[AssertionResult]:
    """Evaluate, then raise ResponseAssertionError listing every failed result."""
    results = evaluate(response, expectations)
    failures = [r for r in results if not r.passed]
    if failures:
        message = f"{len(failures)} of {len(results)} expectation(s) failed:\n" + "\n".join(
            f"  {r.describe()}" for r in failures
        )
        log_status("error", message)
        raise ResponseAssertionError(message, results)
    return results


class ResponseAssertion:
    """
    Fluent collector for the `then()` stage:

        then(response).status_code(200).body("name", "doggie").assert_all()
    """

    def __init__(self, response: Response, expectations: Optional[Iterable[Expectation]] = None):
        self.response = response
        self.expectations: List[Expectation] = list(expectations or [])

    def expect(self, expectation: Expectation) -> "ResponseAssertion":
        self.expectations.append(expectation)
        return self

    def status_code(self, matcher: Any) -> "ResponseAssertion":
        return self.expect(status_code(matcher))

    def header(self, name: str, matcher: Any) -> "ResponseAssertion":
        return self.expect(header(name, matcher))

    def body(self, path: str, matcher: Any) -> "ResponseAssertion":
        return self.expect(body(path, matcher))

    def results(self) -> List[AssertionResult]:
        return evaluate(self.response, self.expectations)

    def assert_all(self) -> List[AssertionResult]:
        return assert_response(self.response, self.expectations)


def then(response: Response) -> ResponseAssertion:
    return ResponseAssertion(response)
