"""Assertions used by the checks.

Every helper either returns quietly or raises ConformanceViolation with a
message of the form `<what was checked>: expected <actual> <relation> <expected>`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

from immutable_checker.core.plain import deep_equal
from immutable_checker.core.report import describe, format_expected


class ConformanceViolation(AssertionError):
    """A class broke the immutable-value convention.

    Subclasses AssertionError so test runners report it as a plain failure.
    """

    def __init__(
        self,
        message: str,
        check: str | None = None,
        index: int | None = None,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.check = check
        self.index = index
        self.expected = expected
        self.actual = actual


def fail(message: str, **kwargs: Any) -> NoReturn:
    raise ConformanceViolation(message, **kwargs)


def expect(condition: bool, message: str, **kwargs: Any) -> None:
    """Assert a plain condition."""
    if not condition:
        fail(message, **kwargs)


def expect_callable(value: Any, message: str, **kwargs: Any) -> None:
    if not callable(value):
        fail(format_expected(message, value, 'to be callable', show_expected=False), **kwargs)


def expect_instance_of(value: Any, cls: type, message: str, **kwargs: Any) -> None:
    if not isinstance(value, cls):
        fail(format_expected(message, value, 'to be an instance of', cls), **kwargs)


def expect_type(value: Any, cls: type | tuple[type, ...], message: str, kind: str | None = None, **kwargs: Any) -> None:
    """Like expect_instance_of, worded for builtin kinds (str, list, ...)."""
    if not isinstance(value, cls):
        kind = kind or getattr(cls, '__name__', 'value')
        fail(format_expected(message, value, f'to be a {kind}', show_expected=False), **kwargs)


def expect_is(actual: Any, expected: Any, message: str, **kwargs: Any) -> None:
    """Identity comparison, used for True/False results of equals()."""
    if actual is not expected:
        fail(format_expected(message, actual, 'to equal', expected), expected=expected, actual=actual, **kwargs)


def expect_deep_equal(actual: Any, expected: Any, message: str, **kwargs: Any) -> None:
    if not deep_equal(actual, expected):
        fail(format_expected(message, actual, 'to deeply equal', expected), expected=expected, actual=actual, **kwargs)


def expect_raises(fn: Callable[[], Any], message: str, **kwargs: Any) -> None:
    """Assert that calling fn raises an Exception."""
    try:
        result = fn()
    except Exception:
        return
    fail(f'{message}: returned {describe(result)}', **kwargs)
