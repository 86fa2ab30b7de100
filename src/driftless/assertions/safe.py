"""safe_assert and assert_result utilities.

- safe_assert: always runs, even with python -O, and raises ContractError
- assert_result: returns Result[None, E] based on a condition
"""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from driftless._core import DriftlessError
from driftless.result import Err, Ok, Result

__all__ = ['ContractError', 'assert_result', 'safe_assert']


class ContractError(DriftlessError, AssertionError):
    """A library contract was violated, e.g. `Some(None)`.

    Subclasses AssertionError so generic assertion handlers still see it.
    """

    def __init__(self, message: str = '', code: str | None = 'contract') -> None:
        super().__init__(message, code)


def safe_assert(condition: bool, message: str = '') -> None:
    """Assert that works even in optimized mode (-O flag).

    Args:
        condition: The condition to check.
        message: Optional error message if assertion fails.

    Raises:
        ContractError: If condition is False.

    Example:
        ```python
        safe_assert(1 + 1 == 2)  # passes
        safe_assert(False, 'This always fails')  # raises ContractError
        ```
    """
    if not condition:
        raise ContractError(message)


@overload
def assert_result[E](condition: bool, error: E) -> Result[None, E]: ...


@overload
def assert_result[E](condition: bool, error: Callable[[], E], *, lazy: bool = True) -> Result[None, E]: ...


def assert_result[E](
    condition: bool,
    error: E | Callable[[], E],
    *,
    lazy: bool = False,
) -> Result[None, E]:
    """Return Ok(None) if condition is True, else Err(error).

    Handy as a `trip` callback: the check can derail a success without
    replacing its payload.

    Args:
        condition: The condition to check.
        error: The error value, or a callable that produces it (if lazy=True).
        lazy: If True, treat error as a callable and only invoke it on failure.

    Returns:
        Ok(None) if condition is True, Err(error) if False.

    Example:
        ```python
        assert_result(False, 'validation failed')
        # Err(error='validation failed')

        Ok(17).trip(lambda n: assert_result(n >= 18, 'too young'))
        # Err(error='too young')
        ```
    """
    if condition:
        return Ok(None)

    if lazy and callable(error):
        return Err(error())
    return Err(error)
