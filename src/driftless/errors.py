"""Panics and error-mapping helpers.

A `Panic` marks a broken invariant: code that was declared infallible raised
anyway. Panics are never folded into `Err`; they propagate so the bug is loud.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from driftless._core import DriftlessError
from driftless._logging import get_logger

if TYPE_CHECKING:
    from typing import TypeIs

__all__ = [
    'Panic',
    'as_infallible',
    'is_panic',
    'panic',
    'unsafe_cast_to',
]

logger = get_logger(__name__)


class Panic(DriftlessError):
    """Raised when a path declared infallible raised an exception.

    The triggering value is kept as `cause`. When it is an exception it is also
    chained through `__cause__`, so tracebacks show both.

    Attributes:
        cause: The exception or value that broke the contract.
    """

    __slots__ = ('cause',)

    def __init__(self, cause: Any = None, message: str = 'Panic', code: str | None = 'panic') -> None:
        super().__init__(message, code)
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @classmethod
    def caused_by(cls, cause: Any = None, message: str = 'Panic') -> Panic:
        """Build a Panic wrapping `cause`."""
        return cls(cause, message)

    def __repr__(self) -> str:
        return f'Panic({self.cause!r}, {self.message!r})'


def as_infallible(e: Any) -> NoReturn:
    """Error mapper for code paths that must never fail.

    Passing this where an error mapper is expected asserts that the wrapped
    computation cannot raise. If it does, a `Panic` is raised with the original
    exception as its cause. An existing `Panic` is re-raised unchanged.

    Args:
        e: The exception (or arbitrary raised value) that escaped.

    Raises:
        Panic: Always.

    Example:
        ```python
        from driftless import Result, as_infallible

        Result.from_fallible(lambda: 42, as_infallible)
        # Ok(value=42)
        ```
    """
    if isinstance(e, Panic):
        raise e
    logger.debug('infallible.raised', error_type=type(e).__name__)
    raise Panic.caused_by(
        e,
        f'A function you passed as infallible raised an exception: {e!r}',
    )


def panic(err: Any = None) -> NoReturn:
    """Raise `err` if it is an exception, otherwise a `Panic` caused by it.

    Intended as an argument to `unwrap_or_else` where a failure is truly
    unrecoverable.

    Example:
        ```python
        from driftless import Err, panic

        Err(ValueError('bad')).unwrap_or_else(panic)
        # raises ValueError('bad')
        ```
    """
    if isinstance(err, BaseException):
        raise err
    raise Panic.caused_by(err, 'Panic caused by unknown error!')


def is_panic(err: object) -> TypeIs[Panic]:
    """Return True if `err` is a driftless `Panic`."""
    return isinstance(err, Panic)


def unsafe_cast_to[E](err: Any) -> E:
    """Identity error mapper that only narrows the static type.

    Unsafe by construction; meant for prototyping when lifting external code
    whose raised exception types are documented but not enforced.
    """
    return err
