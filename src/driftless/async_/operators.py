"""Free-function mirrors of the Task chaining methods.

Each factory takes the callback (and any extra arguments) and returns a
one-argument operator. An operator accepts the current value, a Result or an
awaitable of one such as a Task, and returns a coroutine of the next Result.
Operators call the same helpers as the Task methods, so
`task.map(f)` and `pipe(task, map_(f))` always agree.

Example:
    ```python
    from driftless import Task
    from driftless.async_.operators import and_then, map_, pipe, unwrap_or

    task = pipe(
        Task.succeed('21'),
        map_(int),
        and_then(lambda n: Task.succeed(n * 2)),
    )
    assert await unwrap_or(0)(task) == 42
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Coroutine
from typing import Any

from driftless.async_ import _helpers
from driftless.async_._helpers import Settleable
from driftless.async_.task import Task
from driftless.result import Result

__all__ = [
    'and_ensure',
    'and_then',
    'clone',
    'id_',
    'inspect',
    'inspect_err',
    'iter_',
    'map_',
    'map_err',
    'map_or',
    'map_or_else',
    'or_else',
    'or_ensure',
    'pipe',
    'rise',
    'tap',
    'trip',
    'unwrap',
    'unwrap_or',
    'unwrap_or_else',
    'zip_',
]

type Operator[R] = Callable[[Settleable[Any, Any]], Coroutine[Any, Any, R]]


def id_() -> Operator[Result[Any, Any]]:
    return lambda res: _helpers.id_result(res)


def clone() -> Operator[Result[Any, Any]]:
    return lambda res: _helpers.clone_result(res)


def map_[T, U](f: Callable[[T], U | Awaitable[U]]) -> Operator[Result[U, Any]]:
    """Operator form of `Task.map`."""
    return lambda res: _helpers.map_success(res, f)


def map_or[T, U](f: Callable[[T], U | Awaitable[U]], or_value: U | Awaitable[U]) -> Operator[Result[U, Any]]:
    return lambda res: _helpers.map_success_or(res, f, or_value)


def map_or_else[T, U, E](
    f: Callable[[T], U | Awaitable[U]],
    else_fn: Callable[[E], U | Awaitable[U]],
) -> Operator[Result[U, Any]]:
    return lambda res: _helpers.map_success_or_else(res, f, else_fn)


def map_err[E, F](f: Callable[[E], F | Awaitable[F]]) -> Operator[Result[Any, F]]:
    """Operator form of `Task.map_err`."""
    return lambda res: _helpers.map_failure(res, f)


def and_then[T, U, F](f: Callable[[T], Settleable[U, F]]) -> Operator[Result[U, Any]]:
    """Operator form of `Task.and_then`."""
    return lambda res: _helpers.chain_success(res, f)


def or_else[E, U, F](f: Callable[[E], Settleable[U, F]]) -> Operator[Result[Any, F]]:
    """Operator form of `Task.or_else`."""
    return lambda res: _helpers.chain_failure(res, f)


def zip_[U, F](other: Settleable[U, F]) -> Operator[Result[tuple[Any, U], Any]]:
    """Operator form of `Task.zip`; the piped value is the left side."""
    return lambda res: _helpers.zip_results(res, other)


def tap(f: Callable[[Result[Any, Any]], Any]) -> Operator[Result[Any, Any]]:
    return lambda res: _helpers.tap_result(res, f)


def inspect[T](f: Callable[[T], Any]) -> Operator[Result[T, Any]]:
    return lambda res: _helpers.inspect_success(res, f)


def inspect_err[E](f: Callable[[E], Any]) -> Operator[Result[Any, E]]:
    return lambda res: _helpers.inspect_failure(res, f)


def trip[T, U, F](f: Callable[[T], Settleable[U, F]]) -> Operator[Result[T, Any]]:
    """Operator form of `Task.trip`."""
    return lambda res: _helpers.trip_result(res, f)


and_ensure = trip


def rise[E, U, F](f: Callable[[E], Settleable[U, F]]) -> Operator[Result[Any, E]]:
    """Operator form of `Task.rise`."""
    return lambda res: _helpers.rise_result(res, f)


or_ensure = rise


def unwrap() -> Operator[Any]:
    return lambda res: _helpers.unwrap_result(res)


def unwrap_or[U](or_value: U | Awaitable[U]) -> Operator[Any]:
    return lambda res: _helpers.unwrap_result_or(res, or_value)


def unwrap_or_else[E, U](else_fn: Callable[[E], U | Awaitable[U]]) -> Operator[Any]:
    return lambda res: _helpers.unwrap_result_or_else(res, else_fn)


def iter_() -> Callable[[Settleable[Any, Any]], AsyncIterator[Any]]:
    """Operator form of `Task.iter`; returns an async iterator, not a coroutine."""
    return lambda res: _helpers.iter_result(res)


def pipe(value: Settleable[Any, Any], *operators: Callable[[Any], Awaitable[Any]]) -> Task[Any, Any]:
    """Thread `value` through `operators` left to right and wrap the outcome in a Task.

    Each operator receives the awaitable produced by the one before it, so
    stages run strictly in order and no stage sees an unsettled value.
    Terminal operators (`unwrap*`) belong outside a pipe, applied to the
    returned Task.

    Args:
        value: A Result, Task or other awaitable of a Result.
        *operators: Operators built by the factories in this module.

    Returns:
        A Task settling to the last operator's Result.

    Example:
        ```python
        pipe(Task.fail('boom'), map_err(str.upper), or_else(lambda e: Ok(len(e))))
        # settles to Ok(value=4)
        ```
    """
    current: Any = value
    for operator in operators:
        current = operator(current)
    return Task.of(current)
