"""Coroutines behind every Task method and free-function operator.

Each helper takes the current value (a Result, or an awaitable of one) and
returns the next Result. Callbacks may be sync or return awaitables. Task
methods and the operators in `driftless.async_.operators` both call these, so
the two surfaces cannot drift apart.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from typing import Any

import anyio

from driftless._internal.payload import clone_payload, clones_enabled
from driftless.result import Err, Ok, Result

type Settleable[T, E] = Result[T, E] | Awaitable[Result[T, E]]

__all__ = [
    'Settleable',
    'chain_failure',
    'chain_success',
    'clone_result',
    'gather_results',
    'id_result',
    'inspect_failure',
    'inspect_success',
    'iter_result',
    'map_failure',
    'map_success',
    'map_success_or',
    'map_success_or_else',
    'maybe_await',
    'rise_result',
    'settle',
    'tap_result',
    'trip_result',
    'unwrap_result',
    'unwrap_result_or',
    'unwrap_result_or_else',
    'zip_results',
]


async def maybe_await(value: Any) -> Any:
    """Await `value` if it is awaitable, otherwise return it."""
    if inspect.isawaitable(value):
        return await value
    return value


async def settle[T, E](res: Settleable[T, E]) -> Result[T, E]:
    """Resolve a Result or an awaitable of one to a Result."""
    if isinstance(res, Result):
        return res
    return await res


def _view[V](value: V) -> V:
    return clone_payload(value) if clones_enabled() else value


def _first_leaf(group: BaseExceptionGroup[Any]) -> BaseException:
    exc: BaseException = group
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc


async def gather_results[T, E](items: Sequence[Settleable[T, E]]) -> list[Result[T, E]]:
    """Settle every item concurrently and return the Results by position.

    A failure inside the task group is re-raised as its first leaf exception
    so a Panic surfaces as itself rather than wrapped in an ExceptionGroup.
    """
    results: list[Result[T, E] | None] = [None] * len(items)

    async def collect(index: int, item: Settleable[T, E]) -> None:
        results[index] = await settle(item)

    try:
        async with anyio.create_task_group() as tg:
            for index, item in enumerate(items):
                tg.start_soon(collect, index, item)
    except ExceptionGroup as group:
        raise _first_leaf(group)

    return results  # type: ignore[return-value]


async def id_result[T, E](res: Settleable[T, E]) -> Result[T, E]:
    return await settle(res)


async def clone_result[T, E](res: Settleable[T, E]) -> Result[T, E]:
    return (await settle(res)).clone()  # type: ignore[attr-defined]


async def map_success[T, U, E](res: Settleable[T, E], f: Callable[[T], U | Awaitable[U]]) -> Result[U, E]:
    result = await settle(res)
    if isinstance(result, Err):
        return result
    return Ok(await maybe_await(f(result.value)))  # type: ignore[attr-defined]


async def map_success_or[T, U, E](
    res: Settleable[T, E],
    f: Callable[[T], U | Awaitable[U]],
    or_value: U | Awaitable[U],
) -> Ok[U]:
    result = await settle(res)
    if isinstance(result, Err):
        return Ok(await maybe_await(or_value))
    return Ok(await maybe_await(f(result.value)))  # type: ignore[attr-defined]


async def map_success_or_else[T, U, E](
    res: Settleable[T, E],
    f: Callable[[T], U | Awaitable[U]],
    else_fn: Callable[[E], U | Awaitable[U]],
) -> Ok[U]:
    result = await settle(res)
    if isinstance(result, Err):
        return Ok(await maybe_await(else_fn(result.error)))
    return Ok(await maybe_await(f(result.value)))  # type: ignore[attr-defined]


async def map_failure[T, E, F](res: Settleable[T, E], f: Callable[[E], F | Awaitable[F]]) -> Result[T, F]:
    result = await settle(res)
    if isinstance(result, Ok):
        return result
    return Err(await maybe_await(f(result.error)))  # type: ignore[attr-defined]


async def chain_success[T, U, E, F](
    res: Settleable[T, E],
    f: Callable[[T], Settleable[U, F]],
) -> Result[U, E | F]:
    """Run `f` on the Ok value and flatten whatever Result it produces."""
    result = await settle(res)
    if isinstance(result, Err):
        return result
    return await settle(f(result.value))  # type: ignore[attr-defined]


async def chain_failure[T, U, E, F](
    res: Settleable[T, E],
    f: Callable[[E], Settleable[U, F]],
) -> Result[T | U, F]:
    result = await settle(res)
    if isinstance(result, Ok):
        return result
    return await settle(f(result.error))  # type: ignore[attr-defined]


async def zip_results[T, U, E, F](res: Settleable[T, E], other: Settleable[U, F]) -> Result[tuple[T, U], E | F]:
    """Settle both sides concurrently; the left Err wins over the right."""
    left, right = await gather_results([res, other])
    return left.zip(right)  # type: ignore[attr-defined]


async def tap_result[T, E](res: Settleable[T, E], f: Callable[[Result[T, E]], Any]) -> Result[T, E]:
    result = await settle(res)
    await maybe_await(f(_view(result)))
    return result


async def inspect_success[T, E](res: Settleable[T, E], f: Callable[[T], Any]) -> Result[T, E]:
    result = await settle(res)
    if isinstance(result, Ok):
        await maybe_await(f(_view(result.value)))
    return result


async def inspect_failure[T, E](res: Settleable[T, E], f: Callable[[E], Any]) -> Result[T, E]:
    result = await settle(res)
    if isinstance(result, Err):
        await maybe_await(f(_view(result.error)))
    return result


async def trip_result[T, U, E, F](res: Settleable[T, E], f: Callable[[T], Settleable[U, F]]) -> Result[T, E | F]:
    """Derail an Ok with the check's Err; otherwise keep the original Ok."""
    result = await settle(res)
    if isinstance(result, Err):
        return result
    check = await settle(f(_view(result.value)))  # type: ignore[attr-defined]
    return check.and_(result)  # type: ignore[attr-defined]


async def rise_result[T, U, E, F](res: Settleable[T, E], f: Callable[[E], Settleable[U, F]]) -> Result[T | U, E]:
    """Recover an Err with the check's Ok; otherwise keep the original Err."""
    result = await settle(res)
    if isinstance(result, Ok):
        return result
    check = await settle(f(_view(result.error)))  # type: ignore[attr-defined]
    return check.or_(result)  # type: ignore[attr-defined]


async def unwrap_result[T, E](res: Settleable[T, E]) -> T | E:
    return (await settle(res)).unwrap()  # type: ignore[attr-defined]


async def unwrap_result_or[T, U, E](res: Settleable[T, E], or_value: U | Awaitable[U]) -> T | U:
    result = await settle(res)
    if isinstance(result, Ok):
        return result.value
    return await maybe_await(or_value)


async def unwrap_result_or_else[T, U, E](res: Settleable[T, E], else_fn: Callable[[E], U | Awaitable[U]]) -> T | U:
    result = await settle(res)
    if isinstance(result, Ok):
        return result.value
    return await maybe_await(else_fn(result.error))  # type: ignore[attr-defined]


async def iter_result[T, E](res: Settleable[T, E]) -> AsyncIterator[T]:
    """Yield the Ok value once, or nothing on Err."""
    result = await settle(res)
    if isinstance(result, Ok):
        yield result.value
