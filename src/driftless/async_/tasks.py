"""Folds over collections of Tasks."""

from __future__ import annotations

from collections.abc import Iterable

from driftless.async_._helpers import Settleable, gather_results
from driftless.async_.task import Task
from driftless.result import Err, Ok, Results

__all__ = ['Tasks']


async def _all[T, E](items: list[Settleable[T, E]]) -> Ok[list[T]] | Err[E]:
    return Results.all(await gather_results(items))


async def _any[T, E](items: list[Settleable[T, E]]) -> Ok[T] | Err[list[E]]:
    return Results.any(await gather_results(items))


class Tasks:
    """Concurrent folds over Tasks.

    Members are awaited concurrently in an anyio task group. Once every
    member has settled, the Results are folded in input order, so "first"
    always means first by position, not first to finish.
    """

    @staticmethod
    def all[T, E](tasks: Iterable[Settleable[T, E]]) -> Task[list[T], E]:
        """Settle to Ok of every value, or the first Err by position.

        Example:
            ```python
            await Tasks.all([Task.succeed(1), Task.succeed(2)])
            # Ok(value=[1, 2])
            ```
        """
        return Task(_all(list(tasks)))

    @staticmethod
    def any[T, E](tasks: Iterable[Settleable[T, E]]) -> Task[T, list[E]]:
        """Settle to the first Ok by position, or Err of every error.

        Example:
            ```python
            await Tasks.any([Task.fail('a'), Task.succeed(42), Task.fail('b')])
            # Ok(value=42)
            ```
        """
        return Task(_any(list(tasks)))
