"""Task: an awaitable that always settles to a Result and never raises for failures.

A Task wraps a pending computation of a `Result`. Domain failures travel as
`Err` values. Awaiting a Task raises only for a broken contract: a path
declared infallible raised, or a callback handed to a chaining method did.
Either case surfaces as a `Panic`.

Example:
    ```python
    from driftless import Task

    async def load_user(user_id: int) -> dict: ...

    safe_load = Task.lift_fallible(load_user, lambda e: f'lookup failed: {e}')

    async def main():
        result = await (
            safe_load(7)
            .map(lambda user: user['name'])
            .inspect_err(print)
        )
    ```
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncIterator, Awaitable, Callable, Coroutine, Generator
from typing import Any, NamedTuple

import aiologic

from driftless._internal.lift import lift
from driftless._internal.once import SettlementCell
from driftless._logging import get_logger
from driftless.async_ import _helpers
from driftless.async_._helpers import Settleable
from driftless.errors import as_infallible
from driftless.result import Err, Ok, Result

__all__ = ['DeferredTask', 'Task']

logger = get_logger(__name__)

_PENDING: Any = object()


async def _infallible[T, E](source: Awaitable[Result[T, E]]) -> Result[T, E]:
    try:
        return await source
    except Exception as e:
        as_infallible(e)


async def _reraise(exc: Exception) -> Any:
    raise exc


async def _capture[T, E](
    source: Awaitable[Any],
    err_map_fn: Callable[[Exception], E],
    ctor: Callable[[Any], Result[T, E]],
) -> Result[T, E]:
    try:
        return ctor(await source)
    except Exception as e:
        return Err(err_map_fn(e))


async def _map_error[E](exc: Exception, err_map_fn: Callable[[Exception], E]) -> Err[E]:
    return Err(err_map_fn(exc))


class Task[T, E]:
    """An async computation that always settles to `Result[T, E]`.

    Tasks created while an asyncio loop is running start immediately; tasks
    created outside one start on their first await. A Task settles once, and
    every await, concurrent or repeated, yields the identical Result object.

    Build Tasks with the classmethod constructors rather than calling the
    class directly. Chaining methods return new Tasks and leave the receiver
    untouched.

    Attributes:
        _source: The awaitable still to be driven, or None once started.
        _future: The asyncio task driving `_source`, once started.
        _result: The settled Result, or a sentinel while pending.
        _error: The exception raised by the source, if any.
        _started: Whether something is driving `_source`.
        _ready: Event set once the Task has settled.

    Example:
        ```python
        async def main():
            task = Task.succeed(21).map(lambda x: x * 2)
            assert await task == Ok(42)
            assert await task.unwrap() == 42
        ```
    """

    __slots__ = ('_error', '_future', '_ready', '_result', '_source', '_started')

    def __init__(self, source: Awaitable[Result[T, E]]) -> None:
        """Wrap an awaitable of a Result.

        Exceptions escaping `source` are turned into a `Panic`.

        Args:
            source: An awaitable that produces a Result[T, E].
        """
        self._source: Awaitable[Result[T, E]] | None = _infallible(source)
        self._future: asyncio.Future[None] | None = None
        self._result: Result[T, E] = _PENDING
        self._error: BaseException | None = None
        self._started = False
        self._ready = aiologic.Event()
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self._started = True
        self._future = asyncio.ensure_future(self._drive())

    @classmethod
    def _settled(cls, result: Result[T, E]) -> Task[T, E]:
        task = cls.__new__(cls)
        task._source = None
        task._future = None
        task._result = result
        task._error = None
        task._started = True
        task._ready = aiologic.Event()
        task._ready.set()
        return task

    async def _drive(self) -> None:
        source, self._source = self._source, None
        try:
            self._result = await source  # type: ignore[misc]
        except BaseException as exc:
            self._error = exc
            if not isinstance(exc, Exception):
                raise
        finally:
            self._ready.set()

    async def _resolve(self) -> Result[T, E]:
        if not self._started:
            # An awaiter being cancelled must not settle the Task.
            self._started = True
            self._future = asyncio.ensure_future(self._drive())
        if not self._ready.is_set():
            await self._ready
        if self._error is not None:
            raise self._error
        return self._result

    def __await__(self) -> Generator[Any, None, Result[T, E]]:
        return self._resolve().__await__()

    def __repr__(self) -> str:
        if self._result is not _PENDING:
            return f'Task({self._result!r})'
        if self._error is not None:
            return f'Task(<raised {type(self._error).__name__}>)'
        return 'Task(<pending>)'

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------

    @classmethod
    def succeed(cls, value: T) -> Task[T, Any]:
        """Return a Task already settled to `Ok(value)`."""
        return cls._settled(Ok(value))

    @classmethod
    def fail(cls, error: E) -> Task[Any, E]:
        """Return a Task already settled to `Err(error)`."""
        return cls._settled(Err(error))

    @classmethod
    def of(cls, value: Settleable[T, E]) -> Task[T, E]:
        """Wrap a Result or an awaitable of one.

        The awaitable is trusted to encode failures as Err. If it raises
        instead, awaiting the Task raises a `Panic`.

        Example:
            ```python
            async def lookup(key: str) -> Result[int, str]:
                ...

            task = Task.of(lookup('answer'))
            ```
        """
        if isinstance(value, Result):
            return cls._settled(value)
        return cls(value)

    @classmethod
    def from_(cls, f: Callable[[], Settleable[T, E]]) -> Task[T, E]:
        """Call `f` and wrap the Result or awaitable it returns.

        Same contract as `of`: if `f` raises, synchronously or not, awaiting
        the Task raises a `Panic`.
        """
        try:
            value = f()
        except Exception as e:
            return cls(_reraise(e))
        return cls.of(value)

    @classmethod
    def from_awaitable(
        cls,
        source: Awaitable[T],
        err_map_fn: Callable[[Exception], E],
    ) -> Task[T, E]:
        """Lift an awaitable that may raise.

        A returned value becomes `Ok(value)`. An exception becomes
        `Err(err_map_fn(exc))`.

        Example:
            ```python
            task = Task.from_awaitable(client.get(url), lambda e: FetchError(str(e)))
            ```
        """
        return cls(_capture(source, err_map_fn, Ok))

    @classmethod
    def from_fallible(
        cls,
        f: Callable[[], T | Awaitable[T]],
        err_map_fn: Callable[[Exception], E],
    ) -> Task[T, E]:
        """Call `f`, which may be sync or return an awaitable, capturing failures.

        Exceptions raised synchronously by `f` or by the awaitable it returns
        become `Err(err_map_fn(exc))`.
        """
        return cls.lift_fallible(f, err_map_fn)()

    @classmethod
    def lift_fallible[**P](
        cls,
        f: Callable[P, Any],
        err_map_fn: Callable[[Exception], E],
        ctor: Callable[[Any], Result[Any, E]] | None = None,
    ) -> Callable[P, Task[Any, E]]:
        """Turn a throwing function, sync or async, into one returning a Task.

        Args:
            f: The function to wrap.
            err_map_fn: Maps a raised exception to the Err payload.
            ctor: Builds a Result from the return value. Defaults to `Ok`.

        Returns:
            A function with the same signature returning a Task.

        Example:
            ```python
            async def read_config(path: str) -> dict: ...

            safe_read = Task.lift_fallible(read_config, lambda e: ConfigError(str(e)))
            result = await safe_read('app.toml')
            ```
        """
        build = ctor or Ok

        def on_value(value: Any) -> Task[Any, E]:
            if inspect.isawaitable(value):
                return cls(_capture(value, err_map_fn, build))
            return cls._settled(build(value))

        def on_error(exc: Exception) -> Task[Any, E]:
            return cls(_map_error(exc, err_map_fn))

        return lift(f, on_value, on_error)

    @classmethod
    def deferred(cls) -> DeferredTask:
        """Create a Task settled from the outside.

        Returns a `(task, succeed, fail)` triple. The first call to `succeed`
        or `fail` settles the Task; every later call is ignored and returns
        False. Both functions are safe to call from other threads.

        Example:
            ```python
            task, succeed, fail = Task.deferred()
            loop.call_later(5, fail, TimeoutError())
            client.on_reply(succeed)
            result = await task
            ```
        """
        cell: SettlementCell[Result[T, E]] = SettlementCell()
        task = cls(cell.wait())

        def settle_with(result: Result[T, E]) -> bool:
            if cell.set(result):
                logger.debug('task.deferred.settled', outcome='ok' if result.is_ok() else 'err')  # type: ignore[attr-defined]
                return True
            logger.debug('task.deferred.ignored', outcome='ok' if result.is_ok() else 'err')  # type: ignore[attr-defined]
            return False

        def succeed(value: T) -> bool:
            return settle_with(Ok(value))

        def fail(error: E) -> bool:
            return settle_with(Err(error))

        return DeferredTask(task, succeed, fail)

    # -----------------------------------------------------------------
    # Chaining
    # -----------------------------------------------------------------

    def id(self) -> Task[T, E]:
        return Task(_helpers.id_result(self))

    def clone(self) -> Task[T, E]:
        """Return a Task settling to a deep copy of this Task's Result."""
        return Task(_helpers.clone_result(self))

    def map[U](self, f: Callable[[T], U | Awaitable[U]]) -> Task[U, E]:
        """Transform the Ok value; `f` may be async. Err passes through."""
        return Task(_helpers.map_success(self, f))

    def map_or[U](self, f: Callable[[T], U | Awaitable[U]], or_value: U | Awaitable[U]) -> Task[U, Any]:
        """Map the Ok value, or settle to `Ok(or_value)` on Err."""
        return Task(_helpers.map_success_or(self, f, or_value))

    def map_or_else[U](
        self,
        f: Callable[[T], U | Awaitable[U]],
        else_fn: Callable[[E], U | Awaitable[U]],
    ) -> Task[U, Any]:
        """Map the Ok value, or settle to `Ok(else_fn(error))` on Err."""
        return Task(_helpers.map_success_or_else(self, f, else_fn))

    def map_err[F](self, f: Callable[[E], F | Awaitable[F]]) -> Task[T, F]:
        """Transform the Err payload; `f` may be async. Ok passes through."""
        return Task(_helpers.map_failure(self, f))

    def and_then[U, F](self, f: Callable[[T], Settleable[U, F]]) -> Task[U, E | F]:
        """Chain a Result- or Task-returning function on the Ok value.

        The returned Result is flattened, never nested.
        """
        return Task(_helpers.chain_success(self, f))

    def or_else[U, F](self, f: Callable[[E], Settleable[U, F]]) -> Task[T | U, F]:
        """Chain a Result- or Task-returning recovery on the Err payload."""
        return Task(_helpers.chain_failure(self, f))

    def zip[U, F](self, other: Settleable[U, F]) -> Task[tuple[T, U], E | F]:
        """Settle both sides concurrently and pair the Ok values.

        If either side fails, the left Err is returned before the right one.
        """
        return Task(_helpers.zip_results(self, other))

    def tap(self, f: Callable[[Result[T, E]], Any]) -> Task[T, E]:
        """Pass a clone of the settled Result to `f` and keep the original.

        `f` is awaited if it returns an awaitable. Its return value is ignored.
        If it raises, awaiting the Task raises a `Panic`.
        """
        return Task(_helpers.tap_result(self, f))

    def inspect(self, f: Callable[[T], Any]) -> Task[T, E]:
        """Like `tap`, but only called with a copy of the Ok value."""
        return Task(_helpers.inspect_success(self, f))

    def inspect_err(self, f: Callable[[E], Any]) -> Task[T, E]:
        """Like `tap`, but only called with a copy of the Err payload."""
        return Task(_helpers.inspect_failure(self, f))

    def trip[U, F](self, f: Callable[[T], Settleable[U, F]]) -> Task[T, E | F]:
        """Run an Ok-side check that can derail the success.

        The check's Err replaces the Ok. The check's Ok is discarded and the
        original value is kept.
        """
        return Task(_helpers.trip_result(self, f))

    def and_ensure[U, F](self, f: Callable[[T], Settleable[U, F]]) -> Task[T, E | F]:
        """Alias of `trip`."""
        return self.trip(f)

    def rise[U, F](self, f: Callable[[E], Settleable[U, F]]) -> Task[T | U, E]:
        """Run an Err-side recovery that can replace the failure.

        The recovery's Ok replaces the Err. If the recovery itself fails, the
        original Err is kept.
        """
        return Task(_helpers.rise_result(self, f))

    def or_ensure[U, F](self, f: Callable[[E], Settleable[U, F]]) -> Task[T | U, E]:
        """Alias of `rise`."""
        return self.rise(f)

    def pipe(self, *operators: Callable[[Any], Awaitable[Any]]) -> Task[Any, Any]:
        """Thread this Task through free-function operators.

        Example:
            ```python
            from driftless.async_ import operators as op

            task = Task.succeed(2).pipe(op.map_(lambda x: x + 1), op.inspect(print))
            ```
        """
        from driftless.async_.operators import pipe

        return pipe(self, *operators)

    # -----------------------------------------------------------------
    # Terminal operations
    # -----------------------------------------------------------------

    def unwrap(self) -> Coroutine[Any, Any, T | E]:
        """Await the Ok value, or the Err payload."""
        return _helpers.unwrap_result(self)

    def unwrap_or[U](self, or_value: U | Awaitable[U]) -> Coroutine[Any, Any, T | U]:
        return _helpers.unwrap_result_or(self, or_value)

    def unwrap_or_else[U](self, else_fn: Callable[[E], U | Awaitable[U]]) -> Coroutine[Any, Any, T | U]:
        return _helpers.unwrap_result_or_else(self, else_fn)

    def iter(self) -> AsyncIterator[T]:
        """Return an async iterator yielding the Ok value once, or nothing."""
        return _helpers.iter_result(self)

    def __aiter__(self) -> AsyncIterator[T]:
        return self.iter()


class DeferredTask(NamedTuple):
    """A Task paired with the functions that settle it.

    Attributes:
        task: The Task that settles on the first `succeed` or `fail` call.
        succeed: Settles the Task to `Ok(value)`. Returns False if already settled.
        fail: Settles the Task to `Err(error)`. Returns False if already settled.
    """

    task: Task[Any, Any]
    succeed: Callable[[Any], bool]
    fail: Callable[[Any], bool]
