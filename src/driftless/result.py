"""Result type: Ok[T] | Err[E] for computations that may fail.

Failures are ordinary values. Lift throwing code with `Result.from_fallible`
or `Result.lift_fallible` and compose with `map`, `and_then`, `or_else`,
`trip` and `rise`.

Example:
    ```python
    from driftless import Err, Ok, Result

    def parse(raw: str) -> Result[int, ValueError]:
        return Result.from_fallible(lambda: int(raw), lambda e: e)

    parse('42').map(lambda n: n + 1)
    # Ok(value=43)

    parse('x').map_err(lambda e: f'bad input: {e}')
    # Err(error="bad input: invalid literal for int() with base 10: 'x'")
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from driftless._internal.lift import lift
from driftless._internal.payload import clone_payload, clones_enabled, to_json_value
from driftless.errors import as_infallible

if TYPE_CHECKING:
    from typing import TypeIs

    from driftless.option import NothingType, Some

__all__ = ['Err', 'Ok', 'Result', 'Results']


class Result[T, E]:
    """Common base of `Ok` and `Err`, plus the Result constructors.

    Never instantiated directly. Use it for `isinstance` checks and for the
    `from_*` and `lift*` constructors.
    """

    __slots__ = ()

    @classmethod
    def from_(cls, f: Callable[[], T]) -> Ok[T]:
        """Run a function that must not raise and wrap its return value in Ok.

        No exception is captured into Err here. If `f` raises anyway, the
        exception escapes as a `Panic` with the original as its cause. Use
        `from_fallible` for code that can fail.

        Raises:
            Panic: If `f` raises.
        """
        return cls.from_fallible(f, as_infallible)  # type: ignore[return-value]

    @classmethod
    def from_fallible[F](cls, f: Callable[[], T], err_map_fn: Callable[[Exception], F]) -> Ok[T] | Err[F]:
        """Run `f`, capturing any exception as `Err(err_map_fn(exc))`.

        Example:
            ```python
            Result.from_fallible(lambda: 1 / 0, lambda e: str(e))
            # Err(error='division by zero')
            ```
        """
        return cls.lift_fallible(f, err_map_fn)()

    @classmethod
    def lift[**P, U](
        cls,
        f: Callable[P, U],
        ctor: Callable[[U], Result[Any, Any]] | None = None,
    ) -> Callable[P, Result[Any, Any]]:
        """Turn a function that must not raise into one returning a Result.

        Args:
            f: The function to wrap.
            ctor: Builds a Result from the return value. Defaults to `Ok`.

        Raises:
            Panic: From the returned function, if `f` or `ctor` raises.
        """
        return lift(f, ctor or Ok, as_infallible)

    @classmethod
    def lift_fallible[**P, U, F](
        cls,
        f: Callable[P, U],
        err_map_fn: Callable[[Exception], F],
        ctor: Callable[[U], Result[Any, Any]] | None = None,
    ) -> Callable[P, Result[Any, Any]]:
        """Turn a throwing function into one returning a Result.

        Args:
            f: The function to wrap.
            err_map_fn: Maps a raised exception to the Err payload.
            ctor: Builds a Result from the return value. Defaults to `Ok`.

        Returns:
            A function with the same signature returning `ctor(value)` or
            `Err(err_map_fn(exc))`.

        Example:
            ```python
            safe_int = Result.lift_fallible(int, lambda e: 'not a number')
            Ok('12').and_then(safe_int)  # Ok(value=12)
            Ok('xy').and_then(safe_int)  # Err(error='not a number')
            ```
        """
        return lift(f, ctor or Ok, lambda e: Err(err_map_fn(e)))


@dataclass(slots=True, frozen=True)
class Ok[T](Result[T, Any]):
    """Represents a successful computation containing a value of type T.

    Attributes:
        value: The successful result value. May be None.
    """

    value: T
    __match_args__ = ('value',)

    def is_ok(self) -> TypeIs[Ok[T]]:
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        return False

    def id(self) -> Ok[T]:
        return self

    def clone(self) -> Ok[T]:
        """Return an Ok holding a deep copy of the value."""
        return Ok(clone_payload(self.value))

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value using a function.

        Args:
            f: A callable that takes the value and returns a new value of type U.

        Returns:
            Ok[U]: A new Ok containing the transformed value.
        """
        return Ok(f(self.value))

    def map_or[U](self, f: Callable[[T], U], or_value: U) -> Ok[U]:  # noqa: ARG002
        return Ok(f(self.value))

    def map_or_else[U](self, f: Callable[[T], U], else_fn: Callable[[Any], U]) -> Ok[U]:  # noqa: ARG002
        return Ok(f(self.value))

    def map_err[F](self, f: Callable[[Any], F]) -> Ok[T]:  # noqa: ARG002
        return self

    def and_then[U, F](self, f: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Chain a computation that may fail, returning its Result directly."""
        return f(self.value)

    def or_else[F](self, f: Callable[[Any], Result[T, F]]) -> Ok[T]:  # noqa: ARG002
        return self

    def trip[U, F](self, f: Callable[[T], Result[U, F]]) -> Ok[T] | Err[F]:
        """Run a fallible check on a copy of the value.

        The check's Err replaces self; its Ok is discarded and self is kept.

        Example:
            ```python
            Ok(17).trip(lambda n: Ok(None) if n >= 18 else Err('too young'))
            # Err(error='too young')
            ```
        """
        view = clone_payload(self.value) if clones_enabled() else self.value
        return f(view).and_(self)  # type: ignore[attr-defined]

    def rise[U, F](self, f: Callable[[Any], Result[U, F]]) -> Ok[T]:  # noqa: ARG002
        return self

    def and_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    def or_[U, F](self, other: Result[U, F]) -> Ok[T]:  # noqa: ARG002
        return self

    def zip[U, F](self, other: Result[U, F]) -> Ok[tuple[T, U]] | Err[F]:
        """Pair two Ok values, otherwise return the first Err."""
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other  # type: ignore[return-value]

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[U](self, default: U) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else[U](self, f: Callable[[Any], U]) -> T:  # noqa: ARG002
        return self.value

    def to_tuple(self) -> tuple[T, None]:
        """Return `(value, None)`."""
        return (self.value, None)

    def ok(self) -> Some[T] | NothingType:
        """Project the success side into an Option.

        A None success value collapses to Nothing.
        """
        from driftless.option import Option

        return Option.from_(self.value)

    def to_option(self) -> Some[T] | NothingType:
        return self.ok()

    def err(self) -> NothingType:
        from driftless.option import Nothing

        return Nothing

    def into[R](self, f: Callable[[Result[T, Any]], R]) -> R:
        return f(self)

    def iter(self) -> Iterator[T]:
        """Yield the value once. Each call returns a fresh iterator."""
        yield self.value

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def tap(self, f: Callable[[Result[T, Any]], Any]) -> Ok[T]:
        """Call `f` with a clone of self for side effects and return self."""
        f(self.clone() if clones_enabled() else self)
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call `f` with a copy of the value for side effects and return self."""
        f(clone_payload(self.value) if clones_enabled() else self.value)
        return self

    def inspect_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def to_json_value(self) -> Any:
        return to_json_value(self.value)


@dataclass(slots=True, frozen=True)
class Err[E](Result[Any, E]):
    """Represents a failed computation containing an error of type E.

    Attributes:
        error: The failure payload, typically but not necessarily an exception.
    """

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> TypeIs[Ok[Any]]:
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        return True

    def id(self) -> Err[E]:
        return self

    def clone(self) -> Err[E]:
        """Return an Err holding a deep copy of the error."""
        return Err(clone_payload(self.error))

    def map[U](self, f: Callable[[Any], U]) -> Err[E]:  # noqa: ARG002
        return self

    def map_or[U](self, f: Callable[[Any], U], or_value: U) -> Ok[U]:  # noqa: ARG002
        return Ok(or_value)

    def map_or_else[U](self, f: Callable[[Any], U], else_fn: Callable[[E], U]) -> Ok[U]:  # noqa: ARG002
        return Ok(else_fn(self.error))

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error using a function."""
        return Err(f(self.error))

    def and_then[U, F](self, f: Callable[[Any], Result[U, F]]) -> Err[E]:  # noqa: ARG002
        return self

    def or_else[U, F](self, f: Callable[[E], Result[U, F]]) -> Result[U, F]:
        """Recover from the error, returning the callback's Result directly."""
        return f(self.error)

    def trip[U, F](self, f: Callable[[Any], Result[U, F]]) -> Err[E]:  # noqa: ARG002
        return self

    def rise[U, F](self, f: Callable[[E], Result[U, F]]) -> Ok[U] | Err[E]:
        """Attempt recovery on a copy of the error.

        A successful recovery replaces self; a failed one keeps the original
        Err, discarding the recovery's own error.
        """
        view = clone_payload(self.error) if clones_enabled() else self.error
        return f(view).or_(self)  # type: ignore[attr-defined]

    def and_[U, F](self, other: Result[U, F]) -> Err[E]:  # noqa: ARG002
        return self

    def or_[U, F](self, other: Result[U, F]) -> Result[U, F]:
        return other

    def zip[U, F](self, other: Result[U, F]) -> Err[E]:  # noqa: ARG002
        return self

    def unwrap(self) -> E:
        """Return the error. Never raises."""
        return self.error

    def unwrap_or[U](self, default: U) -> U:
        return default

    def unwrap_or_else[U](self, f: Callable[[E], U]) -> U:
        return f(self.error)

    def to_tuple(self) -> tuple[None, E]:
        """Return `(None, error)`."""
        return (None, self.error)

    def ok(self) -> NothingType:
        from driftless.option import Nothing

        return Nothing

    def to_option(self) -> NothingType:
        return self.ok()

    def err(self) -> Some[E] | NothingType:
        from driftless.option import Option

        return Option.from_(self.error)

    def into[R](self, f: Callable[[Result[Any, E]], R]) -> R:
        return f(self)

    def iter(self) -> Iterator[Any]:
        return iter(())

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def tap(self, f: Callable[[Result[Any, E]], Any]) -> Err[E]:
        f(self.clone() if clones_enabled() else self)
        return self

    def inspect(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call `f` with a copy of the error for side effects and return self."""
        f(clone_payload(self.error) if clones_enabled() else self.error)
        return self

    def to_json_value(self) -> Any:
        return to_json_value(self.error)


class Results:
    """Folds over collections of Results."""

    @staticmethod
    def all[T, E](results: Iterable[Result[T, E]]) -> Ok[list[T]] | Err[E]:
        """Return Ok of all values, or the first Err in iteration order.

        Example:
            ```python
            Results.all([Ok(1), Ok(2)])           # Ok(value=[1, 2])
            Results.all([Ok(1), Err('a'), Err('b')])  # Err(error='a')
            Results.all([])                      # Ok(value=[])
            ```
        """
        values: list[T] = []
        for result in results:
            if isinstance(result, Err):
                return result
            values.append(result.value)  # type: ignore[attr-defined]
        return Ok(values)

    @staticmethod
    def any[T, E](results: Iterable[Result[T, E]]) -> Ok[T] | Err[list[E]]:
        """Return the first Ok, or Err of every error in iteration order."""
        errors: list[E] = []
        for result in results:
            if isinstance(result, Ok):
                return result
            errors.append(result.error)  # type: ignore[attr-defined]
        return Err(errors)
