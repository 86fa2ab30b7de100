"""Option type: Some[T] | Nothing for optional values.

`Some` always holds a non-None value; absence is the shared `Nothing`
singleton. Every operation is total and returns a new Option, never mutating
the receiver.

Example:
    ```python
    from driftless import Option, Options, Some, Nothing

    Option.from_(42).map(lambda x: x * 2)
    # Some(value=84)

    Option.from_coercible(0)
    # Nothing

    Options.all([Some(1), Some(2), Nothing])
    # Nothing
    ```
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from driftless._internal.payload import clone_payload, clones_enabled, to_json_value
from driftless.assertions.safe import safe_assert

if TYPE_CHECKING:
    from typing import TypeIs

    from driftless.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Options', 'Some']


class Option[T]:
    """Common base of `Some` and `NothingType`, plus the Option constructors.

    Never instantiated directly. Use it for `isinstance` checks and for the
    `from_*` constructors.
    """

    __slots__ = ()

    @classmethod
    def from_(cls, value: T | None) -> Some[T] | NothingType:
        """Return Some(value) unless value is None.

        Example:
            ```python
            Option.from_(0)     # Some(value=0)
            Option.from_(None)  # Nothing
            ```
        """
        if value is None:
            return Nothing
        return Some(value)

    @classmethod
    def from_fallible(cls, value: T | BaseException | None) -> Some[T] | NothingType:
        """Like `from_`, but exception instances are treated as absent as well."""
        if value is None or isinstance(value, BaseException):
            return Nothing
        return Some(value)  # type: ignore[arg-type]

    @classmethod
    def from_coercible(cls, value: T | None) -> Some[T] | NothingType:
        """Return Some(value) only if value is truthy.

        `0`, `''`, `False`, empty containers, `None` and float NaN all map to
        Nothing.
        """
        if not value or (isinstance(value, float) and math.isnan(value)):
            return Nothing
        return Some(value)  # type: ignore[arg-type]


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Some variant of Option containing a value of type T.

    Attributes:
        value: The wrapped value. Never None.

    Raises:
        ContractError: If constructed with None.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(1).zip(Some('a'))
        Some(value=(1, 'a'))
    """

    value: T
    __match_args__ = ('value',)

    def __post_init__(self) -> None:
        safe_assert(
            self.value is not None,
            'Some() requires a value that is not None, use Option.from_() for nullable input',
        )

    @classmethod
    def _unchecked(cls, value: T) -> Some[T]:
        # map() trusts its callback's annotated return type
        some = object.__new__(cls)
        object.__setattr__(some, 'value', value)
        return some

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def id(self) -> Some[T]:
        """Return self unchanged."""
        return self

    def clone(self) -> Some[T]:
        """Return a Some holding a deep copy of the value."""
        return Some(clone_payload(self.value))

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply `f` to the contained value.

        The callback must not return None. This is a typing contract only and
        is not checked at runtime.
        """
        return Some._unchecked(f(self.value))

    def map_or[U](self, f: Callable[[T], U], or_value: U) -> Some[U]:  # noqa: ARG002
        return self.map(f)

    def map_or_else[U](self, f: Callable[[T], U], else_fn: Callable[[], U]) -> Some[U]:  # noqa: ARG002
        return self.map(f)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function, flattening the result."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only if `predicate` returns True."""
        return self if predicate(self.value) else Nothing

    def and_[U](self, other: Option[U]) -> Option[U]:
        return other

    def or_(self, other: Option[T]) -> Some[T]:  # noqa: ARG002
        return self

    def xor(self, other: Option[T]) -> Some[T] | NothingType:
        """Return self if exactly one side is Some, otherwise Nothing."""
        return Nothing if other.is_some() else self  # type: ignore[attr-defined]

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        return self.value

    def ok_or[E](self, error: E) -> Ok[T]:  # noqa: ARG002
        """Convert to Ok(value), ignoring the error."""
        from driftless.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, f: Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        from driftless.result import Ok

        return Ok(self.value)

    def zip[U](self, other: Option[U]) -> Some[tuple[T, U]] | NothingType:
        """Pair two Some values into `Some((a, b))`."""
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def trip[U](self, f: Callable[[T], Option[U]]) -> Some[T] | NothingType:
        """Run an Option-returning check; keep self if it is Some, else Nothing.

        `f` receives a deep copy of the value. Equivalent to
        `self.and_then(f).and_(self)`.
        """
        view = clone_payload(self.value) if clones_enabled() else self.value
        return f(view).and_(self)  # type: ignore[attr-defined]

    def tap(self, f: Callable[[Option[T]], Any]) -> Some[T]:
        """Call `f` with a clone of self for side effects and return self."""
        f(self.clone() if clones_enabled() else self)
        return self

    def iter(self) -> Iterator[T]:
        """Return an iterator yielding the value once."""
        yield self.value

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def into[R](self, f: Callable[[Option[T]], R]) -> R:
        """Pass self to `f` and return its result."""
        return f(self)

    def to_json_value(self) -> Any:
        """Return the value as JSON-compatible builtins."""
        return to_json_value(self.value)


@dataclass(slots=True, frozen=True)
class NothingType(Option[Any]):
    """Nothing variant of Option representing absence of a value.

    Use the `Nothing` constant instead of instantiating directly. Separate
    instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def id(self) -> NothingType:
        return self

    def clone(self) -> NothingType:
        return self

    def map[U](self, f: Callable[[Any], U]) -> NothingType:  # noqa: ARG002
        return self

    def map_or[U](self, f: Callable[[Any], U], or_value: U) -> Option[U]:  # noqa: ARG002
        """Return `Option.from_(or_value)`."""
        return Option.from_(or_value)

    def map_or_else[U](self, f: Callable[[Any], U], else_fn: Callable[[], U]) -> Option[U]:  # noqa: ARG002
        """Return `Option.from_(else_fn())`."""
        return Option.from_(else_fn())

    def and_then[U](self, f: Callable[[Any], Option[U]]) -> NothingType:  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> NothingType:  # noqa: ARG002
        return self

    def and_[U](self, other: Option[U]) -> NothingType:  # noqa: ARG002
        return self

    def or_[U](self, other: Option[U]) -> Option[U]:
        return other

    def xor[U](self, other: Option[U]) -> Option[U]:
        return other if other.is_some() else self  # type: ignore[attr-defined]

    def unwrap(self) -> None:
        """Return None; Nothing never raises on unwrap."""
        return None

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        return f()

    def ok_or[E](self, error: E) -> Err[E]:
        from driftless.result import Err

        return Err(error)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        from driftless.result import Err

        return Err(f())

    def zip[U](self, other: Option[U]) -> NothingType:  # noqa: ARG002
        return self

    def trip[U](self, f: Callable[[Any], Option[U]]) -> NothingType:  # noqa: ARG002
        return self

    def tap(self, f: Callable[[Option[Any]], Any]) -> NothingType:
        f(self)
        return self

    def iter(self) -> Iterator[Any]:
        return iter(())

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def into[R](self, f: Callable[[Option[Any]], R]) -> R:
        return f(self)

    def to_json_value(self) -> None:
        return None


Nothing: NothingType = NothingType()
"""The shared absent value."""


class Options:
    """Folds over collections of Options."""

    @staticmethod
    def all[T](options: Iterable[Option[T]]) -> Some[list[T]] | NothingType:
        """Return Some of all values if every element is Some, else Nothing.

        An empty input yields Nothing, not `Some([])`.

        Example:
            ```python
            Options.all([Some(1), Some(2), Some(3)])  # Some(value=[1, 2, 3])
            Options.all([])                           # Nothing
            ```
        """
        values: list[T] = []
        for option in options:
            if not isinstance(option, Some):
                return Nothing
            values.append(option.value)
        if not values:
            return Nothing
        return Some(values)

    @staticmethod
    def any[T](options: Iterable[Option[T]]) -> Some[T] | NothingType:
        """Return the first Some, or Nothing if there is none."""
        for option in options:
            if isinstance(option, Some):
                return option
        return Nothing
