"""Tests for Option type (Some and Nothing)."""

import math

import pytest
from driftless import ContractError, Err, Nothing, NothingType, Ok, Option, Options, Some
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import exceptions, falsy_values, nullable_values, options, present_values


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        some = Some(42)
        assert some.value == 42

    def test_some_with_none_is_contract_error(self):
        """Some(None) violates the Some invariant."""
        with pytest.raises(ContractError):
            Some(None)

    def test_contract_error_is_assertion_error(self):
        """The violation is an assertion-style error."""
        with pytest.raises(AssertionError):
            Some(None)

    def test_some_with_falsy_value(self):
        """Falsy values other than None are valid payloads."""
        assert Some(0).value == 0
        assert Some('').value == ''

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]


class TestNothing:
    """Tests for the Nothing singleton."""

    def test_nothing_is_singleton(self):
        assert Nothing is Nothing
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        """Separate NothingType instances compare equal."""
        assert NothingType() == Nothing
        assert hash(NothingType()) == hash(Nothing)

    def test_nothing_repr(self):
        assert repr(Nothing) == 'Nothing'

    def test_variants_share_base(self):
        assert isinstance(Some(1), Option)
        assert isinstance(Nothing, Option)


class TestConstruction:
    """Tests for Option.from_, from_fallible and from_coercible."""

    def test_from_value(self):
        assert Option.from_(1) == Some(1)
        assert Option.from_(0) == Some(0)

    def test_from_none(self):
        assert Option.from_(None) is Nothing

    @given(nullable_values)
    def test_from_totality(self, value):
        """from_ returns Some iff the value is not None."""
        assert Option.from_(value).is_some() == (value is not None)

    @given(exceptions)
    def test_from_fallible_treats_exceptions_as_absent(self, exc):
        assert Option.from_fallible(exc) is Nothing

    def test_from_fallible_keeps_values(self):
        assert Option.from_fallible('ok') == Some('ok')
        assert Option.from_fallible(None) is Nothing

    @given(falsy_values)
    def test_from_coercible_falsy_is_absent(self, value):
        """0, '', NaN, False and empty containers all become Nothing."""
        assert Option.from_coercible(value) is Nothing

    @given(present_values.filter(bool))
    def test_from_coercible_truthy_is_present(self, value):
        assert Option.from_coercible(value) == Some(value)

    def test_from_coercible_nan(self):
        assert Option.from_coercible(math.nan) is Nothing


class TestTransformations:
    """Tests for map, map_or, map_or_else, and_then and filter."""

    def test_map_some(self):
        assert Some(2).map(lambda x: x * 3) == Some(6)

    def test_map_nothing_skips_callback(self):
        calls = []
        assert Nothing.map(calls.append) is Nothing
        assert calls == []

    def test_map_or(self):
        assert Some(2).map_or(lambda x: x + 1, 0) == Some(3)
        assert Nothing.map_or(lambda x: x + 1, 0) == Some(0)

    def test_map_or_with_none_fallback(self):
        """A None fallback goes through Option.from_ and stays absent."""
        assert Nothing.map_or(lambda x: x, None) is Nothing

    def test_map_or_else(self):
        assert Some(2).map_or_else(lambda x: x + 1, lambda: 10) == Some(3)
        assert Nothing.map_or_else(lambda x: x + 1, lambda: 10) == Some(10)

    def test_and_then_flattens(self):
        half = lambda x: Some(x // 2) if x % 2 == 0 else Nothing  # noqa: E731
        assert Some(8).and_then(half) == Some(4)
        assert Some(3).and_then(half) is Nothing
        assert Nothing.and_then(half) is Nothing

    def test_filter(self):
        assert Some(4).filter(lambda x: x > 3) == Some(4)
        assert Some(2).filter(lambda x: x > 3) is Nothing
        assert Nothing.filter(lambda x: True) is Nothing


class TestLogicalCombinators:
    """Truth tables for and_, or_ and xor."""

    @pytest.mark.parametrize(
        ('lhs', 'rhs', 'expected'),
        [
            (Some(1), Some(2), Some(2)),
            (Some(1), Nothing, Nothing),
            (Nothing, Some(2), Nothing),
            (Nothing, Nothing, Nothing),
        ],
    )
    def test_and(self, lhs, rhs, expected):
        assert lhs.and_(rhs) == expected

    @pytest.mark.parametrize(
        ('lhs', 'rhs', 'expected'),
        [
            (Some(1), Some(2), Some(1)),
            (Some(1), Nothing, Some(1)),
            (Nothing, Some(2), Some(2)),
            (Nothing, Nothing, Nothing),
        ],
    )
    def test_or(self, lhs, rhs, expected):
        assert lhs.or_(rhs) == expected

    @pytest.mark.parametrize(
        ('lhs', 'rhs', 'expected'),
        [
            (Some(1), Some(2), Nothing),
            (Some(1), Nothing, Some(1)),
            (Nothing, Some(2), Some(2)),
            (Nothing, Nothing, Nothing),
        ],
    )
    def test_xor(self, lhs, rhs, expected):
        assert lhs.xor(rhs) == expected


class TestExtraction:
    """Tests for unwrap and friends."""

    def test_unwrap(self):
        assert Some(5).unwrap() == 5
        assert Nothing.unwrap() is None

    def test_unwrap_or(self):
        assert Some(5).unwrap_or(0) == 5
        assert Nothing.unwrap_or(0) == 0

    def test_unwrap_or_else(self):
        assert Some(5).unwrap_or_else(lambda: 0) == 5
        assert Nothing.unwrap_or_else(lambda: 9) == 9

    def test_iter(self):
        assert list(Some(5).iter()) == [5]
        assert list(Nothing.iter()) == []
        assert list(Some('x')) == ['x']


class TestConversion:
    """Tests for ok_or, ok_or_else and the Option/Result round trip."""

    def test_ok_or(self):
        assert Some(1).ok_or('missing') == Ok(1)
        assert Nothing.ok_or('missing') == Err('missing')

    def test_ok_or_else(self):
        assert Some(1).ok_or_else(lambda: 'missing') == Ok(1)
        assert Nothing.ok_or_else(lambda: 'missing') == Err('missing')

    @given(present_values)
    def test_round_trip_some(self, value):
        assert Some(value).ok_or('err').ok() == Some(value)

    def test_round_trip_nothing(self):
        assert Nothing.ok_or('err').ok() is Nothing

    def test_into(self):
        assert Some(2).into(lambda opt: opt.unwrap_or(0) + 1) == 3
        assert Nothing.into(lambda opt: opt.is_none()) is True

    def test_to_json_value(self):
        assert Some({'a': [1, 2]}).to_json_value() == {'a': [1, 2]}
        assert Nothing.to_json_value() is None


class TestZipTripTap:
    """Tests for zip, trip and tap."""

    def test_zip(self):
        assert Some(1).zip(Some('a')) == Some((1, 'a'))
        assert Some(1).zip(Nothing) is Nothing
        assert Nothing.zip(Some('a')) is Nothing

    def test_trip_keeps_original_on_success(self):
        assert Some(20).trip(lambda x: Some('checked')) == Some(20)

    def test_trip_derails_on_nothing(self):
        assert Some(17).trip(lambda x: Nothing if x < 18 else Some(x)) is Nothing

    def test_trip_equivalence(self):
        check = lambda x: Some(x) if x > 0 else Nothing  # noqa: E731
        for opt in (Some(1), Some(-1), Nothing):
            assert opt.trip(check) == opt.and_then(check).and_(opt)

    def test_tap_receives_clone(self):
        """Mutating the tapped value never reaches the original."""
        original = Some([1, 2])
        seen = []

        def mutate(opt):
            opt.value.append(3)
            seen.append(opt)

        assert original.tap(mutate) is original
        assert original.value == [1, 2]
        assert seen[0].value == [1, 2, 3]

    def test_tap_nothing(self):
        seen = []
        assert Nothing.tap(seen.append) is Nothing
        assert seen == [Nothing]

    def test_clone_is_deep(self):
        original = Some({'k': [1]})
        copy = original.clone()
        assert copy == original
        assert copy.value is not original.value
        assert copy.value['k'] is not original.value['k']

    @given(options)
    def test_id_is_identity(self, opt):
        assert opt.id() is opt


class TestOptions:
    """Tests for Options.all and Options.any."""

    def test_all_some(self):
        assert Options.all([Some(1), Some(2), Some(3)]) == Some([1, 2, 3])

    def test_all_with_nothing(self):
        assert Options.all([Some(1), Some(2), Nothing]) is Nothing

    def test_all_empty_is_nothing(self):
        """An empty input is absent, not vacuously present."""
        assert Options.all([]) is Nothing

    def test_any(self):
        assert Options.any([Nothing, Some(2), Some(3)]) == Some(2)
        assert Options.any([Nothing, Nothing]) is Nothing
        assert Options.any([]) is Nothing

    @given(st.lists(options, max_size=6))
    def test_all_matches_every_some(self, opts):
        result = Options.all(opts)
        expected_some = bool(opts) and all(o.is_some() for o in opts)
        assert result.is_some() == expected_some


class TestPatternMatching:
    """Structural pattern matching on Option variants."""

    def test_match(self):
        def describe(opt):
            match opt:
                case Some(value):
                    return f'some {value}'
                case NothingType():
                    return 'nothing'

        assert describe(Some(3)) == 'some 3'
        assert describe(Nothing) == 'nothing'
