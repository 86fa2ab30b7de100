"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from driftless work."""

    def test_option_types(self) -> None:
        from driftless import Nothing, NothingType, Option, Options, Some

        assert Some(42).unwrap() == 42
        assert Nothing.is_none()
        option: Option[int] = Some(1)
        assert option.is_some()
        assert isinstance(Nothing, NothingType)
        assert Options.all([Some(1)]) == Some([1])

    def test_result_types(self) -> None:
        from driftless import Err, Ok, Result, Results

        assert Ok(42).unwrap() == 42
        assert Err('error').is_err()
        result: Result[int, str] = Ok(1)
        assert result.is_ok()
        assert Results.all([Ok(1), Ok(2)]) == Ok([1, 2])

    def test_async_types(self) -> None:
        from driftless import DeferredTask, Task, Tasks, operators, pipe

        assert callable(pipe)
        assert callable(operators.map_)
        assert isinstance(Task.succeed(1), Task)
        assert DeferredTask._fields == ('task', 'succeed', 'fail')
        assert hasattr(Tasks, 'all')

    def test_errors(self) -> None:
        from driftless import DriftlessError, Panic, as_infallible, is_panic, panic, unsafe_cast_to

        assert issubclass(Panic, DriftlessError)
        assert is_panic(Panic())
        assert unsafe_cast_to('e') == 'e'
        assert callable(as_infallible)
        assert callable(panic)

    def test_assertions(self) -> None:
        from driftless import ContractError, assert_result, safe_assert

        assert issubclass(ContractError, AssertionError)
        assert callable(safe_assert)
        assert callable(assert_result)

    def test_config_and_logging(self) -> None:
        from driftless import DriftlessConfig, configure_logging, get_config, get_logger, init

        assert callable(init)
        assert callable(get_config)
        assert callable(configure_logging)
        assert get_logger('driftless.test') is not None
        assert DriftlessConfig().clone_payloads is True


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_option_module(self) -> None:
        from driftless.option import Nothing, Option, Options, Some

        assert Option.from_(None) is Nothing
        assert Options.any([Nothing, Some(1)]) == Some(1)

    def test_result_module(self) -> None:
        from driftless.result import Err, Ok, Result, Results

        assert Result.from_fallible(lambda: 1, str) == Ok(1)
        assert Results.any([Err('a')]) == Err(['a'])

    def test_async_module(self) -> None:
        from driftless.async_ import Task, Tasks
        from driftless.async_.operators import and_then, map_, pipe

        assert callable(and_then)
        assert callable(map_)
        assert callable(pipe)
        assert Task is not None
        assert Tasks is not None


def test_version() -> None:
    import driftless

    assert driftless.__version__ == '0.1.0'
    assert set(driftless.__all__) <= set(dir(driftless))
