"""driftless: Option, Result and a never-rejecting async Task for Python 3.12+.

Flat imports (preferred):
    from driftless import Option, Some, Nothing, Result, Ok, Err, Task

Submodule imports (for organization):
    from driftless.option import Option, Options
    from driftless.result import Result, Results
    from driftless.async_ import Task, Tasks
    from driftless.async_ import operators
"""

# Configuration & logging
from driftless._config import DriftlessConfig, get_config, init
from driftless._core import DriftlessError
from driftless._logging import configure_logging, get_logger

# Assertions
from driftless.assertions import ContractError, assert_result, safe_assert

# Async
from driftless.async_ import DeferredTask, Task, Tasks, operators, pipe

# Errors
from driftless.errors import Panic, as_infallible, is_panic, panic, unsafe_cast_to
from driftless.option import Nothing, NothingType, Option, Options, Some
from driftless.result import Err, Ok, Result, Results

__all__ = [
    # Assertions
    'ContractError',
    # Async
    'DeferredTask',
    # Configuration & logging
    'DriftlessConfig',
    # Errors
    'DriftlessError',
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Options',
    'Panic',
    'Result',
    'Results',
    'Some',
    'Task',
    'Tasks',
    'as_infallible',
    'assert_result',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'is_panic',
    'operators',
    'panic',
    'pipe',
    'safe_assert',
    'unsafe_cast_to',
]

__version__ = '0.1.0'
