"""Async support: Task, DeferredTask, Tasks and point-free operators."""

from driftless.async_ import operators
from driftless.async_.operators import pipe
from driftless.async_.task import DeferredTask, Task
from driftless.async_.tasks import Tasks

__all__ = [
    'DeferredTask',
    'Task',
    'Tasks',
    'operators',
    'pipe',
]
