"""Function lifting shared by Result and Task constructors."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

__all__ = ['lift']


def lift[R](
    func: Callable[..., Any],
    on_value: Callable[[Any], R],
    on_error: Callable[[Exception], R],
) -> Callable[..., R]:
    """Wrap `func` so its outcome is routed through `on_value` or `on_error`.

    `on_value` runs inside the capturing block, so an exception it raises is
    handed to `on_error` like one raised by `func`.

    Only `Exception` subclasses are captured. Cancellation, KeyboardInterrupt
    and other BaseExceptions propagate untouched. The wrapper keeps the
    wrapped function's name, docstring and signature.

    Args:
        func: The function to wrap.
        on_value: Called with the return value when `func` succeeds.
        on_error: Called with the exception when `func` raises.

    Returns:
        A wrapped function returning whatever the handlers produce.
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> R:
        try:
            return on_value(wrapped(*args, **kwargs))
        except Exception as e:
            return on_error(e)

    return wrapper(func)
