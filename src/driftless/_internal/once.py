"""Single-assignment cell for deferred settlement.

aiologic primitives work across threads and event loops, so the cell can be
written from a callback thread while a coroutine awaits it elsewhere.
"""

from __future__ import annotations

import aiologic

__all__ = ['SettlementCell']


class SettlementCell[T]:
    """A cell that can be written to exactly once and awaited until it is.

    The first `set()` wins. Later calls leave the value unchanged and return
    False.

    Examples:
        >>> cell: SettlementCell[int] = SettlementCell()
        >>> cell.set(1)
        True
        >>> cell.set(2)
        False
    """

    __slots__ = ('_event', '_is_set', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._event = aiologic.Event()
        self._value: T | None = None
        self._is_set = False

    def set(self, value: T) -> bool:
        """Store `value` unless the cell is already set.

        Returns:
            True if the value was stored, False if the cell was already set.
        """
        if self._is_set:
            return False

        with self._lock:
            if self._is_set:
                return False
            self._value = value
            self._is_set = True
        self._event.set()
        return True

    async def wait(self) -> T:
        """Suspend until the cell is set, then return its value."""
        await self._event
        return self._value  # type: ignore[return-value]
