"""Cooperative cancellation for blocking store calls and lazy enumerations.

A single :class:`CancellationToken` is created per command invocation. Every
remote call receives the remaining deadline as its timeout, and every lazy
sequence is consumed through :meth:`CancellationToken.guard` so that a
cancelled enumeration raises instead of returning a truncated result.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from fsinspect.errors import OperationCancelled

T = TypeVar("T")


class CancellationToken:
    """Thread-safe cancellation token with an optional deadline.

    Examples:
        >>> token = CancellationToken(timeout=30)
        >>> for item in token.guard(items, "list documents"):
        ...     handle(item)
        >>> # From another thread
        >>> token.cancel()
    """

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._is_cancelled = threading.Event()
        self._lock = threading.Lock()
        self._clock = clock
        self._deadline = clock() + timeout if timeout is not None else None

    def cancel(self) -> None:
        """Signal that cancellation has been requested."""
        with self._lock:
            self._is_cancelled.set()

    def is_cancelled(self) -> bool:
        """Return True once cancelled or past the deadline."""
        if self._is_cancelled.is_set():
            return True
        return self._deadline is not None and self._clock() >= self._deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None when there is none."""
        if self._deadline is None:
            return None
        return max(self._deadline - self._clock(), 0.0)

    def raise_if_cancelled(self, operation: str, path: Optional[str] = None) -> None:
        if self.is_cancelled():
            reason = "cancelled" if self._is_cancelled.is_set() else "deadline exceeded"
            raise OperationCancelled(reason, path=path, operation=operation)

    def guard(
        self, items: Iterable[T], operation: str, path: Optional[str] = None
    ) -> Iterator[T]:
        """Yield from ``items``, checking the token before every element."""
        iterator = iter(items)
        try:
            while True:
                self.raise_if_cancelled(operation, path)
                try:
                    item = next(iterator)
                except StopIteration:
                    return
                yield item
        finally:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()
