"""Debouncer: trailing-edge delayed callback with cancellation.

Each call cancels the pending invocation and schedules a new one.
Only the last call within a quiescent window fires.

  call("o")  call("or")  call("ord")            (delay elapses)
      │          │           │                        │
   schedule   cancel+     cancel+                callback("ord")
              schedule    schedule

Scheduling is delegated to a Scheduler, so the timing source is
replaceable (threading.Timer by default, manual clock in tests).
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol

from catalogfilter.domain.exceptions import InvalidCallbackError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Cancelable(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. No-op if it already ran."""
        ...


class Scheduler(Protocol):
    """Runs a callback once after a delay."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> Cancelable:
        """Schedule callback to run after delay seconds."""
        ...


class ThreadingScheduler:
    """Scheduler backed by threading.Timer (daemon threads)."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> Cancelable:
        """Start a daemon timer for callback."""
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer[**P]:
    """Delay callback until calls stop arriving for `delay` seconds.

    Contract:
      - Leading edge suppressed: a call never fires immediately
      - Trailing edge fires with the arguments of the last call
      - cancel() drops the pending invocation
      - flush() fires the pending invocation now

    Thread Safety:
      - _lock protects pending arguments, handle and generation
      - callback runs outside the lock
      - a stale timer (superseded generation) never fires
    """

    __slots__ = (
        "_callback",
        "_delay",
        "_generation",
        "_handle",
        "_lock",
        "_pending",
        "_scheduler",
    )

    def __init__(
        self,
        callback: Callable[P, None],
        delay: float,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize debouncer.

        Args:
            callback: Called with the last call's arguments once input settles.
            delay: Quiescence window in seconds (must be >= 0).
            scheduler: Timing source. ThreadingScheduler if None.

        Raises:
            InvalidCallbackError: If callback is not callable.
            ValueError: If delay is negative.
        """
        # FAIL-FIRST
        if not callable(callback):
            raise InvalidCallbackError(type(callback))
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")

        self._callback = callback
        self._delay = delay
        self._scheduler: Scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.Lock()
        self._handle: Cancelable | None = None
        self._pending: tuple[tuple[object, ...], dict[str, object]] | None = None
        self._generation = 0

    @property
    def delay(self) -> float:
        """Quiescence window in seconds."""
        return self._delay

    @property
    def pending(self) -> bool:
        """Check if an invocation is waiting to fire."""
        with self._lock:
            return self._pending is not None

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        """Record call and restart the quiescence window."""
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = (args, kwargs)
            self._handle = self._scheduler.schedule(self._delay, lambda: self._fire(generation))
        logger.debug("debounce: rescheduled (generation %d, delay %.3fs)", generation, self._delay)

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            args, kwargs = self._pending
            self._pending = None
            self._handle = None
        self._callback(*args, **kwargs)  # type: ignore[arg-type]

    def flush(self) -> bool:
        """Fire the pending invocation immediately.

        Returns:
            True if a pending invocation was fired.
        """
        with self._lock:
            if self._pending is None:
                return False
            if self._handle is not None:
                self._handle.cancel()
            args, kwargs = self._pending
            self._pending = None
            self._handle = None
            self._generation += 1
        self._callback(*args, **kwargs)  # type: ignore[arg-type]
        return True

    def cancel(self) -> bool:
        """Drop the pending invocation.

        Returns:
            True if something was pending.
        """
        with self._lock:
            if self._pending is None:
                return False
            if self._handle is not None:
                self._handle.cancel()
            self._pending = None
            self._handle = None
            self._generation += 1
        logger.debug("debounce: pending call cancelled")
        return True
