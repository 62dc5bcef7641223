from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any

from batched_subscribe.config import config

Notify = Callable[[], None]

log = logging.getLogger(__name__)


def immediate(notify: Notify, *args: Any, **kwargs: Any) -> None:
    """Notify listeners straight away."""
    notify()


class BatchScope:
    """Batch function that holds back notifications inside `batch()` blocks."""

    def __init__(self) -> None:
        self._depth = 0
        self._scheduled: dict[Notify, None] = {}

    def __call__(self, notify: Notify, *args: Any, **kwargs: Any) -> None:
        if self._depth:
            self._scheduled.setdefault(notify)
        else:
            notify()

    @property
    def batching(self) -> bool:
        return self._depth > 0

    @contextmanager
    def batch(self) -> Generator[None, None, None]:
        """Batch any notifications until the outermost context manager has closed."""
        try:
            self._depth += 1
            yield
        finally:
            self._depth -= 1
            if not self._depth:
                self.flush()

    def flush(self) -> None:
        scheduled = list(self._scheduled)
        self._scheduled.clear()
        for notify in scheduled:
            notify()


class IdleBatch:
    """
    Batch function that notifies once per tick of a Tk event loop.

    The first dispatch schedules a flush on `widget`; any further dispatches
    before it runs are folded into the same flush.
    """

    def __init__(self, widget: Any, delay_ms: int | None = None) -> None:
        self.widget = widget
        self.delay_ms = config.idle_delay_ms if delay_ms is None else delay_ms

        self._scheduled: dict[Notify, None] = {}
        self._timer: str | None = None

    def __call__(self, notify: Notify, *args: Any, **kwargs: Any) -> None:
        self._scheduled.setdefault(notify)
        if self._timer is None:
            if self.delay_ms > 0:
                self._timer = self.widget.after(self.delay_ms, self.flush)
            else:
                self._timer = self.widget.after_idle(self.flush)
            log.debug("Scheduled flush %s", self._timer)

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        """Drop the scheduled flush and any notifications waiting on it."""
        if self._timer is not None:
            self.widget.after_cancel(self._timer)
        self._timer = None
        self._scheduled.clear()

    def flush(self) -> None:
        self._timer = None
        scheduled = list(self._scheduled)
        self._scheduled.clear()
        for notify in scheduled:
            notify()
