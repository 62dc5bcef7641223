from __future__ import annotations

import logging
from collections.abc import Callable

from batched_subscribe.errors import InvalidArgument

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]

log = logging.getLogger(__name__)


class _Slot:
    """A single subscription of a listener."""

    __slots__ = ("listener",)

    def __init__(self, listener: Listener) -> None:
        self.listener = listener


class Broadcaster:
    """
    An ordered set of listeners with copy-on-write snapshots.

    Subscribing and unsubscribing only ever touch the pending list. A
    broadcast commits the pending list as the current snapshot and iterates
    that, so listeners may freely (un)subscribe during a broadcast.
    """

    def __init__(self) -> None:
        self._current: list[_Slot] = []
        self._pending = self._current

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def listeners(self) -> tuple[Listener, ...]:
        """The listeners the next broadcast will call, in order."""
        return tuple(slot.listener for slot in self._pending)

    def _ensure_can_mutate_pending(self) -> None:
        if self._pending is self._current:
            self._pending = list(self._current)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Add a listener, returning a function that removes it again."""
        if not callable(listener):
            raise InvalidArgument("Expected listener to be callable.")

        slot = _Slot(listener)
        subscribed = True

        self._ensure_can_mutate_pending()
        self._pending.append(slot)

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return

            subscribed = False

            self._ensure_can_mutate_pending()
            self._pending.remove(slot)

        return unsubscribe

    def broadcast(self) -> None:
        listeners = self._current = self._pending
        log.debug("Broadcasting to %d listener(s)", len(listeners))
        for slot in listeners:
            slot.listener()
