from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from batched_subscribe.broadcaster import Broadcaster, Listener, Unsubscribe
from batched_subscribe.errors import InvalidArgument

BatchFunction = Callable[..., Any]
Enhancer = Callable[[Callable[..., Any]], Callable[..., "BatchedStore"]]

log = logging.getLogger(__name__)


class BatchedStore:
    """
    Wraps a store so that its listeners are notified through a batch function.

    Anything other than `dispatch`, `subscribe` and `subscribe_immediate` is
    read straight from the wrapped store.
    """

    def __init__(self, base: Any, batch: BatchFunction) -> None:
        self.base = base
        self._batch = batch
        self._broadcaster = Broadcaster()

        # The wrapped store's own subscribe, bypassing batching.
        self.subscribe_immediate: Callable[[Listener], Unsubscribe] = base.subscribe

    def __getattr__(self, name: str) -> Any:
        # Only called for attributes not found on the wrapper itself.
        if name == "base":
            raise AttributeError(name)
        return getattr(self.base, name)

    def dispatch(self, *args: Any, **kwargs: Any) -> Any:
        result = self.base.dispatch(*args, **kwargs)
        self._batch(self._broadcaster.broadcast, *args, **kwargs)
        return result

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._broadcaster.subscribe(listener)


def batched_subscribe(batch: BatchFunction | None = None) -> Enhancer:
    """
    Create a store enhancer that defers listener notification to `batch`.

    `batch` is called after every dispatch with the notify function followed
    by the dispatch arguments, and decides when to call notify.
    """
    if not callable(batch):
        raise InvalidArgument("Expected batch to be callable.")

    def enhancer(create_store: Callable[..., Any]) -> Callable[..., BatchedStore]:
        def create(*args: Any, **kwargs: Any) -> BatchedStore:
            store = create_store(*args, **kwargs)
            log.debug("Batching subscriptions of %r", store)
            return BatchedStore(store, batch)

        return create

    return enhancer
