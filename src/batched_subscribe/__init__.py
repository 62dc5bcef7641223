from batched_subscribe.batching import BatchScope, IdleBatch, immediate
from batched_subscribe.broadcaster import Broadcaster
from batched_subscribe.enhancer import BatchedStore, batched_subscribe
from batched_subscribe.errors import InvalidArgument

__all__ = [
    "BatchScope",
    "BatchedStore",
    "Broadcaster",
    "IdleBatch",
    "InvalidArgument",
    "batched_subscribe",
    "immediate",
]
