"""In-process channel delivering complete record snapshots."""

import queue
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")

_CLOSED = object()


class SnapshotChannel(Generic[T]):
    """Message-passing channel for full snapshots of a record collection.

    Publishers push the complete current collection whenever any record
    changes; receivers treat every snapshot as the whole truth.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)

    def publish(self, records: Iterable[T]) -> None:
        """Push a snapshot of the full collection."""
        self._queue.put(tuple(records))

    def close(self) -> None:
        """Signal receivers that no more snapshots will arrive."""
        self._queue.put(_CLOSED)

    def receive(self, timeout: float | None = None) -> tuple[T, ...] | None:
        """Block for the next snapshot; None once the channel is closed.

        Raises:
            queue.Empty: If ``timeout`` elapses without a snapshot.
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            return None
        return item


__all__ = ["SnapshotChannel"]
