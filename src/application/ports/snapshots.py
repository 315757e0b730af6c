"""Port for push-delivered record snapshots."""

from typing import Generic, Protocol, TypeVar

T = TypeVar("T", covariant=True)


class SnapshotSourcePort(Protocol, Generic[T]):
    """Source delivering complete snapshots of a record collection.

    Each snapshot replaces the previous one entirely. ``None`` signals that
    the source is closed.
    """

    def receive(self, timeout: float | None = None) -> tuple[T, ...] | None:
        """Block until the next snapshot arrives and return it."""


__all__ = ["SnapshotSourcePort"]
