"""Append-only progress history for claims and records."""

from collections.abc import Iterable, Iterator
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from src.domain.models.claims import ProgressEntry


class ProgressLog:
    """Ordered audit trail of status changes.

    Entries are only ever appended. Any status may follow any other; the
    log records what happened and does not police transitions.
    """

    def __init__(self, entries: Iterable[ProgressEntry] = ()) -> None:
        self._entries: tuple[ProgressEntry, ...] = tuple(entries)

    def __iter__(self) -> Iterator[ProgressEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[ProgressEntry, ...]:
        """Entries in insertion order."""
        return self._entries

    def append(self, entry: ProgressEntry) -> ProgressEntry:
        """Add an entry at the end of the history."""
        self._entries = self._entries + (entry,)
        return entry

    def record(
        self,
        status: str,
        note: str,
        author: str,
        when: datetime,
        amount: Decimal | None = None,
    ) -> ProgressEntry:
        """Build a new entry with a fresh id and append it."""
        entry = ProgressEntry(
            id=uuid4().hex,
            date=when,
            status=status,
            note=note,
            author=author,
            amount=amount,
        )
        return self.append(entry)

    def most_recent(self) -> ProgressEntry | None:
        """Return the entry with the latest date.

        The latest date wins over insertion order. Ties go to the entry
        appended last.
        """
        latest = None
        for entry in self._entries:
            if latest is None or entry.date >= latest.date:
                latest = entry
        return latest

    def chronological(self) -> list[ProgressEntry]:
        """Return entries sorted by date, stable for equal dates."""
        return sorted(self._entries, key=lambda entry: entry.date)


__all__ = ["ProgressLog"]
