"""Record history and multi-line paste handling.

The parsers emit records in input order. Everything that combines results
from several inputs lives here: folding a multi-line paste into successes
and a last error, and merging new records into a history kept sorted by
GPS time of week.
"""

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from ubxtool.ubx import NavPvtData, ParseError, parse_nav_pvt

__all__ = ["LineBatch", "NavPvtHistory", "parse_hex_lines"]


@dataclass
class LineBatch:
    """Result of parsing every line of a multi-line paste.

    Attributes:
        records: Records from the lines that parsed, in line order.
        errors: ``(line_number, error)`` for each failed line, 1-based.
    """

    records: list[NavPvtData] = field(default_factory=list)
    errors: list[tuple[int, ParseError]] = field(default_factory=list)

    @property
    def last_error(self) -> ParseError | None:
        """The error to show the user: the last one, only if nothing parsed."""
        if self.records or not self.errors:
            return None
        return self.errors[-1][1]


def parse_hex_lines(text: str) -> LineBatch:
    """Parse each non-blank line of ``text`` as an independent hex frame.

    A failing line never stops the lines after it.

    Example:
        >>> batch = parse_hex_lines(SAMPLE_HEX + "\\n" + "B5 62")
        >>> len(batch.records), batch.errors
        (1, [(2, <ParseError.TOO_SHORT: ...>)])
        >>> batch.last_error is None
        True
    """
    batch = LineBatch()
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        result = parse_nav_pvt(line)
        if result.record is not None:
            batch.records.append(result.record)
        elif result.error is not None:
            batch.errors.append((line_number, result.error))
    return batch


class NavPvtHistory:
    """Thread-safe list of records kept in ascending time-of-week order.

    Records with equal ``time_of_week_ms`` keep their arrival order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[NavPvtData] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def extend(self, records: Iterable[NavPvtData]) -> int:
        """Merge ``records`` into the history and return how many were added."""
        new_records = list(records)
        with self._lock:
            self._records = sorted(
                self._records + new_records,
                key=lambda record: record.time_of_week_ms,
            )
        return len(new_records)

    def records(self) -> list[NavPvtData]:
        """Snapshot of the history, oldest first."""
        with self._lock:
            return list(self._records)

    def latest(self) -> NavPvtData | None:
        """The record with the greatest time of week, or None if empty."""
        with self._lock:
            return self._records[-1] if self._records else None

    def clear(self) -> None:
        with self._lock:
            self._records = []
