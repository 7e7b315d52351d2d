"""CSV export of NAV-PVT records.

One header line and one line per record, joined with ``\\n`` and without a
trailing newline. Integer fields are written raw; coordinates use 7
decimal places, heading and pDOP use 2. Decimal columns round exact ties
away from zero, so 0.125 is written as ``0.13``.
"""

from collections.abc import Iterable
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from ubxtool.ubx import NavPvtData

__all__ = ["CSV_HEADERS", "export_csv", "export_filename", "format_csv_row"]

CSV_HEADERS = (
    "iTOW",
    "Timestamp",
    "FixType",
    "NumSV",
    "Lon",
    "Lat",
    "Height_MSL",
    "hAcc",
    "vAcc",
    "VelN",
    "VelE",
    "VelD",
    "GroundSpeed",
    "Heading",
    "pDOP",
)

_COORDINATE_QUANTUM = Decimal("1e-7")
_TWO_PLACES = Decimal("0.01")


def _fixed(value: float, quantum: Decimal) -> str:
    # Decimal(float) is the exact binary value, so only true ties round up.
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_csv_row(record: NavPvtData) -> str:
    """Format one record as a 15-column CSV line."""
    return ",".join(
        str(value)
        for value in (
            record.time_of_week_ms,
            record.timestamp,
            record.fix_type,
            record.num_satellites,
            _fixed(record.longitude_degrees, _COORDINATE_QUANTUM),
            _fixed(record.latitude_degrees, _COORDINATE_QUANTUM),
            record.height_msl_mm,
            record.horizontal_accuracy_mm,
            record.vertical_accuracy_mm,
            record.velocity_north_mm_s,
            record.velocity_east_mm_s,
            record.velocity_down_mm_s,
            record.ground_speed_mm_s,
            _fixed(record.heading_of_motion_degrees, _TWO_PLACES),
            _fixed(record.position_dop, _TWO_PLACES),
        )
    )


def export_csv(records: Iterable[NavPvtData]) -> str:
    """Render ``records`` as CSV text, header first."""
    lines = [",".join(CSV_HEADERS)]
    lines.extend(format_csv_row(record) for record in records)
    return "\n".join(lines)


def export_filename(now: datetime) -> str:
    """Download name for an export created at ``now``.

    Example:
        >>> export_filename(datetime(2025, 3, 1, 12, 35, 19))
        'ubx_data_export_2025-03-01T12:35:19.csv'
    """
    return f"ubx_data_export_{now.isoformat()[:19]}.csv"
