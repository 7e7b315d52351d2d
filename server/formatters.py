"""JSON formatting of NAV-PVT records and derived display quantities."""

import dataclasses
import json
import math
from typing import Any

from ubxtool.ubx import NavPvtData

__all__ = [
    "altitude_meters",
    "format_chart_series",
    "format_history",
    "format_history_message",
    "format_record",
    "local_offset_meters",
    "position_accuracy_3d_mm",
    "speed_kilometers_per_hour",
]

# Flat-earth approximation, good enough to show drift around a fixed point.
_METERS_PER_DEGREE_LATITUDE = 110574.0
_METERS_PER_DEGREE_LONGITUDE_AT_EQUATOR = 111320.0


def speed_kilometers_per_hour(record: NavPvtData) -> float:
    return record.ground_speed_mm_s / 1000 * 3.6


def altitude_meters(record: NavPvtData) -> float:
    """Height above mean sea level in metres."""
    return record.height_msl_mm / 1000


def position_accuracy_3d_mm(record: NavPvtData) -> float:
    return math.hypot(record.horizontal_accuracy_mm, record.vertical_accuracy_mm)


def local_offset_meters(
    record: NavPvtData, origin: NavPvtData
) -> tuple[float, float]:
    """East and north offset of ``record`` from ``origin`` in metres."""
    cos_latitude = math.cos(math.radians(origin.latitude_degrees))
    east = (
        (record.longitude_degrees - origin.longitude_degrees)
        * _METERS_PER_DEGREE_LONGITUDE_AT_EQUATOR
        * cos_latitude
    )
    north = (
        record.latitude_degrees - origin.latitude_degrees
    ) * _METERS_PER_DEGREE_LATITUDE
    return east, north


def format_record(record: NavPvtData) -> dict[str, Any]:
    """All decoded fields plus the values the dashboard shows directly."""
    payload = dataclasses.asdict(record)
    payload.update(
        {
            "fix_type_name": record.fix_type_name,
            "speed_kmh": speed_kilometers_per_hour(record),
            "altitude_m": altitude_meters(record),
            "position_accuracy_3d_mm": position_accuracy_3d_mm(record),
        }
    )
    return payload


def format_chart_series(records: list[NavPvtData]) -> list[dict[str, Any]]:
    """One chart point per record; offsets are relative to the first record."""
    if not records:
        return []

    origin = records[0]
    series = []
    for index, record in enumerate(records):
        east, north = local_offset_meters(record, origin)
        series.append(
            {
                "index": index,
                "time": record.timestamp.split(" ")[1],
                "altitude_m": altitude_meters(record),
                "speed_kmh": speed_kilometers_per_hour(record),
                "num_satellites": record.num_satellites,
                "east_m": east,
                "north_m": north,
            }
        )
    return series


def format_history(records: list[NavPvtData]) -> dict[str, Any]:
    """Serialize a time-ordered history for the history endpoint."""
    return {
        "count": len(records),
        "records": [format_record(record) for record in records],
        "latest": format_record(records[-1]) if records else None,
        "series": format_chart_series(records),
    }


def format_history_message(records: list[NavPvtData]) -> str:
    """Serialize a history change into a JSON string for WebSocket transmission."""
    return json.dumps(
        {
            "type": "history",
            "count": len(records),
            "latest": format_record(records[-1]) if records else None,
        }
    )
