"""UBX data types for decoded NAV-PVT messages and parse outcomes.

Design Decisions:
    1. Frozen record: a ``NavPvtData`` is built once from a validated frame
       and never mutated, so records can be shared between the history,
       the exporter and the HTTP layer without copying.

    2. Raw fix type: ``fix_type`` keeps the byte as received. ``FixType``
       names the documented values, but an undocumented value must not turn
       a checksum-valid frame into a decode failure.

    3. Classified errors instead of exceptions: malformed input is an
       expected outcome for pasted text, so drivers return a ``ParseError``
       member whose value is the message shown to the user.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class FixType(IntEnum):
    """GNSS fix type reported in the NAV-PVT ``fixType`` field."""

    NO_FIX = 0
    DEAD_RECKONING = 1
    FIX_2D = 2
    FIX_3D = 3
    GNSS_AND_DR = 4
    TIME_ONLY = 5


class ParseError(Enum):
    """Classified parse failures. Values are user-facing messages."""

    TOO_SHORT = "Input too short for a complete UBX-NAV-PVT message."
    INVALID_HEX = "Invalid hexadecimal string."
    HEADER_NOT_FOUND = "UBX-NAV-PVT Header (0xB5 0x62 0x01 0x07) not found."
    INCOMPLETE_PACKET = "Incomplete packet length."
    CHECKSUM_FAILED = "Checksum validation failed."
    NO_PACKETS_FOUND = "No valid UBX-NAV-PVT packets found in this file."
    IO_FAILURE = "Error reading file."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class NavPvtData:
    """Decoded UBX-NAV-PVT (Navigation Position Velocity Time) message.

    Attributes:
        time_of_week_ms: GPS time of week of the navigation epoch (iTOW) in
            milliseconds. Used as the sort key when merging records.
        year: UTC year.
        month: UTC month, 1-12.
        day: UTC day of month, 1-31.
        hour: UTC hour, 0-23.
        minute: UTC minute, 0-59.
        second: UTC second, 0-60.
        validity_flags: Raw ``valid`` bit field (validDate, validTime,
            fullyResolved, validMag).
        time_accuracy_ns: Time accuracy estimate in nanoseconds.
        nanoseconds: Signed fraction of second in nanoseconds.

        fix_type: GNSS fix type (see ``FixType``). Kept as the raw byte.
        flags: Raw fix status flags (gnssFixOK, diffSoln, psmState, ...).
        num_satellites: Number of satellites used in the solution.

        longitude_degrees: Longitude in degrees (raw * 1e-7).
        latitude_degrees: Latitude in degrees (raw * 1e-7).
        height_ellipsoid_mm: Height above the ellipsoid in millimetres.
        height_msl_mm: Height above mean sea level in millimetres.
        horizontal_accuracy_mm: Horizontal accuracy estimate in millimetres.
        vertical_accuracy_mm: Vertical accuracy estimate in millimetres.

        velocity_north_mm_s: NED north velocity in mm/s.
        velocity_east_mm_s: NED east velocity in mm/s.
        velocity_down_mm_s: NED down velocity in mm/s.
        ground_speed_mm_s: 2-D ground speed in mm/s.
        heading_of_motion_degrees: 2-D heading of motion (raw * 1e-5).
        speed_accuracy_mm_s: Speed accuracy estimate in mm/s.
        heading_accuracy_degrees: Heading accuracy estimate (raw * 1e-5).
        position_dop: Position dilution of precision (raw * 0.01).

        timestamp: ``YYYY-MM-DD HH:MM:SS`` built from the calendar fields.
        raw_hex: Uppercase hex of the 100 frame bytes the record came from.

    Example:
        >>> result = parse_nav_pvt(SAMPLE_HEX)
        >>> result.record.fix_type_name
        'FIX_3D'
        >>> result.record.num_satellites
        8
    """

    time_of_week_ms: int
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    validity_flags: int
    time_accuracy_ns: int
    nanoseconds: int
    fix_type: int
    flags: int
    num_satellites: int
    longitude_degrees: float
    latitude_degrees: float
    height_ellipsoid_mm: int
    height_msl_mm: int
    horizontal_accuracy_mm: int
    vertical_accuracy_mm: int
    velocity_north_mm_s: int
    velocity_east_mm_s: int
    velocity_down_mm_s: int
    ground_speed_mm_s: int
    heading_of_motion_degrees: float
    speed_accuracy_mm_s: int
    heading_accuracy_degrees: float
    position_dop: float
    timestamp: str
    raw_hex: str

    @property
    def fix_type_name(self) -> str:
        """Name of the fix type, or ``"UNKNOWN"`` for undocumented values."""
        try:
            return FixType(self.fix_type).name
        except ValueError:
            return "UNKNOWN"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one hex input: exactly one of the two is set."""

    record: NavPvtData | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.record is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of record and error")

    @property
    def success(self) -> bool:
        return self.record is not None
