"""UBX frame constants and the NAV-PVT payload field table.

UBX frame layout::

    +--------+--------+-------+-----+----------+-----------+------+------+
    | SYNC 1 | SYNC 2 | CLASS | ID  |  LENGTH  |  PAYLOAD  | CK_A | CK_B |
    |  0xB5  |  0x62  | 0x01  | 0x07| 2 bytes  | 92 bytes  |      |      |
    +--------+--------+-------+-----+----------+-----------+------+------+

All multi-byte integers are little-endian. Payload offsets below are relative
to the first payload byte, i.e. ``frame_offset + HEADER_LENGTH``.
"""

import struct
from dataclasses import dataclass

# --- frame layout ---------------------------------------------------------------
SYNC_CHAR_1 = 0xB5
SYNC_CHAR_2 = 0x62
CLASS_NAV = 0x01
ID_PVT = 0x07

HEADER_LENGTH = 6  # sync(2) + class(1) + id(1) + length(2)
CHECKSUM_LENGTH = 2
NAV_PVT_PAYLOAD_LENGTH = 92
TOTAL_PACKET_LENGTH = HEADER_LENGTH + NAV_PVT_PAYLOAD_LENGTH + CHECKSUM_LENGTH

# --- fixed-point scale factors --------------------------------------------------
COORDINATE_SCALE = 1e-7  # lon/lat, degrees
HEADING_SCALE = 1e-5  # headMot/headAcc, degrees
DOP_SCALE = 0.01  # pDOP, unitless


@dataclass(frozen=True)
class PayloadField:
    """One fixed-offset field of the NAV-PVT payload.

    Attributes:
        name: Attribute name on ``NavPvtData``.
        offset: Byte offset from the start of the payload.
        fmt: ``struct`` format character (``B``, ``H``, ``I``, ``i``).
        scale: Multiplier for fixed-point fields, or ``None`` to keep the
            raw integer.
    """

    name: str
    offset: int
    fmt: str
    scale: float | None = None

    def read(self, data: bytes, payload_offset: int) -> int | float:
        """Read this field from ``data`` with the payload starting at ``payload_offset``."""
        (raw,) = struct.unpack_from("<" + self.fmt, data, payload_offset + self.offset)
        if self.scale is None:
            return raw
        return raw * self.scale


# flags2 (offset 22) and bytes 78-91 (flags3, reserved, headVeh, magDec,
# magAcc) are not decoded.
NAV_PVT_FIELDS: tuple[PayloadField, ...] = (
    PayloadField("time_of_week_ms", 0, "I"),
    PayloadField("year", 4, "H"),
    PayloadField("month", 6, "B"),
    PayloadField("day", 7, "B"),
    PayloadField("hour", 8, "B"),
    PayloadField("minute", 9, "B"),
    PayloadField("second", 10, "B"),
    PayloadField("validity_flags", 11, "B"),
    PayloadField("time_accuracy_ns", 12, "I"),
    PayloadField("nanoseconds", 16, "i"),
    PayloadField("fix_type", 20, "B"),
    PayloadField("flags", 21, "B"),
    PayloadField("num_satellites", 23, "B"),
    PayloadField("longitude_degrees", 24, "i", COORDINATE_SCALE),
    PayloadField("latitude_degrees", 28, "i", COORDINATE_SCALE),
    PayloadField("height_ellipsoid_mm", 32, "i"),
    PayloadField("height_msl_mm", 36, "i"),
    PayloadField("horizontal_accuracy_mm", 40, "I"),
    PayloadField("vertical_accuracy_mm", 44, "I"),
    PayloadField("velocity_north_mm_s", 48, "i"),
    PayloadField("velocity_east_mm_s", 52, "i"),
    PayloadField("velocity_down_mm_s", 56, "i"),
    PayloadField("ground_speed_mm_s", 60, "i"),
    PayloadField("heading_of_motion_degrees", 64, "i", HEADING_SCALE),
    PayloadField("speed_accuracy_mm_s", 68, "I"),
    PayloadField("heading_accuracy_degrees", 72, "I", HEADING_SCALE),
    PayloadField("position_dop", 76, "H", DOP_SCALE),
)
