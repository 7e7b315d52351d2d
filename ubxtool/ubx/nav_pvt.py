"""NAV-PVT payload decoder.

UBX-NAV-PVT (class 0x01, id 0x07) is the receiver's combined navigation
solution: time, fix quality, geodetic position, NED velocity and accuracy
estimates in a single 92-byte payload.

NAV-PVT Payload Layout (offsets from the first payload byte):
    0  iTOW     u32  ms      24 lon      i32  1e-7 deg  60 gSpeed   i32  mm/s
    4  year     u16          28 lat      i32  1e-7 deg  64 headMot  i32  1e-5 deg
    6  month    u8           32 height   i32  mm        68 sAcc     u32  mm/s
    7  day      u8           36 hMSL     i32  mm        72 headAcc  u32  1e-5 deg
    8  hour     u8           40 hAcc     u32  mm        76 pDOP     u16  0.01
    9  min      u8           44 vAcc     u32  mm
    10 sec      u8           48 velN     i32  mm/s
    11 valid    u8           52 velE     i32  mm/s
    12 tAcc     u32  ns      56 velD     i32  mm/s
    16 nano     i32  ns
    20 fixType  u8
    21 flags    u8
    23 numSV    u8
"""

from ubxtool.ubx.fields import HEADER_LENGTH, NAV_PVT_FIELDS, TOTAL_PACKET_LENGTH
from ubxtool.ubx.types import NavPvtData


def _format_timestamp(fields: dict[str, int | float]) -> str:
    """Format the calendar fields as ``YYYY-MM-DD HH:MM:SS``."""
    return (
        f"{fields['year']}-{fields['month']:02d}-{fields['day']:02d} "
        f"{fields['hour']:02d}:{fields['minute']:02d}:{fields['second']:02d}"
    )


def decode_nav_pvt(data: bytes, offset: int, raw_hex: str) -> NavPvtData:
    """Decode the NAV-PVT frame whose first sync byte is at ``offset``.

    The frame must already have passed header and checksum validation; no
    validation happens here.

    Args:
        data: Buffer holding the frame.
        offset: Position of the first sync byte in ``data``.
        raw_hex: Hex text of the frame bytes, kept on the record for display.

    Returns:
        The decoded ``NavPvtData``.

    Raises:
        ValueError: If the frame does not fit inside ``data``. Drivers only
            call this on located frames, so this indicates a caller bug.
    """
    if offset < 0 or offset + TOTAL_PACKET_LENGTH > len(data):
        raise ValueError(
            f"NAV-PVT frame at offset {offset} exceeds buffer of {len(data)} bytes."
        )

    payload_offset = offset + HEADER_LENGTH
    fields = {field.name: field.read(data, payload_offset) for field in NAV_PVT_FIELDS}

    return NavPvtData(
        **fields,
        timestamp=_format_timestamp(fields),
        raw_hex=raw_hex,
    )
