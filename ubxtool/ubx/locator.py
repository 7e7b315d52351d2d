"""Frame locator for UBX-NAV-PVT messages.

A candidate frame at offset ``i`` starts with the four-byte pattern
``B5 62 01 07``. It is a valid frame when ``TOTAL_PACKET_LENGTH`` bytes are
available from ``i`` and its checksum matches. The two-byte length field is
not read: NAV-PVT always has a 92-byte payload.
"""

from ubxtool.ubx.checksum import validate_checksum
from ubxtool.ubx.fields import (
    CLASS_NAV,
    ID_PVT,
    SYNC_CHAR_1,
    SYNC_CHAR_2,
    TOTAL_PACKET_LENGTH,
)
from ubxtool.ubx.types import ParseError

_HEADER = bytes((SYNC_CHAR_1, SYNC_CHAR_2, CLASS_NAV, ID_PVT))


def is_nav_pvt_header(data: bytes, index: int) -> bool:
    """Return True if sync, class and id bytes match at ``index``."""
    return data[index : index + len(_HEADER)] == _HEADER


def find_header(data: bytes, start: int = 0) -> int:
    """Return the first offset ``>= start`` holding a NAV-PVT header, or -1."""
    return data.find(_HEADER, start)


def locate_frame(data: bytes, start: int = 0) -> int | ParseError:
    """Locate the first NAV-PVT frame at or after ``start``.

    Only the first header match is considered; a failing candidate is
    reported rather than skipped. Callers that need to resynchronize past
    bad candidates scan with ``find_header`` and ``validate_checksum``
    directly.

    Args:
        data: Buffer to search.
        start: First offset to consider.

    Returns:
        Offset of the first sync byte of a valid frame, or:
        - ``ParseError.HEADER_NOT_FOUND`` if no header matches,
        - ``ParseError.INCOMPLETE_PACKET`` if the first match is too close
          to the end of ``data`` to hold a full frame,
        - ``ParseError.CHECKSUM_FAILED`` if the first match is complete but
          its checksum does not validate.
    """
    index = find_header(data, start)
    if index < 0:
        return ParseError.HEADER_NOT_FOUND

    if len(data) - index < TOTAL_PACKET_LENGTH:
        return ParseError.INCOMPLETE_PACKET

    if not validate_checksum(data, index):
        return ParseError.CHECKSUM_FAILED

    return index
