"""Scan drivers that turn text or binary input into NAV-PVT records.

Two policies share the locator and decoder:

* ``parse_nav_pvt`` handles one line of pasted hex. The line is expected to
  hold a single frame, so the first header match decides the outcome and a
  checksum failure is reported to the user.

* ``parse_binary_ubx`` handles whole log files. Raw logger dumps contain
  other UBX/NMEA traffic and plenty of accidental ``B5 62 01 07``
  sequences, so a failing candidate is skipped and the scan resumes one
  byte later.
"""

import logging

from ubxtool.ubx.checksum import validate_checksum
from ubxtool.ubx.fields import TOTAL_PACKET_LENGTH
from ubxtool.ubx.hexinput import clean_hex_string, hex_to_bytes
from ubxtool.ubx.locator import find_header, locate_frame
from ubxtool.ubx.nav_pvt import decode_nav_pvt
from ubxtool.ubx.types import NavPvtData, ParseError, ParseResult

logger = logging.getLogger(__name__)


def parse_nav_pvt(text: str) -> ParseResult:
    """Parse a single NAV-PVT frame from a line of hex text.

    Processing steps:
    1. Normalize separators, ``0x``/``h`` markers and case
    2. Reject input shorter than one frame (200 hex digits)
    3. Reject odd-length or non-hex input
    4. Locate the first header and validate length and checksum
    5. Decode the frame

    Args:
        text: Hex text, possibly with separators and surrounding noise.

    Returns:
        ``ParseResult`` with ``record`` set on success, or ``error`` set to
        ``TOO_SHORT``, ``INVALID_HEX``, ``HEADER_NOT_FOUND``,
        ``INCOMPLETE_PACKET`` or ``CHECKSUM_FAILED``.

    Example:
        >>> result = parse_nav_pvt("B5 62 01 07 5C 00 A0 73 9B 16 ...")
        >>> result.success
        True
        >>> parse_nav_pvt("B5 62").error
        <ParseError.TOO_SHORT: ...>
    """
    hex_text = clean_hex_string(text)

    if len(hex_text) < TOTAL_PACKET_LENGTH * 2:
        return ParseResult(error=ParseError.TOO_SHORT)

    data = hex_to_bytes(hex_text)
    if data is None:
        return ParseResult(error=ParseError.INVALID_HEX)

    located = locate_frame(data)
    if isinstance(located, ParseError):
        return ParseResult(error=located)

    raw_hex = hex_text[located * 2 : (located + TOTAL_PACKET_LENGTH) * 2]
    return ParseResult(record=decode_nav_pvt(data, located, raw_hex))


def parse_binary_ubx(data: bytes) -> list[NavPvtData]:
    """Extract every valid NAV-PVT frame from a binary buffer.

    Frames are returned in file order. After a valid frame the scan jumps
    past all of its bytes, so frames never overlap; after a failed
    candidate it advances by a single byte.

    Args:
        data: Complete contents of a UBX log.

    Returns:
        List of decoded records, possibly empty. Checksum failures are
        never reported.
    """
    records: list[NavPvtData] = []
    skipped = 0
    index = 0
    last_start = len(data) - TOTAL_PACKET_LENGTH

    while True:
        index = find_header(data, index)
        if index < 0 or index > last_start:
            break
        if validate_checksum(data, index):
            frame = data[index : index + TOTAL_PACKET_LENGTH]
            records.append(decode_nav_pvt(data, index, frame.hex().upper()))
            index += TOTAL_PACKET_LENGTH
            continue
        logger.debug("Skipping NAV-PVT candidate at offset %d: bad checksum", index)
        skipped += 1
        index += 1

    logger.debug(
        "Scanned %d bytes: %d NAV-PVT frames, %d rejected candidates",
        len(data),
        len(records),
        skipped,
    )
    return records
