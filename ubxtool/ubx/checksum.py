"""UBX checksum calculation and validation.

UBX frames carry an 8-bit Fletcher checksum (RFC 1145) over every byte
between the sync characters and the checksum itself, i.e. class, id, the
two length bytes and the payload.

Example frame structure:
    B5 62 01 07 5C 00 <92 payload bytes> CK_A CK_B
          ^                            ^
          start of checksummed range   end (exclusive)
"""

from ubxtool.ubx.fields import CHECKSUM_LENGTH, TOTAL_PACKET_LENGTH


def calculate_checksum(data: bytes, start: int, end: int) -> tuple[int, int]:
    """Calculate the two UBX checksum bytes over ``data[start:end]``.

    Two running 8-bit accumulators are kept. For each byte ``b``, in order::

        ck_a = (ck_a + b) mod 256
        ck_b = (ck_b + ck_a) mod 256

    Because ``ck_b`` sums the running ``ck_a`` values it depends on byte
    order as well as byte values, so a single corrupted byte always changes
    at least one of the two results.

    Args:
        data: Buffer holding the frame.
        start: First checksummed byte (the class byte of the frame).
        end: One past the last checksummed byte (the first checksum byte).

    Returns:
        Tuple of ``(ck_a, ck_b)``.

    Example:
        >>> calculate_checksum(bytes([0x01, 0x07]), 0, 2)
        (8, 9)
    """
    ck_a = 0
    ck_b = 0
    for byte in data[start:end]:
        ck_a = (ck_a + byte) & 0xFF
        ck_b = (ck_b + ck_a) & 0xFF
    return ck_a, ck_b


def validate_checksum(data: bytes, offset: int = 0) -> bool:
    """Validate the checksum of the NAV-PVT frame starting at ``offset``.

    The frame is assumed to be ``TOTAL_PACKET_LENGTH`` bytes long; the
    length field is not consulted.

    Args:
        data: Buffer holding the frame.
        offset: Position of the first sync byte.

    Returns:
        True if the trailing ``CK_A``/``CK_B`` pair matches the calculated
        checksum, False if it does not or if fewer than
        ``TOTAL_PACKET_LENGTH`` bytes are available from ``offset``.
    """
    end = offset + TOTAL_PACKET_LENGTH
    if offset < 0 or end > len(data):
        return False

    ck_a, ck_b = calculate_checksum(data, offset + 2, end - CHECKSUM_LENGTH)
    return ck_a == data[end - 2] and ck_b == data[end - 1]
