"""Helper factories for UBX tests: NAV-PVT frames built from field values."""

import struct

# Same frame as server.main.SAMPLE_HEX
SAMPLE_HEX = (
    "B5 62 01 07 5C 00 A0 73 9B 16 E2 07 05 13 0D 05 19 37 19 00 00 00 "
    "C0 1D FE FF 03 01 0A 08 2C F9 FA 07 FC 69 4D 1F 8B 21 01 00 07 87 "
    "00 00 E2 04 00 00 4E 07 00 00 78 00 00 00 D3 FF FF FF 08 00 00 00 "
    "80 00 00 00 D9 9D 0E 02 D2 00 00 00 87 D6 12 00 9C 00 00 00 00 00 "
    "00 00 00 00 00 00 00 00 00 00 34 EB"
)
SAMPLE_FRAME = bytes.fromhex(SAMPLE_HEX)

# iTOW .. pDOP, then 14 undecoded bytes
_PAYLOAD_FORMAT = "<IHBBBBBBIiBBBBiiiiIIiiiiiIIH14x"

_SAMPLE_VALUES = {
    "itow": 379286432,
    "year": 2018,
    "month": 5,
    "day": 19,
    "hour": 13,
    "minute": 5,
    "second": 25,
    "valid": 0x37,
    "t_acc": 25,
    "nano": -123456,
    "fix_type": 3,
    "flags": 0x01,
    "flags2": 0x0A,
    "num_sv": 8,
    "lon": 133888300,
    "lat": 525167100,
    "height": 74123,
    "h_msl": 34567,
    "h_acc": 1250,
    "v_acc": 1870,
    "vel_n": 120,
    "vel_e": -45,
    "vel_d": 8,
    "g_speed": 128,
    "head_mot": 34512345,
    "s_acc": 210,
    "head_acc": 1234567,
    "p_dop": 156,
}


def _fletcher(body: bytes) -> bytes:
    ck_a = ck_b = 0
    for byte in body:
        ck_a = (ck_a + byte) % 256
        ck_b = (ck_b + ck_a) % 256
    return bytes([ck_a, ck_b])


def frame_from_payload(payload: bytes) -> bytes:
    """Wrap ``payload`` in a NAV-PVT header and a valid checksum."""
    body = bytes([0x01, 0x07]) + len(payload).to_bytes(2, "little") + payload
    return b"\xB5\x62" + body + _fletcher(body)


def make_nav_pvt_frame(**overrides: int) -> bytes:
    """Build a checksum-valid 100-byte NAV-PVT frame.

    With no overrides the result equals ``SAMPLE_FRAME``. Keyword names are
    the raw UBX field names in snake case (``itow``, ``lon``, ``p_dop``, ...).
    """
    values = {**_SAMPLE_VALUES, **overrides}
    return frame_from_payload(struct.pack(_PAYLOAD_FORMAT, *values.values()))


def corrupt(frame: bytes, index: int) -> bytes:
    """Return ``frame`` with the byte at ``index`` changed."""
    data = bytearray(frame)
    data[index] ^= 0xFF
    return bytes(data)
