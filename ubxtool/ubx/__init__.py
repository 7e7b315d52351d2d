"""UBX binary protocol parser for NAV-PVT messages."""

from ubxtool.ubx.checksum import calculate_checksum, validate_checksum
from ubxtool.ubx.fields import TOTAL_PACKET_LENGTH
from ubxtool.ubx.hexinput import clean_hex_string, hex_to_bytes
from ubxtool.ubx.locator import locate_frame
from ubxtool.ubx.nav_pvt import decode_nav_pvt
from ubxtool.ubx.scanner import parse_binary_ubx, parse_nav_pvt
from ubxtool.ubx.types import FixType, NavPvtData, ParseError, ParseResult

__all__ = [
    "TOTAL_PACKET_LENGTH",
    "FixType",
    "NavPvtData",
    "ParseError",
    "ParseResult",
    "calculate_checksum",
    "clean_hex_string",
    "decode_nav_pvt",
    "hex_to_bytes",
    "locate_frame",
    "parse_binary_ubx",
    "parse_nav_pvt",
    "validate_checksum",
]
