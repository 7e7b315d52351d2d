"""UBX-NAV-PVT analyzer: parse u-blox navigation records from hex or binary logs."""

from ubxtool.export import export_csv
from ubxtool.files import read_ubx_file, read_ubx_files
from ubxtool.history import LineBatch, NavPvtHistory, parse_hex_lines
from ubxtool.ubx import (
    FixType,
    NavPvtData,
    ParseError,
    ParseResult,
    parse_binary_ubx,
    parse_nav_pvt,
    validate_checksum,
)

__all__ = [
    "FixType",
    "LineBatch",
    "NavPvtData",
    "NavPvtHistory",
    "ParseError",
    "ParseResult",
    "export_csv",
    "parse_binary_ubx",
    "parse_hex_lines",
    "parse_nav_pvt",
    "read_ubx_file",
    "read_ubx_files",
    "validate_checksum",
]
