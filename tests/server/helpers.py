"""Helper factories for server tests."""

from tests.ubx.helpers import make_nav_pvt_frame
from ubxtool.ubx import NavPvtData, parse_binary_ubx


def make_record(**overrides: int) -> NavPvtData:
    return parse_binary_ubx(make_nav_pvt_frame(**overrides))[0]


def make_hex(**overrides: int) -> str:
    return make_nav_pvt_frame(**overrides).hex(" ").upper()
