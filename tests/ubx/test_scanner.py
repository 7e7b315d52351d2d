"""Tests for the single-match and exhaustive-scan drivers."""

import logging

import pytest

from tests.ubx.helpers import (
    SAMPLE_FRAME,
    SAMPLE_HEX,
    corrupt,
    frame_from_payload,
    make_nav_pvt_frame,
)
from ubxtool.ubx import (
    ParseError,
    clean_hex_string,
    parse_binary_ubx,
    parse_nav_pvt,
)


def _spaced_hex(data: bytes) -> str:
    return data.hex(" ").upper()


class TestParseNavPvt:
    """Tests for parse_nav_pvt function."""

    def test_sample(self):
        result = parse_nav_pvt(SAMPLE_HEX)
        assert result.success is True
        assert result.error is None
        assert result.record is not None
        assert result.record.fix_type == 3
        assert result.record.num_satellites == 8
        assert result.record.longitude_degrees == pytest.approx(13.38883)
        assert result.record.latitude_degrees == pytest.approx(52.51671)
        assert result.record.height_msl_mm == 34567
        assert result.record.heading_of_motion_degrees == pytest.approx(345.12345)
        assert result.record.position_dop == pytest.approx(1.56)

    def test_raw_hex_is_normalized_frame(self):
        result = parse_nav_pvt(SAMPLE_HEX.lower())
        assert result.record is not None
        assert result.record.raw_hex == SAMPLE_FRAME.hex().upper()

    def test_raw_hex_excludes_surrounding_noise(self):
        result = parse_nav_pvt("00 11 " + SAMPLE_HEX + " 22 33")
        assert result.record is not None
        assert result.record.raw_hex == SAMPLE_FRAME.hex().upper()

    def test_c_array_format(self):
        text = ", ".join(f"0x{byte:02x}" for byte in SAMPLE_FRAME)
        result = parse_nav_pvt(text)
        assert result.success is True

    def test_colon_format(self):
        result = parse_nav_pvt(SAMPLE_FRAME.hex(":"))
        assert result.success is True

    def test_idempotent(self):
        first = parse_nav_pvt(SAMPLE_HEX)
        second = parse_nav_pvt(SAMPLE_HEX)
        assert first == second

    def test_reparse_of_normalized_input(self):
        first = parse_nav_pvt(SAMPLE_HEX)
        second = parse_nav_pvt(clean_hex_string(SAMPLE_HEX))
        assert first.record == second.record

    def test_too_short(self):
        result = parse_nav_pvt(_spaced_hex(SAMPLE_FRAME[:99]))
        assert result.success is False
        assert result.record is None
        assert result.error is ParseError.TOO_SHORT

    def test_empty_input(self):
        assert parse_nav_pvt("").error is ParseError.TOO_SHORT

    def test_too_short_checked_before_hex(self):
        assert parse_nav_pvt("ZZZ").error is ParseError.TOO_SHORT

    def test_odd_length(self):
        result = parse_nav_pvt(SAMPLE_HEX + " 0")
        assert result.error is ParseError.INVALID_HEX

    def test_non_hex_characters(self):
        result = parse_nav_pvt(SAMPLE_HEX.replace("5C", "QQ"))
        assert result.error is ParseError.INVALID_HEX

    def test_header_not_found(self):
        result = parse_nav_pvt("00 " * 120)
        assert result.error is ParseError.HEADER_NOT_FOUND
        assert result.record is None

    def test_incomplete_packet(self):
        result = parse_nav_pvt("00 00 " + _spaced_hex(SAMPLE_FRAME[:99]))
        assert result.error is ParseError.INCOMPLETE_PACKET

    def test_checksum_failed(self):
        result = parse_nav_pvt(_spaced_hex(corrupt(SAMPLE_FRAME, 99)))
        assert result.error is ParseError.CHECKSUM_FAILED
        assert result.record is None

    def test_checksum_failure_is_not_resynchronized(self):
        text = _spaced_hex(corrupt(SAMPLE_FRAME, 40) + make_nav_pvt_frame(itow=5000))
        assert parse_nav_pvt(text).error is ParseError.CHECKSUM_FAILED

    def test_first_of_two_valid_frames(self):
        text = _spaced_hex(make_nav_pvt_frame(itow=9000) + make_nav_pvt_frame(itow=1000))
        result = parse_nav_pvt(text)
        assert result.record is not None
        assert result.record.time_of_week_ms == 9000


class TestParseBinaryUbx:
    """Tests for parse_binary_ubx function."""

    def test_empty_buffer(self):
        assert parse_binary_ubx(b"") == []

    def test_junk_only(self):
        assert parse_binary_ubx(bytes(range(256)) * 4) == []

    def test_single_frame_exact_length(self):
        records = parse_binary_ubx(SAMPLE_FRAME)
        assert len(records) == 1
        assert records[0].num_satellites == 8

    def test_one_byte_short(self):
        assert parse_binary_ubx(SAMPLE_FRAME[:99]) == []

    def test_raw_hex_uppercase(self):
        records = parse_binary_ubx(b"\x00" + SAMPLE_FRAME)
        assert records[0].raw_hex == SAMPLE_FRAME.hex().upper()

    def test_same_record_as_text_driver(self):
        assert parse_binary_ubx(SAMPLE_FRAME)[0] == parse_nav_pvt(SAMPLE_HEX).record

    def test_two_frames_separated_by_junk(self):
        first = make_nav_pvt_frame(itow=2000)
        second = make_nav_pvt_frame(itow=1000)
        records = parse_binary_ubx(first + bytes(range(10)) + second)
        assert [record.time_of_week_ms for record in records] == [2000, 1000]

    def test_back_to_back_frames(self):
        data = b"".join(make_nav_pvt_frame(itow=itow) for itow in (1, 2, 3))
        records = parse_binary_ubx(data)
        assert [record.time_of_week_ms for record in records] == [1, 2, 3]

    def test_header_inside_consumed_frame_ignored(self):
        # Reserved bytes at the end of the payload spell a NAV-PVT header
        payload = SAMPLE_FRAME[6:98]
        first = frame_from_payload(payload[:88] + b"\xB5\x62\x01\x07")
        records = parse_binary_ubx(first + SAMPLE_FRAME)
        assert len(records) == 2
        assert records[0].raw_hex == first.hex().upper()
        assert records[1].raw_hex == SAMPLE_FRAME.hex().upper()

    def test_bad_checksum_candidate_skipped(self):
        data = corrupt(make_nav_pvt_frame(itow=1000), 99) + make_nav_pvt_frame(itow=2000)
        records = parse_binary_ubx(data)
        assert len(records) == 1
        assert records[0].time_of_week_ms == 2000

    def test_false_sync_inside_junk(self):
        data = b"\xB5\x62\x01\x07\x00\x00" + SAMPLE_FRAME
        records = parse_binary_ubx(data)
        assert len(records) == 1

    def test_trailing_partial_frame_ignored(self):
        data = SAMPLE_FRAME + SAMPLE_FRAME[:60]
        assert len(parse_binary_ubx(data)) == 1

    def test_accepts_bytearray(self):
        assert len(parse_binary_ubx(bytearray(SAMPLE_FRAME))) == 1

    def test_rejected_candidate_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="ubxtool.ubx.scanner"):
            parse_binary_ubx(corrupt(SAMPLE_FRAME, 99))
        assert "bad checksum" in caplog.text

    def test_partial_sync_runs_skipped(self):
        data = b"\xB5\x62\x01" * 5000 + SAMPLE_FRAME + b"\xB5\x62\x01\x07" * 10
        records = parse_binary_ubx(data)
        assert len(records) == 1
        assert records[0].raw_hex == SAMPLE_FRAME.hex().upper()

    def test_rejected_candidates_counted(self, caplog: pytest.LogCaptureFixture):
        data = corrupt(SAMPLE_FRAME, 99) * 3 + SAMPLE_FRAME
        with caplog.at_level(logging.DEBUG, logger="ubxtool.ubx.scanner"):
            records = parse_binary_ubx(data)
        assert len(records) == 1
        assert "1 NAV-PVT frames, 3 rejected candidates" in caplog.text
