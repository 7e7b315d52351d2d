"""Command-line converter from UBX logs or pasted hex to CSV.

Usage::

    python -m ubxtool flight.ubx other.bin -o track.csv
    python -m ubxtool --hex "B5 62 01 07 5C 00 ..."
    cat dump.txt | python -m ubxtool --hex -

Records from all inputs are merged and sorted by GPS time of week before
being written.
"""

import argparse
import logging
import sys

from ubxtool.export import export_csv
from ubxtool.files import UBX_FILE_EXTENSIONS, read_ubx_files
from ubxtool.history import NavPvtHistory, parse_hex_lines
from ubxtool.ubx import ParseError

logger = logging.getLogger("ubxtool")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ubxtool",
        description="Extract UBX-NAV-PVT records and write them as CSV.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help=f"binary UBX logs ({', '.join(UBX_FILE_EXTENSIONS)})",
    )
    parser.add_argument(
        "--hex",
        dest="hex_inputs",
        action="append",
        default=[],
        metavar="TEXT",
        help="hex text, one frame per line; '-' reads from stdin (repeatable)",
    )
    parser.add_argument("-o", "--output", help="output CSV file (default: stdout)")
    parser.add_argument(
        "-j", "--jobs", type=int, default=4, help="files scanned in parallel"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="verbose information on progress"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="debug information on progress"
    )
    return parser


def _configure_logging(verbose: bool, debug: bool) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(format="%(levelname)s: %(message)s", level=level)


def _collect_hex(history: NavPvtHistory, hex_inputs: list[str]) -> None:
    for text in hex_inputs:
        if text == "-":
            text = sys.stdin.read()
        batch = parse_hex_lines(text)
        for line_number, error in batch.errors:
            logger.warning("hex line %d: %s", line_number, error.message)
        history.extend(batch.records)


def _collect_files(history: NavPvtHistory, paths: list[str], jobs: int) -> None:
    for scan in read_ubx_files(paths, max_workers=jobs):
        if scan.error is not None:
            logger.error("%s: %s (%s)", scan.path, ParseError.IO_FAILURE.message, scan.error)
        elif not scan.records:
            logger.warning("%s: %s", scan.path, ParseError.NO_PACKETS_FOUND.message)
        history.extend(scan.records)


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.debug)

    if not args.files and not args.hex_inputs:
        logger.error("nothing to do: give UBX files or --hex input")
        return 2

    history = NavPvtHistory()
    _collect_hex(history, args.hex_inputs)
    _collect_files(history, args.files, args.jobs)

    if len(history) == 0:
        logger.error("no UBX-NAV-PVT records parsed")
        return 1

    csv_text = export_csv(history.records())
    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as output:
            output.write(csv_text)
    else:
        sys.stdout.write(csv_text + "\n")

    logger.info("wrote %d records", len(history))
    return 0


if __name__ == "__main__":
    sys.exit(main())
