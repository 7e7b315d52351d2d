"""Reading UBX log files from disk.

Each file is read fully into memory and handed to ``parse_binary_ubx``.
``OSError`` from opening or reading is not translated here; callers decide
how to report it.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from ubxtool.ubx import NavPvtData, parse_binary_ubx

__all__ = ["FileScan", "read_ubx_file", "read_ubx_files"]

logger = logging.getLogger(__name__)

# File extensions offered by file pickers. Not enforced.
UBX_FILE_EXTENSIONS = (".ubx", ".bin", ".log")

_DEFAULT_MAX_WORKERS = 4


@dataclass
class FileScan:
    """Outcome of scanning one file.

    Attributes:
        path: The file that was scanned.
        records: Records found, in file order. Empty on error.
        error: The ``OSError`` raised while reading, or None.
    """

    path: Path
    records: list[NavPvtData]
    error: OSError | None = None


def read_ubx_file(path: str | Path) -> list[NavPvtData]:
    """Read ``path`` and return every NAV-PVT record in it.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    data = Path(path).read_bytes()
    records = parse_binary_ubx(data)
    logger.info("%s: %d NAV-PVT records in %d bytes", path, len(records), len(data))
    return records


def _collect(path: Path, future: "Future[list[NavPvtData]]") -> FileScan:
    try:
        return FileScan(path=path, records=future.result())
    except OSError as e:
        return FileScan(path=path, records=[], error=e)


def read_ubx_files(
    paths: list[str | Path],
    max_workers: int = _DEFAULT_MAX_WORKERS,
) -> list[FileScan]:
    """Scan several files in parallel.

    Scans share no state, so each file runs on its own worker thread. A file
    that cannot be read is reported in its ``FileScan`` and does not affect
    the others.

    Args:
        paths: Files to scan.
        max_workers: Size of the thread pool.

    Returns:
        One ``FileScan`` per path, in the order of ``paths``.
    """
    resolved = [Path(path) for path in paths]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(read_ubx_file, path) for path in resolved]
        return [_collect(path, future) for path, future in zip(resolved, futures)]
