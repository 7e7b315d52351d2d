"""FastAPI web server for UBX-NAV-PVT log analysis.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

The server keeps one record history, sorted by GPS time of week, that is
fed by pasted hex (``POST /api/parse``) and uploaded log files
(``POST /api/upload``). Dashboards read it from ``GET /api/history`` and
subscribe to ``ws://<host>:8000/ws`` for a ``type="history"`` JSON message
on every change. ``GET /api/export.csv`` downloads the history as CSV.
"""

import asyncio
import json
import logging
from datetime import datetime
from typing import Any

from fastapi import (
    FastAPI,
    HTTPException,
    Request,
    Response,
    WebSocket,
    WebSocketDisconnect,
)
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from starlette.requests import ClientDisconnect

from server.broadcaster import Broadcaster
from server.formatters import format_history, format_history_message, format_record
from ubxtool.export import export_csv, export_filename
from ubxtool.history import NavPvtHistory, parse_hex_lines
from ubxtool.ubx import ParseError, parse_binary_ubx

logger = logging.getLogger(__name__)

# Demonstration frame for "load sample": 2018-05-19 13:05:25, 3D fix, 8 SVs.
SAMPLE_HEX = (
    "B5 62 01 07 5C 00 A0 73 9B 16 E2 07 05 13 0D 05 19 37 19 00 00 00 "
    "C0 1D FE FF 03 01 0A 08 2C F9 FA 07 FC 69 4D 1F 8B 21 01 00 07 87 "
    "00 00 E2 04 00 00 4E 07 00 00 78 00 00 00 D3 FF FF FF 08 00 00 00 "
    "80 00 00 00 D9 9D 0E 02 D2 00 00 00 87 D6 12 00 9C 00 00 00 00 00 "
    "00 00 00 00 00 00 00 00 00 00 34 EB"
)

_QUEUE_MAX_SIZE = 10
_KEEPALIVE_SECONDS = 15.0
_KEEPALIVE_MESSAGE = json.dumps({"type": "keepalive"})

_history = NavPvtHistory()
_broadcaster = Broadcaster(max_queue_size=_QUEUE_MAX_SIZE)


class HexInput(BaseModel):
    """Pasted hex text; each line is parsed as one frame."""

    text: str


def _publish_history() -> None:
    _broadcaster.publish(format_history_message(_history.records()))


app = FastAPI(title="UBX-NAV-PVT Analyzer")


@app.get("/api/sample")
async def get_sample() -> dict[str, str]:
    """Return the demonstration hex frame."""
    return {"hex": SAMPLE_HEX}


@app.post("/api/parse")
async def parse_hex(body: HexInput) -> dict[str, Any]:
    """Parse pasted hex, one frame per line, and merge the results.

    Lines that fail are skipped. If no line parses, the request fails with
    the error of the last failing line.
    """
    batch = await run_in_threadpool(parse_hex_lines, body.text)
    if batch.last_error is not None:
        logger.info("Manual input rejected: %s", batch.last_error.message)
        raise HTTPException(status_code=400, detail=batch.last_error.message)

    added = _history.extend(batch.records)
    if added:
        _publish_history()
    logger.info("Manual input: %d records added, %d lines failed", added, len(batch.errors))
    return {
        "added": added,
        "records": [format_record(record) for record in batch.records],
        "errors": [
            {"line": line_number, "error": error.message}
            for line_number, error in batch.errors
        ],
    }


@app.post("/api/upload")
async def upload_log(request: Request) -> dict[str, Any]:
    """Scan a raw UBX log sent as the request body.

    Any content type is accepted; the body is treated as opaque bytes.
    """
    try:
        data = await request.body()
    except ClientDisconnect as e:
        raise HTTPException(status_code=400, detail=ParseError.IO_FAILURE.message) from e

    records = await run_in_threadpool(parse_binary_ubx, data)
    if not records:
        logger.info("Upload of %d bytes contained no NAV-PVT frames", len(data))
        raise HTTPException(
            status_code=400, detail=ParseError.NO_PACKETS_FOUND.message
        )

    _history.extend(records)
    _publish_history()
    logger.info("Upload of %d bytes: %d records added", len(data), len(records))
    return {
        "added": len(records),
        "records": [format_record(record) for record in records],
    }


@app.get("/api/history")
async def get_history() -> dict[str, Any]:
    """Return the history, oldest first, with the latest record and chart series."""
    return format_history(_history.records())


@app.delete("/api/history", status_code=204)
async def clear_history() -> Response:
    _history.clear()
    _publish_history()
    return Response(status_code=204)


@app.get("/api/export.csv")
async def export_history() -> Response:
    """Download the history as CSV."""
    records = _history.records()
    if not records:
        raise HTTPException(status_code=404, detail="No records to export.")

    filename = export_filename(datetime.now())
    return Response(
        content=export_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            try:
                message = await asyncio.wait_for(queue.get(), timeout=_KEEPALIVE_SECONDS)
            except TimeoutError:
                message = _KEEPALIVE_MESSAGE
            await websocket.send_text(message)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream history updates to a connected WebSocket client.

    The current state is sent right after the connection is accepted, then
    one message per change. Each client gets its own bounded queue (max
    ``_QUEUE_MAX_SIZE`` messages) that drops its oldest entry when full.
    History changes only on user action, so an idle connection receives a
    ``type="keepalive"`` message every ``_KEEPALIVE_SECONDS``; a client that
    has gone away is dropped when that send fails.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    queue = _broadcaster.subscribe()
    queue.put_nowait(format_history_message(_history.records()))
    try:
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        _broadcaster.unsubscribe(queue)
