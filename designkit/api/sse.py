"""
Server-Sent Events framing for the sync channel.

Bus handlers run on whichever thread performed the write, so events are
handed to the stream's event loop with ``call_soon_threadsafe``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from designkit.core.ports import EventSubscriberPort

logger = logging.getLogger(__name__)

HEARTBEAT = ": heartbeat\n\n"
RETRY_MS = 3000
QUEUE_SIZE = 100

SSE_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


@dataclass
class SSEMessage:
    """Server-Sent Event message."""

    event: str
    data: dict[str, Any]
    id: str | None = None
    retry: int | None = None

    def serialize(self) -> str:
        lines = []
        if self.id:
            lines.append(f"id: {self.id}")
        lines.append(f"event: {self.event}")
        if self.retry is not None:
            lines.append(f"retry: {self.retry}")
        lines.append(f"data: {json.dumps(self.data, separators=(',', ':'))}")
        lines.append("")
        return "\n".join(lines) + "\n"


async def event_stream(
    subscriber: EventSubscriberPort,
    *,
    heartbeat_interval: float = 30.0,
    is_disconnected: Callable[[], Awaitable[bool]] | None = None,
) -> AsyncGenerator[str, None]:
    """
    Yield serialized SSE frames: ``connected`` first, then one frame per
    published event, with heartbeat comments while idle.

    The subscription lives exactly as long as the generator.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[SSEMessage] = asyncio.Queue(maxsize=QUEUE_SIZE)

    def enqueue(message: SSEMessage) -> None:
        try:
            queue.put_nowait(message)
        except asyncio.QueueFull:
            logger.warning("SSE client is not keeping up; dropped %s", message.id)

    def on_event(event: str, seq: int) -> None:
        message = SSEMessage(event=event, data={"event": event, "seq": seq}, id=str(seq))
        loop.call_soon_threadsafe(enqueue, message)

    unsubscribe = subscriber.subscribe(on_event)
    logger.debug("SSE client connected")
    try:
        yield SSEMessage(event="connected", data={}, retry=RETRY_MS).serialize()
        while True:
            if is_disconnected is not None and await is_disconnected():
                break
            try:
                message = await asyncio.wait_for(queue.get(), timeout=heartbeat_interval)
            except TimeoutError:
                yield HEARTBEAT
                continue
            yield message.serialize()
    finally:
        unsubscribe()
        logger.debug("SSE client disconnected")
