import asyncio
import logging
from typing import Optional, Tuple

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from restaurantos.services.events import Subscription

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ws")


def _wanted(event_type: str, topics: Tuple[str, ...]) -> bool:
    return not topics or event_type.split(".", 1)[0] in topics


async def _forward(websocket: WebSocket, sub: Subscription, topics: Tuple[str, ...], keepalive: float):
    while True:
        try:
            event = await sub.get(timeout=keepalive)
        except asyncio.TimeoutError:
            # keep idle connections open through proxies
            await websocket.send_json({"type": "ping", "data": {}})
            continue
        if _wanted(event.type, topics):
            await websocket.send_json(event.model_dump(mode="json"))


async def _drain(websocket: WebSocket):
    # client messages are ignored, this only waits for the disconnect
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Event stream client disconnected")


@router.websocket("/events")
async def events_stream(
    websocket: WebSocket,
    topics: Optional[str] = Query(None, description="Comma separated: order,table,menu"),
):
    """
    Pushes every store mutation to the client. The subscription lives
    exactly as long as the connection.
    """
    await websocket.accept()
    restaurant = websocket.app.state.restaurant
    wanted = tuple(t.strip() for t in topics.split(",") if t.strip()) if topics else ()

    async with restaurant.events.subscription() as sub:
        await websocket.send_json({"type": "connected", "data": {"topics": list(wanted)}})
        tasks = {
            asyncio.create_task(_forward(websocket, sub, wanted, restaurant.settings.WS_KEEPALIVE_SECONDS)),
            asyncio.create_task(_drain(websocket)),
        }
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                task.cancel()
            for task in tasks:
                try:
                    await task
                except (asyncio.CancelledError, WebSocketDisconnect):
                    pass
                except Exception:
                    logger.exception("Event stream task failed")
