"""Notifications API endpoint for real-time updates via WebSocket"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...di.container import get_container
from ...infrastructure.notifications import WebSocketManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])

POLICY_VIOLATION = 1008
INTERNAL_ERROR = 1011


@router.websocket("/ws")
async def websocket_notifications(
    websocket: WebSocket,
    token: Optional[str] = Query(None, description="JWT access token for authentication"),
):
    """
    WebSocket endpoint for receiving real-time notifications.

    Messages are JSON objects {type, data, timestamp} for classifications,
    level ups, unlocked badges, leaderboard changes, new posts and completed
    challenges.

    Example connection:
        ws://host/api/v1/notifications/ws?token=<jwt_token>
    """
    if not token:
        await websocket.close(code=POLICY_VIOLATION, reason="Authentication token required")
        return

    container = get_container()
    try:
        user = await container.get(GetCurrentUserUseCase).execute(token)
    except ValueError as e:
        logger.warning(f"Invalid token for WebSocket connection: {e}")
        await websocket.close(code=POLICY_VIOLATION, reason="Invalid or expired token")
        return
    except RuntimeError as e:
        logger.error(f"Could not authenticate WebSocket connection: {e}")
        await websocket.close(code=INTERNAL_ERROR, reason="Authentication unavailable")
        return

    manager: WebSocketManager = container.get(WebSocketManager)
    user_id = user.id

    await websocket.accept()
    logger.info(f"WebSocket connection accepted for user {user_id}")

    await manager.add_connection(user_id, websocket)
    try:
        await websocket.send_json({
            "type": "connection_established",
            "message": "Connected to notifications service",
            "user_id": user_id,
        })

        # Keep-alive loop; clients may send "ping"
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_text("pong")
            elif message != "pong":
                logger.debug(f"Received message from user {user_id}: {message}")
    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected for user {user_id}")
    finally:
        await manager.remove_connection(user_id, websocket)
        logger.info(f"WebSocket connection cleaned up for user {user_id}")
