"""Notification Service: builds messages and routes them to the WebSocket manager"""

import logging
from typing import Any, Dict, Optional

from ...utils.datetime_utils import now_iso
from .websocket_manager import WebSocketManager

logger = logging.getLogger(__name__)

CLASSIFICATION_CREATED = "classification_created"
LEVEL_UP = "level_up"
BADGE_UNLOCKED = "badge_unlocked"
LEADERBOARD_UPDATED = "leaderboard_updated"
POST_CREATED = "post_created"
CHALLENGE_COMPLETED = "challenge_completed"


class NotificationService:
    """
    Publishes real-time change notifications.

    Delivery is best effort: a failed push is logged and never fails the
    request that triggered it.
    """

    def __init__(self, websocket_manager: Optional[WebSocketManager] = None) -> None:
        self.websocket_manager = websocket_manager

    @staticmethod
    def format_notification(event_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "type": event_type,
            "data": data,
            "timestamp": now_iso(),
        }

    async def notify_user(self, user_id: str, event_type: str, data: Dict[str, Any]) -> int:
        if self.websocket_manager is None:
            return 0
        try:
            return await self.websocket_manager.send_to_user(
                user_id, self.format_notification(event_type, data)
            )
        except Exception as e:
            logger.error(f"Error sending {event_type} notification to user {user_id}: {e}", exc_info=True)
            return 0

    async def broadcast(self, event_type: str, data: Dict[str, Any]) -> int:
        if self.websocket_manager is None:
            return 0
        try:
            return await self.websocket_manager.broadcast_to_all(self.format_notification(event_type, data))
        except Exception as e:
            logger.error(f"Error broadcasting {event_type} notification: {e}", exc_info=True)
            return 0
