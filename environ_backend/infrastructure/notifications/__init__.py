"""Notifications infrastructure for real-time updates"""

from .websocket_manager import WebSocketManager
from .notification_service import NotificationService

__all__ = [
    "WebSocketManager",
    "NotificationService",
]
