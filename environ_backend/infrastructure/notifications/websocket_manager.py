"""WebSocket Manager for pushing real-time updates to connected clients"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class WebSocketManager:
    """
    Tracks WebSocket connections per user and sends JSON messages to them.

    A connection that fails on send is dropped.
    """

    def __init__(self) -> None:
        self._connections: Dict[str, Set[WebSocket]] = {}
        self._lock = asyncio.Lock()

    async def add_connection(self, user_id: str, websocket: WebSocket) -> None:
        async with self._lock:
            self._connections.setdefault(user_id, set()).add(websocket)
        logger.info(f"Added WebSocket connection for user {user_id}. Total connections: {self.get_total_connections()}")

    async def remove_connection(self, user_id: str, websocket: WebSocket) -> None:
        async with self._lock:
            connections = self._connections.get(user_id)
            if connections is not None:
                connections.discard(websocket)
                if not connections:
                    del self._connections[user_id]
        logger.info(f"Removed WebSocket connection for user {user_id}. Total connections: {self.get_total_connections()}")

    async def send_to_user(self, user_id: str, message: Dict[str, Any]) -> int:
        """
        Send a message to all WebSocket connections of one user.

        Returns:
            Number of connections the message was delivered to
        """
        async with self._lock:
            connections = set(self._connections.get(user_id, set()))
        if not connections:
            return 0

        try:
            message_json = json.dumps(message, default=str)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize message to JSON: {e}")
            return 0

        sent_count = 0
        for websocket in connections:
            try:
                await websocket.send_text(message_json)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Failed to send message to connection for user {user_id}: {e}")
                await self.remove_connection(user_id, websocket)

        logger.debug(f"Sent {message.get('type')} to {sent_count}/{len(connections)} connections for user {user_id}")
        return sent_count

    async def broadcast_to_all(self, message: Dict[str, Any]) -> int:
        total_sent = 0
        for user_id in self.get_connected_users():
            total_sent += await self.send_to_user(user_id, message)
        return total_sent

    def get_connected_users(self) -> List[str]:
        return list(self._connections.keys())

    def get_total_connections(self) -> int:
        return sum(len(connections) for connections in self._connections.values())
