"""WebSocket connection management: one chat session per connection"""
import json
import logging

from fastapi import WebSocket

from chat.session import ChatSession

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Tracks live connections and the chat session each one owns"""

    def __init__(self) -> None:
        """Initialize connection manager with no active sessions"""
        self.active_sessions: dict[WebSocket, ChatSession] = {}

    async def connect(self, websocket: WebSocket, session: ChatSession) -> None:
        """Accept a connection and bind it to its session"""
        await websocket.accept()
        self.active_sessions[websocket] = session

    def disconnect(self, websocket: WebSocket) -> ChatSession | None:
        """Forget a connection and close its session (history is discarded)"""
        session = self.active_sessions.pop(websocket, None)
        if session is not None:
            session.close()
        return session

    async def send_json(self, websocket: WebSocket, message: dict) -> bool:
        """Send a frame to one client

        Returns False (and drops the connection) when the send fails.
        """
        try:
            await websocket.send_text(json.dumps(message))
            return True
        except Exception as e:
            logger.warning("Error sending message to client: %s", e)
            self.disconnect(websocket)
            return False

    def get_connection_count(self) -> int:
        """Get the number of active connections"""
        return len(self.active_sessions)
