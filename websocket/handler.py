"""WebSocket connection handling and client frame dispatch"""
import asyncio
import json
import logging

from fastapi import WebSocket, WebSocketDisconnect

from ai.client import RemoteAIClient
from chat.session import ChatSession
from domain.models import ChatState
from websocket.connection_manager import ConnectionManager

logger = logging.getLogger(__name__)

FRAME_SEND = "send"
FRAME_RETRY = "retry"
FRAME_EXPAND = "expand"
FRAME_COLLAPSE = "collapse"
FRAME_INPUT = "input"
FRAME_CONNECTIVITY = "connectivity"
FRAME_DISMISS_ERROR = "dismiss_error"


def parse_client_frame(message: str) -> tuple[str, dict]:
    """Decode a client frame into (type, payload). Raises ValueError on bad JSON."""
    data = json.loads(message)
    if not isinstance(data, dict):
        raise ValueError("Frame must be a JSON object")
    frame_type = str(data.get("type", "")).strip()
    return frame_type, data


def dispatch_frame(
    session: ChatSession,
    frame_type: str,
    data: dict,
    pending: set[asyncio.Task],
) -> None:
    """Apply one client frame to the session

    send and retry run as background tasks so the receive loop keeps
    reading; a second send while one is in flight hits the session's guard.
    """
    if frame_type == FRAME_SEND:
        task = asyncio.create_task(session.send(str(data.get("text", ""))))
    elif frame_type == FRAME_RETRY:
        task = asyncio.create_task(session.retry())
    elif frame_type == FRAME_EXPAND:
        session.expand()
        return
    elif frame_type == FRAME_COLLAPSE:
        session.collapse()
        return
    elif frame_type == FRAME_INPUT:
        session.update_input(str(data.get("text", "")))
        return
    elif frame_type == FRAME_CONNECTIVITY:
        session.service.network_monitor.set_online(bool(data.get("online", True)))
        return
    elif frame_type == FRAME_DISMISS_ERROR:
        session.dismiss_error()
        return
    else:
        logger.warning("Ignoring unknown frame type: %r", frame_type)
        return

    pending.add(task)
    task.add_done_callback(pending.discard)


async def _forward_states(
    websocket: WebSocket,
    outbox: asyncio.Queue[dict],
    connection_manager: ConnectionManager,
) -> None:
    """Drain state snapshots to the client in emission order"""
    while True:
        frame = await outbox.get()
        if not await connection_manager.send_json(websocket, frame):
            return


async def handle_websocket_connection(
    websocket: WebSocket,
    client: RemoteAIClient,
    connection_manager: ConnectionManager,
    probe_url: str | None = None,
) -> None:
    """Run one chat session for the lifetime of a WebSocket connection"""
    expanded = websocket.query_params.get("expanded", "").lower() in ("1", "true", "yes")
    session = ChatSession.create(client, probe_url=probe_url, default_expanded=expanded)

    outbox: asyncio.Queue[dict] = asyncio.Queue()

    def on_state(state: ChatState) -> None:
        outbox.put_nowait({"type": "state", "state": state.to_dict()})

    session.subscribe(on_state)
    pending: set[asyncio.Task] = set()
    writer: asyncio.Task | None = None

    try:
        await connection_manager.connect(websocket, session)
        logger.info(
            "Session %s connected. Total clients: %s",
            session.session_id,
            connection_manager.get_connection_count(),
        )

        await websocket.send_text(json.dumps({
            "type": "connected",
            "session_id": session.session_id,
        }))
        on_state(session.state)
        writer = asyncio.create_task(_forward_states(websocket, outbox, connection_manager))

        while True:
            message = await websocket.receive_text()
            try:
                frame_type, data = parse_client_frame(message)
            except ValueError:
                logger.warning("Invalid JSON received from session %s", session.session_id)
                # Client can recover, keep the connection open
                outbox.put_nowait({"type": "error", "message": "Invalid JSON format"})
                continue

            dispatch_frame(session, frame_type, data, pending)

    except WebSocketDisconnect:
        logger.info("Session %s disconnected", session.session_id)
    except Exception:
        logger.exception("WebSocket error in session %s", session.session_id)
    finally:
        for task in list(pending):
            task.cancel()
        if writer is not None:
            writer.cancel()
        connection_manager.disconnect(websocket)
        session.close()
