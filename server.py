"""Main FastAPI application - portfolio chat over WebSocket plus the /api/chat endpoint"""
import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, WebSocket

import config
from ai.client import RemoteAIClient
from api.routes import router
from websocket.connection_manager import ConnectionManager
from websocket.handler import handle_websocket_connection

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("portfolio-chat")

connection_manager = ConnectionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown"""
    # Startup: one pooled HTTP client shared by every session's AI calls
    http_client = httpx.AsyncClient(timeout=config.AI_TIMEOUT)
    app.state.ai_client = RemoteAIClient(http_client=http_client)
    if not app.state.ai_client.is_configured:
        logger.warning("GEMINI_API_KEY is not set; chat will answer from templates only")
    logger.info("Portfolio chat started (model=%s)", config.GEMINI_MODEL)

    yield

    # Shutdown: release pooled connections
    await http_client.aclose()
    logger.info("Application shutdown complete")


app = FastAPI(title="Portfolio Chat", lifespan=lifespan)
app.include_router(router)


@app.get("/")
async def get_index():
    """List the available endpoints"""
    return {
        "name": "Portfolio Chat",
        "endpoints": {
            "POST /api/chat": "Single-shot reply from the AI backend",
            "GET /api/health": "Remote AI availability",
            "WS /ws": "Chat session (send, retry, expand, collapse, input, connectivity, dismiss_error)",
        },
    }


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """WebSocket endpoint that delegates to handler"""
    await handle_websocket_connection(
        websocket,
        websocket.app.state.ai_client,
        connection_manager,
        probe_url=config.NETWORK_PROBE_URL or None,
    )


def serve() -> None:
    uvicorn.run(app, host=config.SERVER_HOST, port=config.SERVER_PORT)


if __name__ == "__main__":
    serve()
