#!/usr/bin/env python3
"""Manual smoke test: open a chat session against a running server and ask a question"""

import asyncio
import json
import sys

import websockets

import config


async def run_session(question: str) -> None:
    """Connect, expand the widget, send one question and print state updates"""
    uri = f"ws://{config.SERVER_HOST}:{config.SERVER_PORT}/ws"

    async with websockets.connect(uri) as websocket:
        connected = json.loads(await websocket.recv())
        print(f"Connected: {connected}")

        await websocket.send(json.dumps({"type": "expand"}))
        await websocket.send(json.dumps({"type": "send", "text": question}))

        # Wait for the reply to land (loading flag drops with an AI message appended)
        for _ in range(20):
            try:
                frame = json.loads(await asyncio.wait_for(websocket.recv(), timeout=45.0))
            except asyncio.TimeoutError:
                print("Timeout waiting for response")
                break
            if frame.get("type") != "state":
                print(f"Frame: {frame}")
                continue
            state = frame["state"]
            if state["error"]:
                print(f"Error banner: {state['error']} (retry: {state['can_retry']})")
                break
            messages = state["messages"]
            if messages and messages[-1]["sender"] == "ai" and not state["is_loading"]:
                print(f"AI: {messages[-1]['content']}")
                break


if __name__ == "__main__":
    asyncio.run(run_session(" ".join(sys.argv[1:]) or "What are your skills?"))
