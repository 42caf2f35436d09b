"""
CONFIGURATION
=============

Runtime settings for the portfolio chat service, read from the environment.
A .env file in the project root is loaded first so the Gemini API key stays
out of the code.

Fixed product limits (message length, rate-limit window, backoff caps) live
in domain/constants.py; this module only holds values that change per
deployment.
"""

import os
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


def _int_env(name: str, default: int) -> int:
    return int(_float_env(name, default))


# -----------------------------------------------------------------------------
# GEMINI
# -----------------------------------------------------------------------------
# The only required secret. Its absence is reported by the /api/chat endpoint
# as a labelled 500 rather than surfacing as a downstream auth failure.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "").strip()
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_API_BASE = os.getenv(
    "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
).rstrip("/")

# -----------------------------------------------------------------------------
# AI CALL POLICY
# -----------------------------------------------------------------------------
AI_MAX_RETRIES = _int_env("AI_MAX_RETRIES", 3)
AI_RETRY_DELAY = _float_env("AI_RETRY_DELAY", 1.0)    # seconds, doubled per attempt
AI_TIMEOUT = _float_env("AI_TIMEOUT", 30.0)           # seconds, doubled on slow networks
AI_MAX_TOKENS = _int_env("AI_MAX_TOKENS", 500)
AI_TEMPERATURE = _float_env("AI_TEMPERATURE", 0.7)

# -----------------------------------------------------------------------------
# NETWORK PROBE
# -----------------------------------------------------------------------------
# A tiny static asset fetched with HEAD to tell "online" from "slow".
# Leave empty to disable probing (status then only follows connectivity events).
NETWORK_PROBE_URL = os.getenv("NETWORK_PROBE_URL", "").strip()

# -----------------------------------------------------------------------------
# SERVER
# -----------------------------------------------------------------------------
SERVER_HOST = os.getenv("SERVER_HOST", "localhost")
SERVER_PORT = _int_env("SERVER_PORT", 8765)
