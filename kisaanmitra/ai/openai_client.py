"""
Unified OpenAI client.

All modules that need OpenAI should import from here:
    from kisaanmitra.ai.openai_client import get_client, key_present, set_last_error

This ensures:
- The API key is read ONCE (via core.config) and stripped of whitespace.
- A single async client instance is reused.
- The last failure is kept for the debug status endpoint.
"""
from typing import Optional

import openai

from kisaanmitra.core.config import OPENAI_API_KEY, VERIFIER_TIMEOUT_SECONDS

# Track last error for diagnostics
_last_error: Optional[str] = None

# Lazily-created singleton
_client: Optional[openai.AsyncOpenAI] = None


def key_present() -> bool:
    return bool(OPENAI_API_KEY)


def key_fingerprint() -> str:
    """Return masked key for safe logging: sk-xxxx...1234"""
    if not OPENAI_API_KEY:
        return "(not set)"
    if len(OPENAI_API_KEY) <= 10:
        return OPENAI_API_KEY[:2] + "***"
    return OPENAI_API_KEY[:6] + "..." + OPENAI_API_KEY[-4:]


def get_client() -> Optional[openai.AsyncOpenAI]:
    """
    Return the shared OpenAI client, or None if the key is missing.
    """
    global _client
    if not OPENAI_API_KEY:
        return None
    if _client is None:
        _client = openai.AsyncOpenAI(api_key=OPENAI_API_KEY, timeout=VERIFIER_TIMEOUT_SECONDS)
    return _client


def set_last_error(msg: Optional[str]):
    global _last_error
    _last_error = msg


def get_last_error() -> Optional[str]:
    return _last_error


def log_startup():
    """Print one-time startup diagnostics."""
    print(f"[AI] OPENAI_API_KEY present: {key_present()}", flush=True)
    print(f"[AI] key fingerprint: {key_fingerprint()}", flush=True)
    print(f"[AI] openai library version: {openai.__version__}", flush=True)
