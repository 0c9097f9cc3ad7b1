"""Configuration for the WebGL shader generator server."""

import os
from dotenv import load_dotenv

load_dotenv()


class MissingConfigError(RuntimeError):
    """Raised when a required environment variable is not set."""


# LLM
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    f"{GEMINI_MODEL}:generateContent"
)
GEMINI_TIMEOUT_SECONDS = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "10"))

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")


def gemini_api_key() -> str:
    """Fetch GEMINI_API_KEY from the environment at call time."""
    key = os.getenv("GEMINI_API_KEY")
    if not key:
        raise MissingConfigError("environment variable GEMINI_API_KEY is missing.")
    return key


def has_gemini_api_key() -> bool:
    return bool(os.getenv("GEMINI_API_KEY"))
