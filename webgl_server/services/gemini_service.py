"""Gemini Service - REST client for the generateContent endpoint."""

import copy
import logging
import time

import httpx

from webgl_server import config
from webgl_server.prompts.schema import GENERATION_CONFIG
from webgl_server.prompts.system_prompt import SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """The Gemini API call did not produce a usable response body."""


class ConnectionFailed(ApiError):
    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Failed to connect to Gemini API: {details}")


class BadStatus(ApiError):
    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"API returned status {status}: {body}")


def build_request_body(prompt: str) -> dict:
    """Build the generateContent payload for a user prompt."""
    return {
        "contents": [
            {"parts": [{"text": prompt}]},
        ],
        "system_instruction": {
            "parts": [{"text": SYSTEM_INSTRUCTION}],
        },
        "generationConfig": copy.deepcopy(GENERATION_CONFIG),
    }


class GeminiClient:
    """Issues one POST per prompt against the Gemini REST API.

    The API key is passed as the ``key`` query parameter. No retries are
    attempted; every failure surfaces as an ``ApiError``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        url: str = config.GEMINI_API_URL,
        timeout: float = config.GEMINI_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self._client = httpx.AsyncClient(transport=transport)
        logger.info("Gemini client initialized for %s", url)

    async def generate(self, prompt: str) -> dict:
        """POST the prompt and return the decoded response envelope."""
        body = build_request_body(prompt)

        t0 = time.perf_counter()
        try:
            resp = await self._client.post(
                self.url,
                params={"key": self.api_key},
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except httpx.TransportError as e:
            logger.warning("Gemini request failed: %r", e)
            raise ConnectionFailed(repr(e)) from e
        elapsed_ms = round((time.perf_counter() - t0) * 1000, 2)

        if resp.status_code != 200:
            logger.warning(
                "Gemini returned status %d after %sms", resp.status_code, elapsed_ms
            )
            raise BadStatus(resp.status_code, resp.text)

        try:
            envelope = resp.json()
        except ValueError as e:
            raise BadStatus(resp.status_code, resp.text) from e

        logger.info("Gemini responded in %sms", elapsed_ms)
        return envelope

    async def aclose(self) -> None:
        await self._client.aclose()
