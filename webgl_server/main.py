"""WebGL shader generator FastAPI server."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from webgl_server.models import (
    PromptRequest,
    PromptResponse,
    ErrorResponse,
    HealthResponse,
)
from webgl_server.services import webgl_service
from webgl_server.services.gemini_service import ApiError, GeminiClient
from webgl_server.services.webgl_service import NormalizeError
from webgl_server import config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A missing API key aborts startup instead of failing each request.
    gemini_client = GeminiClient(config.gemini_api_key())
    app.state.gemini_client = gemini_client
    try:
        yield
    finally:
        await gemini_client.aclose()


app = FastAPI(
    title="WebGL Shader Generator",
    description="Generate WebGL shaders and vertex data from text prompts using Gemini",
    version="0.1.0",
    lifespan=lifespan,
)


def get_gemini_client(request: Request) -> GeminiClient:
    return request.app.state.gemini_client


# ── REST Endpoints ──────────────────────────────────────────────


@app.get("/api/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        version=app.version,
        model=config.GEMINI_MODEL,
        providers={"gemini": config.has_gemini_api_key()},
    )


@app.post(
    "/api/prompt",
    response_model=PromptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def prompt(
    req: PromptRequest,
    gemini_client: GeminiClient = Depends(get_gemini_client),
):
    try:
        envelope = await gemini_client.generate(req.prompt)
    except ApiError as e:
        logger.warning("Gemini call failed: %s", e)
        return JSONResponse(
            status_code=500, content=ErrorResponse(error=str(e)).model_dump()
        )

    try:
        webgl = webgl_service.normalize(envelope)
    except NormalizeError as e:
        logger.warning("Unusable Gemini response: %s", e)
        return JSONResponse(
            status_code=400, content=ErrorResponse(error=str(e)).model_dump()
        )

    return PromptResponse(response=webgl)


# ── Main ────────────────────────────────────────────────────────


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "webgl_server.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL,
    )
