"""Pydantic models for the WebGL shader generator API."""

from pydantic import BaseModel, Field


class PromptRequest(BaseModel):
    prompt: str = Field(..., description="Text description of the shape or effect")


class PromptResponse(BaseModel):
    response: dict = Field(..., description="WebGL program with defaults applied")


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = ""
    model: str = ""
    providers: dict = {}
