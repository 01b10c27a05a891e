"""
HueMatch — Pydantic models
Request/response schemas for the HTTP API.
"""

from pydantic import BaseModel, Field


class TextInput(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"text": "a calm evening by the sea"}]}}

    text: str


class ColorOutput(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"r": 255, "g": 0, "b": 0}]}}

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HealthResponse(BaseModel):
    status: str
    entries: int
    dimensions: int
    version: str
