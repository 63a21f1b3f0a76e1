"""
notecache — Pydantic Response Schemas
======================================

What:  Pydantic models for the JSON parts of the API.
How:   FastAPI serializes route return values through these models and
       publishes them in the OpenAPI document at /openapi.json.

Only the list and health endpoints speak JSON; every other endpoint
returns plain text, so there are no request models here.
"""

from typing import Optional

from pydantic import BaseModel, Field


class NoteEntry(BaseModel):
    """
    What:  One stored note as returned by GET /notes.
    Note:  `text` is null when the file is listed but could not be read.
    """
    name: str = Field(description="Note name (file name without .txt)")
    text: Optional[str] = Field(description="Full note content")


class HealthResponse(BaseModel):
    """
    What:  Response from GET /health.
    Who:   Load balancers, process supervisors, humans with curl.
    """
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    cache_dir: str = Field(description="Resolved cache directory path")
    cache_writable: bool = Field(description="Whether notes can be written")
    uptime_seconds: float = Field(description="Seconds since process start")
