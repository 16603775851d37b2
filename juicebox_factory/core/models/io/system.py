"""Server status I/O models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Liveness of the server and reachability of its database."""

    status: Literal["ok", "degraded"] = Field(description="ok when every dependency answered")
    database: Literal["ok", "unavailable"] = Field(description="Result of a trivial query")


class VersionInfo(BaseModel):
    version: str = Field(description="Semantic version of the API")
    schema_version: str = Field(description="Version of the request/response schemas")
