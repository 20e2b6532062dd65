from __future__ import annotations

from pydantic import BaseModel, Field

from snippet_runner.models import ExecutionResult


class ExecuteRequest(BaseModel):
    """POST /api/execute-code: request body."""

    language: str = Field(min_length=1)
    source_code: str = Field(min_length=1)
    stdin: str | None = None


class ExecuteResponse(ExecutionResult):
    pass


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    database: str = "up"
