from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SnippetCreate(BaseModel):
    username: str = Field(min_length=1)
    language: str = Field(min_length=1)
    source_code: str = Field(min_length=1)
    stdin: str | None = None
    stdout: str | None = None
    created_at: datetime | None = None


class Snippet(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    language: str
    stdin: str | None = None
    source_code: str
    stdout: str | None = None
    created_at: datetime


class SnippetSummary(Snippet):
    """A snippet whose ``source_code`` holds only the leading preview."""


class SnippetPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    records: list[SnippetSummary]


class ExecutionResult(BaseModel):
    stdout: str | None = None
    stderr: str | None = None
    compile_output: str | None = None
    message: str | None = None
    status: str | None = None
    time: float | None = None
    memory: int | None = None
