from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from snippet_runner.api.dependencies import get_store
from snippet_runner.api.pagination import parse_page_params
from snippet_runner.api.schemas import ErrorResponse
from snippet_runner.core.errors import SnippetValidationError, StorageError
from snippet_runner.core.ports.store import SnippetStore
from snippet_runner.core.snippets import create_snippet, list_snippets
from snippet_runner.models import Snippet, SnippetCreate, SnippetPage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/snippets", tags=["snippets"])

SAVE_ERROR = "Error saving the code snippet"
READ_ERROR = "Error retrieving code snippets"


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Snippet,
    responses={500: {"model": ErrorResponse}},
)
async def create(
    body: SnippetCreate,
    store: SnippetStore = Depends(get_store),
) -> Snippet | JSONResponse:
    try:
        return await create_snippet(store, body)
    except SnippetValidationError as exc:
        logger.warning("Rejected snippet: %s", exc)
        return _error(SAVE_ERROR)
    except StorageError:
        logger.exception("Failed to save snippet")
        return _error(SAVE_ERROR)


@router.get("", response_model=SnippetPage, responses={500: {"model": ErrorResponse}})
async def list_(
    request: Request,
    store: SnippetStore = Depends(get_store),
) -> SnippetPage | JSONResponse:
    """Newest snippets first; ``source_code`` is a preview of the first 100 characters."""
    page, per_page = parse_page_params(request)
    try:
        return await list_snippets(store, page, per_page)
    except StorageError:
        logger.exception("Failed to list snippets (page=%d, per_page=%d)", page, per_page)
        return _error(READ_ERROR)
