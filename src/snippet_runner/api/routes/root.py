from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from snippet_runner.core.languages import supported_languages

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint: API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "Snippet Runner API",
            "description": "Store code snippets and run them on a remote sandbox.",
            "version": "0.1.0",
        },
        "languages": supported_languages(),
        "links": {
            "self": "/",
            "snippets": "/api/snippets",
            "execute": "/api/execute-code",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
