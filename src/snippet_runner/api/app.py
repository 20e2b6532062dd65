from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from snippet_runner.api.lifespan import lifespan
from snippet_runner.api.routes.execute import EXECUTE_ERROR
from snippet_runner.api.routes.execute import router as execute_router
from snippet_runner.api.routes.health import router as health_router
from snippet_runner.api.routes.root import router as root_router
from snippet_runner.api.routes.snippets import SAVE_ERROR
from snippet_runner.api.routes.snippets import router as snippets_router
from snippet_runner.config import Settings, get_settings

logger = logging.getLogger(__name__)

_INVALID_BODY_MESSAGES = {
    "/api/snippets": SAVE_ERROR,
    "/api/execute-code": EXECUTE_ERROR,
}


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Validation details stay in the log, not in the response.
    logger.warning("Invalid request body for %s: %s", request.url.path, exc.errors())
    message = _INVALID_BODY_MESSAGES.get(request.url.path, "Invalid request")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Snippet Runner API",
        description="Store code snippets and run them on a remote sandbox.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_request)  # type: ignore[arg-type]

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(snippets_router)
    app.include_router(execute_router)

    return app
