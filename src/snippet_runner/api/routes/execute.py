from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from snippet_runner.api.dependencies import get_executor
from snippet_runner.api.schemas import ErrorResponse, ExecuteRequest, ExecuteResponse
from snippet_runner.core.errors import ExecutionError, ExecutionTimeoutError, UnsupportedLanguageError
from snippet_runner.core.execute import run_execution
from snippet_runner.core.ports.executor import CodeExecutor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["execute"])

EXECUTE_ERROR = "Error executing code"
TIMEOUT_ERROR = "Code execution timed out"


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


@router.post("/execute-code", response_model=ExecuteResponse, responses={500: {"model": ErrorResponse}})
async def execute_code(
    body: ExecuteRequest,
    executor: CodeExecutor = Depends(get_executor),
) -> ExecuteResponse | JSONResponse:
    """Run a snippet on the remote execution service and return its output."""
    try:
        result = await run_execution(executor, body.language, body.source_code, body.stdin)
    except UnsupportedLanguageError as exc:
        return _error(f"Unsupported language: {exc.language}")
    except ExecutionTimeoutError as exc:
        logger.warning("Execution of %s snippet timed out: %s", body.language, exc)
        return _error(TIMEOUT_ERROR)
    except ExecutionError as exc:
        logger.warning("Execution of %s snippet failed: %s", body.language, exc)
        return _error(EXECUTE_ERROR)
    return ExecuteResponse(**result.model_dump())
