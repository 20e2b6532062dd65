"""Client for a Judge0-compatible remote code execution service.

The service runs submissions asynchronously: ``POST /submissions`` returns a
token immediately and ``GET /submissions/{token}`` reports the job status.
``submit_and_await`` submits once and polls with exponential backoff until the
status is terminal or the caller's time budget is spent.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from snippet_runner.config import Settings
from snippet_runner.core.errors import ExecutionTimeoutError, RemoteServiceError, SubmissionError
from snippet_runner.models import ExecutionResult

logger = logging.getLogger(__name__)

# Status ids below this value are "In Queue" (1) and "Processing" (2).
_FIRST_TERMINAL_STATUS = 3

_RESULT_FIELDS = "stdout,stderr,compile_output,message,status,time,memory"


def is_terminal_status(status_id: int) -> bool:
    return status_id >= _FIRST_TERMINAL_STATUS


def _status_of(payload: Any) -> tuple[int, str | None]:
    if not isinstance(payload, dict):
        raise RemoteServiceError("Result payload is not an object")
    status = payload.get("status")
    if not isinstance(status, dict) or not isinstance(status.get("id"), int):
        raise RemoteServiceError("Result payload has no status id")
    return status["id"], status.get("description")


def _to_result(payload: dict[str, Any]) -> ExecutionResult:
    _, description = _status_of(payload)
    try:
        return ExecutionResult(
            stdout=payload.get("stdout"),
            stderr=payload.get("stderr"),
            compile_output=payload.get("compile_output"),
            message=payload.get("message"),
            status=description,
            time=payload.get("time"),
            memory=payload.get("memory"),
        )
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        raise RemoteServiceError(f"Result payload has unexpected fields: {', '.join(fields)}") from exc


class RemoteExecutionClient:
    """Implements the ``CodeExecutor`` protocol over HTTP."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        api_host: str | None = None,
        *,
        timeout: float = 15.0,
        poll_interval: float = 0.5,
        max_poll_interval: float = 3.0,
        backoff_factor: float = 2.0,
        request_timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._api_host = api_host
        self._timeout = timeout
        self._poll_interval = poll_interval
        self._max_poll_interval = max_poll_interval
        self._backoff_factor = backoff_factor
        self._request_timeout = request_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> RemoteExecutionClient:
        return cls(
            settings.execution_api_url,
            settings.execution_api_key,
            settings.execution_api_host,
            timeout=settings.execution_timeout,
            poll_interval=settings.execution_poll_interval,
            max_poll_interval=settings.execution_max_poll_interval,
            request_timeout=settings.execution_request_timeout,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["X-RapidAPI-Key"] = self._api_key
        if self._api_host:
            headers["X-RapidAPI-Host"] = self._api_host
        return headers

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazily created client shared by all requests of this instance."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers(),
                timeout=self._request_timeout,
                transport=self._transport,
            )
        return self._client

    async def submit(self, language_id: int | None, source_code: str, stdin: str | None = None) -> str:
        """Create a submission and return its token."""
        if language_id is None:
            raise SubmissionError("No language id to submit")

        try:
            response = await self.client.post(
                "/submissions",
                params={"base64_encoded": "false", "wait": "false"},
                json={"language_id": language_id, "source_code": source_code, "stdin": stdin or ""},
            )
        except httpx.HTTPError as exc:
            raise SubmissionError(f"Submission request failed: {type(exc).__name__}") from exc

        if not response.is_success:
            logger.warning("Submission rejected with HTTP %d", response.status_code)
            raise SubmissionError(f"Submission rejected with HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise SubmissionError("Submission response is not JSON") from exc

        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise SubmissionError("Submission response has no token")
        return str(token)

    async def fetch(self, token: str) -> dict[str, Any]:
        """Read the current state of a submission."""
        try:
            response = await self.client.get(
                f"/submissions/{token}",
                params={"base64_encoded": "false", "fields": _RESULT_FIELDS},
            )
        except httpx.HTTPError as exc:
            raise RemoteServiceError(f"Result request failed: {type(exc).__name__}") from exc

        if not response.is_success:
            logger.warning("Result request for %s failed with HTTP %d", token, response.status_code)
            raise RemoteServiceError(f"Result request failed with HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteServiceError("Result response is not JSON") from exc
        _status_of(payload)
        return payload

    async def submit_and_await(
        self,
        language_id: int | None,
        source_code: str,
        stdin: str | None = None,
        timeout: float | None = None,
    ) -> ExecutionResult:
        """Submit a program and poll until the service reports a terminal status.

        Raises ``SubmissionError`` if the submission is not accepted,
        ``ExecutionTimeoutError`` if ``timeout`` seconds pass without a terminal
        status and ``RemoteServiceError`` for any other unexpected answer.
        """
        budget = self._timeout if timeout is None else timeout
        deadline = asyncio.get_running_loop().time() + budget
        token: str | None = None
        polls = 0
        delay = self._poll_interval

        try:
            async with asyncio.timeout_at(deadline):
                token = await self.submit(language_id, source_code, stdin)
                while True:
                    payload = await self.fetch(token)
                    polls += 1
                    status_id, description = _status_of(payload)
                    if is_terminal_status(status_id):
                        logger.info("Submission %s finished after %d poll(s): %s", token, polls, description)
                        return _to_result(payload)
                    await asyncio.sleep(delay)
                    delay = min(delay * self._backoff_factor, self._max_poll_interval)
        except TimeoutError as exc:
            logger.warning("Submission %s not finished within %.1fs (%d poll(s))", token, budget, polls)
            raise ExecutionTimeoutError(f"No result within {budget:g}s") from exc

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
