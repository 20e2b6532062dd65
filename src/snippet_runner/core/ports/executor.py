from typing import Protocol

from snippet_runner.models import ExecutionResult


class CodeExecutor(Protocol):
    async def submit_and_await(
        self,
        language_id: int | None,
        source_code: str,
        stdin: str | None = None,
        timeout: float | None = None,
    ) -> ExecutionResult: ...

    async def aclose(self) -> None: ...
