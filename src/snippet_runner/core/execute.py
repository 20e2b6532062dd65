from snippet_runner.core.errors import UnsupportedLanguageError
from snippet_runner.core.languages import resolve_language_id
from snippet_runner.core.ports.executor import CodeExecutor
from snippet_runner.models import ExecutionResult


async def run_execution(
    executor: CodeExecutor,
    language: str,
    source_code: str,
    stdin: str | None = None,
    timeout: float | None = None,
) -> ExecutionResult:
    """Resolve ``language`` and run ``source_code`` on the remote service.

    Unknown languages are rejected here, before any remote call is made.
    """
    language_id = resolve_language_id(language)
    if language_id is None:
        raise UnsupportedLanguageError(language)
    return await executor.submit_and_await(language_id, source_code, stdin, timeout=timeout)
