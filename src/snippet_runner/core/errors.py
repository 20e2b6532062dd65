"""Error taxonomy shared by the store, the execution client and the handlers."""

from __future__ import annotations


class SnippetRunnerError(Exception):
    """Base class for all errors raised by snippet-runner."""


class SnippetValidationError(SnippetRunnerError, ValueError):
    """Raised when a snippet is missing a required field."""


class StorageError(SnippetRunnerError):
    """Raised when the snippet store is unavailable or rejects a write."""


class UnsupportedLanguageError(SnippetRunnerError, ValueError):
    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language: {language!r}")
        self.language = language


class ExecutionError(SnippetRunnerError):
    """Base class for failures at the remote execution boundary."""


class SubmissionError(ExecutionError):
    """The remote service did not accept the submission or returned no token."""


class ExecutionTimeoutError(ExecutionError):
    """No terminal result was reported within the timeout budget."""


class RemoteServiceError(ExecutionError):
    """The remote service answered with an unexpected status or payload."""
