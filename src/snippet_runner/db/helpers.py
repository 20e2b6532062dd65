import math
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from snippet_runner.core.errors import SnippetValidationError
from snippet_runner.models import SnippetCreate

TABLE_NAME = "code_snippets"

PREVIEW_LENGTH = 100

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10

_REQUIRED_FIELDS = ("username", "language", "source_code")


def validate_snippet_input(data: SnippetCreate | Mapping[str, Any]) -> SnippetCreate:
    """Coerce raw input into a ``SnippetCreate``, rejecting missing or empty required fields."""
    if isinstance(data, SnippetCreate):
        snippet_in = data
    else:
        try:
            snippet_in = SnippetCreate.model_validate(dict(data))
        except ValidationError as exc:
            fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            raise SnippetValidationError(f"Invalid snippet fields: {', '.join(fields)}") from exc

    # model_construct() skips field validation
    missing = [name for name in _REQUIRED_FIELDS if not getattr(snippet_in, name, None)]
    if missing:
        raise SnippetValidationError(f"Missing required snippet fields: {', '.join(missing)}")
    return snippet_in


def created_at_or_now(value: datetime | None) -> datetime:
    """Default ``created_at`` to the insertion time; naive timestamps are taken as UTC."""
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def normalize_page_params(page: Any, per_page: Any) -> tuple[int, int]:
    """Return a usable ``(page, per_page)`` pair; malformed values fall back to the defaults."""
    return _positive_int(page, DEFAULT_PAGE), _positive_int(per_page, DEFAULT_PER_PAGE)


def total_pages(total_items: int, per_page: int) -> int:
    return math.ceil(total_items / per_page)


def preview(source_code: str) -> str:
    return source_code[:PREVIEW_LENGTH]
