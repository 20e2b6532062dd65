"""Query-string parsing for the paginated snippet listing."""

from __future__ import annotations

from starlette.requests import Request

from snippet_runner.db.helpers import normalize_page_params


def parse_page_params(request: Request) -> tuple[int, int]:
    """Extract ``page`` and ``per_page`` from query params.

    Missing, non-numeric, zero or negative values fall back to page 1 and 10
    records per page; this never raises.
    """
    return normalize_page_params(request.query_params.get("page"), request.query_params.get("per_page"))
