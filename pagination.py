"""Query-string pagination shared by the listing routes."""

from __future__ import annotations

from typing import Optional

from fastapi import Query

from crud import MAX_PAGE
from errors import ValidationError


def get_page(
    page: Optional[str] = Query(
        None, description="1-based page number, 10 records per page"
    ),
) -> int:
    """Parse ``?page=N``; a missing or empty value means the first page.

    Raises :class:`ValidationError` (400) for non-integer input and for
    pages outside ``1..MAX_PAGE``.
    """
    if page is None or page == "":
        return 1
    try:
        value = int(page)
    except ValueError as exc:
        raise ValidationError("Invalid page input") from exc
    if not 1 <= value <= MAX_PAGE:
        raise ValidationError("Invalid page input")
    return value
