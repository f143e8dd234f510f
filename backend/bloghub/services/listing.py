"""
BlogHub Backend — List Filters
===============================

What:  Applies the shared list-endpoint filters to a SELECT.
Who:   CategoryService.list_categories and BlogService.list_blogs.

Filters:
    keywords    → (title ILIKE %kw%) OR (description ILIKE %kw%)
                  LIKE wildcards in the keyword are escaped, so the match is a
                  plain case-insensitive substring test.
    start_date  → created_at >= start (inclusive)
    end_date    → created_at <= end   (inclusive)
    page/limit  → OFFSET (page - 1) * limit LIMIT limit

Ordering is left to the caller.
"""

from datetime import datetime, timezone

from sqlalchemy import Select, or_

from bloghub.schemas.common import ListParams


def parse_date_bound(value: str) -> datetime:
    """
    Parse an ISO 8601 date or datetime into an aware UTC datetime.

    Naive values are taken as UTC, so '2024-03-01' means midnight UTC.

    Raises:
        ValueError: The value is not ISO 8601.
    """
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def apply_list_filters(query: Select, model, params: ListParams) -> Select:
    """
    Narrow `query` by keyword and creation-date range, then paginate it.

    Args:
        query:  SELECT over `model`, already scoped to the owner
        model:  ORM class with title, description and created_at columns
        params: Validated list parameters

    Raises:
        ValueError: start_date or end_date is not ISO 8601.
    """
    if params.keywords:
        pattern = f"%{_escape_like(params.keywords)}%"
        query = query.where(
            or_(
                model.title.ilike(pattern, escape="\\"),
                model.description.ilike(pattern, escape="\\"),
            )
        )

    if params.start_date:
        query = query.where(model.created_at >= parse_date_bound(params.start_date))

    if params.end_date:
        query = query.where(model.created_at <= parse_date_bound(params.end_date))

    return query.offset(params.skip).limit(params.limit)
