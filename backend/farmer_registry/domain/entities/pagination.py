"""Pagination value objects for cooperative listings."""

import math
from dataclasses import dataclass, field

from farmer_registry.domain.entities.farmer_record import FarmerRecord

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 500


def _coerce_positive(raw: int | str | None, default: int) -> int:
    """Parse a page/limit value, falling back to ``default`` when unusable."""
    if raw is None:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class PageRequest:
    """A validated page/limit pair. Never yields a negative offset.

    ``limit`` is clamped to ``MAX_LIMIT``.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_raw(cls, page: int | str | None, limit: int | str | None) -> "PageRequest":
        return cls(
            page=_coerce_positive(page, DEFAULT_PAGE),
            limit=min(_coerce_positive(limit, DEFAULT_LIMIT), MAX_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageInfo:
    page: int
    limit: int
    total_items: int
    total_pages: int
    has_previous: bool
    has_next: bool

    @classmethod
    def build(cls, request: PageRequest, total_items: int) -> "PageInfo":
        total_pages = math.ceil(total_items / request.limit)
        return cls(
            page=request.page,
            limit=request.limit,
            total_items=total_items,
            total_pages=total_pages,
            has_previous=request.page > 1,
            has_next=request.page < total_pages,
        )


@dataclass
class FarmerPage:
    """One page of farmer records plus its pagination metadata."""

    items: list[FarmerRecord] = field(default_factory=list)
    page_info: PageInfo = field(
        default_factory=lambda: PageInfo.build(PageRequest(), 0)
    )
