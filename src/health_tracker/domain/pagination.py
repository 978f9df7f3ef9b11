"""Pagination and list filtering models."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

T = TypeVar("T")


def normalize_page(page: int) -> int:
    """Return a 1-based page number."""
    return max(1, page)


def normalize_page_size(page_size: int) -> int:
    """Clamp the page size to the supported range."""
    return max(1, min(MAX_PAGE_SIZE, page_size))


def calculate_total_pages(total_items: int, page_size: int) -> int:
    if total_items == 0:
        return 0
    return math.ceil(total_items / normalize_page_size(page_size))


@dataclass(frozen=True)
class PageRequest:
    """Requested page, normalized on construction."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", normalize_page(self.page))
        object.__setattr__(self, "page_size", normalize_page_size(self.page_size))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus navigation metadata."""

    items: Sequence[T]
    total_items: int
    page: int
    page_size: int

    @classmethod
    def create(
        cls, items: Sequence[T], total_items: int, request: PageRequest
    ) -> "Page[T]":
        return cls(
            items=list(items),
            total_items=total_items,
            page=request.page,
            page_size=request.page_size,
        )

    @property
    def total_pages(self) -> int:
        return calculate_total_pages(self.total_items, self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def first_item_index(self) -> int:
        """1-based index of the first item on this page, 0 when empty."""
        if self.total_items == 0:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_item_index(self) -> int:
        return min(self.first_item_index + self.page_size - 1, self.total_items)


@dataclass(frozen=True)
class RecordQuery:
    """Filters shared by record listings.

    Each repository applies the filters that exist on its table and ignores
    the rest.
    """

    page: PageRequest = PageRequest()
    start_date: date | None = None
    end_date: date | None = None
    ascending: bool = False
    search: str | None = None
    meal_type: str | None = None
    category: str | None = None
    mood: str | None = None
    min_duration: int | None = None
    max_duration: int | None = None
    min_calories: int | None = None
    max_calories: int | None = None
