"""Paged collection returned by list queries."""

from dataclasses import dataclass, field
from math import ceil
from typing import Callable, Generic, List, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """A single page of items plus the totals needed to render a pager."""

    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 20

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return ceil(self.total_count / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    def map(self, transform: Callable[[T], U]) -> "PagedResult[U]":
        return PagedResult(
            items=[transform(item) for item in self.items],
            total_count=self.total_count,
            page=self.page,
            page_size=self.page_size,
        )

    @classmethod
    def from_sequence(cls, items: Sequence[T], page: int, page_size: int) -> "PagedResult[T]":
        """Slice an already filtered and sorted sequence."""
        start = (page - 1) * page_size
        return cls(
            items=list(items[start : start + page_size]),
            total_count=len(items),
            page=page,
            page_size=page_size,
        )
