"""Page envelope returned by list queries"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, TypeVar

from .paginator import Paginator

T = TypeVar("T")


@dataclass(frozen=True)
class PageEnvelope(Generic[T]):
    """
    One page of results plus pagination metadata

    total_pages = ceil(total_items / items_per_page), 0 when there are no rows.
    """

    items: List[T] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total_items: int = 0
    items_per_page: int = 10

    @classmethod
    def build(cls, items: List[T], page: int, limit: int, total_items: int) -> "PageEnvelope[T]":
        return cls(
            items=items,
            current_page=page,
            total_pages=Paginator.total_pages(total_items, limit),
            total_items=total_items,
            items_per_page=limit,
        )

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1

    def pagination(self) -> Dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }
