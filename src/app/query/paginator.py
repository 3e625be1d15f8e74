"""Pagination parameter parsing and page math"""

import math
from dataclasses import dataclass
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# LIMIT/OFFSET are bound as signed 64-bit integers by every supported store
MAX_SQL_INTEGER = 2 ** 63 - 1


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int
    offset: int


def _positive_int(raw: Any, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if 0 < value <= MAX_SQL_INTEGER else default


class Paginator:
    """
    Parses page/limit inputs and derives page counts

    Missing, non-numeric, zero or negative inputs fall back to the defaults,
    as does a page whose offset cannot be bound as a 64-bit integer.
    No upper bound is applied to limit here.
    """

    def __init__(self, default_page: int = DEFAULT_PAGE, default_limit: int = DEFAULT_LIMIT):
        self.default_page = default_page
        self.default_limit = default_limit

    def paginate(self, page: Any = None, limit: Any = None) -> PageRequest:
        resolved_page = _positive_int(page, self.default_page)
        resolved_limit = _positive_int(limit, self.default_limit)
        if resolved_page * resolved_limit > MAX_SQL_INTEGER:
            resolved_page = self.default_page
        return PageRequest(
            page=resolved_page,
            limit=resolved_limit,
            offset=(resolved_page - 1) * resolved_limit,
        )

    @staticmethod
    def total_pages(total_items: int, limit: int) -> int:
        if total_items <= 0:
            return 0
        return math.ceil(total_items / limit)
