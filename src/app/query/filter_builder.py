"""Query filter builder

Turns already allow-listed filter values and an optional search term into a
parameterized WHERE clause. Values are never interpolated into the SQL text;
every value gets its own named placeholder (:p0, :p1, ...).
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

PARAM_PREFIX = "p"


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def select_filters(params: Mapping[str, Any], allowed: Sequence[str]) -> Dict[str, Any]:
    """
    Pick the allow-listed, non-empty filter values out of request parameters

    Args:
        params: Raw query parameters
        allowed: Field names that may be filtered on

    Returns:
        Ordered mapping of field -> value, in allow-list order
    """
    return {
        field: params[field]
        for field in allowed
        if field in params and not _is_empty(params[field])
    }


def to_bind_params(values: Sequence[Any], start: int = 0) -> Dict[str, Any]:
    """Map positional bound values onto the :pN placeholders"""
    return {f"{PARAM_PREFIX}{start + i}": value for i, value in enumerate(values)}


class QueryFilterBuilder:
    """
    Builds WHERE clauses for list queries

    Equality filters are ANDed together. A search term becomes one OR group of
    LIKE conditions, one per searchable column, ANDed after the filters.
    """

    def __init__(self, alias: Optional[str] = None):
        self.alias = alias

    def _column(self, field: str) -> str:
        if self.alias and "." not in field:
            return f"{self.alias}.{field}"
        return field

    def build(
        self,
        filters: Mapping[str, Any],
        search: Optional[str] = None,
        search_columns: Sequence[str] = (),
    ) -> Tuple[str, List[Any]]:
        """
        Build the WHERE clause and its ordered bound values

        Args:
            filters: field -> value, already restricted to filterable fields
            search: Optional free-text search term
            search_columns: Columns matched with LIKE %term%

        Returns:
            (where_clause, values); where_clause is "" when nothing applies
        """
        conditions: List[str] = []
        values: List[Any] = []

        for field, value in filters.items():
            if _is_empty(value):
                continue
            conditions.append(f"{self._column(field)} = :{PARAM_PREFIX}{len(values)}")
            values.append(value)

        if not _is_empty(search) and search_columns:
            term = f"%{search}%"
            likes = []
            for column in search_columns:
                likes.append(f"{column} LIKE :{PARAM_PREFIX}{len(values)}")
                values.append(term)
            conditions.append(f"({' OR '.join(likes)})")

        where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        return where_clause, values
