"""List query execution

Composes QueryFilterBuilder, SortResolver and Paginator and runs the
two-phase (count, then page) query for a resource.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

from src.app.services.sql_executor import SqlExecutor
from .filter_builder import QueryFilterBuilder, select_filters, to_bind_params
from .page import PageEnvelope
from .paginator import PageRequest, Paginator
from .resource import ResourceConfig
from .sort_resolver import SortResolver, SortSpec

PAGE_PARAM = "page"
LIMIT_PARAM = "limit"
SORT_BY_PARAM = "sortBy"
SORT_ORDER_PARAM = "sortOrder"
SEARCH_PARAM = "search"


@dataclass(frozen=True)
class ListQuery:
    """Validated list request: pagination, sort, filters and search"""

    page: PageRequest
    sort: SortSpec
    filters: Dict[str, Any] = field(default_factory=dict)
    search: Optional[str] = None


class ListQueryExecutor:
    """
    Runs paginated, filtered, sorted list queries

    Exactly two reads are issued per call: a COUNT(*) with the WHERE clause,
    then the page itself with the same WHERE clause plus ORDER BY and bound
    LIMIT/OFFSET. Store errors propagate to the caller untouched.
    """

    def __init__(
        self,
        executor: SqlExecutor,
        paginator: Optional[Paginator] = None,
        sort_resolver: Optional[SortResolver] = None,
        max_limit: Optional[int] = None,
    ):
        self.executor = executor
        self.paginator = paginator or Paginator()
        self.sort_resolver = sort_resolver or SortResolver()
        self.max_limit = max_limit

    def build_query(self, resource: ResourceConfig, params: Mapping[str, Any]) -> ListQuery:
        page = self.paginator.paginate(params.get(PAGE_PARAM), params.get(LIMIT_PARAM))
        if self.max_limit and page.limit > self.max_limit:
            page = replace(page, limit=self.max_limit, offset=(page.page - 1) * self.max_limit)

        sort = self.sort_resolver.resolve(
            params.get(SORT_BY_PARAM),
            resource.sortable_fields,
            params.get(SORT_ORDER_PARAM),
        )
        search = params.get(SEARCH_PARAM)
        return ListQuery(
            page=page,
            sort=sort,
            filters=select_filters(params, resource.filterable_fields),
            search=search if isinstance(search, str) and search.strip() else None,
        )

    async def list(
        self, resource: ResourceConfig, params: Mapping[str, Any]
    ) -> PageEnvelope[Dict[str, Any]]:
        """
        List one page of a resource from raw query parameters

        Args:
            resource: Resource configuration (table, joins, allow-lists)
            params: Raw query parameters (page, limit, sortBy, sortOrder,
                filters, search)

        Returns:
            PageEnvelope of row mappings
        """
        query = self.build_query(resource, params)
        where_clause, values = QueryFilterBuilder(resource.alias).build(
            query.filters, query.search, resource.search_columns
        )
        return await self.execute(resource, where_clause, values, query.sort, query.page)

    async def execute(
        self,
        resource: ResourceConfig,
        where_clause: str,
        values: List[Any],
        sort: SortSpec,
        page: PageRequest,
    ) -> PageEnvelope[Dict[str, Any]]:
        params = to_bind_params(values)

        count_sql = f"SELECT COUNT(*) AS total FROM {resource.from_clause} {where_clause}"
        total = await self.executor.scalar(count_sql.strip(), params)
        total_items = int(total or 0)

        order_by = f"{resource.alias}.{sort.field} {sort.direction.value}"
        if sort.field != "id":
            # ties on the sort column would otherwise leave page order undefined
            order_by += f", {resource.alias}.id ASC"

        page_sql = (
            f"SELECT {resource.columns} FROM {resource.from_clause} {where_clause} "
            f"ORDER BY {order_by} LIMIT :limit OFFSET :offset"
        )
        rows = await self.executor.execute(
            page_sql, {**params, "limit": page.limit, "offset": page.offset}
        )

        return PageEnvelope.build(
            items=list(rows), page=page.page, limit=page.limit, total_items=total_items
        )
