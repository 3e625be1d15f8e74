"""Sort resolution against a per-resource allow-list"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

DEFAULT_SORT_FIELD = "id"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class SortSpec:
    field: str
    direction: SortDirection


class SortResolver:
    """
    Validates a requested sort column and direction

    Unknown fields fall back to "id"; anything other than a case-insensitive
    "desc" sorts ascending. Never raises.
    """

    def __init__(self, default_field: str = DEFAULT_SORT_FIELD):
        self.default_field = default_field

    def resolve(
        self,
        requested_field: Optional[str],
        allowed_fields: Sequence[str],
        requested_direction: Optional[str] = None,
    ) -> SortSpec:
        field = requested_field if requested_field in allowed_fields else self.default_field
        return SortSpec(field=field, direction=self.resolve_direction(requested_direction))

    @staticmethod
    def resolve_direction(requested_direction: Optional[str]) -> SortDirection:
        if isinstance(requested_direction, str) and requested_direction.strip().upper() == "DESC":
            return SortDirection.DESC
        return SortDirection.ASC
