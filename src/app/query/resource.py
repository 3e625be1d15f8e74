"""Declarative per-resource configuration

One ResourceConfig describes everything the generic list/get/stats/write
paths need to know about an entity. Joins and column lists are trusted,
developer-written SQL fragments; request input only ever selects among the
allow-lists.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Type


@dataclass(frozen=True)
class ResourceConfig:
    name: str
    label: str
    table: str
    alias: str
    model: Optional[Type[Any]] = None
    select_columns: str = ""
    joins: Tuple[str, ...] = ()
    sortable_fields: Tuple[str, ...] = ("id",)
    filterable_fields: Tuple[str, ...] = ()
    search_columns: Tuple[str, ...] = ()
    identifier_field: Optional[str] = None
    identifier_prefix: Optional[str] = None
    identifier_with_year: bool = False
    stats_counts: Dict[str, Sequence[str]] = field(default_factory=dict)
    stats_sums: Tuple[str, ...] = ()
    stats_averages: Tuple[str, ...] = ()
    prepare: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None

    @property
    def columns(self) -> str:
        return self.select_columns or f"{self.alias}.*"

    @property
    def from_clause(self) -> str:
        parts = [f"{self.table} {self.alias}", *self.joins]
        return " ".join(parts)

    @property
    def noun(self) -> str:
        return self.label if self.label.isupper() else self.label.lower()

    @property
    def title(self) -> str:
        """Sentence-case label; acronyms such as RFQ keep their case"""
        return self.label if self.label.isupper() else self.label.capitalize()

    @property
    def plural_label(self) -> str:
        return f"{self.noun}s"
