"""Base model for domain entities"""

from datetime import datetime, timezone
from sqlalchemy import DateTime
from sqlmodel import Column, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_column() -> Column:
    """Timezone-aware audit column; each field needs its own Column instance"""
    return Column(DateTime(timezone=True), nullable=False)


class BaseModel(SQLModel):
    """Common parent for all table models"""

    def touch(self) -> None:
        """Refresh updated_at on entities that track it"""
        if hasattr(self, "updated_at"):
            self.updated_at = utc_now()
