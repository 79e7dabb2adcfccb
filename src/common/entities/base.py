from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, func

from src.configuration.config import Base


def utc_now() -> datetime:
    return datetime.now(UTC)


class BaseEntity(Base):
    __abstract__ = True

    created_at = Column(
        DateTime(timezone=True), nullable=False, default=utc_now, server_default=func.now()
    )

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id}, created_at={self.created_at})>"
