"""Базовые классы для моделей SQLAlchemy."""
from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func
from health_coach.database import Base


class TimestampMixin:
    """Миксин для автоматического создания временных меток."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class BaseModel(Base, TimestampMixin):
    """Базовая модель для всех таблиц: id и временные метки."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"
