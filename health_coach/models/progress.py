"""Модель дневной записи прогресса."""
from sqlalchemy import Boolean, Column, Integer, Float, ForeignKey, Text
from sqlalchemy.orm import relationship
from health_coach.models.base import BaseModel


class ProgressEntry(BaseModel):
    """Итог дня: тренировка и потребленные калории."""

    __tablename__ = "progress_entries"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    workout_completed = Column(Boolean, nullable=False, default=False)
    calories_consumed = Column(Float, nullable=False, default=0.0)
    target_calories = Column(Float, nullable=False)

    # Опционально
    weight_kg = Column(Float)
    note = Column(Text)

    # Relationship
    user = relationship("User", back_populates="progress_entries")
