"""Модель пользователя Telegram."""
from sqlalchemy import Column, BigInteger, String
from sqlalchemy.orm import relationship
from health_coach.models.base import BaseModel


class User(BaseModel):
    """Пользователь бота."""

    __tablename__ = "users"

    telegram_id = Column(BigInteger, unique=True, nullable=False, index=True)
    username = Column(String(50))
    first_name = Column(String(100))
    last_name = Column(String(100))

    # Relationships
    profile = relationship(
        "Profile", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    progress_entries = relationship(
        "ProgressEntry", back_populates="user", cascade="all, delete-orphan"
    )
