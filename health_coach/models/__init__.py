"""Модели базы данных."""
from health_coach.models.base import BaseModel, TimestampMixin
from health_coach.models.user import User
from health_coach.models.profile import Profile, Gender, ActivityLevel, FitnessGoal
from health_coach.models.progress import ProgressEntry

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "User",
    "Profile",
    "Gender",
    "ActivityLevel",
    "FitnessGoal",
    "ProgressEntry",
]
