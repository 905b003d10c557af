"""Модель профиля пользователя (параметры, цели и предпочтения)."""
from sqlalchemy import Column, Integer, Float, ForeignKey, Enum, JSON
from sqlalchemy.orm import relationship
import enum
from health_coach.models.base import BaseModel


class Gender(str, enum.Enum):
    """Пол пользователя."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, enum.Enum):
    """Уровень активности."""
    SEDENTARY = "sedentary"                  # Сидячий образ жизни
    LIGHTLY_ACTIVE = "lightly_active"        # Спорт 1-3 раза в неделю
    MODERATELY_ACTIVE = "moderately_active"  # Спорт 3-5 раз в неделю
    VERY_ACTIVE = "very_active"              # Спорт 6-7 раз в неделю


class FitnessGoal(str, enum.Enum):
    """Фитнес-цели пользователя."""
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"
    STRENGTH = "strength"


class Profile(BaseModel):
    """Профиль пользователя с параметрами, целями и предпочтениями."""

    __tablename__ = "profiles"

    user_id = Column(Integer, ForeignKey("users.id"), unique=True)

    # Личные данные
    gender = Column(Enum(Gender))
    age = Column(Integer)
    height_cm = Column(Float)
    weight_kg = Column(Float)

    # Активность и цели
    activity_level = Column(Enum(ActivityLevel), default=ActivityLevel.SEDENTARY)
    fitness_goals = Column(JSON, default=list)

    # Предпочтения
    workout_types = Column(JSON, default=list)
    workout_duration = Column(Integer, default=30)  # минут
    days_per_week = Column(Integer, default=3)
    dietary_restrictions = Column(JSON, default=list)

    # Рассчитанные дневные нормы
    daily_calories = Column(Integer, default=2000)
    daily_protein = Column(Integer, default=125)
    daily_carbs = Column(Integer, default=225)
    daily_fats = Column(Integer, default=67)

    # Relationship
    user = relationship("User", back_populates="profile")
