"""Общие фикстуры тестов."""
import os

# БД в памяти, до импорта пакета (engine создается при импорте)
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest

from health_coach.database import Base, engine, init_db
from health_coach.models import ActivityLevel, Gender, Profile, ProgressEntry


@pytest.fixture()
def make_profile():
    """Фабрика профилей (объекты не сохраняются в БД)."""

    def _make(**overrides) -> Profile:
        fields = {
            "gender": Gender.MALE,
            "age": 28,
            "height_cm": 175,
            "weight_kg": 75,
            "activity_level": ActivityLevel.MODERATELY_ACTIVE,
            "fitness_goals": [],
            "workout_types": [],
            "days_per_week": 3,
            "dietary_restrictions": [],
        }
        fields.update(overrides)
        return Profile(**fields)

    return _make


@pytest.fixture()
def make_progress():
    """Фабрика записей прогресса."""

    def _make(**overrides) -> ProgressEntry:
        fields = {
            "workout_completed": True,
            "calories_consumed": 2000.0,
            "target_calories": 2000.0,
        }
        fields.update(overrides)
        return ProgressEntry(**fields)

    return _make


@pytest.fixture()
def db():
    """Чистая схема БД для теста."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)
