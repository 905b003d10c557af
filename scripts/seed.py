"""Заполнение БД тестовыми пользователями.

Запуск: python scripts/seed.py (удаляет всех существующих пользователей).
"""
import logging
from health_coach.database import get_db, init_db
from health_coach.models import ActivityLevel, Gender, Profile, User
from health_coach.services.nutrition_calc import apply_targets, calculate_nutrition_needs

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {
        "user": {"telegram_id": 1000001, "username": "john_doe", "first_name": "John", "last_name": "Doe"},
        "profile": {
            "age": 28,
            "gender": Gender.MALE,
            "height_cm": 175,
            "weight_kg": 75,
            "activity_level": ActivityLevel.MODERATELY_ACTIVE,
            "fitness_goals": ["weight_loss", "muscle_gain"],
            "workout_types": ["strength", "cardio"],
            "workout_duration": 45,
            "days_per_week": 4,
            "dietary_restrictions": [],
        },
    },
    {
        "user": {"telegram_id": 1000002, "username": "jane_smith", "first_name": "Jane", "last_name": "Smith"},
        "profile": {
            "age": 32,
            "gender": Gender.FEMALE,
            "height_cm": 165,
            "weight_kg": 60,
            "activity_level": ActivityLevel.LIGHTLY_ACTIVE,
            "fitness_goals": ["endurance", "strength"],
            "workout_types": ["cardio", "flexibility"],
            "workout_duration": 30,
            "days_per_week": 3,
            "dietary_restrictions": ["vegetarian"],
        },
    },
]


def seed() -> int:
    """Очистить пользователей и создать тестовых. Возвращает число созданных."""
    init_db()

    with get_db() as db:
        # Профили и прогресс удаляются каскадом
        for user in db.query(User).all():
            db.delete(user)
        db.commit()
        logger.info("Cleared existing users")

        for sample in SAMPLE_USERS:
            profile = Profile(**sample["profile"])
            apply_targets(profile, calculate_nutrition_needs(profile))
            db.add(User(**sample["user"], profile=profile))
        db.commit()

    logger.info(f"Seeding completed: {len(SAMPLE_USERS)} users created")
    return len(SAMPLE_USERS)


if __name__ == "__main__":
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO
    )
    seed()
