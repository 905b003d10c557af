"""Сервис для работы с пользователями и профилями."""
import logging
from typing import Optional
from telegram import User as TelegramUser
from sqlalchemy.orm import joinedload
from health_coach.database import get_db
from health_coach.models import User, Profile
from health_coach.services.nutrition_calc import apply_targets, calculate_nutrition_needs

logger = logging.getLogger(__name__)


def get_or_create_user(telegram_user: TelegramUser) -> User:
    """Получить или создать пользователя.

    Args:
        telegram_user: Объект пользователя из Telegram

    Returns:
        Объект User из БД
    """
    with get_db() as db:
        # Ищем пользователя с загрузкой профиля
        user = (
            db.query(User)
            .options(joinedload(User.profile))
            .filter(User.telegram_id == telegram_user.id)
            .first()
        )

        if not user:
            # Создаем нового
            user = User(
                telegram_id=telegram_user.id,
                username=telegram_user.username,
                first_name=telegram_user.first_name,
                last_name=telegram_user.last_name,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            user.profile = None
            logger.info(f"New user {telegram_user.id} created")

        return user


def get_user_by_telegram_id(telegram_id: int) -> Optional[User]:
    """Получить пользователя по Telegram ID.

    Args:
        telegram_id: ID пользователя в Telegram

    Returns:
        Объект User или None
    """
    with get_db() as db:
        return (
            db.query(User)
            .options(joinedload(User.profile))
            .filter(User.telegram_id == telegram_id)
            .first()
        )


def has_profile(user: User) -> bool:
    """Проверить, заполнен ли профиль пользователя."""
    return user.profile is not None


def save_profile(user_id: int, **fields) -> Profile:
    """Создать или обновить профиль и пересчитать дневные нормы.

    Args:
        user_id: ID пользователя в БД
        **fields: поля профиля (age, weight_kg, fitness_goals, ...)
    """
    with get_db() as db:
        profile = db.query(Profile).filter_by(user_id=user_id).first()
        if profile is None:
            profile = Profile(user_id=user_id)
            db.add(profile)

        for name, value in fields.items():
            setattr(profile, name, value)

        apply_targets(profile, calculate_nutrition_needs(profile))
        db.commit()
        db.refresh(profile)
        logger.info(f"Saved {profile!r} for user {user_id}: {profile.daily_calories} kcal")
        return profile


def delete_profile(user_id: int) -> bool:
    """Удалить профиль. Возвращает False, если профиля не было."""
    with get_db() as db:
        profile = db.query(Profile).filter_by(user_id=user_id).first()
        if profile is None:
            return False
        db.delete(profile)
        db.commit()
        return True
