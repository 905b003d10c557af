"""Сервис для записи и выборки прогресса."""
import logging
from datetime import datetime, timedelta
from typing import Optional
from health_coach.database import get_db
from health_coach.models import ProgressEntry

logger = logging.getLogger(__name__)


def log_progress(
    user_id: int,
    workout_completed: bool,
    calories_consumed: float,
    target_calories: float,
    weight_kg: Optional[float] = None,
    note: Optional[str] = None,
) -> ProgressEntry:
    """Сохранить итог дня."""
    with get_db() as db:
        entry = ProgressEntry(
            user_id=user_id,
            workout_completed=workout_completed,
            calories_consumed=calories_consumed,
            target_calories=target_calories,
            weight_kg=weight_kg,
            note=note,
        )
        db.add(entry)
        db.commit()
        db.refresh(entry)
        logger.info(f"Logged {entry!r} for user {user_id}: workout={workout_completed}, {calories_consumed} kcal")
        return entry


def get_recent_progress(user_id: int, limit: int = 7) -> list[ProgressEntry]:
    """Последние записи, от новых к старым."""
    with get_db() as db:
        return (
            db.query(ProgressEntry)
            .filter(ProgressEntry.user_id == user_id)
            .order_by(ProgressEntry.created_at.desc(), ProgressEntry.id.desc())
            .limit(limit)
            .all()
        )


def get_progress_summary(user_id: int, days: int = 7) -> dict:
    """Статистика прогресса за период.

    Args:
        user_id: ID пользователя
        days: Количество дней (7, 30)
    """
    with get_db() as db:
        start_date = datetime.now() - timedelta(days=days)

        entries = db.query(ProgressEntry).filter(
            ProgressEntry.user_id == user_id,
            ProgressEntry.created_at >= start_date
        ).all()

        if not entries:
            return {
                "entries": 0,
                "workouts_completed": 0,
                "completion_rate": 0,
                "avg_calories": 0,
            }

        completed = sum(1 for entry in entries if entry.workout_completed)

        return {
            "entries": len(entries),
            "workouts_completed": completed,
            "completion_rate": int(completed / len(entries) * 100),
            "avg_calories": int(sum(entry.calories_consumed for entry in entries) / len(entries)),
        }
