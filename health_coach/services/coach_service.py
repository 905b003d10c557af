"""Сборка полного ответа: нормы, рекомендации и план питания."""
import logging
from typing import Optional, Sequence

from health_coach.services.meal_plan import MealPreferences, build_meal_plan, meal_plan_to_dict
from health_coach.services.nutrition_calc import calculate_nutrition_needs
from health_coach.services.recommendations import (
    RecommendationError,
    generate_recommendations,
    recommendations_to_dict,
)

logger = logging.getLogger(__name__)


def build_coaching_report(
    profile,
    recent_progress: Optional[Sequence] = None,
    meal_preferences: Optional[MealPreferences] = None,
) -> dict:
    """Рассчитать нормы один раз и собрать рекомендации и план питания.

    Args:
        profile: профиль пользователя
        recent_progress: записи прогресса, от новых к старым
        meal_preferences: пожелания к питанию; по умолчанию ограничения из профиля

    Raises:
        RecommendationError: если расчет упал на некорректных данных профиля
    """
    try:
        targets = calculate_nutrition_needs(profile)
        if meal_preferences is None:
            meal_preferences = MealPreferences.from_profile(profile)
        report = {
            "nutrition": targets,
            "recommendations": generate_recommendations(profile, recent_progress, targets),
            "meal_plan": build_meal_plan(profile, meal_preferences),
        }
    except (TypeError, ValueError, ArithmeticError, AttributeError, KeyError) as e:
        logger.error(f"Coaching report failed: {e}", exc_info=True)
        raise RecommendationError("Failed to generate recommendations") from e

    logger.info(f"Coaching report ready: {targets.daily_calories} kcal")
    return report


def report_to_dict(report: dict) -> dict:
    """Преобразовать отчет в словарь для JSON-ответа."""
    return {
        "nutrition": report["nutrition"].to_dict(),
        "recommendations": recommendations_to_dict(report["recommendations"]),
        "mealPlan": meal_plan_to_dict(report["meal_plan"]),
    }
