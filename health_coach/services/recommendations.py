"""Персональные рекомендации по тренировкам, питанию и образу жизни.

Правила детерминированные: каждое срабатывает по явному порогу,
порядок рекомендаций в списке совпадает с порядком проверки правил.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from health_coach.models import FitnessGoal
from health_coach.services.meal_plan import VEGETARIAN
from health_coach.services.nutrition_calc import NutritionTargets, calculate_nutrition_needs

logger = logging.getLogger(__name__)

# Перебор калорий больше чем на 20% от цели
CALORIE_OVERSHOOT_RATIO = 1.2


class RecommendationError(RuntimeError):
    """Не удалось сгенерировать рекомендации."""


@dataclass(frozen=True)
class Recommendation:
    """Одна рекомендация."""

    type: str
    message: str
    action: str

    def to_dict(self) -> dict:
        return {"type": self.type, "message": self.message, "action": self.action}


MOTIVATION = Recommendation(
    type="motivation",
    message="You missed yesterday's workout. Let's get back on track with a lighter session today!",
    action="Start with a 20-minute beginner workout",
)
CARDIO = Recommendation(
    type="cardio",
    message="Add 15 minutes of HIIT training to boost fat burning",
    action="Try interval running or cycling",
)
STRENGTH = Recommendation(
    type="strength",
    message="Focus on progressive overload this week",
    action="Increase weights by 5% or add 2 more reps",
)
CALORIE_CONTROL = Recommendation(
    type="calorie_control",
    message="You exceeded your calorie target yesterday. Let's focus on portion control today.",
    action="Try using smaller plates and eating slowly",
)
PLANT_PROTEIN = Recommendation(
    type="protein",
    message="Ensure adequate protein intake with plant-based sources",
    action="Include lentils, quinoa, or Greek yogurt in your meals",
)
SLEEP = Recommendation(
    type="sleep",
    message="Quality sleep is crucial for recovery and weight management",
    action="Aim for 7-9 hours of sleep tonight",
)
HYDRATION = Recommendation(
    type="hydration",
    message="Stay hydrated to support your metabolism and workout performance",
    action="Drink at least 8 glasses of water today",
)


def _latest(recent_progress: Optional[Sequence]):
    """Самая свежая запись (список отсортирован от новых к старым)."""
    if not recent_progress:
        return None
    return recent_progress[0]


def generate_workout_recommendations(profile, recent_progress: Optional[Sequence]) -> list[Recommendation]:
    """Рекомендации по тренировкам."""
    recommendations = []

    latest = _latest(recent_progress)
    if latest is not None and latest.workout_completed is False:
        recommendations.append(MOTIVATION)

    goals = getattr(profile, "fitness_goals", None) or []
    if FitnessGoal.WEIGHT_LOSS in goals:
        recommendations.append(CARDIO)
    if FitnessGoal.MUSCLE_GAIN in goals:
        recommendations.append(STRENGTH)

    return recommendations


def generate_nutrition_recommendations(
    profile,
    recent_progress: Optional[Sequence],
    targets: Optional[NutritionTargets] = None,
) -> list[Recommendation]:
    """Рекомендации по питанию.

    Перебор считается от цели, записанной вместе с прогрессом. Если цели
    в записи нет, сравниваем с рассчитанной дневной нормой.
    """
    recommendations = []

    latest = _latest(recent_progress)
    if latest is not None and latest.calories_consumed is not None:
        target = latest.target_calories
        if target is None:
            target = (targets or calculate_nutrition_needs(profile)).daily_calories
        if latest.calories_consumed > target * CALORIE_OVERSHOOT_RATIO:
            recommendations.append(CALORIE_CONTROL)

    restrictions = getattr(profile, "dietary_restrictions", None) or []
    if VEGETARIAN in restrictions:
        recommendations.append(PLANT_PROTEIN)

    return recommendations


def generate_lifestyle_recommendations(profile=None, recent_progress=None) -> list[Recommendation]:
    """Общие рекомендации: сон и вода, не зависят от профиля."""
    return [SLEEP, HYDRATION]


def generate_recommendations(
    profile,
    recent_progress: Optional[Sequence] = None,
    targets: Optional[NutritionTargets] = None,
) -> dict[str, list[Recommendation]]:
    """Все три группы рекомендаций."""
    return {
        "workout": generate_workout_recommendations(profile, recent_progress),
        "nutrition": generate_nutrition_recommendations(profile, recent_progress, targets),
        "lifestyle": generate_lifestyle_recommendations(profile, recent_progress),
    }


def get_personalized_recommendations(
    profile,
    recent_progress: Optional[Sequence] = None,
    targets: Optional[NutritionTargets] = None,
) -> dict[str, list[Recommendation]]:
    """Рекомендации для пользователя.

    Любая внутренняя ошибка (например, нечисловой вес в профиле)
    превращается в RecommendationError, частичных результатов нет.
    """
    try:
        return generate_recommendations(profile, recent_progress, targets)
    except (TypeError, ValueError, ArithmeticError, AttributeError, KeyError) as e:
        logger.error(f"Recommendation generation failed: {e}", exc_info=True)
        raise RecommendationError("Failed to generate recommendations") from e


def recommendations_to_dict(recommendations: dict[str, list[Recommendation]]) -> dict:
    """Преобразовать в словарь для JSON-ответа."""
    return {group: [item.to_dict() for item in items] for group, items in recommendations.items()}
