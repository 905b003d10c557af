"""Расчет дневной нормы калорий и БЖУ по профилю."""
import logging
import math
from dataclasses import dataclass

from health_coach.models import ActivityLevel, FitnessGoal, Gender

logger = logging.getLogger(__name__)

# Коэффициенты активности для TDEE
ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}
DEFAULT_ACTIVITY_FACTOR = ACTIVITY_FACTORS[ActivityLevel.SEDENTARY]

WEIGHT_LOSS_DEFICIT = 500  # ккал
MUSCLE_GAIN_SURPLUS = 300  # ккал

# Доли калорий и ккал на грамм
PROTEIN_SHARE, PROTEIN_KCAL = 0.25, 4
CARBS_SHARE, CARBS_KCAL = 0.45, 4
FATS_SHARE, FATS_KCAL = 0.30, 9


@dataclass(frozen=True)
class Macros:
    """Целевые макронутриенты в граммах."""

    protein: int
    carbs: int
    fats: int

    def to_dict(self) -> dict:
        return {"protein": self.protein, "carbs": self.carbs, "fats": self.fats}


@dataclass(frozen=True)
class NutritionTargets:
    """Дневная норма калорий и БЖУ."""

    daily_calories: int
    macros: Macros

    def to_dict(self) -> dict:
        """Преобразовать в словарь для JSON-ответа."""
        return {"dailyCalories": self.daily_calories, "macros": self.macros.to_dict()}


def round_half_up(value: float) -> int:
    """Округление .5 вверх (round() в Python округляет к четному)."""
    return int(math.floor(value + 0.5))


def calculate_bmr(profile) -> float:
    """Базовый метаболизм по формуле Харриса-Бенедикта (ревизия Розы-Шизгала)."""
    if profile.gender == Gender.MALE:
        return 88.362 + 13.397 * profile.weight_kg + 4.799 * profile.height_cm - 5.677 * profile.age
    # Для female и other используем женский вариант
    return 447.593 + 9.247 * profile.weight_kg + 3.098 * profile.height_cm - 4.330 * profile.age


def activity_factor(activity_level) -> float:
    """Коэффициент активности; неизвестный уровень считается сидячим."""
    try:
        return ACTIVITY_FACTORS[ActivityLevel(activity_level)]
    except ValueError:
        return DEFAULT_ACTIVITY_FACTOR


def adjust_for_goals(tdee: float, fitness_goals) -> float:
    """Корректировка под цель.

    Цели проверяются по приоритету: weight_loss важнее muscle_gain,
    одновременно обе поправки не применяются.
    """
    goals = fitness_goals or []
    if FitnessGoal.WEIGHT_LOSS in goals:
        return tdee - WEIGHT_LOSS_DEFICIT
    if FitnessGoal.MUSCLE_GAIN in goals:
        return tdee + MUSCLE_GAIN_SURPLUS
    return tdee


def calculate_nutrition_needs(profile) -> NutritionTargets:
    """Рассчитать дневную норму калорий и БЖУ.

    BMR * коэффициент активности, затем поправка под цель.
    БЖУ 25/45/30% считаются от неокругленной нормы, каждое округляется
    отдельно, поэтому сумма ккал может отличаться от dailyCalories на пару единиц.
    """
    bmr = calculate_bmr(profile)
    tdee = bmr * activity_factor(profile.activity_level)
    target = adjust_for_goals(tdee, getattr(profile, "fitness_goals", None))

    targets = NutritionTargets(
        daily_calories=round_half_up(target),
        macros=Macros(
            protein=round_half_up(target * PROTEIN_SHARE / PROTEIN_KCAL),
            carbs=round_half_up(target * CARBS_SHARE / CARBS_KCAL),
            fats=round_half_up(target * FATS_SHARE / FATS_KCAL),
        ),
    )
    logger.debug(f"BMR={bmr:.2f} TDEE={tdee:.2f} -> {targets}")
    return targets


def apply_targets(profile, targets: NutritionTargets) -> None:
    """Сохранить рассчитанные нормы в профиль."""
    profile.daily_calories = targets.daily_calories
    profile.daily_protein = targets.macros.protein
    profile.daily_carbs = targets.macros.carbs
    profile.daily_fats = targets.macros.fats
