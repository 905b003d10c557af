"""Подбор блюд из каталога под диетические ограничения.

`MealPreferences.from_dict` принимает тело запроса HTTP-слоя
({"dietaryRestrictions": [...], "cuisinePreferences": [...]}).
"""
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from health_coach.services.meal_catalog import MEAL_CATALOG, MealDefinition

logger = logging.getLogger(__name__)

VEGAN = "vegan"
VEGETARIAN = "vegetarian"
GLUTEN_FREE = "gluten_free"


@dataclass(frozen=True)
class MealPreferences:
    """Пожелания к плану питания."""

    dietary_restrictions: tuple[str, ...] = ()
    # Принимается, но пока не влияет на подбор
    cuisine_preferences: tuple[str, ...] = ()

    @classmethod
    def from_profile(cls, profile, cuisine_preferences: Sequence[str] = ()) -> "MealPreferences":
        """Ограничения берутся из профиля пользователя."""
        return cls(
            dietary_restrictions=tuple(getattr(profile, "dietary_restrictions", None) or ()),
            cuisine_preferences=tuple(cuisine_preferences),
        )

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> "MealPreferences":
        """Из словаря вида {"dietaryRestrictions": [...], "cuisinePreferences": [...]}."""
        data = data or {}
        return cls(
            dietary_restrictions=tuple(data.get("dietaryRestrictions") or ()),
            cuisine_preferences=tuple(data.get("cuisinePreferences") or ()),
        )


def is_meal_allowed(meal: MealDefinition, dietary_restrictions: Sequence[str]) -> bool:
    """Проверить блюдо на соответствие ограничениям."""
    if VEGAN in dietary_restrictions and not meal.vegan:
        return False
    if GLUTEN_FREE in dietary_restrictions and not meal.gluten_free:
        return False
    return True


def build_meal_plan(
    profile,
    preferences: Optional[MealPreferences] = None,
    catalog: Mapping[str, Sequence[MealDefinition]] = MEAL_CATALOG,
) -> dict[str, list[MealDefinition]]:
    """Отфильтровать каталог по диетическим ограничениям.

    Args:
        profile: профиль пользователя (сейчас на подбор не влияет)
        preferences: ограничения и кухни; None означает "без ограничений"
        catalog: каталог блюд по приемам пищи

    Returns:
        dict {прием пищи: список блюд} в порядке каталога. Пустой список
        для приема пищи — нормальный результат.
    """
    preferences = preferences or MealPreferences()
    restrictions = preferences.dietary_restrictions

    plan = {
        slot: [meal for meal in meals if is_meal_allowed(meal, restrictions)]
        for slot, meals in catalog.items()
    }
    counts = {slot: len(meals) for slot, meals in plan.items()}
    logger.debug(f"Meal plan for restrictions={list(restrictions)}: {counts}")
    return plan


def meal_plan_to_dict(plan: Mapping[str, Sequence[MealDefinition]]) -> dict:
    """Преобразовать план в словарь для JSON-ответа."""
    return {slot: [meal.to_dict() for meal in meals] for slot, meals in plan.items()}


def total_calories(meals: Sequence[MealDefinition]) -> int:
    """Сумма калорий списка блюд."""
    return sum(meal.calories for meal in meals)
