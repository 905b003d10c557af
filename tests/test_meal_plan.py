"""Тесты подбора блюд."""
from dataclasses import FrozenInstanceError, replace

import pytest

from health_coach.services.meal_catalog import MEAL_CATALOG, MEAL_SLOTS
from health_coach.services.meal_plan import (
    MealPreferences,
    build_meal_plan,
    meal_plan_to_dict,
    total_calories,
)


def _names(meals) -> list[str]:
    return [meal.name for meal in meals]


def test_no_restrictions_returns_full_catalog(make_profile):
    plan = build_meal_plan(make_profile())

    assert list(plan) == list(MEAL_SLOTS)
    for slot in MEAL_SLOTS:
        assert plan[slot] == list(MEAL_CATALOG[slot])


def test_vegan_never_returns_non_vegan(make_profile):
    plan = build_meal_plan(make_profile(), MealPreferences(dietary_restrictions=("vegan",)))

    assert all(meal.vegan for meals in plan.values() for meal in meals)
    assert _names(plan["lunch"]) == ["Quinoa Buddha Bowl"]
    # Пустой прием пищи — нормальный результат
    assert plan["breakfast"] == []
    assert plan["dinner"] == []


def test_gluten_free_excludes_only_gluten_meals(make_profile):
    plan = build_meal_plan(make_profile(), MealPreferences(dietary_restrictions=("gluten_free",)))

    assert _names(plan["breakfast"]) == ["Overnight Oats with Berries"]
    assert _names(plan["lunch"]) == ["Grilled Chicken Salad", "Quinoa Buddha Bowl"]
    assert _names(plan["dinner"]) == ["Baked Salmon with Vegetables"]


def test_custom_catalog_keeps_order(make_profile):
    oats, toast = MEAL_CATALOG["breakfast"]
    salmon = MEAL_CATALOG["dinner"][0]
    catalog = {
        "breakfast": (toast, oats, replace(oats, name="Rice Porridge")),
        "dinner": (salmon,),
    }

    plan = build_meal_plan(
        make_profile(), MealPreferences(dietary_restrictions=("gluten_free",)), catalog=catalog
    )

    assert _names(plan["breakfast"]) == ["Overnight Oats with Berries", "Rice Porridge"]
    assert _names(plan["dinner"]) == ["Baked Salmon with Vegetables"]


def test_cuisine_preferences_do_not_filter(make_profile):
    plain = build_meal_plan(make_profile(), MealPreferences())
    with_cuisine = build_meal_plan(
        make_profile(), MealPreferences(cuisine_preferences=("italian", "japanese"))
    )

    assert with_cuisine == plain


def test_vegetarian_does_not_filter_catalog(make_profile):
    plan = build_meal_plan(make_profile(), MealPreferences(dietary_restrictions=("vegetarian",)))

    assert plan == build_meal_plan(make_profile())


def test_preferences_from_profile(make_profile):
    profile = make_profile(dietary_restrictions=["vegan", "gluten_free"])

    assert MealPreferences.from_profile(profile).dietary_restrictions == ("vegan", "gluten_free")
    assert MealPreferences.from_profile(make_profile(dietary_restrictions=None)) == MealPreferences()


def test_preferences_from_dict():
    preferences = MealPreferences.from_dict(
        {"dietaryRestrictions": ["vegan"], "cuisinePreferences": ["thai"]}
    )

    assert preferences.dietary_restrictions == ("vegan",)
    assert preferences.cuisine_preferences == ("thai",)
    assert MealPreferences.from_dict(None) == MealPreferences()


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        MEAL_CATALOG["snack"] = ()
    with pytest.raises(FrozenInstanceError):
        MEAL_CATALOG["dinner"][0].calories = 1


def test_meal_plan_to_dict(make_profile):
    plan = build_meal_plan(make_profile(), MealPreferences(dietary_restrictions=("vegan",)))

    data = meal_plan_to_dict(plan)

    assert data["lunch"] == [
        {
            "name": "Quinoa Buddha Bowl",
            "calories": 420,
            "protein": 18,
            "carbs": 52,
            "fats": 16,
            "ingredients": ["quinoa", "chickpeas", "vegetables", "tahini"],
            "prepTime": 20,
            "vegan": True,
            "glutenFree": True,
        }
    ]
    assert data["breakfast"] == []


def test_total_calories():
    assert total_calories(MEAL_CATALOG["lunch"]) == 870
    assert total_calories([]) == 0
