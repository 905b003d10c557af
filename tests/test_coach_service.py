"""Тесты сборки полного отчета."""
import pytest

from health_coach.services.coach_service import build_coaching_report, report_to_dict
from health_coach.services.meal_catalog import MEAL_CATALOG
from health_coach.services.meal_plan import MealPreferences
from health_coach.services.recommendations import RecommendationError


def test_report_for_empty_profile(make_profile):
    report = build_coaching_report(make_profile(), [])

    assert report["recommendations"]["workout"] == []
    assert report["recommendations"]["nutrition"] == []
    assert len(report["recommendations"]["lifestyle"]) == 2
    assert report["meal_plan"] == {slot: list(meals) for slot, meals in MEAL_CATALOG.items()}
    assert report["nutrition"].daily_calories == 2750


def test_report_uses_profile_restrictions_by_default(make_profile):
    report = build_coaching_report(make_profile(dietary_restrictions=["vegan"]))

    assert all(meal.vegan for meals in report["meal_plan"].values() for meal in meals)


def test_explicit_preferences_override_profile(make_profile):
    profile = make_profile(dietary_restrictions=["vegan"])

    report = build_coaching_report(profile, [], MealPreferences())

    assert len(report["meal_plan"]["breakfast"]) == 2


def test_report_targets_feed_nutrition_rules(make_profile, make_progress):
    """Цель из записи отсутствует, сравниваем с рассчитанной нормой (2750)."""
    progress = [make_progress(calories_consumed=3400, target_calories=None)]

    report = build_coaching_report(make_profile(), progress)

    assert [item.type for item in report["recommendations"]["nutrition"]] == ["calorie_control"]


def test_report_wraps_computation_fault(make_profile):
    with pytest.raises(RecommendationError):
        build_coaching_report(make_profile(weight_kg=None))


def test_report_to_dict(make_profile):
    data = report_to_dict(build_coaching_report(make_profile(fitness_goals=["weight_loss"])))

    assert data["nutrition"] == {
        "dailyCalories": 2250,
        "macros": {"protein": 141, "carbs": 253, "fats": 75},
    }
    assert [item["type"] for item in data["recommendations"]["workout"]] == ["cardio"]
    assert set(data["mealPlan"]) == {"breakfast", "lunch", "dinner"}
