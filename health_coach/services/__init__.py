"""Сервисы бизнес-логики."""
from health_coach.services.nutrition_calc import NutritionTargets, calculate_nutrition_needs
from health_coach.services.meal_catalog import MEAL_CATALOG, MealDefinition
from health_coach.services.meal_plan import MealPreferences, build_meal_plan
from health_coach.services.recommendations import (
    Recommendation,
    RecommendationError,
    get_personalized_recommendations,
)
from health_coach.services.workout_plan import WorkoutPlan, generate_workout_plan
from health_coach.services.coach_service import build_coaching_report, report_to_dict

__all__ = [
    "NutritionTargets",
    "calculate_nutrition_needs",
    "MEAL_CATALOG",
    "MealDefinition",
    "MealPreferences",
    "build_meal_plan",
    "Recommendation",
    "RecommendationError",
    "get_personalized_recommendations",
    "WorkoutPlan",
    "generate_workout_plan",
    "build_coaching_report",
    "report_to_dict",
]
