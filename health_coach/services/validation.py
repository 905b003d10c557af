"""Проверка введенных данных профиля."""
import math

from health_coach.models import ActivityLevel, Gender

AGE_RANGE = (13, 120)
WEIGHT_RANGE = (30, 300)  # кг
HEIGHT_RANGE = (100, 250)  # см


class ProfileValidationError(ValueError):
    """Некорректное значение поля профиля."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def _parse_float(text: str, field: str, message: str) -> float:
    try:
        value = float(str(text).strip().replace(",", "."))
    except ValueError:
        raise ProfileValidationError(field, message) from None
    # float() принимает "nan" и "inf"
    if not math.isfinite(value):
        raise ProfileValidationError(field, message)
    return value


def parse_age(text: str) -> int:
    """Возраст: целое число 13-120."""
    message = f"Age must be between {AGE_RANGE[0]} and {AGE_RANGE[1]}"
    try:
        age = int(str(text).strip())
    except ValueError:
        raise ProfileValidationError("age", message) from None
    if not (AGE_RANGE[0] <= age <= AGE_RANGE[1]):
        raise ProfileValidationError("age", message)
    return age


def parse_weight(text: str) -> float:
    """Вес в кг: 30-300, допускается десятичная запятая."""
    message = f"Weight must be between {WEIGHT_RANGE[0]} and {WEIGHT_RANGE[1]} kg"
    weight = _parse_float(text, "weight", message)
    if not (WEIGHT_RANGE[0] <= weight <= WEIGHT_RANGE[1]):
        raise ProfileValidationError("weight", message)
    return weight


def parse_height(text: str) -> float:
    """Рост в см: 100-250."""
    message = f"Height must be between {HEIGHT_RANGE[0]} and {HEIGHT_RANGE[1]} cm"
    height = _parse_float(text, "height", message)
    if not (HEIGHT_RANGE[0] <= height <= HEIGHT_RANGE[1]):
        raise ProfileValidationError("height", message)
    return height


def parse_gender(value: str) -> Gender:
    try:
        return Gender(value)
    except ValueError:
        raise ProfileValidationError("gender", "Gender must be male, female, or other") from None


def parse_activity_level(value: str) -> ActivityLevel:
    try:
        return ActivityLevel(value)
    except ValueError:
        raise ProfileValidationError("activityLevel", "Invalid activity level") from None


def parse_calories(text: str) -> float:
    """Калории за день: неотрицательное число."""
    message = "Calories must be a non-negative number"
    calories = _parse_float(text, "caloriesConsumed", message)
    if calories < 0:
        raise ProfileValidationError("caloriesConsumed", message)
    return calories
