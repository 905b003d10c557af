"""Справочник блюд по приемам пищи.

Каталог неизменяемый: кортежи frozen-датаклассов внутри MappingProxyType,
создается один раз при импорте модуля.
"""
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class MealDefinition:
    """Блюдо из каталога (нутриенты на порцию)."""

    name: str
    calories: int
    protein: int
    carbs: int
    fats: int
    ingredients: tuple[str, ...]
    prep_time: int  # минут
    vegan: bool
    gluten_free: bool

    def to_dict(self) -> dict:
        """Преобразовать в словарь для JSON-ответа."""
        return {
            "name": self.name,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "ingredients": list(self.ingredients),
            "prepTime": self.prep_time,
            "vegan": self.vegan,
            "glutenFree": self.gluten_free,
        }


BREAKFAST = "breakfast"
LUNCH = "lunch"
DINNER = "dinner"

MEAL_SLOTS = (BREAKFAST, LUNCH, DINNER)

MEAL_CATALOG = MappingProxyType(
    {
        BREAKFAST: (
            MealDefinition(
                name="Overnight Oats with Berries",
                calories=350,
                protein=15,
                carbs=55,
                fats=8,
                ingredients=("oats", "milk", "berries", "honey"),
                prep_time=5,
                vegan=False,
                gluten_free=True,
            ),
            MealDefinition(
                name="Avocado Toast",
                calories=320,
                protein=12,
                carbs=35,
                fats=18,
                ingredients=("whole grain bread", "avocado", "eggs", "tomato"),
                prep_time=10,
                vegan=False,
                gluten_free=False,
            ),
        ),
        LUNCH: (
            MealDefinition(
                name="Grilled Chicken Salad",
                calories=450,
                protein=35,
                carbs=25,
                fats=22,
                ingredients=("chicken breast", "mixed greens", "olive oil", "vegetables"),
                prep_time=15,
                vegan=False,
                gluten_free=True,
            ),
            MealDefinition(
                name="Quinoa Buddha Bowl",
                calories=420,
                protein=18,
                carbs=52,
                fats=16,
                ingredients=("quinoa", "chickpeas", "vegetables", "tahini"),
                prep_time=20,
                vegan=True,
                gluten_free=True,
            ),
        ),
        DINNER: (
            MealDefinition(
                name="Baked Salmon with Vegetables",
                calories=480,
                protein=40,
                carbs=20,
                fats=25,
                ingredients=("salmon", "broccoli", "sweet potato", "olive oil"),
                prep_time=25,
                vegan=False,
                gluten_free=True,
            ),
        ),
    }
)
