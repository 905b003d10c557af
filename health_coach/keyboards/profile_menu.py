"""Клавиатуры для заполнения профиля и дневника."""
from telegram import InlineKeyboardButton, InlineKeyboardMarkup

GENDER_OPTIONS = [("Мужской", "male"), ("Женский", "female"), ("Другой", "other")]

ACTIVITY_OPTIONS = [
    ("Сидячий образ жизни", "sedentary"),
    ("Легкая (спорт 1-3 раза)", "lightly_active"),
    ("Средняя (спорт 3-5 раз)", "moderately_active"),
    ("Высокая (спорт 6-7 раз)", "very_active"),
]

GOAL_OPTIONS = [
    ("Похудеть", "weight_loss"),
    ("Набрать мышцы", "muscle_gain"),
    ("Выносливость", "endurance"),
    ("Сила", "strength"),
]

DIET_OPTIONS = [
    ("Вегетарианство", "vegetarian"),
    ("Веганство", "vegan"),
    ("Без глютена", "gluten_free"),
]


def get_choice_keyboard(options: list[tuple[str, str]], prefix: str) -> InlineKeyboardMarkup:
    """Кнопки одиночного выбора: callback_data = "<prefix>:<value>"."""
    keyboard = [[InlineKeyboardButton(label, callback_data=f"{prefix}:{value}")] for label, value in options]
    return InlineKeyboardMarkup(keyboard)


def get_multi_select_keyboard(
    options: list[tuple[str, str]], prefix: str, selected: list[str]
) -> InlineKeyboardMarkup:
    """Кнопки множественного выбора с галочками и кнопкой "Готово".

    Args:
        options: пары (подпись, значение)
        prefix: префикс callback_data
        selected: уже выбранные значения
    """
    keyboard = [
        [
            InlineKeyboardButton(
                f"✅ {label}" if value in selected else label,
                callback_data=f"{prefix}:{value}",
            )
        ]
        for label, value in options
    ]
    keyboard.append([InlineKeyboardButton("➡️ Готово", callback_data=f"{prefix}:done")])
    return InlineKeyboardMarkup(keyboard)


def get_workout_done_keyboard() -> InlineKeyboardMarkup:
    """Кнопки "была ли тренировка"."""
    keyboard = [
        [
            InlineKeyboardButton("💪 Да", callback_data="workout:yes"),
            InlineKeyboardButton("😴 Нет", callback_data="workout:no"),
        ]
    ]
    return InlineKeyboardMarkup(keyboard)


def toggle(selected: list[str], value: str) -> list[str]:
    """Добавить значение в выбор или убрать его."""
    if value in selected:
        return [item for item in selected if item != value]
    return selected + [value]


def get_update_confirm_keyboard() -> InlineKeyboardMarkup:
    """Подтверждение перезаписи существующего профиля."""
    keyboard = [
        [
            InlineKeyboardButton("✏️ Обновить", callback_data="update:yes"),
            InlineKeyboardButton("↩️ Оставить", callback_data="update:no"),
        ]
    ]
    return InlineKeyboardMarkup(keyboard)
