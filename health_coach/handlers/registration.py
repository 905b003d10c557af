"""Обработчики регистрации и просмотра профиля."""
import logging
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    MessageHandler,
    ConversationHandler,
    filters,
    ContextTypes,
)
from health_coach.keyboards.profile_menu import (
    ACTIVITY_OPTIONS,
    DIET_OPTIONS,
    GENDER_OPTIONS,
    GOAL_OPTIONS,
    get_choice_keyboard,
    get_multi_select_keyboard,
    get_update_confirm_keyboard,
    toggle,
)
from health_coach.services.user_service import (
    delete_profile,
    get_or_create_user,
    get_user_by_telegram_id,
    has_profile,
    save_profile,
)
from health_coach.services.validation import (
    ProfileValidationError,
    parse_activity_level,
    parse_age,
    parse_gender,
    parse_height,
    parse_weight,
)

logger = logging.getLogger(__name__)

# Состояния регистрации
GENDER, AGE, HEIGHT, WEIGHT, ACTIVITY, GOALS, DIET, CONFIRM_UPDATE = range(8)

GENDER_PROMPT = "👤 <b>Регистрация профиля</b>\n\n" "Шаг 1/7: Укажи свой пол:"


async def register_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Начало регистрации (команда /register или кнопка из /start)."""
    if update.callback_query:
        await update.callback_query.answer()

    user = get_or_create_user(update.effective_user)
    message = update.effective_message

    # Сохраняем user_id в контекст
    context.user_data["user_id"] = user.id

    if has_profile(user):
        await message.reply_text(
            "⚠️ У тебя уже есть профиль.\n"
            "Заполнить его заново? Текущие данные будут перезаписаны.",
            reply_markup=get_update_confirm_keyboard(),
        )
        return CONFIRM_UPDATE

    await message.reply_text(
        GENDER_PROMPT,
        reply_markup=get_choice_keyboard(GENDER_OPTIONS, "gender"),
        parse_mode="HTML",
    )
    return GENDER


async def confirm_update_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Ответ на вопрос о перезаписи профиля."""
    query = update.callback_query
    await query.answer()

    if query.data != "update:yes":
        context.user_data.clear()
        await query.edit_message_text("👌 Профиль оставлен без изменений. Посмотреть: /profile")
        return ConversationHandler.END

    await query.edit_message_text(
        GENDER_PROMPT,
        reply_markup=get_choice_keyboard(GENDER_OPTIONS, "gender"),
        parse_mode="HTML",
    )
    return GENDER


async def gender_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка выбора пола."""
    query = update.callback_query
    await query.answer()

    context.user_data["gender"] = parse_gender(query.data.split(":")[1])

    await query.edit_message_text(
        "✅ Пол сохранен\n\n" "Шаг 2/7: Сколько тебе лет?\n" "Отправь числом (например: 25)"
    )
    return AGE


async def age_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка ввода возраста."""
    try:
        context.user_data["age"] = parse_age(update.message.text)
    except ProfileValidationError:
        await update.message.reply_text("❌ Введи корректный возраст (13-120 лет)")
        return AGE

    await update.message.reply_text(
        "✅ Возраст сохранен\n\n"
        "Шаг 3/7: Какой у тебя рост (в см)?\n"
        "Отправь числом (например: 175)"
    )
    return HEIGHT


async def height_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка ввода роста."""
    try:
        context.user_data["height"] = parse_height(update.message.text)
    except ProfileValidationError:
        await update.message.reply_text("❌ Введи корректный рост (100-250 см)")
        return HEIGHT

    await update.message.reply_text(
        "✅ Рост сохранен\n\n"
        "Шаг 4/7: Какой у тебя текущий вес (в кг)?\n"
        "Отправь числом (например: 70.5)"
    )
    return WEIGHT


async def weight_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка ввода веса."""
    try:
        context.user_data["weight"] = parse_weight(update.message.text)
    except ProfileValidationError:
        await update.message.reply_text("❌ Введи корректный вес (30-300 кг)")
        return WEIGHT

    await update.message.reply_text(
        "✅ Вес сохранен\n\n" "Шаг 5/7: Какой у тебя уровень активности?",
        reply_markup=get_choice_keyboard(ACTIVITY_OPTIONS, "activity"),
    )
    return ACTIVITY


async def activity_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Обработка выбора активности."""
    query = update.callback_query
    await query.answer()

    context.user_data["activity"] = parse_activity_level(query.data.split(":")[1])
    context.user_data["goals"] = []

    await query.edit_message_text(
        "✅ Активность сохранена\n\n" "Шаг 6/7: Какие у тебя цели? Можно выбрать несколько.",
        reply_markup=get_multi_select_keyboard(GOAL_OPTIONS, "goal", []),
    )
    return GOALS


async def goals_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Выбор целей: переключение галочек до нажатия "Готово"."""
    query = update.callback_query
    await query.answer()

    value = query.data.split(":")[1]
    if value != "done":
        context.user_data["goals"] = toggle(context.user_data.get("goals", []), value)
        await query.edit_message_reply_markup(
            reply_markup=get_multi_select_keyboard(GOAL_OPTIONS, "goal", context.user_data["goals"])
        )
        return GOALS

    context.user_data["diet"] = []
    await query.edit_message_text(
        "✅ Цели сохранены\n\n" "Шаг 7/7: Есть ли ограничения в питании?",
        reply_markup=get_multi_select_keyboard(DIET_OPTIONS, "diet", []),
    )
    return DIET


async def diet_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Выбор ограничений в питании и сохранение профиля."""
    query = update.callback_query
    await query.answer()

    value = query.data.split(":")[1]
    if value != "done":
        context.user_data["diet"] = toggle(context.user_data.get("diet", []), value)
        await query.edit_message_reply_markup(
            reply_markup=get_multi_select_keyboard(DIET_OPTIONS, "diet", context.user_data["diet"])
        )
        return DIET

    data = context.user_data
    profile = save_profile(
        data["user_id"],
        gender=data["gender"],
        age=data["age"],
        height_cm=data["height"],
        weight_kg=data["weight"],
        activity_level=data["activity"],
        fitness_goals=data.get("goals", []),
        dietary_restrictions=data.get("diet", []),
    )
    logger.info(f"Profile saved for user {data['user_id']}")

    # Очищаем контекст
    context.user_data.clear()

    await query.edit_message_text(
        f"🎉 <b>Профиль сохранен!</b>\n\n"
        f"📊 Твои дневные нормы:\n"
        f"🔥 {profile.daily_calories} ккал\n"
        f"🥗 Б: {profile.daily_protein}г | Ж: {profile.daily_fats}г | У: {profile.daily_carbs}г\n\n"
        f"Получить рекомендации: /recommend",
        parse_mode="HTML",
    )
    return ConversationHandler.END


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Отмена регистрации."""
    await update.message.reply_text("❌ Регистрация отменена.")
    context.user_data.clear()
    return ConversationHandler.END


async def profile_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Показать профиль."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    profile = user.profile
    goals = ", ".join(profile.fitness_goals or []) or "—"
    diet = ", ".join(profile.dietary_restrictions or []) or "нет"

    await update.message.reply_text(
        f"👤 <b>Твой профиль</b>\n\n"
        f"Пол: {profile.gender.value}\n"
        f"Возраст: {profile.age}\n"
        f"Рост: {profile.height_cm:g} см\n"
        f"Вес: {profile.weight_kg:g} кг\n"
        f"Активность: {profile.activity_level.value}\n"
        f"Цели: {goals}\n"
        f"Ограничения в питании: {diet}\n\n"
        f"📊 Норма: {profile.daily_calories} ккал\n"
        f"🥗 Б: {profile.daily_protein}г | Ж: {profile.daily_fats}г | У: {profile.daily_carbs}г",
        parse_mode="HTML",
    )


async def delete_profile_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Удалить профиль."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if user and delete_profile(user.id):
        await update.message.reply_text("🗑️ Профиль удален. Заполнить заново: /register")
    else:
        await update.message.reply_text("⚠️ Профиль не найден.")


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    conv_handler = ConversationHandler(
        entry_points=[
            CommandHandler("register", register_start),
            CallbackQueryHandler(register_start, pattern=r"^start:register$"),
        ],
        states={
            CONFIRM_UPDATE: [CallbackQueryHandler(confirm_update_handler, pattern=r"^update:(yes|no)$")],
            GENDER: [CallbackQueryHandler(gender_handler, pattern=r"^gender:")],
            AGE: [MessageHandler(filters.TEXT & ~filters.COMMAND, age_handler)],
            HEIGHT: [MessageHandler(filters.TEXT & ~filters.COMMAND, height_handler)],
            WEIGHT: [MessageHandler(filters.TEXT & ~filters.COMMAND, weight_handler)],
            ACTIVITY: [CallbackQueryHandler(activity_handler, pattern=r"^activity:")],
            GOALS: [CallbackQueryHandler(goals_handler, pattern=r"^goal:")],
            DIET: [CallbackQueryHandler(diet_handler, pattern=r"^diet:")],
        },
        fallbacks=[CommandHandler("cancel", cancel)],
    )
    application.add_handler(conv_handler)
    application.add_handler(CommandHandler("profile", profile_command))
    application.add_handler(CommandHandler("delete_profile", delete_profile_command))
