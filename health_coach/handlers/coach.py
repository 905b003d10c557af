"""Обработчики рекомендаций, плана питания и плана тренировок."""
import logging
from html import escape
from telegram import Update
from telegram.ext import Application, CommandHandler, CallbackQueryHandler, ContextTypes
from health_coach.services.coach_service import build_coaching_report
from health_coach.services.meal_catalog import MealDefinition
from health_coach.services.meal_plan import MealPreferences, build_meal_plan, total_calories
from health_coach.services.nutrition_calc import NutritionTargets
from health_coach.services.progress_service import get_progress_summary, get_recent_progress
from health_coach.services.recommendations import Recommendation, RecommendationError
from health_coach.services.user_service import get_user_by_telegram_id, has_profile
from health_coach.services.workout_plan import WorkoutPlan, generate_workout_plan

logger = logging.getLogger(__name__)

GROUP_TITLES = {
    "workout": "🏋️ Тренировки",
    "nutrition": "🥗 Питание",
    "lifestyle": "🌙 Образ жизни",
}

SLOT_TITLES = {
    "breakfast": "🍳 Завтрак",
    "lunch": "🥪 Обед",
    "dinner": "🍲 Ужин",
}

ERROR_TEXT = "❌ Не удалось сформировать рекомендации. Попробуй позже."


def format_targets(targets: NutritionTargets) -> str:
    """Дневная норма одной строкой."""
    macros = targets.macros
    return (
        f"🔥 {targets.daily_calories} ккал\n"
        f"🥗 Б: {macros.protein}г | Ж: {macros.fats}г | У: {macros.carbs}г"
    )


def format_recommendations(recommendations: dict[str, list[Recommendation]]) -> str:
    """Текст рекомендаций по группам. Пустые группы пропускаются."""
    blocks = []
    for group, items in recommendations.items():
        if not items:
            continue
        lines = [f"<b>{GROUP_TITLES.get(group, group)}</b>"]
        for item in items:
            lines.append(f"• {escape(item.message)}\n  👉 {escape(item.action)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_meal(meal: MealDefinition) -> str:
    return (
        f"• {escape(meal.name)} — {meal.calories} ккал, {meal.prep_time} мин\n"
        f"  Б:{meal.protein}г Ж:{meal.fats}г У:{meal.carbs}г"
    )


def format_meal_plan(plan: dict[str, list[MealDefinition]]) -> str:
    """Текст плана питания по приемам пищи."""
    blocks = []
    for slot, meals in plan.items():
        title = f"<b>{SLOT_TITLES.get(slot, slot)}</b>"
        if meals:
            blocks.append("\n".join([title] + [format_meal(meal) for meal in meals]))
        else:
            blocks.append(f"{title}\nНет подходящих блюд")
    return "\n\n".join(blocks)


def format_workout_plan(plan: WorkoutPlan) -> str:
    """Текст плана тренировок на неделю."""
    lines = [f"<b>{escape(plan.plan_name)}</b>", f"Длительность: {plan.duration_weeks} недель", ""]
    for workout in plan.workouts:
        lines.append(f"📅 <b>{workout.day}</b> — {workout.focus}")
        for exercise in workout.exercises:
            lines.append(f"   • {escape(exercise.name)}: {exercise.sets} x {escape(exercise.reps)}")
    return "\n".join(lines)


async def _get_profile_user(update: Update):
    """Пользователь с профилем или None (с сообщением пользователю)."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await update.effective_message.reply_text("❌ Сначала заполни профиль: /register")
        return None
    return user


async def recommend_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Персональные рекомендации по последней записи прогресса."""
    if update.callback_query:
        await update.callback_query.answer()

    user = await _get_profile_user(update)
    if not user:
        return

    try:
        report = build_coaching_report(user.profile, get_recent_progress(user.id))
    except RecommendationError:
        logger.error(f"Recommendations failed for user {user.id}", exc_info=True)
        await update.effective_message.reply_text(ERROR_TEXT)
        return

    await update.effective_message.reply_text(
        f"📊 <b>Твоя норма</b>\n{format_targets(report['nutrition'])}\n\n"
        f"{format_recommendations(report['recommendations'])}",
        parse_mode="HTML",
    )


async def meal_plan_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """План питания с учетом ограничений профиля.

    Аргументы команды добавляют ограничения: /mealplan vegan gluten_free
    """
    if update.callback_query:
        await update.callback_query.answer()

    user = await _get_profile_user(update)
    if not user:
        return

    restrictions = list(user.profile.dietary_restrictions or []) + list(context.args or [])
    plan = build_meal_plan(user.profile, MealPreferences(dietary_restrictions=tuple(restrictions)))
    # Берем первое подходящее блюдо каждого приема пищи
    day_total = total_calories([meals[0] for meals in plan.values() if meals])

    await update.effective_message.reply_text(
        f"🍽️ <b>План питания</b>\n\n{format_meal_plan(plan)}\n\n"
        f"Пример дня: {day_total} из {user.profile.daily_calories} ккал",
        parse_mode="HTML",
    )


async def workout_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """План тренировок."""
    user = await _get_profile_user(update)
    if not user:
        return

    plan = generate_workout_plan(user.profile)
    await update.message.reply_text(format_workout_plan(plan), parse_mode="HTML")


async def dashboard_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Сводка: норма, прогресс за неделю и главные рекомендации."""
    user = await _get_profile_user(update)
    if not user:
        return

    recent = get_recent_progress(user.id)
    summary = get_progress_summary(user.id, days=7)

    try:
        report = build_coaching_report(user.profile, recent)
    except RecommendationError:
        logger.error(f"Dashboard failed for user {user.id}", exc_info=True)
        await update.message.reply_text(ERROR_TEXT)
        return

    # На дашборде только рекомендации, зависящие от пользователя
    personal = {group: items for group, items in report["recommendations"].items() if group != "lifestyle"}
    personal_text = format_recommendations(personal) or "Все идет по плану 👍"

    await update.message.reply_text(
        f"📊 <b>Дашборд</b>\n\n"
        f"{format_targets(report['nutrition'])}\n\n"
        f"📅 За 7 дней: {summary['entries']} записей, "
        f"тренировок {summary['workouts_completed']} ({summary['completion_rate']}%)\n"
        f"📈 Среднее: {summary['avg_calories']} ккал\n\n"
        f"{personal_text}",
        parse_mode="HTML",
    )


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    application.add_handler(CommandHandler("recommend", recommend_command))
    application.add_handler(CommandHandler("mealplan", meal_plan_command))
    application.add_handler(CommandHandler("workout", workout_command))
    application.add_handler(CommandHandler("dashboard", dashboard_command))

    # Inline-кнопки из /start
    application.add_handler(CallbackQueryHandler(recommend_command, pattern=r"^start:recommend$"))
    application.add_handler(CallbackQueryHandler(meal_plan_command, pattern=r"^start:mealplan$"))
