"""Обработчики дневника прогресса."""
import logging
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    ConversationHandler,
    MessageHandler,
    filters,
    ContextTypes,
)
from health_coach.keyboards.profile_menu import get_workout_done_keyboard
from health_coach.services.progress_service import get_progress_summary, log_progress
from health_coach.services.user_service import get_user_by_telegram_id, has_profile
from health_coach.services.validation import ProfileValidationError, parse_calories

logger = logging.getLogger(__name__)

# Состояния дневника
WORKOUT, CALORIES = range(2)


async def log_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Начало записи итогов дня."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return ConversationHandler.END

    context.user_data["user_id"] = user.id
    context.user_data["target_calories"] = user.profile.daily_calories

    await update.message.reply_text(
        "📝 <b>Итоги дня</b>\n\nБыла ли сегодня тренировка?",
        reply_markup=get_workout_done_keyboard(),
        parse_mode="HTML",
    )
    return WORKOUT


async def workout_done_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Ответ про тренировку."""
    query = update.callback_query
    await query.answer()

    context.user_data["workout_completed"] = query.data == "workout:yes"

    await query.edit_message_text(
        "✅ Записано\n\n" "Сколько калорий ты съел(а) сегодня?\n" "Отправь числом (например: 2100)"
    )
    return CALORIES


async def calories_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Калории за день и сохранение записи."""
    try:
        calories = parse_calories(update.message.text)
    except ProfileValidationError:
        await update.message.reply_text("❌ Введи количество калорий числом")
        return CALORIES

    data = context.user_data
    target = data["target_calories"]
    log_progress(
        data["user_id"],
        workout_completed=data["workout_completed"],
        calories_consumed=calories,
        target_calories=target,
    )
    context.user_data.clear()

    diff = int(calories - target)
    diff_text = f"+{diff}" if diff > 0 else str(diff)
    await update.message.reply_text(
        f"✅ Итоги дня сохранены\n\n"
        f"🔥 {int(calories)} / {target} ккал ({diff_text})\n\n"
        f"Рекомендации на завтра: /recommend"
    )
    return ConversationHandler.END


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """Отмена записи."""
    await update.message.reply_text("❌ Запись отменена.")
    context.user_data.clear()
    return ConversationHandler.END


async def progress_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Статистика прогресса за неделю и месяц."""
    user = get_user_by_telegram_id(update.effective_user.id)
    if not user or not has_profile(user):
        await update.message.reply_text("❌ Сначала заполни профиль: /register")
        return

    week = get_progress_summary(user.id, days=7)
    month = get_progress_summary(user.id, days=30)

    await update.message.reply_text(
        f"📈 <b>Прогресс</b>\n\n"
        f"📅 Неделя: {week['entries']} записей\n"
        f"   💪 Тренировок: {week['workouts_completed']} ({week['completion_rate']}%)\n"
        f"   🔥 Среднее: {week['avg_calories']} ккал\n\n"
        f"📅 Месяц: {month['entries']} записей\n"
        f"   💪 Тренировок: {month['workouts_completed']} ({month['completion_rate']}%)\n"
        f"   🔥 Среднее: {month['avg_calories']} ккал",
        parse_mode="HTML",
    )


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    conv_handler = ConversationHandler(
        entry_points=[CommandHandler("log", log_start)],
        states={
            WORKOUT: [CallbackQueryHandler(workout_done_handler, pattern=r"^workout:(yes|no)$")],
            CALORIES: [MessageHandler(filters.TEXT & ~filters.COMMAND, calories_handler)],
        },
        fallbacks=[CommandHandler("cancel", cancel)],
    )
    application.add_handler(conv_handler)
    application.add_handler(CommandHandler("progress", progress_command))
