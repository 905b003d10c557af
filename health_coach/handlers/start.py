"""Обработчики команд /start и /help."""
from telegram import (
    Update,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
)
from telegram.ext import Application, CommandHandler, ContextTypes
from health_coach.services.user_service import get_or_create_user, has_profile

HELP_TEXT = (
    "📖 <b>Команды бота:</b>\n\n"
    "👤 <b>Профиль:</b>\n"
    "/register - Заполнить или обновить профиль\n"
    "/profile - Мои данные\n"
    "/delete_profile - Удалить профиль\n\n"
    "💡 <b>Коучинг:</b>\n"
    "/recommend - Персональные рекомендации\n"
    "/mealplan - План питания (можно добавить: vegan, gluten_free)\n"
    "/workout - План тренировок\n"
    "/dashboard - Сводка\n\n"
    "📝 <b>Дневник:</b>\n"
    "/log - Записать итоги дня\n"
    "/progress - Статистика\n\n"
    "❓ <b>Помощь:</b>\n"
    "/help - Эта справка\n"
    "/cancel - Отменить ввод"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка команды /start."""
    user = get_or_create_user(update.effective_user)

    if not has_profile(user):
        # Inline-кнопка регистрации
        keyboard = [
            [InlineKeyboardButton("📝 Заполнить профиль", callback_data="start:register")]
        ]
        reply_markup = InlineKeyboardMarkup(keyboard)

        await update.message.reply_text(
            "👋 Привет! Я твой персональный фитнес-коуч.\n\n"
            "Я рассчитаю норму калорий, подберу питание и подскажу, как тренироваться.\n\n"
            "Для начала нужно заполнить профиль:",
            reply_markup=reply_markup,
        )
    else:
        # Inline-кнопки под сообщением
        keyboard = [
            [InlineKeyboardButton("💡 Рекомендации", callback_data="start:recommend")],
            [InlineKeyboardButton("🍽️ План питания", callback_data="start:mealplan")],
        ]
        reply_markup = InlineKeyboardMarkup(keyboard)

        await update.message.reply_text(
            f"👋 С возвращением, {user.first_name or 'друг'}!\n\n"
            f"📊 Твоя дневная норма: {user.profile.daily_calories} ккал",
            reply_markup=reply_markup,
        )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Обработка команды /help."""
    await update.message.reply_text(HELP_TEXT, parse_mode="HTML")


def register_handlers(application: Application) -> None:
    """Регистрация обработчиков."""
    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
