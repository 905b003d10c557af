"""Точка входа для Health Coach Bot."""
import logging
from telegram.ext import Application
from health_coach.config import config
from health_coach.database import init_db
from health_coach.handlers import (
    register_start_handlers,
    register_registration_handlers,
    register_coach_handlers,
    register_progress_handlers,
)

# Настройка логирования
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Запуск бота."""
    # Проверка конфигурации
    try:
        config.validate()
    except ValueError as e:
        logger.error(f"Ошибка конфигурации: {e}")
        return

    # Инициализация БД
    logger.info("Инициализация базы данных...")
    init_db()

    # Создание приложения
    logger.info("Запуск бота...")
    application = Application.builder().token(config.BOT_TOKEN).build()

    # Регистрация обработчиков (разговоры раньше обычных команд)
    register_start_handlers(application)
    register_registration_handlers(application)
    register_progress_handlers(application)
    register_coach_handlers(application)

    application.run_polling(allowed_updates=["message", "callback_query"])


if __name__ == "__main__":
    main()
