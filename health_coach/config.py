"""Конфигурация бота из переменных окружения."""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Config:
    """Настройки бота."""

    BOT_TOKEN: str
    DATABASE_URL: str
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Загрузка конфигурации из окружения."""
        return cls(
            BOT_TOKEN=os.getenv("BOT_TOKEN", ""),
            DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///health_coach.db"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """Проверка обязательных настроек."""
        if not self.BOT_TOKEN:
            raise ValueError("BOT_TOKEN не установлен в .env")


# Глобальный экземпляр конфигурации
config = Config.from_env()
