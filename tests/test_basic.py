"""Базовые тесты: конфигурация и БД."""
import pytest
from health_coach.config import Config
from health_coach.database import get_db
from health_coach.models import User


def test_config_validation():
    """Тест валидации конфигурации."""
    config = Config(
        BOT_TOKEN="test_token",
        DATABASE_URL="sqlite:///test.db",
    )
    # Не должно вызывать ошибку
    config.validate()


def test_config_validation_without_token():
    """Без токена бот не запускается."""
    config = Config(BOT_TOKEN="", DATABASE_URL="sqlite:///test.db")

    with pytest.raises(ValueError):
        config.validate()


def test_config_from_env(monkeypatch):
    """Загрузка из переменных окружения."""
    monkeypatch.setenv("BOT_TOKEN", "abc")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")

    config = Config.from_env()

    assert config.BOT_TOKEN == "abc"
    assert config.LOG_LEVEL == "DEBUG"
    assert config.DATABASE_URL == "sqlite:///other.db"


def test_config_defaults(monkeypatch):
    """Значения по умолчанию."""
    for name in ("BOT_TOKEN", "LOG_LEVEL", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    config = Config.from_env()

    assert config.BOT_TOKEN == ""
    assert config.LOG_LEVEL == "INFO"
    assert config.DATABASE_URL == "sqlite:///health_coach.db"


def test_database_creation(db):
    """Тест создания БД."""
    with get_db() as session:
        assert session is not None
        assert session.query(User).count() == 0
