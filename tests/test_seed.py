"""Тест заполнения БД тестовыми данными."""
from scripts.seed import seed
from health_coach.database import get_db
from health_coach.models import Profile, User


def test_seed_creates_sample_users(db):
    assert seed() == 2
    # Повторный запуск очищает старых пользователей
    assert seed() == 2

    with get_db() as session:
        assert session.query(User).count() == 2
        john = session.query(User).filter_by(username="john_doe").one()
        assert john.profile.daily_calories == 2250
        jane = session.query(Profile).filter_by(age=32).one()
        assert jane.daily_calories == 1891
        assert jane.dietary_restrictions == ["vegetarian"]
