"""Тесты дневника прогресса и профилей на SQLite."""
from types import SimpleNamespace

from health_coach.database import get_db
from health_coach.models import ActivityLevel, Gender, ProgressEntry, User
from health_coach.services.progress_service import (
    get_progress_summary,
    get_recent_progress,
    log_progress,
)
from health_coach.services.user_service import (
    delete_profile,
    get_or_create_user,
    get_user_by_telegram_id,
    has_profile,
    save_profile,
)


def _telegram_user(telegram_id: int = 111):
    return SimpleNamespace(id=telegram_id, username="tester", first_name="Test", last_name="User")


def _create_user_with_profile() -> User:
    user = get_or_create_user(_telegram_user())
    save_profile(
        user.id,
        gender=Gender.MALE,
        age=28,
        height_cm=175,
        weight_kg=75,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        fitness_goals=["weight_loss"],
        dietary_restrictions=["vegetarian"],
    )
    return get_user_by_telegram_id(111)


def test_get_or_create_user(db):
    user = get_or_create_user(_telegram_user())
    again = get_or_create_user(_telegram_user())

    assert user.id == again.id
    assert not has_profile(user)


def test_save_profile_calculates_targets(db):
    user = _create_user_with_profile()

    assert has_profile(user)
    assert user.profile.daily_calories == 2250
    assert user.profile.daily_protein == 141
    assert user.profile.fitness_goals == ["weight_loss"]
    assert user.profile.activity_level == ActivityLevel.MODERATELY_ACTIVE


def test_save_profile_updates_existing(db):
    user = _create_user_with_profile()

    profile = save_profile(user.id, fitness_goals=["muscle_gain"])

    assert profile.id == user.profile.id
    assert profile.daily_calories == 3050


def test_delete_profile(db):
    user = _create_user_with_profile()

    assert delete_profile(user.id) is True
    assert delete_profile(user.id) is False
    assert not has_profile(get_user_by_telegram_id(111))


def test_recent_progress_is_newest_first(db):
    user = _create_user_with_profile()
    log_progress(user.id, workout_completed=True, calories_consumed=2000, target_calories=2250)
    log_progress(user.id, workout_completed=False, calories_consumed=2800, target_calories=2250)

    recent = get_recent_progress(user.id)

    assert [entry.workout_completed for entry in recent] == [False, True]
    assert recent[0].calories_consumed == 2800


def test_recent_progress_limit(db):
    user = _create_user_with_profile()
    for calories in range(10):
        log_progress(user.id, workout_completed=True, calories_consumed=calories, target_calories=2250)

    recent = get_recent_progress(user.id, limit=3)

    assert [entry.calories_consumed for entry in recent] == [9, 8, 7]


def test_progress_summary(db):
    user = _create_user_with_profile()
    log_progress(user.id, workout_completed=True, calories_consumed=2000, target_calories=2250)
    log_progress(user.id, workout_completed=False, calories_consumed=2400, target_calories=2250)

    summary = get_progress_summary(user.id, days=7)

    assert summary == {
        "entries": 2,
        "workouts_completed": 1,
        "completion_rate": 50,
        "avg_calories": 2200,
    }


def test_progress_summary_empty(db):
    user = _create_user_with_profile()

    assert get_progress_summary(user.id)["entries"] == 0


def test_deleting_user_removes_progress(db):
    user = _create_user_with_profile()
    log_progress(user.id, workout_completed=True, calories_consumed=2000, target_calories=2250)

    with get_db() as session:
        session.delete(session.get(User, user.id))
        session.commit()
        assert session.query(ProgressEntry).count() == 0


def test_model_repr(db):
    user = _create_user_with_profile()

    assert repr(user) == f"<User id={user.id}>"
    assert repr(user.profile).startswith("<Profile id=")
