"""Тесты диалогов регистрации и дневника."""
import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from telegram.ext import ConversationHandler

from health_coach.handlers import progress, registration
from health_coach.models import ActivityLevel, Gender
from health_coach.services.progress_service import get_recent_progress
from health_coach.services.user_service import get_or_create_user, get_user_by_telegram_id, save_profile

TELEGRAM_USER = SimpleNamespace(id=555, username="coach_fan", first_name="Alex", last_name=None)


def _command_update(text: str = "/register"):
    update = MagicMock()
    update.callback_query = None
    update.effective_user = TELEGRAM_USER
    update.effective_message.reply_text = AsyncMock()
    update.message.text = text
    update.message.reply_text = AsyncMock()
    return update


def _callback_update(data: str):
    update = MagicMock()
    update.effective_user = TELEGRAM_USER
    update.callback_query.data = data
    update.callback_query.answer = AsyncMock()
    update.callback_query.edit_message_text = AsyncMock()
    return update


def _context():
    return SimpleNamespace(user_data={}, args=[])


def _existing_user():
    user = get_or_create_user(TELEGRAM_USER)
    save_profile(user.id, gender=Gender.MALE, age=28, height_cm=175, weight_kg=75)
    return user


def test_register_new_user_starts_with_gender(db):
    update, context = _command_update(), _context()

    state = asyncio.run(registration.register_start(update, context))

    assert state == registration.GENDER
    assert "user_id" in context.user_data


def test_register_existing_profile_asks_to_confirm(db):
    _existing_user()
    update, context = _command_update(), _context()

    state = asyncio.run(registration.register_start(update, context))

    assert state == registration.CONFIRM_UPDATE
    markup = update.effective_message.reply_text.call_args.kwargs["reply_markup"]
    assert [b.callback_data for b in markup.inline_keyboard[0]] == ["update:yes", "update:no"]


def test_confirm_update_continues_registration(db):
    user = _existing_user()
    context = _context()
    context.user_data["user_id"] = user.id

    state = asyncio.run(registration.confirm_update_handler(_callback_update("update:yes"), context))

    assert state == registration.GENDER
    assert context.user_data["user_id"] == user.id


def test_confirm_update_keep_leaves_profile(db):
    user = _existing_user()
    context = _context()
    context.user_data["user_id"] = user.id

    state = asyncio.run(registration.confirm_update_handler(_callback_update("update:no"), context))

    assert state == ConversationHandler.END
    assert context.user_data == {}
    assert get_user_by_telegram_id(TELEGRAM_USER.id).profile.age == 28


def test_finishing_registration_overwrites_profile(db):
    user = _existing_user()
    context = _context()
    context.user_data.update(
        user_id=user.id,
        gender=Gender.FEMALE,
        age=32,
        height=165.0,
        weight=60.0,
        activity=ActivityLevel.LIGHTLY_ACTIVE,
        goals=["endurance"],
        diet=["vegetarian"],
    )

    state = asyncio.run(registration.diet_handler(_callback_update("diet:done"), context))

    assert state == ConversationHandler.END
    profile = get_user_by_telegram_id(TELEGRAM_USER.id).profile
    assert profile.gender == Gender.FEMALE
    assert profile.age == 32
    assert profile.dietary_restrictions == ["vegetarian"]


def test_non_finite_calories_are_rejected(db):
    user = _existing_user()

    for text in ("nan", "inf", "-inf"):
        update = _command_update(text)
        context = _context()
        context.user_data.update(user_id=user.id, target_calories=2750, workout_completed=True)

        state = asyncio.run(progress.calories_handler(update, context))

        assert state == progress.CALORIES
        assert "калорий" in update.message.reply_text.call_args.args[0]

    assert get_recent_progress(user.id) == []
