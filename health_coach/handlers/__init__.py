"""Обработчики команд бота."""
from health_coach.handlers.start import register_handlers as register_start_handlers
from health_coach.handlers.registration import register_handlers as register_registration_handlers
from health_coach.handlers.coach import register_handlers as register_coach_handlers
from health_coach.handlers.progress import register_handlers as register_progress_handlers

__all__ = [
    "register_start_handlers",
    "register_registration_handlers",
    "register_coach_handlers",
    "register_progress_handlers",
]
