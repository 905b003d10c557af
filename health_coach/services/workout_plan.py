"""Генерация недельного плана тренировок по профилю."""
import logging
from dataclasses import dataclass
from types import MappingProxyType

from health_coach.models import FitnessGoal

logger = logging.getLogger(__name__)

PLAN_DURATION_WEEKS = 8
DEFAULT_DAYS_PER_WEEK = 3
DEFAULT_WORKOUT_TYPES = ("strength", "cardio")

# Дни тренировок для каждой частоты: равномерно по неделе
TRAINING_DAYS = MappingProxyType(
    {
        1: ("Wednesday",),
        2: ("Tuesday", "Friday"),
        3: ("Monday", "Wednesday", "Friday"),
        4: ("Monday", "Tuesday", "Thursday", "Friday"),
        5: ("Monday", "Tuesday", "Wednesday", "Friday", "Saturday"),
        6: ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        7: ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    }
)

# Тип тренировки, который следует из цели
GOAL_WORKOUT_TYPES = MappingProxyType(
    {
        FitnessGoal.WEIGHT_LOSS.value: "cardio",
        FitnessGoal.ENDURANCE.value: "cardio",
        FitnessGoal.MUSCLE_GAIN.value: "strength",
        FitnessGoal.STRENGTH.value: "strength",
    }
)


@dataclass(frozen=True)
class Exercise:
    """Упражнение в тренировке."""

    name: str
    type: str
    sets: int
    reps: str
    target_muscles: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "sets": self.sets,
            "reps": self.reps,
            "targetMuscles": list(self.target_muscles),
        }


@dataclass(frozen=True)
class WorkoutDay:
    """Тренировочный день."""

    day: str
    focus: str
    exercises: tuple[Exercise, ...]

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "focus": self.focus,
            "exercises": [exercise.to_dict() for exercise in self.exercises],
        }


@dataclass(frozen=True)
class WorkoutPlan:
    """План тренировок на несколько недель."""

    plan_name: str
    description: str
    duration_weeks: int
    workouts: tuple[WorkoutDay, ...]

    def to_dict(self) -> dict:
        return {
            "planName": self.plan_name,
            "description": self.description,
            "duration": self.duration_weeks,
            "workouts": [workout.to_dict() for workout in self.workouts],
        }


EXERCISE_CATALOG = MappingProxyType(
    {
        "strength": (
            Exercise("Push-ups", "strength", 3, "10-15", ("chest", "shoulders", "triceps")),
            Exercise("Goblet Squats", "strength", 3, "10-12", ("quadriceps", "glutes")),
            Exercise("Dumbbell Rows", "strength", 3, "10-12", ("back", "biceps")),
            Exercise("Plank", "strength", 3, "30-45 sec", ("core",)),
        ),
        "cardio": (
            Exercise("Jumping Jacks", "cardio", 3, "45 sec", ("full body",)),
            Exercise("Interval Running", "cardio", 6, "1 min fast / 1 min easy", ("legs", "heart")),
            Exercise("Mountain Climbers", "cardio", 3, "30 sec", ("core", "shoulders")),
        ),
        "flexibility": (
            Exercise("Sun Salutation", "flexibility", 3, "5 flows", ("full body",)),
            Exercise("Hamstring Stretch", "flexibility", 2, "30 sec each side", ("hamstrings",)),
            Exercise("Cat-Cow", "flexibility", 2, "10", ("spine", "core")),
        ),
        "hiit": (
            Exercise("Burpees", "hiit", 4, "30 sec on / 30 sec off", ("full body",)),
            Exercise("Jump Squats", "hiit", 4, "30 sec on / 30 sec off", ("quadriceps", "glutes")),
            Exercise("High Knees", "hiit", 4, "30 sec on / 30 sec off", ("legs", "core")),
        ),
    }
)


def _days_per_week(profile) -> int:
    days = getattr(profile, "days_per_week", None) or DEFAULT_DAYS_PER_WEEK
    return min(max(int(days), 1), 7)


def resolve_workout_types(profile) -> list[str]:
    """Типы тренировок: из предпочтений, иначе из целей, иначе по умолчанию."""
    preferred = getattr(profile, "workout_types", None) or []
    if preferred:
        return list(dict.fromkeys(preferred))

    goals = getattr(profile, "fitness_goals", None) or []
    from_goals = [GOAL_WORKOUT_TYPES.get(getattr(goal, "value", goal)) for goal in goals]
    from_goals = [workout_type for workout_type in from_goals if workout_type]
    if from_goals:
        return list(dict.fromkeys(from_goals))

    return list(DEFAULT_WORKOUT_TYPES)


def plan_name(fitness_goals) -> str:
    """Название плана по целям."""
    if not fitness_goals:
        return "Personalized General Fitness Plan"
    names = [getattr(goal, "value", goal) for goal in fitness_goals]
    return f"Personalized {' & '.join(names)} Plan"


def generate_workout_plan(profile) -> WorkoutPlan:
    """Сгенерировать план тренировок.

    Дни недели берутся по частоте из профиля, типы тренировок чередуются
    по кругу. Неизвестный тип тренировки заменяется силовой.
    """
    days = TRAINING_DAYS[_days_per_week(profile)]
    workout_types = resolve_workout_types(profile)

    workouts = []
    for index, day in enumerate(days):
        workout_type = workout_types[index % len(workout_types)]
        if workout_type not in EXERCISE_CATALOG:
            workout_type = "strength"
        exercises = EXERCISE_CATALOG[workout_type]
        workouts.append(WorkoutDay(day=day, focus=workout_type, exercises=exercises))

    goals = getattr(profile, "fitness_goals", None) or []
    plan = WorkoutPlan(
        plan_name=plan_name(goals),
        description="Workout plan generated from your profile and preferences",
        duration_weeks=PLAN_DURATION_WEEKS,
        workouts=tuple(workouts),
    )
    logger.debug(f"Workout plan '{plan.plan_name}': {len(plan.workouts)} days, types={workout_types}")
    return plan
