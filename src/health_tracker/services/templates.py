"""Fixed exercise and guidance templates per goal."""

from health_tracker.domain.errors import InvalidInputError
from health_tracker.domain.metrics import Goal
from health_tracker.domain.programs import Exercise, ProgramTemplate

PROGRAM_TEMPLATES: dict[Goal, ProgramTemplate] = {
    Goal.LOSE: ProgramTemplate(
        exercises=[
            Exercise(
                name="Cardiovascular Exercise",
                sets=1,
                reps=30,
                description="30 minutes of brisk walking or running",
            ),
            Exercise(
                name="Squat",
                sets=3,
                reps=15,
                description="Fundamental exercise for the leg muscles",
            ),
            Exercise(
                name="Push-up",
                sets=3,
                reps=12,
                description="Works the chest and arm muscles",
            ),
            Exercise(
                name="Plank",
                sets=3,
                reps=45,
                description="Hold the plank position for 45 seconds",
            ),
        ],
        recommendations=[
            "Eat 5-6 small portioned meals a day",
            "Include protein in every meal",
            "Eat more vegetables and fruit",
            "Avoid sugary and processed foods",
            "Drink at least 2.5-3 liters of water a day",
        ],
    ),
    Goal.GAIN: ProgramTemplate(
        exercises=[
            Exercise(
                name="Bench Press",
                sets=4,
                reps=8,
                description="Fundamental exercise for building the chest muscles",
            ),
            Exercise(
                name="Deadlift",
                sets=4,
                reps=6,
                description="Works the back and leg muscles",
            ),
            Exercise(
                name="Military Press",
                sets=3,
                reps=10,
                description="Builds the shoulder muscles",
            ),
            Exercise(
                name="Pull-ups",
                sets=3,
                reps=8,
                description="Builds the back muscles",
            ),
        ],
        recommendations=[
            "Eat 6-7 meals a day",
            "Have complex carbohydrates and protein in every meal",
            "Drink a protein shake after training",
            "Snack on oily seeds and nuts between meals",
            "Drink at least 3 liters of water a day",
        ],
    ),
    Goal.MAINTAIN: ProgramTemplate(
        exercises=[
            Exercise(
                name="Full Body Circuit",
                sets=3,
                reps=12,
                description="Circuit training for the whole body",
            ),
            Exercise(
                name="Bodyweight Exercises",
                sets=3,
                reps=15,
                description="Exercises performed with your own body weight",
            ),
            Exercise(
                name="Yoga/Stretching",
                sets=1,
                reps=20,
                description="20 minutes of stretching and balance movements",
            ),
            Exercise(
                name="Core Workout",
                sets=3,
                reps=30,
                description="Exercises for the abdominal and core region",
            ),
        ],
        recommendations=[
            "Eat a balanced and varied diet",
            "Try not to skip meals",
            "Do not neglect fresh vegetables and fruit",
            "Vary your protein sources",
            "Drink 2-2.5 liters of water a day",
        ],
    ),
}


def select_template(goal: Goal) -> ProgramTemplate:
    """Return the fixed template for a goal."""
    template = PROGRAM_TEMPLATES.get(goal) if isinstance(goal, Goal) else None
    if template is None:
        raise InvalidInputError(f"Unknown goal: {goal!r}")
    return ProgramTemplate(
        exercises=list(template.exercises),
        recommendations=list(template.recommendations),
    )
