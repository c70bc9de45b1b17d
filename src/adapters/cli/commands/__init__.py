"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.evaluation_commands import (
    course_evaluations,
    trainee_evaluations,
    trainer_courses,
)

__all__ = [
    "course_evaluations",
    "trainee_evaluations",
    "trainer_courses",
]
