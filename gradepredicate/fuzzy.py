"""Fuzzy predicate calculation for a student's academic record."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from gradepredicate.records import Achievement, FuzzyResult, Level, Thesis

logger = logging.getLogger(__name__)

_LEVEL_PRIORITY = {
    str(Level.INTERNASIONAL): 3,
    str(Level.NASIONAL): 2,
    str(Level.INTERNAL): 1,
}

_THESIS_IMPACT = {
    str(Level.INTERNASIONAL): 5.0,
    str(Level.NASIONAL): 3.0,
}

Inference = Callable[[float, int, int, int, str, float, str, int], str]


class FuzzyError(Exception):
    """Raised when the fuzzy predicate cannot be calculated or stored."""


def level_priority(level: Any) -> int:
    """Return the priority of a level: higher is better, 0 when unknown."""
    return _LEVEL_PRIORITY.get(str(level), 0)


def best_achievement(achievements: Sequence[Achievement] | None) -> Achievement | None:
    """Pick the achievement with the highest level, then the lowest rank."""
    if not achievements:
        return None
    best = achievements[0]
    for achievement in achievements[1:]:
        if level_priority(achievement.level) > level_priority(best.level):
            best = achievement
        elif achievement.level == best.level and achievement.rank < best.rank:
            best = achievement
    return best


def thesis_impact(thesis: Thesis) -> float:
    """Impact factor of a thesis by its publication level; 1.0 otherwise."""
    return _THESIS_IMPACT.get(str(thesis.level), 1.0)


class FuzzyService:
    """Runs the inference for a student and stores the resulting predicate.

    ``infer`` receives, in order: IPK, semester, repeated courses, best
    achievement rank, best achievement level, thesis impact, thesis level
    and activity count, and returns the predicate name.
    """

    def __init__(
        self,
        academic_repo: Any,
        thesis_repo: Any,
        achievement_repo: Any,
        activity_repo: Any,
        predicate_repo: Any,
        infer: Inference,
    ) -> None:
        self.academic_repo = academic_repo
        self.thesis_repo = thesis_repo
        self.achievement_repo = achievement_repo
        self.activity_repo = activity_repo
        self.predicate_repo = predicate_repo
        self.infer = infer

    @staticmethod
    def _optional(what: str, fetch: Callable[[], Any]) -> list:
        try:
            return list(fetch() or ())
        except Exception as err:
            logger.warning("error getting %s data: %s", what, err)
            return []

    def calculate_fuzzy(self, student_id: int) -> FuzzyResult:
        try:
            academics = self.academic_repo.get_academics_by_user_id(student_id)
        except Exception as err:
            raise FuzzyError(f"error getting academic data: {err}") from err
        if not academics:
            raise FuzzyError(f"academic data not found for student ID: {student_id}")
        academic = academics[0]

        theses = self._optional(
            "thesis", lambda: self.thesis_repo.get_theses_by_user_id(student_id)
        )
        if theses:
            thesis = theses[0]
        else:
            logger.warning("thesis data not found for student ID: %d", student_id)
            thesis = Thesis()

        achievements = self._optional(
            "achievement",
            lambda: self.achievement_repo.get_achievements_by_user_id(student_id),
        )
        activities = self._optional(
            "activity", lambda: self.activity_repo.get_activities_by_user_id(student_id)
        )

        best = best_achievement(achievements)
        best_level = str(best.level) if best is not None else ""
        best_rank = best.rank if best is not None else 0
        activity_count = len(activities)
        impact = thesis_impact(thesis)
        thesis_level = str(thesis.level)

        predicate_name = self.infer(
            academic.ipk,
            academic.semester,
            academic.repeated_courses,
            best_rank,
            best_level,
            impact,
            thesis_level,
            activity_count,
        )

        try:
            predicate = self.predicate_repo.get_by_name(predicate_name)
        except Exception as err:
            raise FuzzyError(f"error getting predicate: {err}") from err
        if predicate is None:
            raise FuzzyError("error getting predicate: predicate not found")

        academic.predicate_id = predicate.id
        try:
            self.academic_repo.update_academic(academic)
        except Exception as err:
            raise FuzzyError(f"error updating academic predicate: {err}") from err

        return FuzzyResult(
            student_id=student_id,
            ipk=academic.ipk,
            semester=academic.semester,
            repeated_courses=academic.repeated_courses,
            achievement_level=best_level,
            achievement_rank=best_rank,
            thesis_level=thesis_level,
            thesis_impact=impact,
            activity_count=activity_count,
            predicate=predicate_name,
        )