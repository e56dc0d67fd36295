"""Service for a student's achievements."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from gradepredicate.records import (
    Achievement,
    AchievementResponse,
    CreateAchievementRequest,
    NotFoundError,
    UpdateAchievementRequest,
)


def _to_response(model: Achievement) -> AchievementResponse:
    return AchievementResponse(
        id=model.id,
        user_id=model.user_id,
        title=model.title,
        certificate=model.certificate,
        rank=model.rank,
        level=str(model.level),
        year=model.year,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class AchievementService:
    """Creates, reads, updates and deletes achievements.

    The repository returns None for a missing record and raises on failure;
    its exceptions propagate unchanged.
    """

    def __init__(self, repo: Any) -> None:
        self.repo = repo

    def _require_achievement(self, achievement_id: int) -> Achievement:
        model = self.repo.get_achievement_by_id(achievement_id)
        if model is None:
            raise NotFoundError("achievement not found")
        return model

    def create_achievement(self, req: CreateAchievementRequest) -> AchievementResponse:
        now = datetime.now()
        model = Achievement(
            user_id=req.user_id,
            title=req.title,
            certificate=req.certificate,
            rank=req.rank,
            level=req.level,
            year=req.year,
            created_at=now,
            updated_at=now,
        )
        self.repo.create_achievement(model)
        return _to_response(model)

    def get_achievement_by_id(self, achievement_id: int) -> AchievementResponse:
        return _to_response(self._require_achievement(achievement_id))

    def get_achievements_by_user_id(self, user_id: int) -> list[AchievementResponse]:
        return [
            _to_response(m)
            for m in self.repo.get_achievements_by_user_id(user_id) or ()
        ]

    def get_all_achievements(self) -> list[AchievementResponse]:
        return [_to_response(m) for m in self.repo.get_all_achievements() or ()]

    def update_achievement(
        self, achievement_id: int, req: UpdateAchievementRequest
    ) -> AchievementResponse:
        model = self._require_achievement(achievement_id)

        model.title = req.title
        model.certificate = req.certificate
        model.rank = req.rank
        model.level = req.level
        model.year = req.year
        model.updated_at = datetime.now()

        self.repo.update_achievement(model)
        return _to_response(model)

    def delete_achievement(self, achievement_id: int) -> None:
        self.repo.delete_achievement(achievement_id)