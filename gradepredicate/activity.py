"""Service for a student's organisational activities."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from gradepredicate.records import (
    Activity,
    ActivityResponse,
    CreateActivityRequest,
    NotFoundError,
    UpdateActivityRequest,
)


def _to_response(model: Activity) -> ActivityResponse:
    return ActivityResponse(
        id=model.id,
        user_id=model.user_id,
        organization=model.organization,
        year=model.year,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class ActivityService:
    """Creates, reads, updates and deletes activities.

    The repository returns None for a missing record and raises on failure;
    its exceptions propagate unchanged.
    """

    def __init__(self, repo: Any) -> None:
        self.repo = repo

    def _require_activity(self, activity_id: int) -> Activity:
        model = self.repo.get_activity_by_id(activity_id)
        if model is None:
            raise NotFoundError("activity not found")
        return model

    def create_activity(self, req: CreateActivityRequest) -> ActivityResponse:
        now = datetime.now()
        model = Activity(
            user_id=req.user_id,
            organization=req.organization,
            year=req.year,
            created_at=now,
            updated_at=now,
        )
        self.repo.create_activity(model)
        return _to_response(model)

    def get_activity_by_id(self, activity_id: int) -> ActivityResponse:
        return _to_response(self._require_activity(activity_id))

    def get_activities_by_user_id(self, user_id: int) -> list[ActivityResponse]:
        return [
            _to_response(m) for m in self.repo.get_activities_by_user_id(user_id) or ()
        ]

    def get_all_activities(self) -> list[ActivityResponse]:
        return [_to_response(m) for m in self.repo.get_all_activities() or ()]

    def update_activity(
        self, activity_id: int, req: UpdateActivityRequest
    ) -> ActivityResponse:
        model = self._require_activity(activity_id)

        model.organization = req.organization
        model.year = req.year
        model.updated_at = datetime.now()

        self.repo.update_activity(model)
        return _to_response(model)

    def delete_activity(self, activity_id: int) -> None:
        self.repo.delete_activity(activity_id)