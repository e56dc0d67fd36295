"""Service for a student's academic records."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from gradepredicate.records import (
    Academic,
    AcademicResponse,
    CreateAcademicRequest,
    NotFoundError,
    UpdateAcademicRequest,
)


def _to_response(model: Academic) -> AcademicResponse:
    return AcademicResponse(
        id=model.id,
        user_id=model.user_id,
        ipk=model.ipk,
        repeated_courses=model.repeated_courses,
        semester=model.semester,
        year=model.year,
        predicate_id=model.predicate_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class AcademicService:
    """Creates, reads, updates and deletes academic records.

    Repositories return None for a missing record and raise on failure;
    their exceptions propagate unchanged.
    """

    def __init__(self, repo: Any, user_repo: Any, predicate_repo: Any) -> None:
        self.repo = repo
        self.user_repo = user_repo
        self.predicate_repo = predicate_repo

    def _require_user(self, user_id: int) -> None:
        if self.user_repo.get_user_by_id(user_id) is None:
            raise NotFoundError("user not found")

    def _require_academic(self, academic_id: int) -> Academic:
        model = self.repo.get_academic_by_id(academic_id)
        if model is None:
            raise NotFoundError("academic record not found")
        return model

    def create_academic(self, req: CreateAcademicRequest) -> AcademicResponse:
        self._require_user(req.user_id)
        now = datetime.now()
        model = Academic(
            user_id=req.user_id,
            ipk=req.ipk,
            repeated_courses=req.repeated_courses,
            semester=req.semester,
            year=req.year,
            predicate_id=req.predicate_id,
            created_at=now,
            updated_at=now,
        )
        self.repo.create_academic(model)
        return _to_response(model)

    def get_academic_by_id(self, academic_id: int) -> AcademicResponse:
        return _to_response(self._require_academic(academic_id))

    def get_academics_by_user_id(self, user_id: int) -> list[AcademicResponse]:
        return [_to_response(m) for m in self.repo.get_academics_by_user_id(user_id) or ()]

    def get_all_academics(self) -> list[AcademicResponse]:
        return [_to_response(m) for m in self.repo.get_all_academics() or ()]

    def update_academic(
        self, academic_id: int, req: UpdateAcademicRequest
    ) -> AcademicResponse:
        model = self._require_academic(academic_id)
        self._require_user(model.user_id)

        model.ipk = req.ipk
        model.repeated_courses = req.repeated_courses
        model.semester = req.semester
        model.year = req.year
        model.predicate_id = req.predicate_id
        model.updated_at = datetime.now()

        self.repo.update_academic(model)
        return _to_response(model)

    def delete_academic(self, academic_id: int) -> None:
        self.repo.delete_academic(academic_id)