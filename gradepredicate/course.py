"""Service for the course catalogue."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from gradepredicate.records import (
    Course,
    CourseResponse,
    CreateCourseRequest,
    NotFoundError,
    UpdateCourseRequest,
)


def _to_response(model: Course) -> CourseResponse:
    return CourseResponse(
        id=model.id,
        code=model.code,
        course_name=model.course_name,
        credit_course=model.credit_course,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _new_course(req: CreateCourseRequest) -> Course:
    now = datetime.now()
    return Course(
        code=req.code,
        course_name=req.course_name,
        credit_course=req.credit_course,
        created_at=now,
        updated_at=now,
    )


class CourseService:
    """Creates, reads, updates, deletes and bulk-imports courses.

    The repository returns None for a missing record and raises on failure;
    its exceptions propagate unchanged.
    """

    def __init__(self, repo: Any) -> None:
        self.repo = repo

    def _require_course(self, course_id: int) -> Course:
        model = self.repo.get_course_by_id(course_id)
        if model is None:
            raise NotFoundError("course not found")
        return model

    def create_course(self, req: CreateCourseRequest) -> CourseResponse:
        model = _new_course(req)
        self.repo.create_course(model)
        return _to_response(model)

    def get_course_by_id(self, course_id: int) -> CourseResponse:
        return _to_response(self._require_course(course_id))

    def get_courses(self) -> list[CourseResponse]:
        return [_to_response(m) for m in self.repo.get_courses() or ()]

    def update_course(self, course_id: int, req: UpdateCourseRequest) -> CourseResponse:
        model = self._require_course(course_id)

        model.code = req.code
        model.course_name = req.course_name
        model.credit_course = req.credit_course
        model.updated_at = datetime.now()

        self.repo.update_course(model)
        return _to_response(model)

    def delete_course(self, course_id: int) -> None:
        self._require_course(course_id)
        self.repo.delete_course(course_id)

    def import_courses(self, reqs: Iterable[CreateCourseRequest]) -> None:
        """Create every course in order, stopping at the first failure."""
        for req in reqs:
            self.repo.create_course(_new_course(req))