"""Domain records, request payloads and response payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotFoundError(LookupError):
    """Raised when a requested record does not exist."""


class Level(str, Enum):
    """Level at which an achievement or a thesis was recognised."""

    INTERNASIONAL = "internasional"
    NASIONAL = "nasional"
    INTERNAL = "internal"

    def __str__(self) -> str:
        return self.value


@dataclass
class User:
    id: int = 0
    name: str = ""
    email: str = ""


@dataclass
class Academic:
    id: int = 0
    user_id: int = 0
    ipk: float = 0.0
    repeated_courses: int = 0
    semester: int = 0
    year: int = 0
    predicate_id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Achievement:
    id: int = 0
    user_id: int = 0
    title: str = ""
    certificate: bool = False
    rank: int = 0
    level: str = ""
    year: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Activity:
    id: int = 0
    user_id: int = 0
    organization: str = ""
    year: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Course:
    id: int = 0
    code: str = ""
    course_name: str = ""
    credit_course: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Thesis:
    id: int = 0
    user_id: int = 0
    level: str = ""


@dataclass
class Predicate:
    id: int = 0
    name: str = ""


@dataclass
class CreateAcademicRequest:
    user_id: int = 0
    ipk: float = 0.0
    repeated_courses: int = 0
    semester: int = 0
    year: int = 0
    predicate_id: int = 0


@dataclass
class UpdateAcademicRequest:
    ipk: float = 0.0
    repeated_courses: int = 0
    semester: int = 0
    year: int = 0
    predicate_id: int = 0


@dataclass
class AcademicResponse:
    id: int
    user_id: int
    ipk: float
    repeated_courses: int
    semester: int
    year: int
    predicate_id: int | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass
class CreateAchievementRequest:
    user_id: int = 0
    title: str = ""
    certificate: bool = False
    rank: int = 0
    level: str = ""
    year: int = 0


@dataclass
class UpdateAchievementRequest:
    title: str = ""
    certificate: bool = False
    rank: int = 0
    level: str = ""
    year: int = 0


@dataclass
class AchievementResponse:
    id: int
    user_id: int
    title: str
    certificate: bool
    rank: int
    level: str
    year: int
    created_at: datetime | None
    updated_at: datetime | None


@dataclass
class CreateActivityRequest:
    user_id: int = 0
    organization: str = ""
    year: int = 0


@dataclass
class UpdateActivityRequest:
    organization: str = ""
    year: int = 0


@dataclass
class ActivityResponse:
    id: int
    user_id: int
    organization: str
    year: int
    created_at: datetime | None
    updated_at: datetime | None


@dataclass
class CreateCourseRequest:
    code: str = ""
    course_name: str = ""
    credit_course: int = 0


@dataclass
class UpdateCourseRequest:
    code: str = ""
    course_name: str = ""
    credit_course: int = 0


@dataclass
class CourseResponse:
    id: int
    code: str
    course_name: str
    credit_course: int
    created_at: datetime | None
    updated_at: datetime | None


@dataclass
class FuzzyResult:
    student_id: int
    ipk: float
    semester: int
    repeated_courses: int
    achievement_level: str
    achievement_rank: int
    thesis_level: str
    thesis_impact: float
    activity_count: int
    predicate: str