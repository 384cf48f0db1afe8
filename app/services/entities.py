from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from app.core.config import settings
from app.core.database import Store
from app.models.admin import Admin
from app.models.assignment import Assignment
from app.models.course import Course
from app.models.student import Student
from app.services.gateway import Entity, RecordGateway
from app.services.identifiers import ADMIN_PREFIX, STUDENT_PREFIX
from app.services.student.student import coerce_student, student_defaults


def course_defaults(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Missing or empty description is stored as ''."""
    return {**fields, "description": fields.get("description") or ""}


def coerce_assignment(fields: Dict[str, Any]) -> Dict[str, Any]:
    """dueDate arrives as an ISO "YYYY-MM-DD" string."""
    due_date = fields.get("dueDate")
    if isinstance(due_date, str):
        return {**fields, "dueDate": date.fromisoformat(due_date)}
    if due_date is not None and not isinstance(due_date, date):
        raise TypeError(f"dueDate must be a date string, not {type(due_date).__name__}")
    return fields


STUDENTS = Entity(
    model=Student,
    label="Student",
    editable=("course", "attendance"),
    id_prefix=STUDENT_PREFIX,
    derive=student_defaults,
    coerce=coerce_student,
    partial_update=True,
)

ADMINS = Entity(
    model=Admin,
    label="Admin",
    # No admin update route
    editable=(),
    id_prefix=ADMIN_PREFIX,
)

COURSES = Entity(
    model=Course,
    label="Course",
    editable=("name", "description"),
    order_by="name",
    derive=course_defaults,
)

ASSIGNMENTS = Entity(
    model=Assignment,
    label="Assignment",
    editable=("courseName", "title", "description", "dueDate"),
    order_by="dueDate",
    coerce=coerce_assignment,
)


@dataclass(frozen=True)
class Gateways:
    students: RecordGateway
    admins: RecordGateway
    courses: RecordGateway
    assignments: RecordGateway


def build_gateways(store: Store, max_id_attempts: int = settings.MAX_ID_ATTEMPTS) -> Gateways:
    return Gateways(
        students=RecordGateway(store, STUDENTS, max_id_attempts),
        admins=RecordGateway(store, ADMINS, max_id_attempts),
        courses=RecordGateway(store, COURSES, max_id_attempts),
        assignments=RecordGateway(store, ASSIGNMENTS, max_id_attempts),
    )
