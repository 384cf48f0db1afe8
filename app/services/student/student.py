import random
from typing import Any, Dict

DEFAULT_COURSE = "General"

ATTENDANCE_MIN = 60
ATTENDANCE_MAX = 100


def course_label(selected_courses: Any) -> str:
    """Comma separated course list picked at registration, or "General"."""
    if isinstance(selected_courses, list) and selected_courses:
        return ", ".join(str(course) for course in selected_courses)
    return DEFAULT_COURSE


def random_attendance() -> int:
    return random.randint(ATTENDANCE_MIN, ATTENDANCE_MAX)


def random_gpa() -> float:
    """Tiered draw: 33% honours, 33% good standing, 34% the rest."""
    chance = random.random()
    if chance < 0.33:
        low, high = 3.5, 4.0
    elif chance < 0.66:
        low, high = 3.0, 3.4
    else:
        low, high = 2.0, 2.9
    return round(random.uniform(low, high), 1)


def student_defaults(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Attendance and GPA assigned when a student row is created."""
    return {
        **fields,
        "attendance": random_attendance(),
        "gpa": random_gpa(),
    }


def coerce_student(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Numeric strings are accepted for attendance, other text is rejected."""
    attendance = fields.get("attendance")
    if isinstance(attendance, str):
        return {**fields, "attendance": int(attendance)}
    if attendance is not None and not isinstance(attendance, (int, float)):
        raise TypeError(f"attendance must be a number, not {type(attendance).__name__}")
    return fields
