import re

from app.services.identifiers import ADMIN_PREFIX, STUDENT_PREFIX, generate_id
from app.services.student import student


def test_generate_id_has_prefix_and_four_digits():
    for prefix in (STUDENT_PREFIX, ADMIN_PREFIX):
        for _ in range(200):
            key = generate_id(prefix)
            assert re.fullmatch(rf"{prefix}\d{{4}}", key)
            assert 1000 <= int(key[3:]) <= 9999


def test_random_attendance_range():
    values = {student.random_attendance() for _ in range(500)}
    assert min(values) >= 60
    assert max(values) <= 100


def test_random_gpa_tiers(monkeypatch):
    tiers = {0.1: (3.5, 4.0), 0.5: (3.0, 3.4), 0.9: (2.0, 2.9)}
    for chance, (low, high) in tiers.items():
        monkeypatch.setattr(student.random, "random", lambda chance=chance: chance)
        for _ in range(100):
            gpa = student.random_gpa()
            assert low <= gpa <= high
            assert round(gpa, 1) == gpa


def test_student_defaults_keeps_given_fields():
    fields = student.student_defaults({"username": "ana", "course": "Physics"})
    assert fields["username"] == "ana"
    assert fields["course"] == "Physics"
    assert 60 <= fields["attendance"] <= 100
    assert 2.0 <= fields["gpa"] <= 4.0


def test_course_label():
    assert student.course_label(["Physics", "Mathematics"]) == "Physics, Mathematics"
    assert student.course_label([]) == "General"
    assert student.course_label(None) == "General"


def test_course_label_ignores_non_lists():
    assert student.course_label("Physics") == "General"
    assert student.course_label({"a": 1}) == "General"
    assert student.course_label([1, "Art"]) == "1, Art"
