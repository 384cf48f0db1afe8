from sqlalchemy import func, inspect, insert, select
from sqlalchemy.exc import OperationalError

from app.core.database import init_db
from app.models.course import Course, DEFAULT_COURSES
from app.models.student import Student


def course_names(store):
    with store.connect() as connection:
        return [row.name for row in connection.execute(select(Course.__table__.c.name))]


def test_creates_tables_and_seeds_courses(store):
    tables = set(inspect(store.engine).get_table_names())
    assert {"students", "admins", "courses", "assignments"} <= tables
    assert sorted(course_names(store)) == sorted(DEFAULT_COURSES)


def test_seed_runs_only_once(store):
    init_db(store)
    init_db(store)
    assert len(course_names(store)) == len(DEFAULT_COURSES)


def test_existing_courses_are_not_reseeded(empty_store):
    store = empty_store
    Course.__table__.create(bind=store.engine)
    with store.begin() as connection:
        connection.execute(insert(Course.__table__).values(name="Art", description=""))

    init_db(store)

    assert course_names(store) == ["Art"]


def test_failing_table_does_not_stop_startup(empty_store, monkeypatch):
    store = empty_store

    def broken_create(*args, **kwargs):
        raise OperationalError("CREATE TABLE students", {}, Exception("disk full"))

    monkeypatch.setattr(Student.__table__, "create", broken_create)

    init_db(store)

    tables = set(inspect(store.engine).get_table_names())
    assert "students" not in tables
    assert {"admins", "courses", "assignments"} <= tables
    with store.connect() as connection:
        count = connection.execute(select(func.count()).select_from(Course.__table__)).scalar_one()
    assert count == len(DEFAULT_COURSES)
