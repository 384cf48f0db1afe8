from sqlalchemy import Column, Integer, String, Text
from app.core.database import Base

DEFAULT_COURSES = ("Computer Science", "Mathematics", "Physics", "Engineering", "Cybersecurity")
DEFAULT_COURSE_DESCRIPTION = "Standard Course"


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text)
