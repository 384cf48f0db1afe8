from sqlalchemy import Column, Date, Integer, String, Text
from app.core.database import Base


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    course_name = Column("courseName", String(100), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    due_date = Column("dueDate", Date)
