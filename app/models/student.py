from sqlalchemy import Column, Integer, Numeric, String
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(String(50), primary_key=True)
    username = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    course = Column(String(255), default="General", server_default="General")
    status = Column(String(50), default="Active", server_default="Active")
    attendance = Column(Integer, default=0, server_default="0")
    gpa = Column(Numeric(3, 1), default=0.0, server_default="0.0")
