from sqlalchemy import Column, String
from app.core.database import Base


class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(50), primary_key=True)
    username = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
