from pydantic import BaseModel
from typing import Any


class CourseBase(BaseModel):
    name: Any = None
    description: Any = None


class CourseCreate(CourseBase):
    pass


class CourseUpdate(CourseBase):
    pass
