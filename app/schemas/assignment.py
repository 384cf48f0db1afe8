from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class AssignmentBase(BaseModel):
    course_name: Any = Field(default=None, alias="courseName")
    title: Any = None
    description: Any = None
    # ISO date string, parsed by the assignments gateway
    due_date: Any = Field(default=None, alias="dueDate")

    model_config = ConfigDict(populate_by_name=True)


class AssignmentCreate(AssignmentBase):
    pass


class AssignmentUpdate(AssignmentBase):
    pass
