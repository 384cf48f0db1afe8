from pydantic import BaseModel, ConfigDict, Field
from typing import Any


# Values are not type-checked here: a missing or malformed one is rejected
# by the store and reported as a database error
class RegisterRequest(BaseModel):
    username: Any = None
    email: Any = None
    password: Any = None
    role: Any = None
    selected_courses: Any = Field(default=None, alias="selectedCourses")

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    username_or_email: Any = Field(default=None, alias="usernameOrEmail")
    password: Any = None

    model_config = ConfigDict(populate_by_name=True)
