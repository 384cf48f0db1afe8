from pydantic import BaseModel
from typing import Any


class StudentUpdate(BaseModel):
    course: Any = None
    # Written only when the key is present in the body, null included
    attendance: Any = None
