from typing import Optional

from fastapi import APIRouter, Depends, status

from app.api.deps import get_gateways
from app.core.exceptions import error_messages
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.auth import authenticate
from app.services.entities import Gateways
from app.services.student.student import course_label

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    body: Optional[RegisterRequest] = None,
    gateways: Gateways = Depends(get_gateways)
):
    """
    Create an admin (`role: "admin"`) or a student account.

    Students get a `STU` id, the selected courses joined as their course
    and random attendance / GPA. Admins get an `ADM` id.
    """
    body = body or RegisterRequest()
    fields = {
        "username": body.username,
        "email": body.email,
        "password": body.password,
    }

    if body.role == "admin":
        with error_messages(duplicate="Email already exists", failure="Database error"):
            gateways.admins.create(fields)
        return {"message": "Admin Registration Successful"}

    fields["course"] = course_label(body.selected_courses)
    with error_messages(duplicate="Email already exists", failure="Database error"):
        student_id = gateways.students.create(fields)
    return {"message": "Student Registration Successful", "id": student_id, "role": "student"}


@router.post("/login")
def login(
    body: Optional[LoginRequest] = None,
    gateways: Gateways = Depends(get_gateways)
):
    """
    Check the admin table, then the student table.
    """
    body = body or LoginRequest()
    with error_messages(failure="DB error"):
        role, account = authenticate(gateways, body.username_or_email, body.password)
    return {
        "message": "Login Successful",
        "username": account["username"],
        "role": role,
        "student": account,
    }
