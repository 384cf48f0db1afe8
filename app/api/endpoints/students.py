from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_gateways
from app.core.exceptions import error_messages
from app.schemas.student import StudentUpdate
from app.services.entities import Gateways

router = APIRouter()


@router.get("")
def get_students(gateways: Gateways = Depends(get_gateways)):
    """All students, in store order"""
    with error_messages(failure="Error fetching students"):
        return gateways.students.get_all()


@router.get("/{student_id}")
def get_student(
    student_id: str,
    gateways: Gateways = Depends(get_gateways)
):
    with error_messages(not_found="Student not found", failure="Error fetching student"):
        return gateways.students.get(student_id)


@router.put("/{student_id}")
def update_student(
    student_id: str,
    student: Optional[StudentUpdate] = None,
    gateways: Gateways = Depends(get_gateways)
):
    """
    Update the course, and the attendance when the body carries it.
    Reports success even if no student has this id.
    """
    student = student or StudentUpdate()
    fields = student.model_dump(include=student.model_fields_set | {"course"})
    with error_messages(failure="Database update failed"):
        gateways.students.update(student_id, fields)
    return {"message": "Student updated successfully"}


@router.delete("/{student_id}")
def delete_student(
    student_id: str,
    gateways: Gateways = Depends(get_gateways)
):
    with error_messages(failure="Database delete failed"):
        gateways.students.delete(student_id)
    return {"message": "Student deleted successfully"}
