from typing import Optional

from fastapi import APIRouter, Depends, status

from app.api.deps import get_gateways
from app.core.exceptions import error_messages
from app.schemas.course import CourseCreate, CourseUpdate
from app.services.entities import Gateways

router = APIRouter()


@router.get("")
def get_courses(gateways: Gateways = Depends(get_gateways)):
    """Course catalog sorted by name"""
    with error_messages(failure="Error fetching courses"):
        return gateways.courses.get_all()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_course(
    course: Optional[CourseCreate] = None,
    gateways: Gateways = Depends(get_gateways)
):
    course = course or CourseCreate()
    with error_messages(duplicate="Course name already exists", failure="Database error on course creation"):
        course_id = gateways.courses.create(course.model_dump())
    return {"message": "Course added successfully", "insertId": course_id}


@router.put("/{course_id}")
def update_course(
    course_id: str,
    course: Optional[CourseUpdate] = None,
    gateways: Gateways = Depends(get_gateways)
):
    """Overwrites both name and description."""
    course = course or CourseUpdate()
    with error_messages(failure="Database update failed"):
        gateways.courses.update(course_id, course.model_dump())
    return {"message": "Course updated successfully"}


@router.delete("/{course_id}")
def delete_course(
    course_id: str,
    gateways: Gateways = Depends(get_gateways)
):
    with error_messages(failure="Database delete failed"):
        gateways.courses.delete(course_id)
    return {"message": "Course deleted successfully"}
