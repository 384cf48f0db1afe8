from typing import Optional

from fastapi import APIRouter, Depends, status

from app.api.deps import get_gateways
from app.core.exceptions import error_messages
from app.schemas.assignment import AssignmentCreate, AssignmentUpdate
from app.services.entities import Gateways

router = APIRouter()


@router.get("")
def get_assignments(gateways: Gateways = Depends(get_gateways)):
    """Assignments, earliest due date first"""
    with error_messages(failure="Error fetching assignments"):
        return gateways.assignments.get_all()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_assignment(
    assignment: Optional[AssignmentCreate] = None,
    gateways: Gateways = Depends(get_gateways)
):
    """
    `courseName` is free text, it is not checked against the catalog.
    """
    assignment = assignment or AssignmentCreate()
    with error_messages(failure="Database error on assignment creation"):
        assignment_id = gateways.assignments.create(assignment.model_dump(by_alias=True))
    return {"message": "Assignment added successfully", "insertId": assignment_id}


@router.put("/{assignment_id}")
def update_assignment(
    assignment_id: str,
    assignment: Optional[AssignmentUpdate] = None,
    gateways: Gateways = Depends(get_gateways)
):
    assignment = assignment or AssignmentUpdate()
    with error_messages(failure="Database update failed"):
        gateways.assignments.update(assignment_id, assignment.model_dump(by_alias=True))
    return {"message": "Assignment updated successfully"}


@router.delete("/{assignment_id}")
def delete_assignment(
    assignment_id: str,
    gateways: Gateways = Depends(get_gateways)
):
    with error_messages(failure="Database delete failed"):
        gateways.assignments.delete(assignment_id)
    return {"message": "Assignment deleted successfully"}
