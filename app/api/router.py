from fastapi import APIRouter
from app.api.endpoints import assignments, auth, courses, students

api_router = APIRouter()

api_router.include_router(
    auth.router,
    tags=["auth"]
)

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"]
)

api_router.include_router(
    courses.router,
    prefix="/courses",
    tags=["courses"]
)

api_router.include_router(
    assignments.router,
    prefix="/assignments",
    tags=["assignments"]
)
