from fastapi import APIRouter

from linguaflow.api.v1.endpoints import answers, lessons, students, tutors

api_router = APIRouter()
api_router.include_router(
    students.router,
    prefix='/students',
    tags=['students'],
)
api_router.include_router(
    lessons.router,
    prefix='/lessons',
    tags=['lessons'],
)
api_router.include_router(
    tutors.router,
    prefix='/tutors',
    tags=['tutors'],
)
api_router.include_router(
    answers.router,
    prefix='/answers',
    tags=['grading'],
)
