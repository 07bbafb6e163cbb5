"""
EduAssist — demo teacher/student dashboards backed by mock data.
FastAPI entry point.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import GradingError, grading_error_handler, validation_error_handler
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.routers import grade, notifications, student, teacher
from app.services.notifications import ToastQueue

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    description="Mock AI grading and role-based dashboards for teachers and students",
    version="1.0.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(GradingError, grading_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# One toast queue per app instance
app.state.toasts = ToastQueue(duration=settings.TOAST_DURATION_SECONDS)

# Include routers
app.include_router(grade.router)
app.include_router(teacher.router)
app.include_router(student.router)
app.include_router(notifications.router)


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/api/health")
async def health():
    return {"status": "healthy"}
