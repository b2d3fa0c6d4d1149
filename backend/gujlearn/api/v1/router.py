"""API v1 router - includes all v1 endpoints."""

from fastapi import APIRouter

from gujlearn.api.v1.endpoints import content_import, health, progress, quizzes, usage_sessions

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(content_import.router)
api_router.include_router(quizzes.router)
api_router.include_router(progress.router)
api_router.include_router(usage_sessions.router)
