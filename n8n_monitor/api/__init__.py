"""
API package for the n8n monitor backend.

This package aggregates all API routers to be included in the FastAPI
application. Paths live under ``/api`` to match what the dashboard UI
requests.
"""

from fastapi import APIRouter
from .routes.config import router as config_router
from .routes.workflows import router as workflows_router
from .routes.executions import router as executions_router
from .routes.alerts import router as alerts_router
from .routes.webhook_tests import router as webhook_tests_router
from .routes.health import router as health_router

api_router = APIRouter()
api_router.include_router(config_router)
api_router.include_router(workflows_router)
api_router.include_router(executions_router)
api_router.include_router(alerts_router)
api_router.include_router(webhook_tests_router)
api_router.include_router(health_router)
