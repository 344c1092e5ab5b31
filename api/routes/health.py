"""Health check routes"""

from fastapi import APIRouter
import logging

from adapters import mongo_adapter
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("mealprep.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "ok",
        "service": settings.app_name,
        "plan_store": settings.plan_store_backend.value,
        "mongo_connected": mongo_adapter.is_connected(),
    }
