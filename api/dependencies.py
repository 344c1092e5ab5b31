"""
API dependencies for dependency injection
"""

import logging
from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from adapters import mongo_adapter
from app.config import settings, PlanStoreBackend
from domain.models import get_db_session
from repositories import InMemoryPlanStore, MongoPlanStore, PantryRepository
from repositories.base import PlanStore, PantrySource
from services.grocery_service import GroceryService
from services.planner_service import PlannerService
from services.shopping_service import ShoppingService

logger = logging.getLogger("mealprep.api.dependencies")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


@lru_cache(maxsize=1)
def get_plan_store() -> PlanStore:
    """One plan store per process, chosen by settings.plan_store_backend."""
    if settings.plan_store_backend == PlanStoreBackend.MONGO:
        logger.info("Using MongoDB plan store")
        return MongoPlanStore(mongo_adapter.plans_collection())
    logger.info("Using in-memory plan store")
    return InMemoryPlanStore()


def get_pantry_source(db: Session = Depends(get_db)) -> PantrySource:
    return PantryRepository(db)


def get_planner_service(store: PlanStore = Depends(get_plan_store)) -> PlannerService:
    return PlannerService(store)


def get_grocery_service(store: PlanStore = Depends(get_plan_store)) -> GroceryService:
    return GroceryService(store)


def get_shopping_service(
    store: PlanStore = Depends(get_plan_store),
    pantry: PantrySource = Depends(get_pantry_source),
) -> ShoppingService:
    return ShoppingService(store, pantry)
