"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, PlanStore, PantrySource
from repositories.memory_repository import InMemoryPlanStore, InMemoryPantrySource
from repositories.plan_repository import MongoPlanStore
from repositories.pantry_repository import PantryRepository

__all__ = [
    "BaseRepository",
    "PlanStore",
    "PantrySource",
    "InMemoryPlanStore",
    "InMemoryPantrySource",
    "MongoPlanStore",
    "PantryRepository",
]
