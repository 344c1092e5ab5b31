"""
Base repository interfaces for the data access layer.
This follows the Repository pattern to separate business logic from data access.

Services depend on PlanStore and PantrySource only; which storage sits behind
them is decided by the host.
"""

from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session
from abc import ABC, abstractmethod

from domain.enums import MealSlot
from domain.schemas.plan_schemas import DayPlan, PlannedItem
from domain.schemas.pantry_schemas import PantryItem

ModelType = TypeVar("ModelType")


class PlanStore(ABC):
    """
    Day plan storage keyed by YYYY-MM-DD.

    Replace and append are separate operations: replace overwrites a slot,
    append adds to it. Every call may raise; callers see the error unchanged.
    """

    @abstractmethod
    def get_day_plan(self, date_key: str) -> DayPlan:
        """Return the plan for a date, creating an empty four-slot plan if none exists."""

    @abstractmethod
    def replace_meal_slot(self, date_key: str, slot: MealSlot, items: List[PlannedItem]) -> None:
        """Overwrite one slot with exactly `items`."""

    @abstractmethod
    def append_to_meal_slot(self, date_key: str, slot: MealSlot, item: PlannedItem) -> None:
        """Add one item to the end of a slot."""

    def remove_item_from_slot(self, date_key: str, slot: MealSlot, item_id: str) -> bool:
        """Drop an item by id. Returns False when no item had that id."""
        current = self.get_day_plan(date_key).meals[slot]
        kept = [i for i in current if i.id != item_id]
        if len(kept) == len(current):
            return False
        self.replace_meal_slot(date_key, slot, kept)
        return True


class PantrySource(ABC):
    """Read access to the household pantry."""

    @abstractmethod
    def list_pantry(self) -> List[PantryItem]:
        """All pantry items, most recently updated first."""


class BaseRepository(Generic[ModelType], ABC):
    """
    Base SQL repository providing common CRUD operations.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Update existing entity"""
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: str) -> bool:
        """Delete entity by ID"""
        entity = self.get_by_id(entity_id)
        if entity:
            self.db.delete(entity)
            self.db.commit()
            return True
        return False

