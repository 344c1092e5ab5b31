"""
In-memory repositories - default plan store and a pantry source for tests and local runs.
"""

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Iterable, List, Optional

from core.utils.helpers import parse_date_key
from domain.enums import MealSlot
from domain.schemas.plan_schemas import DayPlan, PlannedItem
from domain.schemas.pantry_schemas import PantryItem
from repositories.base import PlanStore, PantrySource

logger = logging.getLogger("mealprep.store.memory")


class InMemoryPlanStore(PlanStore):
    """Keeps day plans as plain dicts so callers never share mutable state with the store."""

    def __init__(self):
        self._docs: Dict[str, dict] = {}
        self._lock = Lock()

    def _ensure(self, date_key: str) -> dict:
        doc = self._docs.get(date_key)
        if doc is None:
            doc = DayPlan.empty(parse_date_key(date_key)).model_dump(mode="json")
            self._docs[date_key] = doc
            logger.debug("Created empty day plan %s", date_key)
        return doc

    def get_day_plan(self, date_key: str) -> DayPlan:
        with self._lock:
            return DayPlan.model_validate(self._ensure(date_key))

    def replace_meal_slot(self, date_key: str, slot: MealSlot, items: List[PlannedItem]) -> None:
        slot = MealSlot(slot)
        with self._lock:
            doc = self._ensure(date_key)
            doc["meals"][slot.value] = [i.model_dump(mode="json") for i in items]

    def append_to_meal_slot(self, date_key: str, slot: MealSlot, item: PlannedItem) -> None:
        slot = MealSlot(slot)
        with self._lock:
            doc = self._ensure(date_key)
            doc["meals"].setdefault(slot.value, []).append(item.model_dump(mode="json"))

    def dates(self) -> List[str]:
        """Date keys that have a stored plan, ascending."""
        with self._lock:
            return sorted(self._docs)


class InMemoryPantrySource(PantrySource):
    def __init__(self, items: Optional[Iterable[PantryItem]] = None):
        self._items: List[PantryItem] = list(items or [])

    def add(self, item: PantryItem) -> PantryItem:
        self._items.append(item)
        return item

    def list_pantry(self) -> List[PantryItem]:
        def _ts(p: PantryItem) -> datetime:
            ts = p.updated_at
            return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)

        return sorted((p.model_copy() for p in self._items), key=_ts, reverse=True)
