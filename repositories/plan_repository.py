"""
Plan Repository - MongoDB-backed day plan storage.

One document per date:
    {"_id": "2024-01-07", "date": "2024-01-07",
     "meals": {"breakfast": [...], "lunch": [...], "dinner": [...], "snack": [...]},
     "updated_at": datetime}
"""

import logging
from datetime import datetime, timezone
from typing import List

from pymongo.collection import Collection

from core.utils.helpers import parse_date_key
from domain.enums import MealSlot
from domain.schemas.plan_schemas import DayPlan, PlannedItem
from repositories.base import PlanStore

logger = logging.getLogger("mealprep.store.mongo")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MongoPlanStore(PlanStore):
    """Day plans in a MongoDB collection. Every write touches a single document."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def _ensure_doc(self, date_key: str) -> None:
        empty = DayPlan.empty(parse_date_key(date_key)).model_dump(mode="json")
        self.collection.update_one(
            {"_id": date_key},
            {"$setOnInsert": {**empty, "updated_at": _now()}},
            upsert=True,
        )

    def get_day_plan(self, date_key: str) -> DayPlan:
        doc = self.collection.find_one({"_id": date_key})
        if doc is None:
            self._ensure_doc(date_key)
            logger.debug("Created empty day plan %s", date_key)
            return DayPlan.empty(parse_date_key(date_key))
        return DayPlan.model_validate(
            {"date": doc.get("date", date_key), "meals": doc.get("meals") or {}}
        )

    def replace_meal_slot(self, date_key: str, slot: MealSlot, items: List[PlannedItem]) -> None:
        slot = MealSlot(slot)
        self._ensure_doc(date_key)
        self.collection.update_one(
            {"_id": date_key},
            {
                "$set": {
                    f"meals.{slot.value}": [i.model_dump(mode="json") for i in items],
                    "updated_at": _now(),
                }
            },
        )

    def append_to_meal_slot(self, date_key: str, slot: MealSlot, item: PlannedItem) -> None:
        slot = MealSlot(slot)
        self._ensure_doc(date_key)
        self.collection.update_one(
            {"_id": date_key},
            {
                "$push": {f"meals.{slot.value}": item.model_dump(mode="json")},
                "$set": {"updated_at": _now()},
            },
        )
