"""Grocery aggregation over stored day plans"""

import logging
from datetime import date
from typing import Dict, Iterable, List

from app.exceptions import ServiceValidationError
from core.utils.helpers import date_key, date_range, normalize_name
from domain.schemas.grocery_schemas import GroceryItem, GroceryList
from domain.schemas.plan_schemas import DayPlan
from repositories.base import PlanStore

logger = logging.getLogger("mealprep.grocery")


def merge_component(acc: Dict[str, GroceryItem], name: str, grams: float) -> None:
    """Fold one ingredient into the running map; the first spelling of a name is kept for display."""
    key = normalize_name(name)
    existing = acc.get(key)
    if existing is None:
        acc[key] = GroceryItem(name=name, grams=grams or 0, count=1)
    else:
        existing.grams += grams or 0
        existing.count = (existing.count or 0) + 1


def aggregate_day_plans(plans: Iterable[DayPlan]) -> GroceryList:
    """
    Reduce day plans to one deduplicated needs list.

    Only component breakdowns count toward the totals. An item without
    components adds a "YYYY-MM-DD: name" line to `missing` and nothing else,
    even when it carries its own grams or macros.
    """
    acc: Dict[str, GroceryItem] = {}
    missing: List[str] = []

    for plan in plans:
        key = date_key(plan.date)
        for item in plan.items():
            if item.components:
                for c in item.components:
                    merge_component(acc, c.name, c.grams)
            else:
                missing.append(f"{key}: {item.name}")

    items = sorted(acc.values(), key=lambda i: i.name.lower())
    return GroceryList(items=items, missing=missing)


class GroceryService:
    """Business logic for grocery needs."""

    def __init__(self, store: PlanStore):
        self.store = store

    def aggregate(self, start_date: date, days: int) -> GroceryList:
        """
        Grocery needs for `days` consecutive dates starting at start_date.

        Args:
            start_date: first calendar day
            days: number of days, > 0

        Returns:
            GroceryList with items sorted by name and breakdown-missing entries

        Raises:
            ServiceValidationError: if days is not positive
        """
        if days <= 0:
            raise ServiceValidationError(f"days must be positive, got {days}", code="INVALID_RANGE")

        plans = [self.store.get_day_plan(date_key(d)) for d in date_range(start_date, days)]
        result = aggregate_day_plans(plans)

        logger.info(
            "Aggregated %d days from %s: %d items, %d without breakdown",
            days,
            date_key(start_date),
            len(result.items),
            len(result.missing),
        )
        return result
