"""Shopping report service"""

import logging
from datetime import date
from typing import List, Optional

from core.utils.helpers import date_key, round_half_up
from domain.schemas.grocery_schemas import GroceryItem, ShoppingReport
from repositories.base import PlanStore, PantrySource
from services.grocery_service import GroceryService
from services.pantry_service import PantryService
from services.pricing_service import PriceTable, PricingService

logger = logging.getLogger("mealprep.shopping")


class ShoppingService:
    """Business logic for weekly shopping reports."""

    def __init__(
        self,
        store: PlanStore,
        pantry: PantrySource,
        price_table: Optional[PriceTable] = None,
    ):
        self.grocery = GroceryService(store)
        self.pantry = pantry
        self.price_table = price_table

    def build_report(self, week_start: date, days: int = 7, use_pantry: bool = True) -> ShoppingReport:
        """
        Create a shopping report for a date range:
        needed_ingredients = plan_requirements - pantry_inventory

        Algorithm:
        1. Aggregate component needs over the range
        2. Net them against the pantry (skipped when use_pantry is False)
        3. Price what is still needed

        Args:
            week_start: first day of the range
            days: number of days
            use_pantry: subtract pantry stock before pricing

        Returns:
            ShoppingReport
        """
        groceries = self.grocery.aggregate(week_start, days)

        if use_pantry:
            split = PantryService.reconcile_with_source(groceries.items, self.pantry)
            need, have = split.need, split.have
        else:
            need, have = [i.model_copy() for i in groceries.items], []

        cost = PricingService.estimate_cost(need, self.price_table)

        logger.info(
            "Shopping report %s+%d: need=%d have=%d missing=%d cost=%.2f",
            date_key(week_start),
            days,
            len(need),
            len(have),
            len(groceries.missing),
            cost,
        )
        return ShoppingReport(
            week_start=week_start,
            days=days,
            need=need,
            have=have,
            missing=groceries.missing,
            estimated_cost=cost,
        )

    @staticmethod
    def export_text(report: ShoppingReport) -> str:
        """Plain-text list suitable for sharing."""

        def line(it: GroceryItem) -> str:
            g = f": {round_half_up(it.grams)} g" if it.grams else ""
            return f"• {it.name}{g}"

        lines: List[str] = [f"Grocery list: week starting {date_key(report.week_start)}", "", "NEED:"]
        lines.extend(line(it) for it in report.need)
        if report.have:
            lines.extend(["", "FROM PANTRY:"])
            lines.extend(line(it) for it in report.have)
        if report.missing:
            lines.extend(["", "Meals without ingredient breakdown:"])
            lines.extend(f"- {m}" for m in report.missing)
        lines.extend(["", f"Estimated cost: ${report.estimated_cost:.2f}"])
        return "\n".join(lines)
