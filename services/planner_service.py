from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Mapping, Tuple, Union

from pydantic import ValidationError

from app.exceptions import ServiceValidationError
from core.utils.helpers import (
    date_key,
    date_range,
    new_item_id,
    parse_serving_grams,
    round_half_up,
    start_of_week,
)
from domain.enums import ItemSource, MealSlot, Weekday, MEAL_SLOTS, WEEKDAY_ORDER
from domain.schemas.plan_schemas import (
    AIPlanItem,
    AIWeeklyPlan,
    DayPlan,
    Macros,
    PlannedItem,
    PlannedItemCreate,
)
from repositories.base import PlanStore


logger = logging.getLogger("mealprep.planner")


def parse_weekly_plan(payload: Union[AIWeeklyPlan, Mapping[str, Any]]) -> AIWeeklyPlan:
    """Validate a generated plan at the boundary. Raises ServiceValidationError."""
    if isinstance(payload, AIWeeklyPlan):
        return payload
    try:
        return AIWeeklyPlan.model_validate(payload)
    except ValidationError as e:
        raise ServiceValidationError(
            "Weekly plan is malformed",
            details={"errors": e.errors(include_url=False, include_input=False)},
            code="MALFORMED_PLAN",
        ) from e


def to_planned_item(it: AIPlanItem) -> PlannedItem:
    """Stored form of a generated item: fresh id, recipe source, integer macros.

    Explicit grams are kept as given; only grams read from serving text are rounded.
    """
    grams = it.grams if it.grams is not None else parse_serving_grams(it.serving)
    return PlannedItem(
        id=new_item_id(),
        name=it.name,
        source=ItemSource.RECIPE,
        macros=Macros(
            kcal=round_half_up(it.calories),
            protein=round_half_up(it.protein),
            carbs=round_half_up(it.carbs),
            fat=round_half_up(it.fat),
        ),
        grams=grams,
        components=[c.model_copy() for c in it.components] if it.components else it.components,
    )


class PlannerService:
    """
    Planner:
    - distributes a generated seven-day plan onto calendar dates
    - reads single days and whole weeks
    - manual add / remove of slot items
    All reads and writes go through the PlanStore; store errors propagate.
    """

    def __init__(self, store: PlanStore):
        self.store = store

    # ---------- distribution ----------

    def distribute(self, week_start: date, plan: Union[AIWeeklyPlan, Mapping[str, Any]]) -> None:
        """
        Write a generated week onto week_start .. week_start + 6.

        Offset i takes the items of day name WEEKDAY_ORDER[i] (offset 0 is
        always "Sun"), whatever weekday week_start really is. Item j fills
        slot j in breakfast/lunch/dinner/snack order; a slot with no item is
        cleared and items past the fourth are dropped. Each slot is fully
        replaced, so repeating the call leaves the same final state.

        Issues exactly 28 replace_meal_slot calls. A store failure stops the
        run; slots already written stay written.
        """
        weekly = parse_weekly_plan(plan)

        if week_start.weekday() != 6:
            logger.warning(
                "Distributing plan from %s (%s): offset 0 is still treated as Sun",
                week_start,
                week_start.strftime("%a"),
            )

        by_day: Dict[Weekday, List[AIPlanItem]] = {}
        for d in weekly.meals:
            by_day[d.day] = d.items or []

        # every slot is built before the first write
        writes: List[Tuple[str, MealSlot, List[PlannedItem]]] = []
        for offset, day_name in enumerate(WEEKDAY_ORDER):
            key = date_key(week_start + timedelta(days=offset))
            items = by_day.get(day_name, [])
            for j, slot in enumerate(MEAL_SLOTS):
                writes.append((key, slot, [to_planned_item(items[j])] if j < len(items) else []))
            if len(items) > len(MEAL_SLOTS):
                logger.info("%s (%s): dropped %d items past the snack slot",
                            key, day_name.value, len(items) - len(MEAL_SLOTS))

        for key, slot, slot_items in writes:
            self.store.replace_meal_slot(key, slot, slot_items)

        logger.info("Distributed weekly plan onto %s .. %s",
                    date_key(week_start), date_key(week_start + timedelta(days=6)))

    # ---------- queries ----------

    def get_day_plan(self, day: date) -> DayPlan:
        return self.store.get_day_plan(date_key(day))

    def get_week_plan(self, any_day: date, week_starts_on: int = 1) -> Dict[str, DayPlan]:
        start = start_of_week(any_day, week_starts_on)
        return {date_key(d): self.store.get_day_plan(date_key(d)) for d in date_range(start, 7)}

    # ---------- manual edits ----------

    def add_item(self, day: date, slot: MealSlot, item: Union[PlannedItemCreate, PlannedItem]) -> PlannedItem:
        """Append one item to a slot; existing items stay."""
        data = item.model_dump()
        if not data.get("id"):
            data["id"] = new_item_id()
        planned = PlannedItem.model_validate(data)
        self.store.append_to_meal_slot(date_key(day), MealSlot(slot), planned)
        logger.debug("Added %s to %s %s", planned.name, date_key(day), MealSlot(slot).value)
        return planned

    def remove_item(self, day: date, slot: MealSlot, item_id: str) -> bool:
        removed = self.store.remove_item_from_slot(date_key(day), MealSlot(slot), item_id)
        if not removed:
            logger.info("Item %s not in %s %s", item_id, date_key(day), MealSlot(slot).value)
        return removed
