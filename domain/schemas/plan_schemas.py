from __future__ import annotations

import datetime as dt
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from core.utils.helpers import new_item_id
from domain.enums import ItemSource, MealSlot, Weekday, MEAL_SLOTS

# NaN and infinity parse from JSON but are never valid amounts
Grams = Annotated[float, Field(ge=0, allow_inf_nan=False)]
MacroValue = Annotated[float, Field(allow_inf_nan=False)]
# generated plans must carry real numbers; "400" as a string is rejected
StrictMacro = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class Macros(BaseModel):
    kcal: Optional[MacroValue] = None
    protein: Optional[MacroValue] = None
    carbs: Optional[MacroValue] = None
    fat: Optional[MacroValue] = None


class Component(BaseModel):
    """Ingredient-level breakdown entry of a composite item."""

    name: str = Field(min_length=1)
    grams: Grams


class PlannedItem(BaseModel):
    id: str = Field(default_factory=new_item_id)
    name: str = Field(min_length=1)
    source: ItemSource = ItemSource.CUSTOM
    macros: Optional[Macros] = None
    grams: Optional[Grams] = None
    components: Optional[List[Component]] = None


def _empty_meals() -> Dict[MealSlot, List[PlannedItem]]:
    return {slot: [] for slot in MEAL_SLOTS}


class DayPlan(BaseModel):
    """
    Planned food for one calendar date.

    All four slot keys are present after validation, even when a stored
    record only carries some of them.
    """

    date: dt.date
    meals: Dict[MealSlot, List[PlannedItem]] = Field(default_factory=_empty_meals)

    @model_validator(mode="after")
    def fill_missing_slots(self) -> "DayPlan":
        for slot in MEAL_SLOTS:
            self.meals.setdefault(slot, [])
        self.meals = {slot: self.meals[slot] for slot in MEAL_SLOTS}
        return self

    @classmethod
    def empty(cls, day: dt.date) -> "DayPlan":
        return cls(date=day)

    def items(self) -> List[PlannedItem]:
        """All items in slot-then-item order."""
        return [item for slot in MEAL_SLOTS for item in self.meals[slot]]


# ---------- generated weekly plan (boundary input) ----------


class AIPlanItem(BaseModel):
    name: str = Field(min_length=1)
    serving: Optional[str] = None
    grams: Optional[Grams] = None
    calories: StrictMacro
    protein: StrictMacro
    carbs: StrictMacro
    fat: StrictMacro
    components: Optional[List[Component]] = None


class AIPlanDay(BaseModel):
    day: Weekday
    items: List[AIPlanItem] = []


class AIWeeklyPlan(BaseModel):
    """
    A generated seven-day plan, already extracted from the generator's reply.

    Accepts either the bare shape {"meals": [...]} or the generator's
    envelope {"weeklyPlan": {"meals": [...]}}.
    """

    meals: List[AIPlanDay]

    @model_validator(mode="before")
    @classmethod
    def unwrap_envelope(cls, data):
        if isinstance(data, dict) and "meals" not in data and isinstance(data.get("weeklyPlan"), dict):
            return data["weeklyPlan"]
        return data


# ---------- API payloads ----------


class DistributeRequest(BaseModel):
    week_start: dt.date
    plan: AIWeeklyPlan


class PlannedItemCreate(BaseModel):
    """Manual entry for a slot; id is assigned by the service when omitted."""

    id: Optional[str] = None
    name: str = Field(min_length=1)
    source: ItemSource = ItemSource.CUSTOM
    macros: Optional[Macros] = None
    grams: Optional[Grams] = None
    components: Optional[List[Component]] = None
