from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.config import settings
from domain.enums import MealSlot
from domain.schemas.plan_schemas import DayPlan, DistributeRequest, PlannedItem, PlannedItemCreate
from services.planner_service import PlannerService
from api.dependencies import get_planner_service

router = APIRouter(prefix="/plans", tags=["Meal Planning"])
logger = logging.getLogger("mealprep.api.plans")


@router.get("/week", response_model=Dict[str, DayPlan])
def get_week(
    day: Optional[date] = Query(default=None, description="Any day in the week; defaults to today"),
    week_starts_on: Optional[int] = Query(default=None, ge=0, le=1, description="0=Sunday, 1=Monday"),
    service: PlannerService = Depends(get_planner_service),
):
    """Seven day plans keyed by date, starting on the first day of the week"""
    starts_on = settings.week_starts_on if week_starts_on is None else week_starts_on
    return service.get_week_plan(day or date.today(), starts_on)


@router.post("/distribute", status_code=status.HTTP_204_NO_CONTENT)
def distribute_week(body: DistributeRequest, service: PlannerService = Depends(get_planner_service)):
    """
    Write a generated weekly plan onto seven calendar days.

    `week_start` must be the Sunday the plan was generated for: the plan's
    "Sun" items go to week_start, "Mon" to week_start + 1, and so on.
    Every slot of the week is replaced; slots without an item are cleared.
    """
    logger.info("Distributing weekly plan from %s", body.week_start)
    service.distribute(body.week_start, body.plan)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{day}", response_model=DayPlan)
def get_day(day: date, service: PlannerService = Depends(get_planner_service)):
    """Plan for one date (empty slots when nothing is planned)"""
    return service.get_day_plan(day)


@router.post("/{day}/{slot}/items", response_model=PlannedItem, status_code=status.HTTP_201_CREATED)
def add_item(
    day: date,
    slot: MealSlot,
    item: PlannedItemCreate,
    service: PlannerService = Depends(get_planner_service),
):
    """Append an item to a slot; items already there are kept"""
    return service.add_item(day, slot, item)


@router.delete("/{day}/{slot}/items/{item_id}")
def remove_item(
    day: date,
    slot: MealSlot,
    item_id: str,
    service: PlannerService = Depends(get_planner_service),
):
    """Remove one item from a slot"""
    if not service.remove_item(day, slot, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item {item_id} not found in {day} {slot.value}",
        )
    return {"status": "ok", "removed": item_id}
