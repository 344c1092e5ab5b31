"""API routes for grocery lists, pantry netting and cost estimates."""

from datetime import date
from typing import Optional
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from app.config import settings
from domain.schemas.grocery_schemas import (
    CostRequest,
    CostResponse,
    GroceryList,
    ReconcileRequest,
    ReconcileResult,
    ShoppingReport,
)
from repositories.base import PantrySource
from services.grocery_service import GroceryService
from services.pantry_service import PantryService
from services.pricing_service import PricingService
from services.shopping_service import ShoppingService
from api.dependencies import get_grocery_service, get_pantry_source, get_shopping_service

router = APIRouter(prefix="/grocery", tags=["Grocery"])
logger = logging.getLogger("mealprep.api.grocery")


def _days(days: Optional[int]) -> int:
    return settings.default_grocery_days if days is None else days


@router.get("", response_model=GroceryList)
def get_grocery_list(
    start: date = Query(..., description="First day of the range"),
    days: Optional[int] = Query(default=None, ge=1, le=31),
    service: GroceryService = Depends(get_grocery_service),
):
    """
    Aggregate ingredient components of every planned item in the range.

    Items without a component breakdown are listed under `missing` and do not
    contribute to the totals.
    """
    return service.aggregate(start, _days(days))


@router.post("/reconcile", response_model=ReconcileResult)
def reconcile(request: ReconcileRequest, pantry: PantrySource = Depends(get_pantry_source)):
    """Split grocery items into `have` (covered by the pantry) and `need` (to buy)"""
    return PantryService.reconcile_with_source(request.items, pantry)


@router.post("/cost", response_model=CostResponse)
def estimate_cost(request: CostRequest):
    """Rough price of a list using the default per-gram price table"""
    return CostResponse(estimated_cost=PricingService.estimate_cost(request.items))


@router.get("/report", response_model=ShoppingReport)
def get_report(
    start: date = Query(...),
    days: Optional[int] = Query(default=None, ge=1, le=31),
    use_pantry: bool = Query(default=True),
    service: ShoppingService = Depends(get_shopping_service),
):
    """Grocery list netted against the pantry and priced"""
    return service.build_report(start, _days(days), use_pantry)


@router.get("/report.txt", response_class=PlainTextResponse)
def export_report(
    start: date = Query(...),
    days: Optional[int] = Query(default=None, ge=1, le=31),
    use_pantry: bool = Query(default=True),
    service: ShoppingService = Depends(get_shopping_service),
):
    """Same report as plain text for sharing"""
    report = service.build_report(start, _days(days), use_pantry)
    return ShoppingService.export_text(report)
