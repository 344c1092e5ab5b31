"""Pydantic schemas for grocery lists, reconciliation and cost estimates."""

import datetime as dt
from pydantic import BaseModel, Field
from typing import List, Optional


class GroceryItem(BaseModel):
    """One logical grocery need. Items are the same entity when their trimmed lowercase names match."""
    name: str
    grams: float = Field(default=0, ge=0, allow_inf_nan=False)
    count: Optional[int] = Field(default=None, ge=0)


class GroceryList(BaseModel):
    """Aggregated needs for a date range."""
    items: List[GroceryItem] = []
    missing: List[str] = []


class PricedItem(BaseModel):
    """Anything with a name and an optional weight can be priced."""
    name: str
    grams: Optional[float] = Field(default=None, allow_inf_nan=False)


class ReconcileRequest(BaseModel):
    items: List[GroceryItem]


class ReconcileResult(BaseModel):
    """Grocery needs split against the pantry."""
    need: List[GroceryItem] = []
    have: List[GroceryItem] = []


class CostRequest(BaseModel):
    items: List[PricedItem]


class CostResponse(BaseModel):
    estimated_cost: float


class ShoppingReport(BaseModel):
    """Grocery list for a range, netted against the pantry and priced."""
    week_start: dt.date
    days: int
    need: List[GroceryItem] = []
    have: List[GroceryItem] = []
    missing: List[str] = []
    estimated_cost: float = 0.0
