"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.plan_schemas import (
    Macros,
    Component,
    PlannedItem,
    PlannedItemCreate,
    DayPlan,
    AIPlanItem,
    AIPlanDay,
    AIWeeklyPlan,
    DistributeRequest,
)
from domain.schemas.grocery_schemas import (
    GroceryItem,
    GroceryList,
    PricedItem,
    ReconcileRequest,
    ReconcileResult,
    CostRequest,
    CostResponse,
    ShoppingReport,
)
from domain.schemas.pantry_schemas import (
    PantryItem,
    PantryItemCreate,
    PantryItemUpdate,
)

__all__ = [
    # Plans
    "Macros",
    "Component",
    "PlannedItem",
    "PlannedItemCreate",
    "DayPlan",
    "AIPlanItem",
    "AIPlanDay",
    "AIWeeklyPlan",
    "DistributeRequest",
    # Grocery
    "GroceryItem",
    "GroceryList",
    "PricedItem",
    "ReconcileRequest",
    "ReconcileResult",
    "CostRequest",
    "CostResponse",
    "ShoppingReport",
    # Pantry
    "PantryItem",
    "PantryItemCreate",
    "PantryItemUpdate",
]
