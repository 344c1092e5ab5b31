"""Services package - Business logic layer"""

from services.planner_service import PlannerService
from services.grocery_service import GroceryService
from services.pantry_service import PantryService
from services.pricing_service import PricingService, PriceTable, DEFAULT_PRICE_TABLE
from services.shopping_service import ShoppingService

__all__ = [
    "PlannerService",
    "GroceryService",
    "PantryService",
    "PricingService",
    "PriceTable",
    "DEFAULT_PRICE_TABLE",
    "ShoppingService",
]
