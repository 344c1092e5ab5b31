"""
Tests for shopping reports: aggregate, net against the pantry, price, export.
"""

from datetime import timedelta

from core.utils.helpers import date_key
from domain.enums import MealSlot
from domain.schemas.grocery_schemas import GroceryItem, ShoppingReport
from repositories import InMemoryPantrySource
from services.pricing_service import PriceTable
from services.shopping_service import ShoppingService
from test_fixtures import SUNDAY, pantry_item, planned


def _seed_week(store):
    store.append_to_meal_slot(
        date_key(SUNDAY), MealSlot.LUNCH, planned("Chicken & Rice", [("Chicken breast", 300), ("Rice", 450)])
    )
    store.append_to_meal_slot(
        date_key(SUNDAY + timedelta(days=2)), MealSlot.DINNER, planned("Rice bowl", [("rice", 450)])
    )
    store.append_to_meal_slot(date_key(SUNDAY + timedelta(days=4)), MealSlot.SNACK, planned("Takeout"))


def test_report_without_pantry_prices_everything(plan_store):
    _seed_week(plan_store)
    service = ShoppingService(plan_store, InMemoryPantrySource([pantry_item("Rice", grams=900)]))

    report = service.build_report(SUNDAY, 7, use_pantry=False)

    assert [(i.name, i.grams, i.count) for i in report.need] == [("Chicken breast", 300, 1), ("Rice", 900, 2)]
    assert report.have == []
    assert report.estimated_cost == 4.5
    assert report.missing == ["2024-01-11: Takeout"]


def test_report_with_pantry_prices_only_what_is_needed(plan_store):
    _seed_week(plan_store)
    service = ShoppingService(plan_store, InMemoryPantrySource([pantry_item("rice", grams=600)]))

    report = service.build_report(SUNDAY, 7)

    assert [(i.name, i.grams) for i in report.need] == [("Chicken breast", 300), ("Rice", 300)]
    assert [(i.name, i.grams) for i in report.have] == [("Rice", 600)]
    # 300 * 0.009 + 300 * 0.002
    assert report.estimated_cost == 3.3
    assert report.week_start == SUNDAY and report.days == 7


def test_report_respects_day_range(plan_store):
    _seed_week(plan_store)
    service = ShoppingService(plan_store, InMemoryPantrySource())

    report = service.build_report(SUNDAY, 1)

    assert [i.name for i in report.need] == ["Chicken breast", "Rice"]
    assert report.missing == []


def test_report_uses_custom_price_table(plan_store):
    _seed_week(plan_store)
    table = PriceTable(entries=(), default_price=0.001)
    service = ShoppingService(plan_store, InMemoryPantrySource(), price_table=table)

    assert service.build_report(SUNDAY, 7).estimated_cost == 1.2


def test_export_text_layout():
    report = ShoppingReport(
        week_start=SUNDAY,
        days=7,
        need=[GroceryItem(name="Chicken breast", grams=300.4, count=1), GroceryItem(name="Salt")],
        have=[GroceryItem(name="Rice", grams=600)],
        missing=["2024-01-11: Takeout"],
        estimated_cost=3.3,
    )

    assert ShoppingService.export_text(report) == "\n".join([
        "Grocery list: week starting 2024-01-07",
        "",
        "NEED:",
        "• Chicken breast: 300 g",
        "• Salt",
        "",
        "FROM PANTRY:",
        "• Rice: 600 g",
        "",
        "Meals without ingredient breakdown:",
        "- 2024-01-11: Takeout",
        "",
        "Estimated cost: $3.30",
    ])


def test_export_text_skips_empty_sections():
    report = ShoppingReport(week_start=SUNDAY, days=7)

    assert ShoppingService.export_text(report) == (
        "Grocery list: week starting 2024-01-07\n\nNEED:\n\nEstimated cost: $0.00"
    )
