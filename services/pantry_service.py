from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence
from sqlalchemy.orm import Session
import logging

from core.utils.helpers import normalize_name
from domain.schemas.grocery_schemas import GroceryItem, ReconcileResult
from domain.schemas.pantry_schemas import (
    PantryItem,
    PantryItemCreate,
    PantryItemUpdate,
)
from repositories import PantryRepository
from repositories.base import PantrySource
from app.exceptions import NotFoundError

logger = logging.getLogger("mealprep.pantry")


def _grams(value: Optional[float]) -> Decimal:
    """Decimal of the value as written, so 0.9 - 0.2 splits into 0.2 and 0.7"""
    return Decimal(str(value or 0))


class PantryService:
    @staticmethod
    def reconcile(items: Sequence[GroceryItem], pantry: Iterable[PantryItem]) -> ReconcileResult:
        """
        Split grocery needs into what the pantry covers and what must be bought.

        Matching is by trimmed, case-insensitive name; a later pantry entry
        with the same name replaces an earlier one. Grams are compared as-is
        (no unit conversion) and a missing weight counts as 0. For every
        matched item, have.grams + need.grams equals the item's grams as
        decimal numbers (the split is done in Decimal, not binary floats).
        Nothing is written back to the pantry.

        Args:
            items: aggregated grocery needs
            pantry: current inventory

        Returns:
            ReconcileResult(need, have)
        """
        by_name: Dict[str, PantryItem] = {}
        for p in pantry:
            by_name[normalize_name(p.name)] = p

        need: List[GroceryItem] = []
        have: List[GroceryItem] = []

        for it in items:
            p = by_name.get(normalize_name(it.name))
            if p is None:
                need.append(it.model_copy())
                continue

            pg = _grams(p.grams)
            ig = _grams(it.grams)
            if pg >= ig:
                have.append(GroceryItem(name=it.name, grams=float(ig)))
            else:
                have.append(GroceryItem(name=it.name, grams=float(pg)))
                need.append(GroceryItem(name=it.name, grams=float(ig - pg)))

        logger.debug("Reconciled %d items: %d need, %d have", len(items), len(need), len(have))
        return ReconcileResult(need=need, have=have)

    @staticmethod
    def reconcile_with_source(items: Sequence[GroceryItem], source: PantrySource) -> ReconcileResult:
        """Reconcile against whatever the pantry source currently lists"""
        return PantryService.reconcile(items, source.list_pantry())

    # ---------- inventory ----------

    @staticmethod
    def list_pantry(db: Session) -> List[PantryItem]:
        return PantryRepository(db).list_pantry()

    @staticmethod
    def add_item(db: Session, data: PantryItemCreate) -> PantryItem:
        row = PantryRepository(db).add(data)
        logger.info("Added pantry item %s (%s)", row.id, row.name)
        return PantryItem.model_validate(row)

    @staticmethod
    def update_item(db: Session, item_id: str, data: PantryItemUpdate) -> PantryItem:
        """
        Update a pantry item.

        Raises:
            NotFoundError: if no item has this id
        """
        row = PantryRepository(db).patch(item_id, data)
        if row is None:
            raise NotFoundError(f"Pantry item {item_id} not found")
        return PantryItem.model_validate(row)

    @staticmethod
    def delete_item(db: Session, item_id: str) -> bool:
        removed = PantryRepository(db).delete(item_id)
        if removed:
            logger.info("Removed pantry item %s", item_id)
        return removed
