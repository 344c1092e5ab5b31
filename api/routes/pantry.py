"""Pantry management routes"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging
from typing import List

from domain.schemas.pantry_schemas import PantryItem, PantryItemCreate, PantryItemUpdate
from services.pantry_service import PantryService
from api.dependencies import get_db

router = APIRouter(prefix="/pantry", tags=["Pantry"])
logger = logging.getLogger("mealprep.api.pantry")


@router.get("", response_model=List[PantryItem])
def get_pantry(db: Session = Depends(get_db)):
    """All pantry items, most recently updated first"""
    return PantryService.list_pantry(db)


@router.post("", response_model=PantryItem, status_code=status.HTTP_201_CREATED)
def add_pantry_item(payload: PantryItemCreate, db: Session = Depends(get_db)):
    """Add a single pantry item."""
    return PantryService.add_item(db, payload)


@router.patch("/{item_id}", response_model=PantryItem)
def update_pantry_item(item_id: str, update: PantryItemUpdate, db: Session = Depends(get_db)):
    """
    Update fields of a pantry item.

    Only the fields present in the body change. Typical uses:
    - Record what is left after cooking: {"grams": 250}
    - Rename: {"name": "Basmati rice"}
    """
    return PantryService.update_item(db, item_id, update)


@router.delete("/{item_id}")
def delete_pantry_item(item_id: str, db: Session = Depends(get_db)):
    """Delete a specific pantry item"""
    if not PantryService.delete_item(db, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pantry item {item_id} not found",
        )
    return {"status": "ok", "removed": item_id}
