"""
Pantry Repository - Data access layer for pantry operations
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from repositories.base import BaseRepository, PantrySource
from domain.models import PantryItem
from domain.schemas.pantry_schemas import (
    PantryItem as PantryItemSchema,
    PantryItemCreate,
    PantryItemUpdate,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PantryRepository(BaseRepository[PantryItem], PantrySource):
    """Repository for pantry item data access"""

    def __init__(self, db: Session):
        super().__init__(db, PantryItem)

    def list_pantry(self) -> List[PantryItemSchema]:
        """All pantry items, newest first"""
        rows = (
            self.db.query(PantryItem)
            .order_by(PantryItem.updated_at.desc(), PantryItem.name)
            .all()
        )
        return [PantryItemSchema.model_validate(r) for r in rows]

    def add(self, data: PantryItemCreate) -> PantryItem:
        """Insert a new pantry item"""
        item = PantryItem(**data.model_dump(), updated_at=_now())
        return self.create(item)

    def patch(self, item_id: str, data: PantryItemUpdate) -> Optional[PantryItem]:
        """Apply the fields set on `data`; None when the id is unknown"""
        item = self.get_by_id(item_id)
        if item is None:
            return None
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(item, field, value)
        item.updated_at = _now()
        return self.update(item)
