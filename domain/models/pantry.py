"""
Pantry inventory model.
"""

from sqlalchemy import (
    Column,
    Float,
    Integer,
    Text,
    TIMESTAMP,
    CheckConstraint,
)
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class PantryItem(Base):
    """Household pantry items (what is already owned)"""

    __tablename__ = "pantry_item"

    id = Column(Text, primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    grams = Column(Float)
    count = Column(Integer)
    unit = Column(Text)
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        CheckConstraint("grams IS NULL OR grams >= 0", name="ck_pantry_grams_nonneg"),
        CheckConstraint("count IS NULL OR count >= 0", name="ck_pantry_count_nonneg"),
    )

    def __repr__(self) -> str:
        return f"<PantryItem {self.name!r} grams={self.grams} count={self.count}>"
