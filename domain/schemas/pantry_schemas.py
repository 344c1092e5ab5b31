"""Pydantic schemas for pantry inventory."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PantryItem(BaseModel):
    """Inventory entry. The name is the join key against grocery needs."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    grams: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    count: Optional[int] = Field(default=None, ge=0)
    unit: Optional[str] = None
    updated_at: datetime


class PantryItemCreate(BaseModel):
    name: str = Field(min_length=1)
    grams: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    count: Optional[int] = Field(default=None, ge=0)
    unit: Optional[str] = None


class PantryItemUpdate(BaseModel):
    """Partial update; only fields that are set are written."""

    name: Optional[str] = Field(default=None, min_length=1)
    grams: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    count: Optional[int] = Field(default=None, ge=0)
    unit: Optional[str] = None
