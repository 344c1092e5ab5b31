"""
App package - Application configuration and core utilities.
Contains settings and exceptions shared by every layer.
"""

from app.config import settings
from app.exceptions import MealPrepError, ServiceValidationError, NotFoundError

__all__ = [
    "settings",
    "MealPrepError",
    "ServiceValidationError",
    "NotFoundError",
]
