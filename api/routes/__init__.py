"""API routes package"""

from . import health, plans, grocery, pantry

__all__ = ["health", "plans", "grocery", "pantry"]
