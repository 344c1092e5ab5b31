"""Rough grocery cost estimates from a per-gram price table"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple, Union

from core.utils.helpers import round_half_up
from domain.schemas.grocery_schemas import GroceryItem, PricedItem

DEFAULT_PRICE_PER_GRAM = 0.004  # about $4/kg


@dataclass(frozen=True)
class PriceTable:
    """
    Ordered (substring, price per gram) pairs.

    Lookup returns the first entry whose substring occurs in the item name,
    so a more specific substring has to come before any shorter one it
    contains ("peanut butter" before "peanut").
    """

    entries: Tuple[Tuple[str, float], ...]
    default_price: float = DEFAULT_PRICE_PER_GRAM

    def price_per_gram(self, name: str) -> float:
        k = (name or "").lower()
        for pattern, price in self.entries:
            if pattern.lower() in k:
                return price
        return self.default_price


DEFAULT_PRICE_TABLE = PriceTable(
    entries=(
        ("chicken", 0.009),
        ("rice", 0.002),
        ("oats", 0.003),
        ("banana", 0.004),
        ("apple", 0.004),
        ("egg", 0.002),
        ("milk", 0.0015),
        ("yogurt", 0.0025),
        ("bread", 0.003),
        ("pasta", 0.002),
        ("beans", 0.0025),
        ("tuna", 0.01),
        ("peanut butter", 0.007),
        ("peanut", 0.006),
        ("oil", 0.01),
        ("olive", 0.01),
        ("broccoli", 0.005),
        ("spinach", 0.006),
        ("tomato", 0.004),
        ("onion", 0.003),
    )
)


class PricingService:
    @staticmethod
    def estimate_cost(
        items: Iterable[Union[GroceryItem, PricedItem]],
        table: Optional[PriceTable] = None,
    ) -> float:
        """
        Total price of a list. Grams are rounded to whole grams and floored
        at 0 per item; the sum is rounded to cents once, at the end.
        """
        table = table or DEFAULT_PRICE_TABLE
        total = Decimal(0)
        for it in items:
            grams = max(0, round_half_up(it.grams or 0))
            total += grams * Decimal(str(table.price_per_gram(it.name)))
        return float(total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
