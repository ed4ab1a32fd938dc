"""Domain model entities for expensebook.

These are pure data classes independent of the storage schema. Stores replace
entities instead of mutating them, so an entity handed out earlier never
changes underneath its holder.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Category:
    """Top-level expense classification with ordered subcategories."""

    name: str
    is_default: bool = False
    subcategories: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Expense:
    """A committed expense line item.

    total_amount is stored at save time and never recomputed on read.
    """

    id: str
    date: date
    category: str
    subcategory: str
    description: str
    quantity: int
    unit_price: int
    recipient: str
    total_amount: int
