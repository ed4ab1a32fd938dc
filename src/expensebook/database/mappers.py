"""Mapper functions to convert between domain entities and stored JSON.

Field names follow the persisted layout and the remote sink wire format,
both of which use camelCase keys.
"""

from typing import Any

from expensebook.domain.entities import Category, Expense
from expensebook.utils.date_parser import parse_stored_date


def category_to_payload(category: Category) -> dict[str, Any]:
    """Convert a Category entity to its stored form."""
    return {
        "name": category.name,
        "isDefault": category.is_default,
        "subcategories": list(category.subcategories),
    }


def category_from_payload(data: dict[str, Any]) -> Category:
    """Convert a stored category to a Category entity."""
    return Category(
        name=data["name"],
        is_default=bool(data.get("isDefault", False)),
        subcategories=tuple(data.get("subcategories", [])),
    )


def expense_to_payload(expense: Expense) -> dict[str, Any]:
    """Convert an Expense entity to its stored and wire form."""
    return {
        "id": expense.id,
        "date": expense.date.isoformat(),
        "category": expense.category,
        "subcategory": expense.subcategory,
        "description": expense.description,
        "quantity": expense.quantity,
        "unitPrice": expense.unit_price,
        "recipient": expense.recipient,
        "totalAmount": expense.total_amount,
    }


def expense_from_payload(data: dict[str, Any]) -> Expense:
    """Convert a stored expense to an Expense entity."""
    return Expense(
        id=str(data["id"]),
        date=parse_stored_date(data["date"]),
        category=data.get("category", ""),
        subcategory=data.get("subcategory", ""),
        description=data.get("description", ""),
        quantity=int(data.get("quantity", 1)),
        unit_price=int(data.get("unitPrice", 0)),
        recipient=data.get("recipient", ""),
        total_amount=int(data.get("totalAmount", 0)),
    )
