"""Test helpers shared across test modules."""

from datetime import date

from expensebook.domain.entities import Expense


def make_expense(expense_id: str, day: date, category: str = "Food", **kwargs) -> Expense:
    """Build an expense with sensible defaults."""
    quantity = kwargs.pop("quantity", 1)
    unit_price = kwargs.pop("unit_price", 100)
    return Expense(
        id=expense_id,
        date=day,
        category=category,
        subcategory=kwargs.pop("subcategory", "Groceries"),
        description=kwargs.pop("description", ""),
        quantity=quantity,
        unit_price=unit_price,
        recipient=kwargs.pop("recipient", ""),
        total_amount=quantity * unit_price,
    )
