"""Expense store domain service."""

from typing import Callable, Iterable, Optional

from expensebook.domain.entities import Expense
from expensebook.logger import get_logger

logger = get_logger()

RECENT_LIMIT = 5


class ExpenseStore:
    """Owns the mutable expense collection."""

    def __init__(
        self,
        expenses: Optional[Iterable[Expense]] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        """Initialize expense store.

        Args:
            expenses: Initial expenses in insertion order
            on_change: Callback invoked after every mutation
        """
        self._expenses: list[Expense] = list(expenses or [])
        self._on_change = on_change

    def __len__(self) -> int:
        return len(self._expenses)

    def list_expenses(self) -> list[Expense]:
        """List expenses in insertion order."""
        return list(self._expenses)

    def get_expense(self, expense_id: str) -> Optional[Expense]:
        """Get expense by ID, or None if absent."""
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    def add_expense(self, expense: Expense) -> None:
        """Append an expense. The caller assigns its ID."""
        self._expenses.append(expense)
        logger.info(f"Added expense {expense.id} ({expense.category} > {expense.subcategory})")
        self._changed()

    def remove_expense(self, expense_id: str) -> bool:
        """Remove the first expense with a matching ID.

        Returns:
            True if an expense was removed, False if none matched
        """
        for index, expense in enumerate(self._expenses):
            if expense.id == expense_id:
                del self._expenses[index]
                logger.info(f"Removed expense {expense_id}")
                self._changed()
                return True
        return False

    def remove_by_category(self, category_name: str, notify: bool = True) -> int:
        """Remove every expense filed under a category.

        Args:
            category_name: Category label to match exactly
            notify: If False, the caller reports the change itself

        Returns:
            Number of removed expenses
        """
        kept = [exp for exp in self._expenses if exp.category != category_name]
        removed = len(self._expenses) - len(kept)
        if removed:
            self._expenses = kept
            logger.info(f"Removed {removed} expense(s) of category '{category_name}'")
            if notify:
                self._changed()
        return removed

    def sorted_descending_by_date(self) -> list[Expense]:
        """Return expenses newest first.

        Equal dates keep their insertion order.
        """
        return sorted(self._expenses, key=lambda exp: exp.date, reverse=True)

    def visible_slice(self, show_all: bool) -> list[Expense]:
        """Return all sorted expenses, or only the most recent ones."""
        ordered = self.sorted_descending_by_date()
        if show_all:
            return ordered
        return ordered[:RECENT_LIMIT]

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
