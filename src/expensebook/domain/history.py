"""Expense history view."""

from expensebook.domain.entities import Expense
from expensebook.domain.expenses import RECENT_LIMIT, ExpenseStore


class HistoryView:
    """Read-only projection of the expense store, newest first.

    Collapsed to the most recent entries until toggled. Rows are recomputed
    from the store on every read.
    """

    def __init__(self, store: ExpenseStore, show_all: bool = False):
        self.store = store
        self.show_all = show_all

    def rows(self) -> list[Expense]:
        return self.store.visible_slice(self.show_all)

    def toggle(self) -> bool:
        """Flip between collapsed and expanded. Returns the new flag."""
        self.show_all = not self.show_all
        return self.show_all

    @property
    def has_more(self) -> bool:
        """True when collapsing actually hides rows."""
        return len(self.store) > RECENT_LIMIT

    @property
    def hidden_count(self) -> int:
        if self.show_all:
            return 0
        return max(0, len(self.store) - RECENT_LIMIT)
