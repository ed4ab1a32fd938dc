"""Domain layer for expensebook application."""

from expensebook.domain.categories import CategoryStore
from expensebook.domain.expenses import ExpenseStore
from expensebook.domain.history import HistoryView
from expensebook.domain.state import AppState

__all__ = [
    "AppState",
    "CategoryStore",
    "ExpenseStore",
    "HistoryView",
]
