"""Application state container."""

from typing import Callable, Iterable, Optional

from expensebook.domain.categories import CategoryStore
from expensebook.domain.entities import Category, Expense
from expensebook.domain.expenses import ExpenseStore

Listener = Callable[["AppState"], None]


class AppState:
    """Holds the category store, the expense store and the sink URL.

    Subscribers are called after every mutation of any of the three.
    """

    def __init__(
        self,
        categories: Iterable[Category] = (),
        expenses: Iterable[Expense] = (),
        script_url: Optional[str] = None,
    ):
        self._listeners: list[Listener] = []
        self.expenses = ExpenseStore(expenses, on_change=self._notify)
        self.categories = CategoryStore(self.expenses, categories, on_change=self._notify)
        self.script_url = script_url or None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def set_script_url(self, url: Optional[str]) -> None:
        """Set the remote sink URL. Empty values disable the sink."""
        self.script_url = url.strip() if url and url.strip() else None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
