"""Category store domain service."""

from dataclasses import replace
from typing import Callable, Iterable, Optional

from expensebook.domain.defaults import is_default_subcategory
from expensebook.domain.entities import Category
from expensebook.domain.expenses import ExpenseStore
from expensebook.logger import get_logger

logger = get_logger()


class CategoryStore:
    """Owns the mutable category taxonomy.

    The store trusts its caller: name format validation and interactive
    confirmation happen before these methods are called. Missing targets
    are silently ignored.
    """

    def __init__(
        self,
        expense_store: ExpenseStore,
        categories: Optional[Iterable[Category]] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        """Initialize category store.

        Args:
            expense_store: Expense store that receives cascading deletes
            categories: Initial categories in display order
            on_change: Callback invoked after every mutation
        """
        self.expense_store = expense_store
        self._categories: list[Category] = list(categories or [])
        self._on_change = on_change

    def list_categories(self) -> list[Category]:
        """List categories in insertion order."""
        return list(self._categories)

    def get_category(self, name: str) -> Optional[Category]:
        """Get category by exact name."""
        for cat in self._categories:
            if cat.name == name:
                return cat
        return None

    def add_category(self, name: str) -> bool:
        """Append a user-defined category with no subcategories.

        Returns:
            True if added, False if the name is empty or already present
        """
        if not name or self.get_category(name) is not None:
            return False
        self._categories.append(Category(name=name, is_default=False))
        logger.info(f"Added category '{name}'")
        self._changed()
        return True

    def remove_category(self, name: str) -> bool:
        """Remove a user-defined category and every expense filed under it.

        Default categories are never removed.

        Returns:
            True if the category was removed
        """
        cat = self.get_category(name)
        if cat is None or cat.is_default:
            return False
        self._categories = [c for c in self._categories if c.name != name]
        removed = self.expense_store.remove_by_category(name, notify=False)
        if removed:
            logger.warning(f"Removed category '{name}' together with {removed} expense(s)")
        else:
            logger.info(f"Removed category '{name}'")
        self._changed()
        return True

    def add_subcategory(self, category_name: str, subcategory: str) -> bool:
        """Append a subcategory to a category. Duplicates are not prevented.

        Returns:
            True if the category exists and was updated
        """
        return self._update(
            category_name, lambda subs: subs + (subcategory,), f"Added subcategory '{subcategory}'"
        )

    def remove_subcategory(self, category_name: str, subcategory: str) -> bool:
        """Remove every occurrence of a subcategory from a category.

        Returns:
            True if anything was removed
        """
        cat = self.get_category(category_name)
        if cat is None or subcategory not in cat.subcategories:
            return False
        return self._update(
            category_name,
            lambda subs: tuple(s for s in subs if s != subcategory),
            f"Removed subcategory '{subcategory}'",
        )

    def is_protected_subcategory(self, category_name: str, subcategory: str) -> bool:
        """Return True if the subcategory is an original entry of a default category.

        Subcategories added later to a default category stay removable.
        """
        cat = self.get_category(category_name)
        if cat is None or not cat.is_default:
            return False
        return is_default_subcategory(category_name, subcategory)

    def _update(self, category_name: str, change, message: str) -> bool:
        for index, cat in enumerate(self._categories):
            if cat.name == category_name:
                self._categories[index] = replace(cat, subcategories=change(cat.subcategories))
                logger.info(f"{message} in '{category_name}'")
                self._changed()
                return True
        return False

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
