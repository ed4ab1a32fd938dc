"""Persistence domain service."""

from typing import Any, Callable, Optional

from expensebook.database.base import Database
from expensebook.database.mappers import (
    category_from_payload,
    category_to_payload,
    expense_from_payload,
    expense_to_payload,
)
from expensebook.domain.defaults import default_categories
from expensebook.domain.state import AppState
from expensebook.logger import get_logger

logger = get_logger()

STATE_RECORD_NAME = "expense-store"


class PersistenceService:
    """Loads the application state and mirrors every change back to storage."""

    def __init__(self, db: Database, record_name: str = STATE_RECORD_NAME):
        """Initialize persistence service.

        Args:
            db: Database instance
            record_name: Name of the state record
        """
        self.db = db
        self.record_name = record_name
        self._unsubscribe: Optional[Callable[[], None]] = None

    def load(self) -> AppState:
        """Load the stored state, seeding default categories on first run.

        Returns:
            AppState bound to this service, so later mutations are saved
        """
        payload = self.db.load_record(self.record_name)
        if payload is None:
            logger.info("No stored state found, seeding default categories")
            state = AppState(categories=default_categories())
            self.save(state)
        else:
            state = state_from_payload(payload)
            logger.debug(
                f"Loaded {len(state.categories.list_categories())} categories and "
                f"{len(state.expenses)} expenses"
            )
        self.bind(state)
        return state

    def save(self, state: AppState) -> None:
        """Overwrite the stored record with the given state."""
        self.db.save_record(self.record_name, state_to_payload(state))
        logger.debug(f"Saved state record '{self.record_name}'")

    def bind(self, state: AppState) -> None:
        """Save the state after every mutation from now on."""
        self.unbind()
        self._unsubscribe = state.subscribe(self.save)

    def unbind(self) -> None:
        """Stop mirroring changes."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None


def state_to_payload(state: AppState) -> dict[str, Any]:
    """Serialize the whole state into the stored record layout."""
    return {
        "categories": [category_to_payload(c) for c in state.categories.list_categories()],
        "expenses": [expense_to_payload(e) for e in state.expenses.list_expenses()],
        "scriptUrl": state.script_url,
    }


def state_from_payload(payload: dict[str, Any]) -> AppState:
    """Rebuild state from the stored record layout."""
    return AppState(
        categories=[category_from_payload(c) for c in payload.get("categories", [])],
        expenses=[expense_from_payload(e) for e in payload.get("expenses", [])],
        script_url=payload.get("scriptUrl"),
    )
