"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class Database(ABC):
    """Abstract database interface for expensebook.

    State is kept as named records, each a JSON document that is read and
    written as a whole.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def load_record(self, name: str) -> Optional[dict[str, Any]]:
        """Load a named state record, or None if it was never saved."""
        pass

    @abstractmethod
    def save_record(self, name: str, payload: dict[str, Any]) -> None:
        """Overwrite a named state record."""
        pass

    @abstractmethod
    def delete_record(self, name: str) -> None:
        """Delete a named state record if present."""
        pass
