"""Generic SQLAlchemy database implementation."""

from typing import Any, Optional
from sqlalchemy.orm import Session

from expensebook.database.base import Database
from expensebook.database.models import StateRecord, create_session_factory


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def load_record(self, name: str) -> Optional[dict[str, Any]]:
        """Load a named state record."""
        session = self._get_session()
        # Other processes may have rewritten the record since it was cached
        record = (
            session.query(StateRecord)
            .filter(StateRecord.name == name)
            .populate_existing()
            .first()
        )
        if record is None:
            return None
        return dict(record.payload)

    def save_record(self, name: str, payload: dict[str, Any]) -> None:
        """Overwrite a named state record."""
        session = self._get_session()
        record = session.query(StateRecord).filter(StateRecord.name == name).first()
        if record is None:
            session.add(StateRecord(name=name, payload=payload))
        else:
            # Reassign so the JSON column is flagged dirty
            record.payload = payload
        session.commit()

    def delete_record(self, name: str) -> None:
        """Delete a named state record if present."""
        session = self._get_session()
        session.query(StateRecord).filter(StateRecord.name == name).delete()
        session.commit()
