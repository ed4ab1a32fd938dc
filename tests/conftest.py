"""Shared pytest fixtures for expensebook tests."""

import tempfile
import os

import httpx
import pytest

from expensebook.database.factories import create_sqlite_database
from expensebook.domain.defaults import default_categories
from expensebook.domain.persistence import PersistenceService
from expensebook.domain.state import AppState
from expensebook.domain.workflow import EntryForm
from expensebook.logger import get_logger
from expensebook.sink import RemoteSink

SINK_URL = "https://sheets.example.com/exec"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory so config and logs stay local."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("EXPENSEBOOK_DB_PATH", raising=False)
    monkeypatch.delenv("EXPENSEBOOK_CONFIG", raising=False)

    yield home

    # Handlers installed by the CLI point at this run's streams and files
    logger = get_logger()
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def persistence(temp_db):
    """Create a PersistenceService with a temporary database."""
    return PersistenceService(temp_db)


@pytest.fixture
def state():
    """Create in-memory state seeded with the default categories."""
    return AppState(categories=default_categories(), script_url=SINK_URL)


@pytest.fixture
def sent_requests():
    """Collect requests received by the mock sink."""
    return []


@pytest.fixture
def ok_transport(sent_requests):
    """Mock sink transport that accepts everything."""

    def handler(request: httpx.Request) -> httpx.Response:
        sent_requests.append(request)
        return httpx.Response(200, text="ok")

    return httpx.MockTransport(handler)


@pytest.fixture
def failing_transport(sent_requests):
    """Mock sink transport that answers with a server error."""

    def handler(request: httpx.Request) -> httpx.Response:
        sent_requests.append(request)
        return httpx.Response(500, text="boom")

    return httpx.MockTransport(handler)


@pytest.fixture
def entry_form(state, ok_transport):
    """Create an EntryForm whose sink accepts every expense."""
    return EntryForm(state, RemoteSink(state.script_url, transport=ok_transport))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
