"""Pytest configuration and fixtures for hands-free tests."""

import pytest
import tempfile
import logging
import itertools
from datetime import datetime
from pathlib import Path

from pubsub import pub

from handsfree.commands.interpreter import RuleBasedInterpreter
from handsfree.models.state import AppState
from handsfree.services.command_service import CommandService
from handsfree.services.dispatcher import CommandDispatcher
from handsfree.storage.entity_store import EntityStore


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

FIXED_TIME = datetime(2024, 5, 17, 9, 30, 0)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests wiring several components together")


@pytest.fixture(autouse=True)
def reset_pubsub():
    """Drop all pub/sub subscriptions made during a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def app_state():
    return AppState()


@pytest.fixture
def interpreter():
    return RuleBasedInterpreter()


@pytest.fixture
def id_factory():
    """Deterministic ids: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def fixed_time():
    return FIXED_TIME


@pytest.fixture
def dispatcher(id_factory, fixed_time):
    return CommandDispatcher(id_factory=id_factory, clock=lambda: fixed_time)


@pytest.fixture
def entity_store():
    return EntityStore()


@pytest.fixture
def command_service(app_state, interpreter, dispatcher, entity_store):
    return CommandService(
        state=app_state,
        interpreter=interpreter,
        dispatcher=dispatcher,
        store=entity_store,
    )


@pytest.fixture
def write_config(temp_data_dir):
    """Write a YAML config file into the temp dir and return its path."""
    def _write(content: str, name: str = "handsfree.yaml") -> str:
        path = Path(temp_data_dir) / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
