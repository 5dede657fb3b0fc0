from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def database() -> MagicMock:
    """ScyllaDatabase with read/write mocked out"""
    database = MagicMock()
    database.keyspace = 'appsisted'
    database.table.side_effect = lambda name: f'appsisted."{name}"'
    database.read = AsyncMock()
    database.write = AsyncMock()
    return database
