from collections.abc import AsyncIterator, Generator
from contextlib import asynccontextmanager

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from test.service.parking.unit.in_memory_repos import (
    FakeCredentialManager,
    InMemoryParkingSiteCommandRepo,
    InMemoryParkingSiteQueryRepo,
    InMemorySchemaCommandRepo,
    InMemoryUserCommandRepo,
    InMemoryUserQueryRepo,
    SequentialAccessCodeGenerator,
)


@asynccontextmanager
async def _in_memory_lifespan(app: FastAPI) -> AsyncIterator[None]:
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()


@pytest.fixture
def client(store) -> Generator[TestClient, None, None]:
    """The real app and container, with every driven adapter swapped for its in-memory twin"""
    container.user_command_repo.override(providers.Object(InMemoryUserCommandRepo(store)))
    container.user_query_repo.override(providers.Object(InMemoryUserQueryRepo(store)))
    container.parking_site_command_repo.override(
        providers.Object(InMemoryParkingSiteCommandRepo(store))
    )
    container.parking_site_query_repo.override(
        providers.Object(InMemoryParkingSiteQueryRepo(store))
    )
    container.schema_command_repo.override(providers.Object(InMemorySchemaCommandRepo(store)))
    container.credential_manager.override(providers.Object(FakeCredentialManager()))
    container.access_code_generator.override(providers.Object(SequentialAccessCodeGenerator()))

    app = create_app(lifespan=_in_memory_lifespan, title_suffix=' (Test)')
    with TestClient(app) as test_client:
        yield test_client
