"""
Pytest configuration and fixtures for the Blog Posts API suite
Suite-wide store connection, per-test seed/drop cycle, in-process HTTP client
"""

import os
import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from config.settings import TEST_DATABASE_URL
from core.data_factory import DataFactory
from core.rest_client import RestClient
from core.store_manager import TestStoreManager


# === STORE LIFECYCLE ===

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def store_manager() -> AsyncGenerator[TestStoreManager, None]:
    """Connect once per suite; close once at the end"""
    manager = TestStoreManager(
        TEST_DATABASE_URL,
        DataFactory(),
        store=os.getenv("TEST_STORE", "mongomock")
    )
    await manager.connect()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def rest_client(store_manager) -> AsyncGenerator[RestClient, None]:
    """Shared in-process client against the connected app"""
    client = RestClient(store_manager.app)
    yield client
    await client.close()


@pytest_asyncio.fixture(loop_scope="session")
async def seeded_store(store_manager) -> AsyncGenerator[TestStoreManager, None]:
    """Seed before each test, drop the database after it"""
    await store_manager.seed()
    yield store_manager
    await store_manager.drop()


@pytest.fixture
def data_factory() -> DataFactory:
    return DataFactory()


@pytest.fixture
def posts_service():
    from services.posts_service import get_posts_service
    return get_posts_service()


# === MARKERS ===

def pytest_collection_modifyitems(config, items):
    """Tag tests by the directory they live in"""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}suites{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
