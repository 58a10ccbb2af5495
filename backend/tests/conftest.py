#!/usr/bin/env python
"""
pytest configuration file

This file contains shared fixtures for all tests.
"""

import os

# Must be set before app.settings is imported anywhere
os.environ["DRIVE_STORE_TYPE"] = "in_memory"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("GOOGLE_WORKSPACE_ID", "")
os.environ.setdefault("OPENAI_API_KEY", "")

import pytest  # noqa: E402

from app.components.drive.memory import InMemoryDriveStore  # noqa: E402
from app.components.drive.models import DriveContext  # noqa: E402
from app.components.drive.store_provider import reset_drive_store  # noqa: E402

WORKSPACE_ID = "ws_test"


@pytest.fixture
def workspace_id() -> str:
    """Workspace root id fixture"""
    return WORKSPACE_ID


@pytest.fixture
def memory_store() -> InMemoryDriveStore:
    """Fresh in-memory store with one registered workspace"""
    store = InMemoryDriveStore()
    store.add_workspace(WORKSPACE_ID, "Test Workspace")
    yield store
    store.clear_all()


@pytest.fixture
def ctx(memory_store: InMemoryDriveStore) -> DriveContext:
    """Drive context bound to the in-memory store"""
    return DriveContext(workspace_id=WORKSPACE_ID, store=memory_store)


@pytest.fixture(autouse=True)
def _reset_store_singleton():
    """Keep the store singleton from leaking between tests"""
    reset_drive_store()
    yield
    reset_drive_store()
