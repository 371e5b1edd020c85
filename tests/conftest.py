"""Shared test fixtures for object store tests."""

import sys
from pathlib import Path

# Add project root to path so imports work without PYTHONPATH
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from config.storage_config import StorageConfig
from storage.object_store import ObjectStore


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Storage root inside the test's temporary directory (not created yet)."""
    return tmp_path / "uploads"


@pytest.fixture
def storage_config(storage_root: Path) -> StorageConfig:
    return StorageConfig(root=storage_root)


@pytest.fixture
def store(storage_config: StorageConfig) -> ObjectStore:
    """An initialized ObjectStore rooted in a temporary directory."""
    object_store = ObjectStore(storage_config)
    object_store.initialize()
    return object_store


@pytest.fixture
def client(storage_config: StorageConfig) -> Generator[TestClient, None, None]:
    """Test client for an app whose storage root is a temporary directory."""
    from main import create_app

    app = create_app(storage_config)
    with TestClient(app) as c:
        yield c
