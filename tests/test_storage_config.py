"""Tests for environment-driven configuration and app startup."""

import json
import os
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

from config.storage_config import StorageConfig, load_storage_config
from services.settings_helpers import get_int_setting, get_setting


class TestSettingsHelpers:
    def test_env_value_wins(self) -> None:
        with patch.dict(os.environ, {"OBJECT_STORE_TEST_VALUE": "abc"}):
            assert get_setting("OBJECT_STORE_TEST_VALUE", "default") == "abc"

    def test_missing_or_empty_falls_back(self) -> None:
        with patch.dict(os.environ, {"OBJECT_STORE_TEST_VALUE": ""}):
            assert get_setting("OBJECT_STORE_TEST_VALUE", "default") == "default"
        assert get_setting("OBJECT_STORE_TEST_UNSET_VALUE", 7) == 7

    def test_int_coercion(self) -> None:
        with patch.dict(os.environ, {"OBJECT_STORE_TEST_PORT": "8080"}):
            assert get_int_setting("OBJECT_STORE_TEST_PORT", 3000) == 8080
        with patch.dict(os.environ, {"OBJECT_STORE_TEST_PORT": "not-a-port"}):
            assert get_int_setting("OBJECT_STORE_TEST_PORT", 3000) == 3000

    def test_other_value_types_are_returned_raw(self) -> None:
        with patch.dict(os.environ, {"OBJECT_STORE_TEST_VALUE": "1.5"}):
            assert get_setting("OBJECT_STORE_TEST_VALUE", None, "float") == "1.5"


class TestLoadStorageConfig:
    def test_defaults(self, monkeypatch) -> None:
        for var in ("OBJECT_STORE_ROOT", "OBJECT_STORE_MIME_TYPES_FILE", "HOST", "PORT"):
            monkeypatch.delenv(var, raising=False)

        config = load_storage_config()

        assert config == StorageConfig(root=Path("uploads"), host="0.0.0.0", port=3000)

    def test_from_environment(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("OBJECT_STORE_ROOT", str(tmp_path / "data"))
        monkeypatch.setenv("OBJECT_STORE_MIME_TYPES_FILE", str(tmp_path / "mime.json"))
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9000")

        config = load_storage_config()

        assert config.root == tmp_path / "data"
        assert config.mime_types_file == tmp_path / "mime.json"
        assert config.host == "127.0.0.1"
        assert config.port == 9000


class TestStartup:
    def test_lifespan_creates_root_from_environment(self, monkeypatch, tmp_path) -> None:
        root = tmp_path / "from-env"
        monkeypatch.setenv("OBJECT_STORE_ROOT", str(root))
        monkeypatch.delenv("OBJECT_STORE_MIME_TYPES_FILE", raising=False)

        from main import create_app

        assert not root.exists()
        with TestClient(create_app()) as client:
            assert root.is_dir()
            assert client.get("/buckets").json() == []

    def test_mime_types_file_changes_upload_naming(self, tmp_path) -> None:
        mime_file = tmp_path / "mime.json"
        mime_file.write_text(json.dumps({"application/x-parquet": "parquet"}))
        config = StorageConfig(root=tmp_path / "uploads", mime_types_file=mime_file)

        from main import create_app

        with TestClient(create_app(config)) as client:
            resp = client.put(
                "/upload/tables",
                params={"key": "events"},
                files={"file": ("events", b"PAR1", "application/x-parquet")},
            )

        assert resp.status_code == 200
        assert resp.json()["key"] == "events.parquet"
        assert (tmp_path / "uploads" / "tables" / "events.parquet").exists()
