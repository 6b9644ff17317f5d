"""Shared fixtures for translation sync tests."""

import json
import os

import pytest

from translation_sync.i18n.config import build_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep real TRANSLATION_SYNC_* variables and .env files out of the tests."""
    for name in list(os.environ):
        if name.startswith("TRANSLATION_SYNC_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def locales(tmp_path):
    root = tmp_path / "locales"
    root.mkdir()
    return root


@pytest.fixture
def write_json():
    def _write(path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def read_json():
    def _read(path):
        return json.loads(path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def settings(locales):
    return build_settings(root=[str(locales)], languages=["tr"])
