"""Shared test fixtures and configuration."""

import os

import pytest

from bookshelf_search.config import Settings

from fakes import FakeElasticsearch


ENV_PREFIXES = ("ELASTIC_", "BOOKSHELF_")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell and .env out of the tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIXES) or key == "LOG_LEVEL":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings(tmp_path):
    return Settings(mapping_dir=str(tmp_path), elastic_healthcheck=False)


@pytest.fixture
def fake_es():
    return FakeElasticsearch()
