"""
Pytest configuration and fixtures for Furniture Store tests
"""

import importlib
import logging

import pytest

from furniture_store import config
from furniture_store.config import Settings
from furniture_store.factories import HatilFactory, OtobiFactory


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the caller's environment and cached settings"""
    monkeypatch.delenv("FURNITURE_VARIANT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(config, "load_dotenv_if_exists", lambda: None)
    monkeypatch.setattr(importlib.import_module("furniture_store.main"), "load_dotenv_if_exists", lambda: None)
    config.reset_settings()
    root_level = logging.getLogger().level
    yield
    config.reset_settings()
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def otobi_settings():
    """Settings selecting the Otobi family"""
    return Settings(furniture_variant="otobi", _env_file=None)


@pytest.fixture
def unset_settings():
    """Settings with no furniture variant configured"""
    return Settings(_env_file=None)


@pytest.fixture(params=[HatilFactory, OtobiFactory], ids=["hatil", "otobi"])
def furniture_factory(request):
    """Each concrete furniture factory in turn"""
    return request.param()
