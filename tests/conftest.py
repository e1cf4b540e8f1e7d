"""Shared fixtures for sqlpostgis tests."""

import pytest

from sqlpostgis.functions import PostGIS
from sqlpostgis.query_builder import FragmentBuilder, QueryLayer
from sqlpostgis.settings import _reload_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep SQLPOSTGIS_* variables from the environment out of every test."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("SQLPOSTGIS_"):
            monkeypatch.delenv(key)
    _reload_settings()
    yield
    _reload_settings()


@pytest.fixture
def layer():
    return QueryLayer("postgresql")


@pytest.fixture
def builder(layer):
    return FragmentBuilder(layer)


@pytest.fixture
def st(builder):
    return PostGIS(builder)


@pytest.fixture
def render(layer):
    """Render a fragment to (sql, bindings) with identifiers quoted."""
    def _render(fragment):
        return layer.to_sql(fragment)
    return _render
