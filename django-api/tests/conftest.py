"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from scheduling.domain import Package, PackageItem, Procedure, SessionPolicy
from scheduling.stores import InMemoryCatalogStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def peeling() -> Procedure:
    return Procedure(
        id="proc-peeling",
        name="Peeling",
        policy=SessionPolicy(
            recommended_count=2,
            estimated_session_minutes=45,
            interval="10 dias",
        ),
    )


@pytest.fixture
def cleansing() -> Procedure:
    return Procedure(id="proc-cleansing", name="Limpeza de pele", estimated_duration=90)


@pytest.fixture
def three_session_package() -> Package:
    return Package(
        id="pkg-1",
        name="Protocolo facial",
        items=(
            PackageItem(
                order=0,
                sessions_count=3,
                session_duration_minutes=30,
                recommended_interval="15 dias",
                name="Microagulhamento",
            ),
        ),
    )


@pytest.fixture
def catalog(three_session_package, peeling, cleansing) -> InMemoryCatalogStore:
    return InMemoryCatalogStore(
        packages=[three_session_package],
        procedures=[peeling, cleansing],
    )
