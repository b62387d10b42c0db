"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache

from scheduling import models as orm
from scheduling.stores.django_store import (
    DjangoCatalogStore,
    package_cache_key,
    procedure_cache_key,
)


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on catalog changes."""

    def test_procedure_save_invalidates_cache(self):
        """Saving a procedure drops its cached entry."""
        procedure = orm.Procedure.objects.create(name="Peeling")
        DjangoCatalogStore().get_procedures([str(procedure.id)])
        assert cache.get(procedure_cache_key(procedure.id)) is not None

        procedure.name = "Peeling químico"
        procedure.save()

        assert cache.get(procedure_cache_key(procedure.id)) is None
        found = DjangoCatalogStore().get_procedures([str(procedure.id)])
        assert found[str(procedure.id)].name == "Peeling químico"

    def test_package_item_save_invalidates_package_cache(self):
        """Adding an item to a package drops the cached package."""
        package = orm.Package.objects.create(name="Protocolo")
        DjangoCatalogStore().get_packages([str(package.id)])
        assert cache.get(package_cache_key(package.id)) is not None

        orm.PackageItem.objects.create(package=package, sessions_count=2)

        assert cache.get(package_cache_key(package.id)) is None
        found = DjangoCatalogStore().get_packages([str(package.id)])
        assert len(found[str(package.id)].items) == 1

    def test_package_delete_invalidates_cache(self):
        """Deleting a package drops its cached entry."""
        package = orm.Package.objects.create(name="Protocolo")
        package_id = str(package.id)
        DjangoCatalogStore().get_packages([package_id])

        package.delete()

        assert cache.get(package_cache_key(package_id)) is None
        assert DjangoCatalogStore().get_packages([package_id]) == {}

    def test_moving_item_invalidates_previous_package(self):
        """An item moved to another package no longer expands under the old one."""
        source = orm.Package.objects.create(name="Origem")
        target = orm.Package.objects.create(name="Destino")
        item = orm.PackageItem.objects.create(package=source, sessions_count=2)
        store = DjangoCatalogStore()
        store.get_packages([str(source.id), str(target.id)])

        item.package = target
        item.save()

        assert cache.get(package_cache_key(source.id)) is None
        assert cache.get(package_cache_key(target.id)) is None
        found = store.get_packages([str(source.id), str(target.id)])
        assert found[str(source.id)].items == ()
        assert len(found[str(target.id)].items) == 1
