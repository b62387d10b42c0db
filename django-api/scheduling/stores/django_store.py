"""Django ORM implementation of the CatalogStore.

Rows are converted to domain models and cached per id; signals.py drops the
cached entries whenever a catalog row changes.
"""

import logging
import uuid
from collections.abc import Iterable

from django.conf import settings
from django.core.cache import cache

from scheduling import models as orm
from scheduling.domain import Package, PackageItem, Procedure, SessionPolicy
from scheduling.stores.interfaces import CatalogStore

logger = logging.getLogger(__name__)


def package_cache_key(package_id) -> str:
    return f"scheduling:package:{package_id}"


def procedure_cache_key(procedure_id) -> str:
    return f"scheduling:procedure:{procedure_id}"


def canonical_id(value) -> str | None:
    """Return the lowercase hyphenated form of a UUID id, or None if it is not one."""
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        return None


def _valid_ids(ids: Iterable[str]) -> list[str]:
    valid = []
    for value in ids:
        canonical = canonical_id(value)
        if canonical is None:
            logger.debug("Skipping malformed catalog id %r", value)
            continue
        if canonical not in valid:
            valid.append(canonical)
    return valid


def procedure_to_domain(row: orm.Procedure) -> Procedure:
    return Procedure(
        id=str(row.id),
        name=row.name,
        policy=SessionPolicy(
            recommended_count=row.recommended_session_count,
            estimated_session_minutes=row.estimated_session_minutes,
            interval=row.session_interval or None,
        ),
        estimated_duration=row.estimated_duration,
    )


def package_to_domain(row: orm.Package) -> Package:
    return Package(
        id=str(row.id),
        name=row.name,
        items=tuple(
            PackageItem(
                order=item.order,
                sessions_count=item.sessions_count,
                session_duration_minutes=item.session_duration_minutes,
                recommended_interval=item.recommended_interval or None,
                name=item.name or None,
                manual_name=item.manual_name or None,
                procedure_id=str(item.procedure_id) if item.procedure_id else None,
            )
            for item in row.items.all()
        ),
    )


class DjangoCatalogStore(CatalogStore):
    """Catalog store using Django ORM."""

    def __init__(self, timeout: int | None = None) -> None:
        self._timeout = (
            timeout
            if timeout is not None
            else getattr(settings, "SCHEDULING_CATALOG_CACHE_TIMEOUT", 300)
        )

    def normalize_id(self, value: str) -> str:
        return canonical_id(value) or value

    def get_packages(self, package_ids: Iterable[str]) -> dict[str, Package]:
        ids = _valid_ids(package_ids)
        found = self._from_cache(ids, package_cache_key)
        missing = [package_id for package_id in ids if package_id not in found]
        if missing:
            rows = orm.Package.objects.filter(id__in=missing).prefetch_related("items")
            for row in rows:
                package = package_to_domain(row)
                found[package.id] = package
                cache.set(package_cache_key(package.id), package, self._timeout)
        return {value: found[value] for value in ids if value in found}

    def get_procedures(self, procedure_ids: Iterable[str]) -> dict[str, Procedure]:
        ids = _valid_ids(procedure_ids)
        found = self._from_cache(ids, procedure_cache_key)
        missing = [procedure_id for procedure_id in ids if procedure_id not in found]
        if missing:
            for row in orm.Procedure.objects.filter(id__in=missing):
                procedure = procedure_to_domain(row)
                found[procedure.id] = procedure
                cache.set(procedure_cache_key(procedure.id), procedure, self._timeout)
        return {value: found[value] for value in ids if value in found}

    @staticmethod
    def _from_cache(ids: list[str], key_for) -> dict:
        if not ids:
            return {}
        keys = {key_for(value): value for value in ids}
        cached = cache.get_many(list(keys))
        return {keys[key]: value for key, value in cached.items()}

