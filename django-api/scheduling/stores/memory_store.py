"""In-memory implementation of the CatalogStore."""

from collections.abc import Iterable

from scheduling.domain import Package, Procedure
from scheduling.stores.interfaces import CatalogStore


class InMemoryCatalogStore(CatalogStore):
    """Catalog held in id-indexed dicts, for callers that already hold the data."""

    def __init__(
        self,
        packages: Iterable[Package] = (),
        procedures: Iterable[Procedure] = (),
    ) -> None:
        self._packages = {package.id: package for package in packages}
        self._procedures = {procedure.id: procedure for procedure in procedures}

    def get_packages(self, package_ids: Iterable[str]) -> dict[str, Package]:
        return {
            package_id: self._packages[package_id]
            for package_id in package_ids
            if package_id in self._packages
        }

    def get_procedures(self, procedure_ids: Iterable[str]) -> dict[str, Procedure]:
        return {
            procedure_id: self._procedures[procedure_id]
            for procedure_id in procedure_ids
            if procedure_id in self._procedures
        }
