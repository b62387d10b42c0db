"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from scheduling.domain import Package, Procedure


class CatalogStore(ABC):
    """Read-only access to the packages and procedures sessions expand from."""

    def normalize_id(self, value: str) -> str:
        """Return the canonical form of a catalog id. Identity by default."""
        return value

    @abstractmethod
    def get_packages(self, package_ids: Iterable[str]) -> dict[str, Package]:
        """Return the known packages among package_ids, keyed by id.

        Unknown or malformed ids are omitted.
        """
        ...

    @abstractmethod
    def get_procedures(self, procedure_ids: Iterable[str]) -> dict[str, Procedure]:
        """Return the known procedures among procedure_ids, keyed by id.

        Unknown or malformed ids are omitted.
        """
        ...
