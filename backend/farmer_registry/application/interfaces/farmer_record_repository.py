"""Abstract repository interface (port) for FarmerRecord persistence."""

from abc import ABC, abstractmethod
from datetime import datetime

from farmer_registry.domain.entities import FarmerRecord


class FarmerRecordRepository(ABC):
    """Port for farmer record persistence — implemented in the infrastructure layer.

    Implementations raise ``DuplicateEntityError`` when an insert violates a
    uniqueness constraint and ``PersistenceFailureError`` for any other store
    failure, including timeouts.
    """

    @abstractmethod
    async def get_by_kyc_id(self, kyc_id: str) -> FarmerRecord | None:
        """Retrieve the record holding a KYC id, in any cooperative."""
        ...

    @abstractmethod
    async def get_by_coop_and_farmer(
        self, coop_id: str, farmer_id: str
    ) -> FarmerRecord | None:
        """Retrieve a record by its (cooperative, farmer) key."""
        ...

    @abstractmethod
    async def count(
        self,
        coop_id: str,
        *,
        updated_from: datetime | None = None,
        updated_to: datetime | None = None,
    ) -> int:
        """Count the records of a cooperative inside an optional updated_at window."""
        ...

    @abstractmethod
    async def list_page(
        self,
        coop_id: str,
        *,
        updated_from: datetime | None = None,
        updated_to: datetime | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[FarmerRecord]:
        """Retrieve one page of a cooperative's records, ordered by id."""
        ...

    @abstractmethod
    async def create(self, record: FarmerRecord) -> FarmerRecord:
        """Persist a new record and return it with its store-assigned id."""
        ...

    @abstractmethod
    async def update(self, record: FarmerRecord) -> FarmerRecord:
        """Persist mutable fields of an existing record."""
        ...
