"""Shared fixtures — an in-memory FarmerRecordRepository and payload builders."""

from datetime import datetime, timezone
from typing import Any

import pytest

from farmer_registry.application.interfaces import FarmerRecordRepository
from farmer_registry.application.schemas import FarmerRecordCreate
from farmer_registry.application.services import FarmerRegistryService
from farmer_registry.domain.entities import FarmerRecord
from farmer_registry.domain.exceptions import DuplicateEntityError


class FakeFarmerRecordRepository(FarmerRecordRepository):
    """In-memory fake repository that enforces the same unique keys as the store."""

    def __init__(self):
        self.records: dict[int, FarmerRecord] = {}
        self._next_id = 1
        self.create_calls = 0
        self.fail_writes: Exception | None = None
        self.fail_reads: Exception | None = None

    def _check_reads(self) -> None:
        if self.fail_reads is not None:
            raise self.fail_reads

    def _matching(
        self,
        coop_id: str,
        updated_from: datetime | None,
        updated_to: datetime | None,
    ) -> list[FarmerRecord]:
        return [
            r
            for r in sorted(self.records.values(), key=lambda r: r.id)
            if r.coop_id == coop_id
            and (updated_from is None or r.updated_at >= updated_from)
            and (updated_to is None or r.updated_at <= updated_to)
        ]

    async def get_by_kyc_id(self, kyc_id: str) -> FarmerRecord | None:
        self._check_reads()
        return next(
            (r for r in self.records.values() if r.farmer_kyc_id == kyc_id), None
        )

    async def get_by_coop_and_farmer(
        self, coop_id: str, farmer_id: str
    ) -> FarmerRecord | None:
        self._check_reads()
        return next(
            (
                r
                for r in self.records.values()
                if r.coop_id == coop_id and r.farmer_id == farmer_id
            ),
            None,
        )

    async def count(self, coop_id, *, updated_from=None, updated_to=None) -> int:
        self._check_reads()
        return len(self._matching(coop_id, updated_from, updated_to))

    async def list_page(
        self, coop_id, *, updated_from=None, updated_to=None, skip=0, limit=10
    ) -> list[FarmerRecord]:
        self._check_reads()
        return self._matching(coop_id, updated_from, updated_to)[skip : skip + limit]

    async def create(self, record: FarmerRecord) -> FarmerRecord:
        self.create_calls += 1
        if self.fail_writes is not None:
            raise self.fail_writes
        for existing in self.records.values():
            if record.farmer_kyc_id and existing.farmer_kyc_id == record.farmer_kyc_id:
                raise DuplicateEntityError(
                    "FarmerRecord", "farmer_kyc_id", record.farmer_kyc_id
                )
            if (existing.coop_id, existing.farmer_id) == (record.coop_id, record.farmer_id):
                raise DuplicateEntityError(
                    "FarmerRecord",
                    "coop_id,farmer_id",
                    f"{record.coop_id},{record.farmer_id}",
                )
        record.id = self._next_id
        self._next_id += 1
        self.records[record.id] = record
        return record

    async def update(self, record: FarmerRecord) -> FarmerRecord:
        if record.id not in self.records:
            raise ValueError(f"FarmerRecord {record.id} not found")
        self.records[record.id] = record
        return record

    def seed(self, coop_id: str, farmer_id: str, updated_at: datetime) -> FarmerRecord:
        """Insert a record directly, bypassing admission, with a chosen updated_at."""
        record = FarmerRecord(
            id=self._next_id,
            coop_id=coop_id,
            farmer_id=farmer_id,
            first_name="Seed",
            last_name=farmer_id,
            temp_id=f"temp-{self._next_id}",
            created_at=updated_at,
            updated_at=updated_at,
            club_leader_farmer_id="LEAD-1",
        )
        self.records[record.id] = record
        self._next_id += 1
        return record


@pytest.fixture
def fake_repository() -> FakeFarmerRecordRepository:
    return FakeFarmerRecordRepository()


@pytest.fixture
def service(fake_repository: FakeFarmerRecordRepository) -> FarmerRegistryService:
    return FarmerRegistryService(fake_repository)


def build_payload_data(**overrides: Any) -> dict[str, Any]:
    """A complete admission payload keyed by field name."""
    data: dict[str, Any] = {
        "farmer_id": "F58982",
        "first_name": "Lakshmi",
        "last_name": "Reddy",
        "mobile_number": "+919876543210",
        "region_id": 4,
        "region_part_id": 12,
        "settlement_id": 301,
        "settlement_part_id": 7,
        "custom_geography_structure1_id": "CG1-9",
        "custom_geography_structure2_id": "CG2-3",
        "zip_code": "515001",
        "farmer_kyc_type_id": 2,
        "farmer_kyc_type": "AADHAAR",
        "farmer_kyc_id": "KYC-0001",
        "club_id": "CLUB-7",
        "club_name": "Anantapur Growers",
        "club_leader_farmer_id": "F10001",
        "raithu_created_date": "2025-12-30T05:03:17.863Z",
        "raithu_updated_at": "2025-12-30T05:03:17.863Z",
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_payload():
    def _make(**overrides: Any) -> FarmerRecordCreate:
        return FarmerRecordCreate.model_validate(build_payload_data(**overrides))

    return _make


@pytest.fixture
def utc():
    def _utc(*args: int) -> datetime:
        return datetime(*args, tzinfo=timezone.utc)

    return _utc
