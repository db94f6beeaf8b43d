"""Application service (use case) for farmer admission and lookup."""

import logging
from datetime import datetime, timezone

from farmer_registry.application.interfaces import FarmerRecordRepository
from farmer_registry.application.schemas.farmer_record import FarmerRecordCreate
from farmer_registry.application.services.admission_validator import AdmissionValidator
from farmer_registry.application.services.identity_assigner import TempIdAssigner
from farmer_registry.domain.entities import (
    FarmerPage,
    FarmerRecord,
    PageInfo,
    PageRequest,
    Realm,
)
from farmer_registry.domain.exceptions import (
    AdmissionError,
    DuplicateEntityError,
    DuplicateFarmerInCooperativeError,
    DuplicateKycError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class FarmerRegistryService:
    """Orchestrates admission and queries. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: FarmerRecordRepository,
        validator: AdmissionValidator | None = None,
        id_assigner: TempIdAssigner | None = None,
    ):
        self._repository = repository
        self._validator = validator or AdmissionValidator(repository)
        self._id_assigner = id_assigner or TempIdAssigner()

    async def admit(
        self,
        payload: FarmerRecordCreate,
        coop_id: str,
        realm: Realm = Realm.CUSTOMERS,
    ) -> FarmerRecord:
        """Validate and store a new farmer under ``coop_id``.

        The temp id and both timestamps are stamped here, before the insert.
        Store failures propagate as ``PersistenceFailureError``; the insert is
        not retried.
        """
        try:
            await self._validator.validate(payload, coop_id)
        except AdmissionError as exc:
            logger.warning(
                "Refused %s admission farmer=%s coop=%s: %s",
                realm.value, payload.farmer_id, coop_id, exc.message,
            )
            raise

        now = datetime.now(timezone.utc)
        record = FarmerRecord(
            coop_id=coop_id,
            farmer_id=payload.farmer_id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            temp_id=self._id_assigner.assign(),
            created_at=now,
            updated_at=now,
            mobile_number=payload.mobile_number,
            region_id=payload.region_id,
            region_part_id=payload.region_part_id,
            settlement_id=payload.settlement_id,
            settlement_part_id=payload.settlement_part_id,
            custom_geography_structure1_id=payload.custom_geography_structure1_id,
            custom_geography_structure2_id=payload.custom_geography_structure2_id,
            zip_code=payload.zip_code,
            farmer_kyc_type_id=payload.farmer_kyc_type_id,
            farmer_kyc_type=payload.farmer_kyc_type,
            farmer_kyc_id=payload.farmer_kyc_id,
            club_id=payload.club_id,
            club_name=payload.club_name,
            club_leader_farmer_id=payload.club_leader_farmer_id,
            raithu_created_date=payload.raithu_created_date,
            raithu_updated_at=payload.raithu_updated_at,
        )

        try:
            stored = await self._repository.create(record)
        except DuplicateEntityError as exc:
            # Lost a race with a concurrent admission of the same identity
            logger.warning(
                "Unique constraint rejected %s admission farmer=%s coop=%s field=%s",
                realm.value, payload.farmer_id, coop_id, exc.field,
            )
            if exc.field == "farmer_kyc_id":
                raise DuplicateKycError(payload.farmer_kyc_id, payload.farmer_id) from exc
            raise DuplicateFarmerInCooperativeError(payload.farmer_id, coop_id) from exc

        logger.info(
            "Admitted %s farmer=%s coop=%s temp_id=%s",
            realm.value, stored.farmer_id, stored.coop_id, stored.temp_id,
        )
        return stored

    async def get_one(self, coop_id: str, farmer_id: str) -> FarmerRecord:
        record = await self._repository.get_by_coop_and_farmer(coop_id, farmer_id)
        if record is None:
            raise EntityNotFoundError("Farmer", farmer_id)
        return record

    async def list_records(
        self,
        coop_id: str,
        *,
        updated_from: datetime | None = None,
        updated_to: datetime | None = None,
        page: int | str | None = None,
        limit: int | str | None = None,
    ) -> FarmerPage:
        """Return one page of a cooperative's farmers, filtered on updated_at.

        Both bounds are inclusive and independently optional. Naive datetimes
        are read as UTC. A page past the end yields no items.
        """
        request = PageRequest.from_raw(page, limit)
        updated_from = _as_utc(updated_from)
        updated_to = _as_utc(updated_to)

        total = await self._repository.count(
            coop_id, updated_from=updated_from, updated_to=updated_to
        )
        items: list[FarmerRecord] = []
        # Offsets past the last row never reach the store
        if request.offset < total:
            items = await self._repository.list_page(
                coop_id,
                updated_from=updated_from,
                updated_to=updated_to,
                skip=request.offset,
                limit=request.limit,
            )
        return FarmerPage(items=items, page_info=PageInfo.build(request, total))


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
