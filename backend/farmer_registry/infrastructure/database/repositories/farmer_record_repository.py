"""Concrete repository implementation for FarmerRecord backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from farmer_registry.application.interfaces import FarmerRecordRepository
from farmer_registry.domain.entities import FarmerRecord
from farmer_registry.domain.exceptions import (
    DuplicateEntityError,
    PersistenceFailureError,
)
from farmer_registry.infrastructure.database.models import FarmerRecordModel
from farmer_registry.infrastructure.database.models.farmer_record import (
    KYC_ID_CONSTRAINT,
)


_STORE_ERRORS = (SQLAlchemyError, OSError)


def _violated_field(exc: IntegrityError) -> str:
    """Name the unique key an insert collided with.

    asyncpg reports the constraint name directly. Otherwise only the first
    line of the driver message is read: PostgreSQL puts the constraint name
    there and SQLite the column, while key values only appear further down.
    """
    constraint = getattr(exc.orig.__cause__, "constraint_name", None)
    if constraint is None:
        headline = next(iter(str(exc.orig).splitlines()), "")
        kyc_hit = (
            KYC_ID_CONSTRAINT in headline
            or "farmer_details.farmer_kyc_id" in headline
        )
    else:
        kyc_hit = constraint == KYC_ID_CONSTRAINT
    return "farmer_kyc_id" if kyc_hit else "coop_id,farmer_id"


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLAlchemyFarmerRecordRepository(FarmerRecordRepository):
    """Implements the FarmerRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: FarmerRecordModel) -> FarmerRecord:
        """Map ORM model → domain entity."""
        return FarmerRecord(
            id=model.id,
            temp_id=model.temp_id,
            coop_id=model.coop_id,
            customer_id=model.customer_id,
            vendor_id=model.vendor_id,
            farmer_id=model.farmer_id,
            first_name=model.first_name,
            last_name=model.last_name,
            mobile_number=model.mobile_number,
            region_id=model.region_id,
            region_part_id=model.region_part_id,
            settlement_id=model.settlement_id,
            settlement_part_id=model.settlement_part_id,
            custom_geography_structure1_id=model.custom_geography_structure1_id,
            custom_geography_structure2_id=model.custom_geography_structure2_id,
            zip_code=model.zip_code,
            farmer_kyc_type_id=model.farmer_kyc_type_id,
            farmer_kyc_type=model.farmer_kyc_type,
            farmer_kyc_id=model.farmer_kyc_id or "",
            club_id=model.club_id,
            club_name=model.club_name,
            club_leader_farmer_id=model.club_leader_farmer_id,
            raithu_created_date=model.raithu_created_date,
            raithu_updated_at=model.raithu_updated_at,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
            cust_id_updated_at=_as_utc(model.cust_id_updated_at),
            vendor_id_updated_at=_as_utc(model.vendor_id_updated_at),
        )

    def _to_model(self, entity: FarmerRecord) -> FarmerRecordModel:
        """Map domain entity → ORM model (for creation)."""
        return FarmerRecordModel(
            temp_id=entity.temp_id,
            coop_id=entity.coop_id,
            customer_id=entity.customer_id,
            vendor_id=entity.vendor_id,
            farmer_id=entity.farmer_id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            mobile_number=entity.mobile_number,
            region_id=entity.region_id,
            region_part_id=entity.region_part_id,
            settlement_id=entity.settlement_id,
            settlement_part_id=entity.settlement_part_id,
            custom_geography_structure1_id=entity.custom_geography_structure1_id,
            custom_geography_structure2_id=entity.custom_geography_structure2_id,
            zip_code=entity.zip_code,
            farmer_kyc_type_id=entity.farmer_kyc_type_id,
            farmer_kyc_type=entity.farmer_kyc_type,
            farmer_kyc_id=entity.farmer_kyc_id or None,
            club_id=entity.club_id,
            club_name=entity.club_name,
            club_leader_farmer_id=entity.club_leader_farmer_id,
            raithu_created_date=entity.raithu_created_date,
            raithu_updated_at=entity.raithu_updated_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            cust_id_updated_at=entity.cust_id_updated_at,
            vendor_id_updated_at=entity.vendor_id_updated_at,
        )

    def _filtered(
        self,
        stmt: Select,
        coop_id: str,
        updated_from: datetime | None,
        updated_to: datetime | None,
    ) -> Select:
        stmt = stmt.where(FarmerRecordModel.coop_id == coop_id)
        if updated_from is not None:
            stmt = stmt.where(FarmerRecordModel.updated_at >= _as_utc(updated_from))
        if updated_to is not None:
            stmt = stmt.where(FarmerRecordModel.updated_at <= _as_utc(updated_to))
        return stmt

    async def _first(self, stmt: Select) -> FarmerRecord | None:
        try:
            result = await self._session.execute(stmt.limit(1))
        except _STORE_ERRORS as exc:
            raise PersistenceFailureError(str(exc)) from exc
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def get_by_kyc_id(self, kyc_id: str) -> FarmerRecord | None:
        return await self._first(
            select(FarmerRecordModel).where(FarmerRecordModel.farmer_kyc_id == kyc_id)
        )

    async def get_by_coop_and_farmer(
        self, coop_id: str, farmer_id: str
    ) -> FarmerRecord | None:
        return await self._first(
            select(FarmerRecordModel).where(
                FarmerRecordModel.coop_id == coop_id,
                FarmerRecordModel.farmer_id == farmer_id,
            )
        )

    async def count(
        self,
        coop_id: str,
        *,
        updated_from: datetime | None = None,
        updated_to: datetime | None = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(FarmerRecordModel),
            coop_id,
            updated_from,
            updated_to,
        )
        try:
            result = await self._session.execute(stmt)
        except _STORE_ERRORS as exc:
            raise PersistenceFailureError(str(exc)) from exc
        return result.scalar_one()

    async def list_page(
        self,
        coop_id: str,
        *,
        updated_from: datetime | None = None,
        updated_to: datetime | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[FarmerRecord]:
        stmt = self._filtered(
            select(FarmerRecordModel), coop_id, updated_from, updated_to
        )
        stmt = stmt.order_by(FarmerRecordModel.id.asc()).offset(skip).limit(limit)
        try:
            result = await self._session.execute(stmt)
        except _STORE_ERRORS as exc:
            raise PersistenceFailureError(str(exc)) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, record: FarmerRecord) -> FarmerRecord:
        model = self._to_model(record)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            field = _violated_field(exc)
            value = record.farmer_kyc_id if field == "farmer_kyc_id" else (
                f"{record.coop_id},{record.farmer_id}"
            )
            raise DuplicateEntityError("FarmerRecord", field, value) from exc
        except _STORE_ERRORS as exc:
            await self._session.rollback()
            raise PersistenceFailureError(str(exc)) from exc
        return self._to_entity(model)

    async def update(self, record: FarmerRecord) -> FarmerRecord:
        try:
            model = await self._session.get(FarmerRecordModel, record.id)
            if model is None:
                raise ValueError(f"FarmerRecord {record.id} not found in database")
            model.customer_id = record.customer_id
            model.vendor_id = record.vendor_id
            model.cust_id_updated_at = record.cust_id_updated_at
            model.vendor_id_updated_at = record.vendor_id_updated_at
            model.updated_at = record.updated_at
            await self._session.flush()
        except _STORE_ERRORS as exc:
            raise PersistenceFailureError(str(exc)) from exc
        return self._to_entity(model)
