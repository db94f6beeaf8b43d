"""SQLAlchemy ORM model for the FarmerRecord entity."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from farmer_registry.infrastructure.database.base import Base

COOP_FARMER_CONSTRAINT = "uq_farmer_details_coop_farmer"
KYC_ID_CONSTRAINT = "uq_farmer_details_kyc_id"


class FarmerRecordModel(Base):
    """ORM model — maps to the 'farmer_details' table."""

    __tablename__ = "farmer_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    temp_id: Mapped[str] = mapped_column(String(36), nullable=False)
    coop_id: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_id: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    vendor_id: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    farmer_id: Mapped[str] = mapped_column(String(100), nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mobile_number: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    region_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    region_part_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    settlement_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    settlement_part_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    custom_geography_structure1_id: Mapped[str] = mapped_column(
        String(100), nullable=False, default=""
    )
    custom_geography_structure2_id: Mapped[str] = mapped_column(
        String(100), nullable=False, default=""
    )
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    farmer_kyc_type_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    farmer_kyc_type: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    # NULL when absent so the unique constraint only binds real KYC ids
    farmer_kyc_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    club_id: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    club_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    club_leader_farmer_id: Mapped[str] = mapped_column(
        String(100), nullable=False, default=""
    )
    raithu_created_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    raithu_updated_at: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    cust_id_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    vendor_id_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        UniqueConstraint("coop_id", "farmer_id", name=COOP_FARMER_CONSTRAINT),
        UniqueConstraint("farmer_kyc_id", name=KYC_ID_CONSTRAINT),
        Index("ix_farmer_details_coop_updated", "coop_id", "updated_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<FarmerRecordModel(id={self.id}, "
            f"coop='{self.coop_id}', farmer='{self.farmer_id}')>"
        )
