"""Pure mappings from FarmerRecord entities to the public response shapes.

Success views format timestamps to the second (``2025-01-31T08:15:00Z``);
the error view uses millisecond precision (``2025-01-31T08:15:00.123Z``).
Consumers already rely on both shapes, so they are kept distinct.
"""

from datetime import datetime, timezone
from typing import Any

from farmer_registry.application.schemas.farmer_record import (
    FarmerDetailResponse,
    FarmerReceipt,
    PaginationInfo,
)
from farmer_registry.domain.entities import FarmerRecord, PageInfo

CREATED_MESSAGE = "Farmer detail created successfully"
FETCHED_MESSAGE = "Farmer detail fetched successfully"


def format_timestamp(value: datetime) -> str:
    """Second-precision UTC timestamp with a literal ``Z``."""
    return _as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_timestamp_millis(value: datetime) -> str:
    """Millisecond-precision UTC timestamp with a literal ``Z``."""
    value = _as_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_receipt(record: FarmerRecord, message: str = "") -> FarmerReceipt:
    return FarmerReceipt(
        temp_erp_customer_id=record.temp_id,
        erp_customer_id=record.customer_id,
        erp_vendor_id=record.vendor_id,
        farmer_id=record.farmer_id,
        created_at=format_timestamp(record.created_at),
        updated_at=format_timestamp(record.updated_at),
        message=message,
    )


def to_detail(record: FarmerRecord, message: str = FETCHED_MESSAGE) -> FarmerDetailResponse:
    return FarmerDetailResponse(
        farmer_id=record.farmer_id,
        name=record.full_name,
        mobile_number=record.mobile_number,
        cooperative=record.coop_id,
        region_id=record.region_id,
        region_part_id=record.region_part_id,
        settlement_id=record.settlement_id,
        settlement_part_id=record.settlement_part_id,
        custom_geography_structure1_id=record.custom_geography_structure1_id,
        custom_geography_structure2_id=record.custom_geography_structure2_id,
        zip_code=record.zip_code,
        farmer_kyc_type_id=record.farmer_kyc_type_id,
        farmer_kyc_type=record.farmer_kyc_type,
        farmer_kyc_id=record.farmer_kyc_id,
        club_id=record.club_id,
        club_name=record.club_name,
        club_leader_farmer_id=record.club_leader_farmer_id,
        entity_id=record.temp_id,
        customer_code=record.customer_id,
        vendor_code=record.vendor_id,
        created_date=format_timestamp(record.created_at),
        updated_date=format_timestamp(record.updated_at),
        message=message,
    )


def to_page_info(page_info: PageInfo) -> PaginationInfo:
    return PaginationInfo(
        page=page_info.page,
        limit=page_info.limit,
        total_record=page_info.total_items,
        total_page=page_info.total_pages,
        has_previous=page_info.has_previous,
        has_next=page_info.has_next,
    )


def to_error_view(
    farmer_id: str, message: str, now: datetime | None = None
) -> dict[str, Any]:
    """Fixed-shape body returned when an admission is refused."""
    stamp = format_timestamp_millis(now or datetime.now(timezone.utc))
    return {
        "success": False,
        "data": {
            "tempERPCustomerId": "0",
            "erpCustomerId": "",
            "farmerId": farmer_id,
            "createdAt": stamp,
            "updatedAt": stamp,
            "message": message,
        },
    }
