"""Unit tests for the response projector — view shapes and timestamp formats."""

from datetime import datetime, timedelta, timezone

from farmer_registry.application.services.response_projector import (
    CREATED_MESSAGE,
    format_timestamp,
    format_timestamp_millis,
    to_detail,
    to_error_view,
    to_page_info,
    to_receipt,
)
from farmer_registry.domain.entities import FarmerRecord, PageInfo, PageRequest


def _record(**overrides) -> FarmerRecord:
    stamp = datetime(2026, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc)
    fields = dict(
        id=7,
        coop_id="COOP-1",
        farmer_id="F58982",
        first_name="Lakshmi",
        last_name="Reddy",
        temp_id="5f0c1c52-6d0b-4a52-9a51-0d7f3c4b2a11",
        created_at=stamp,
        updated_at=stamp + timedelta(minutes=1),
        settlement_id=301,
        settlement_part_id=7,
        farmer_kyc_id="KYC-0001",
        club_leader_farmer_id="F10001",
    )
    fields.update(overrides)
    return FarmerRecord(**fields)


def test_format_timestamp_is_second_precision():
    value = datetime(2026, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2026-02-03T04:05:06Z"


def test_format_timestamp_converts_to_utc():
    value = datetime(2026, 2, 3, 10, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert format_timestamp(value) == "2026-02-03T04:30:00Z"


def test_format_timestamp_millis():
    value = datetime(2026, 2, 3, 4, 5, 6, 789654, tzinfo=timezone.utc)
    assert format_timestamp_millis(value) == "2026-02-03T04:05:06.789Z"


def test_format_timestamp_millis_pads_zeroes():
    value = datetime(2026, 2, 3, 4, 5, 6, 4000)
    assert format_timestamp_millis(value) == "2026-02-03T04:05:06.004Z"


def test_receipt_view():
    receipt = to_receipt(_record(customer_id="C-100"), CREATED_MESSAGE)
    body = receipt.model_dump(by_alias=True)

    assert body == {
        "tempERPCustomerId": "5f0c1c52-6d0b-4a52-9a51-0d7f3c4b2a11",
        "erpCustomerId": "C-100",
        "erpVendorId": "",
        "farmerId": "F58982",
        "createdAt": "2026-02-03T04:05:06Z",
        "updatedAt": "2026-02-03T04:06:06Z",
        "message": "Farmer detail created successfully",
    }


def test_detail_view_round_trips_identity_fields():
    record = _record()
    body = to_detail(record).model_dump(by_alias=True)

    assert body["farmerId"] == record.farmer_id
    assert body["cooperative"] == record.coop_id
    assert body["clubLeaderFarmerId"] == record.club_leader_farmer_id
    assert body["farmerKycId"] == record.farmer_kyc_id
    assert body["settlementId"] == 301
    assert body["settlementPartId"] == 7


def test_detail_view_joins_names_with_single_space():
    body = to_detail(_record()).model_dump(by_alias=True)
    assert body["name"] == "Lakshmi Reddy"


def test_detail_view_maps_codes_and_dates():
    record = _record(customer_id="C-1", vendor_id="V-1")
    body = to_detail(record).model_dump(by_alias=True)

    assert body["entityId"] == record.temp_id
    assert body["customerCode"] == "C-1"
    assert body["vendorCode"] == "V-1"
    assert body["createdDate"] == "2026-02-03T04:05:06Z"
    assert body["updatedDate"] == "2026-02-03T04:06:06Z"
    assert body["message"] == "Farmer detail fetched successfully"


def test_error_view_shape():
    now = datetime(2026, 2, 3, 4, 5, 6, 120000, tzinfo=timezone.utc)
    body = to_error_view("F1", "You must provide a Farmer ID.", now=now)

    assert body == {
        "success": False,
        "data": {
            "tempERPCustomerId": "0",
            "erpCustomerId": "",
            "farmerId": "F1",
            "createdAt": "2026-02-03T04:05:06.120Z",
            "updatedAt": "2026-02-03T04:05:06.120Z",
            "message": "You must provide a Farmer ID.",
        },
    }


def test_error_view_defaults_to_now():
    body = to_error_view("", "boom")
    created = body["data"]["createdAt"]
    assert created.endswith("Z")
    assert len(created) == len("2026-02-03T04:05:06.120Z")


def test_page_info_projection():
    info = to_page_info(PageInfo.build(PageRequest(page=2, limit=10), 25))
    assert info.model_dump(by_alias=True) == {
        "page": 2,
        "limit": 10,
        "totalRecord": 25,
        "totalPage": 3,
        "hasPrevious": True,
        "hasNext": True,
    }
