"""Unit tests for the FarmerRecord entity."""

from datetime import datetime, timedelta, timezone

from farmer_registry.domain.entities import FarmerRecord


def _record() -> FarmerRecord:
    created = datetime.now(timezone.utc) - timedelta(days=1)
    return FarmerRecord(
        coop_id="COOP-1",
        farmer_id="F1",
        first_name="Ravi",
        last_name="Kumar",
        temp_id="temp-1",
        created_at=created,
        updated_at=created,
    )


def test_full_name():
    assert _record().full_name == "Ravi Kumar"


def test_record_customer_id_bumps_updated_at():
    record = _record()
    previous = record.updated_at

    record.record_erp_identity(customer_id="C-100")

    assert record.customer_id == "C-100"
    assert record.cust_id_updated_at == record.updated_at
    assert record.vendor_id == ""
    assert record.vendor_id_updated_at is None
    assert record.updated_at > previous
    assert record.created_at <= record.updated_at


def test_record_vendor_id_keeps_temp_id():
    record = _record()

    record.record_erp_identity(vendor_id="V-9")

    assert record.vendor_id == "V-9"
    assert record.vendor_id_updated_at is not None
    assert record.cust_id_updated_at is None
    assert record.temp_id == "temp-1"
