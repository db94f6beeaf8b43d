"""Domain entity — a farmer staged for ERP customer/vendor synchronization."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class Realm(str, Enum):
    """ERP identity a request is made under. Both realms share the same record."""

    CUSTOMERS = "customers"
    VENDORS = "vendors"


@dataclass
class FarmerRecord:
    """Core domain entity for a farmer registered under a cooperative.

    ``temp_id`` identifies the record until the ERP issues permanent
    customer/vendor ids, which arrive later through ``record_erp_identity``.
    """

    coop_id: str
    farmer_id: str
    first_name: str
    last_name: str
    temp_id: str
    created_at: datetime
    updated_at: datetime
    id: int | None = None
    customer_id: str = ""
    vendor_id: str = ""
    mobile_number: str = ""
    region_id: int = 0
    region_part_id: int = 0
    settlement_id: int = 0
    settlement_part_id: int = 0
    custom_geography_structure1_id: str = ""
    custom_geography_structure2_id: str = ""
    zip_code: str = ""
    farmer_kyc_type_id: int = 0
    farmer_kyc_type: str = ""
    farmer_kyc_id: str = ""
    club_id: str = ""
    club_name: str = ""
    club_leader_farmer_id: str = ""
    raithu_created_date: str | None = None
    raithu_updated_at: str | None = None
    cust_id_updated_at: datetime | None = None
    vendor_id_updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def record_erp_identity(
        self,
        customer_id: str | None = None,
        vendor_id: str | None = None,
    ) -> None:
        """Attach permanent ERP ids and refresh the updated_at timestamp."""
        now = datetime.now(timezone.utc)
        if customer_id is not None:
            self.customer_id = customer_id
            self.cust_id_updated_at = now
        if vendor_id is not None:
            self.vendor_id = vendor_id
            self.vendor_id_updated_at = now
        self.updated_at = now
