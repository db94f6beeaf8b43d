"""Pydantic DTOs (Data Transfer Objects) for the farmer registry."""

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel


class FarmerRecordCreate(BaseModel):
    """Admission payload.

    Keys follow the wire format already used by the upstream system; the
    camelCase spelling of each field is accepted too. Required fields default
    to empty so that presence rules are reported by the admission validator.
    """

    farmer_id: str = Field("", validation_alias=AliasChoices("farmerId", "farmer_id"), examples=["F58982"])
    first_name: str = Field("", validation_alias=AliasChoices("firstName", "first_name"))
    last_name: str = Field("", validation_alias=AliasChoices("lastName", "last_name"))
    mobile_number: str = Field("", validation_alias=AliasChoices("mobile_number", "mobileNumber"))
    region_id: int = Field(0, validation_alias=AliasChoices("regionId", "region_id"))
    region_part_id: int = Field(
        0, validation_alias=AliasChoices("regionPartID", "regionPartId", "region_part_id")
    )
    settlement_id: int = Field(
        0, validation_alias=AliasChoices("settlementID", "settlementId", "settlement_id")
    )
    settlement_part_id: int = Field(
        0,
        validation_alias=AliasChoices("settlementPartID", "settlementPartId", "settlement_part_id"),
    )
    custom_geography_structure1_id: str = Field(
        "",
        validation_alias=AliasChoices(
            "custom_geography_structure1_id", "customGeographyStructure1Id"
        ),
    )
    custom_geography_structure2_id: str = Field(
        "",
        validation_alias=AliasChoices(
            "custom_geography_structure2_id", "customGeographyStructure2Id"
        ),
    )
    zip_code: str = Field("", validation_alias=AliasChoices("ZipCode", "zipCode", "zip_code"))
    farmer_kyc_type_id: int = Field(
        0, validation_alias=AliasChoices("farmer_kyc_type_id", "farmerKycTypeId")
    )
    farmer_kyc_type: str = Field("", validation_alias=AliasChoices("farmer_kyc_type", "farmerKycType"))
    farmer_kyc_id: str = Field("", validation_alias=AliasChoices("farmer_kyc_id", "farmerKycId"))
    club_id: str = Field("", validation_alias=AliasChoices("clubId", "club_id"))
    club_name: str = Field("", validation_alias=AliasChoices("clubName", "club_name"))
    club_leader_farmer_id: str = Field(
        "", validation_alias=AliasChoices("clubLeaderFarmerId", "club_leader_farmer_id")
    )
    raithu_created_date: str | None = Field(
        None,
        validation_alias=AliasChoices("raithuCreatedDate", "raithu_created_date"),
        examples=["2025-12-30T05:03:17.863Z"],
    )
    raithu_updated_at: str | None = Field(
        None,
        validation_alias=AliasChoices("raithuUpdatedAt", "raithu_updated_at"),
        examples=["2025-12-30T05:03:17.863Z"],
    )


class _CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class FarmerReceipt(_CamelModel):
    """Creation receipt / list item view."""

    temp_erp_customer_id: str = Field(alias="tempERPCustomerId")
    erp_customer_id: str
    erp_vendor_id: str
    farmer_id: str
    created_at: str
    updated_at: str
    message: str = ""


class CreateFarmerSuccessResponse(_CamelModel):
    success: bool = True
    data: FarmerReceipt


class FarmerDetailResponse(_CamelModel):
    """Full detail view of a single farmer."""

    farmer_id: str
    name: str
    mobile_number: str
    cooperative: str
    region_id: int
    region_part_id: int
    settlement_id: int
    settlement_part_id: int
    custom_geography_structure1_id: str
    custom_geography_structure2_id: str
    zip_code: str
    farmer_kyc_type_id: int
    farmer_kyc_type: str
    farmer_kyc_id: str
    club_id: str
    club_name: str
    club_leader_farmer_id: str
    entity_id: str
    customer_code: str
    vendor_code: str
    created_date: str
    updated_date: str
    message: str


class PaginationInfo(_CamelModel):
    page: int
    limit: int
    total_record: int
    total_page: int
    has_previous: bool
    has_next: bool


class FarmerListResponse(_CamelModel):
    success: bool = True
    data: list[FarmerReceipt]
    pagination: PaginationInfo


class ErrorFarmerResponse(_CamelModel):
    success: bool = False
    message: str
