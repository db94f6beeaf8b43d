"""Farmer admission and lookup endpoints, shared by the customer and vendor realms."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from farmer_registry.application.schemas.farmer_record import (
    CreateFarmerSuccessResponse,
    FarmerDetailResponse,
    FarmerListResponse,
    FarmerRecordCreate,
)
from farmer_registry.application.services import FarmerRegistryService
from farmer_registry.application.services.response_projector import (
    CREATED_MESSAGE,
    to_detail,
    to_page_info,
    to_receipt,
)
from farmer_registry.domain.entities import Realm
from farmer_registry.infrastructure.dependencies import get_farmer_registry_service

router = APIRouter(prefix="/{realm}/{coop_id}/farmers", tags=["Farmers"])


@router.post(
    "",
    response_model=CreateFarmerSuccessResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_farmer(
    realm: Realm,
    coop_id: str,
    payload: FarmerRecordCreate,
    service: FarmerRegistryService = Depends(get_farmer_registry_service),
) -> CreateFarmerSuccessResponse:
    """Admit a new farmer into the cooperative and return its temp id."""
    record = await service.admit(payload, coop_id, realm)
    return CreateFarmerSuccessResponse(data=to_receipt(record, CREATED_MESSAGE))


@router.get("", response_model=FarmerListResponse)
async def list_farmers(
    realm: Realm,
    coop_id: str,
    updated_from: datetime | None = Query(None, alias="updatedFrom"),
    updated_to: datetime | None = Query(None, alias="updatedTo"),
    page: str | None = Query(None, description="Page number, defaults to 1"),
    limit: str | None = Query(
        None, description="Items per page, defaults to 10, at most 500"
    ),
    service: FarmerRegistryService = Depends(get_farmer_registry_service),
) -> FarmerListResponse:
    """Retrieve a paginated list of a cooperative's farmers, filtered on updatedAt."""
    result = await service.list_records(
        coop_id,
        updated_from=updated_from,
        updated_to=updated_to,
        page=page,
        limit=limit,
    )
    return FarmerListResponse(
        data=[to_receipt(r) for r in result.items],
        pagination=to_page_info(result.page_info),
    )


@router.get("/{farmer_id}", response_model=FarmerDetailResponse)
async def get_farmer(
    realm: Realm,
    coop_id: str,
    farmer_id: str,
    service: FarmerRegistryService = Depends(get_farmer_registry_service),
) -> FarmerDetailResponse:
    """Retrieve a single farmer of the cooperative."""
    record = await service.get_one(coop_id, farmer_id)
    return to_detail(record)
