from .farmer_record import (
    CreateFarmerSuccessResponse,
    ErrorFarmerResponse,
    FarmerDetailResponse,
    FarmerListResponse,
    FarmerReceipt,
    FarmerRecordCreate,
    PaginationInfo,
)

__all__ = [
    "CreateFarmerSuccessResponse",
    "ErrorFarmerResponse",
    "FarmerDetailResponse",
    "FarmerListResponse",
    "FarmerReceipt",
    "FarmerRecordCreate",
    "PaginationInfo",
]
