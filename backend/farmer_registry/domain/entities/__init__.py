from .farmer_record import FarmerRecord, Realm
from .pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    FarmerPage,
    PageInfo,
    PageRequest,
)

__all__ = [
    "FarmerRecord",
    "Realm",
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MAX_LIMIT",
    "FarmerPage",
    "PageInfo",
    "PageRequest",
]
