from .farmer_record_repository import FarmerRecordRepository

__all__ = [
    "FarmerRecordRepository",
]
