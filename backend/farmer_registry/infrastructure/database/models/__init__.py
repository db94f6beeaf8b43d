from .farmer_record import FarmerRecordModel

__all__ = [
    "FarmerRecordModel",
]
