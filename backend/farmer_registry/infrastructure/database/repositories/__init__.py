from .farmer_record_repository import SQLAlchemyFarmerRecordRepository

__all__ = [
    "SQLAlchemyFarmerRecordRepository",
]
