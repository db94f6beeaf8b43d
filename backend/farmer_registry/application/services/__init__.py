from .admission_validator import AdmissionValidator
from .farmer_registry_service import FarmerRegistryService
from .identity_assigner import TempIdAssigner

__all__ = [
    "AdmissionValidator",
    "FarmerRegistryService",
    "TempIdAssigner",
]
