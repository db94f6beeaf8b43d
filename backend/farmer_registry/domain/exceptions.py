"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised by a repository when a store-level unique constraint is violated."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class PersistenceFailureError(Exception):
    """Raised when the record store fails or times out.

    The underlying store message is kept on ``message`` and passed through to
    callers of this internal staging service.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ── Admission errors ────────────────────────────────────────────────


class AdmissionError(Exception):
    """Base class for every reason a farmer record can be refused."""

    def __init__(self, message: str, farmer_id: str = ""):
        self.message = message
        self.farmer_id = farmer_id
        super().__init__(message)


class MissingCooperativeError(AdmissionError):
    def __init__(self, farmer_id: str = ""):
        super().__init__("The indicated cooperative does not exist.", farmer_id)


class MissingFarmerIdError(AdmissionError):
    def __init__(self, farmer_id: str = ""):
        super().__init__("You must provide a Farmer ID.", farmer_id)


class MissingNameError(AdmissionError):
    def __init__(self, farmer_id: str = ""):
        super().__init__("You must provide the first and last name.", farmer_id)


class MissingKycIdentityError(AdmissionError):
    def __init__(self, farmer_id: str = ""):
        super().__init__(
            "Either farmer_kyc_id or clubLeaderFarmerId must be provided.", farmer_id
        )


class DuplicateKycError(AdmissionError):
    def __init__(self, kyc_id: str, farmer_id: str = ""):
        self.kyc_id = kyc_id
        super().__init__(
            f"Farmer with the given KYC ID {kyc_id} already exists.", farmer_id
        )


class DuplicateFarmerInCooperativeError(AdmissionError):
    def __init__(self, farmer_id: str, coop_id: str):
        self.coop_id = coop_id
        super().__init__(
            f"The Farmer ID {farmer_id} is already registered in the cooperative {coop_id}.",
            farmer_id,
        )
