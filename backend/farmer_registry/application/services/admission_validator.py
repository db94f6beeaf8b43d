"""Admission rules a farmer payload must pass before a record is created."""

from collections.abc import Callable

from farmer_registry.application.interfaces import FarmerRecordRepository
from farmer_registry.application.schemas.farmer_record import FarmerRecordCreate
from farmer_registry.domain.exceptions import (
    AdmissionError,
    DuplicateFarmerInCooperativeError,
    DuplicateKycError,
    MissingCooperativeError,
    MissingFarmerIdError,
    MissingKycIdentityError,
    MissingNameError,
)


def _present(value: str | None) -> bool:
    return bool(value)


# Ordered presence rules: (holds?, error raised when it does not)
_PRESENCE_RULES: tuple[
    tuple[Callable[[FarmerRecordCreate, str], bool], type[AdmissionError]], ...
] = (
    (lambda payload, coop_id: _present(coop_id), MissingCooperativeError),
    (lambda payload, coop_id: _present(payload.farmer_id), MissingFarmerIdError),
    (
        lambda payload, coop_id: _present(payload.first_name)
        and _present(payload.last_name),
        MissingNameError,
    ),
    (
        lambda payload, coop_id: _present(payload.farmer_kyc_id)
        or _present(payload.club_leader_farmer_id),
        MissingKycIdentityError,
    ),
)


class AdmissionValidator:
    """Runs presence rules, then uniqueness lookups against the repository.

    The first failing check raises; nothing is written by validation. The
    uniqueness lookups are advisory — the store's unique constraints are the
    final word when two admissions race.
    """

    def __init__(self, repository: FarmerRecordRepository):
        self._repository = repository

    async def validate(self, payload: FarmerRecordCreate, coop_id: str) -> None:
        for holds, error in _PRESENCE_RULES:
            if not holds(payload, coop_id):
                raise error(payload.farmer_id)

        if _present(payload.farmer_kyc_id):
            existing = await self._repository.get_by_kyc_id(payload.farmer_kyc_id)
            if existing is not None:
                raise DuplicateKycError(payload.farmer_kyc_id, payload.farmer_id)

        existing = await self._repository.get_by_coop_and_farmer(
            coop_id, payload.farmer_id
        )
        if existing is not None:
            raise DuplicateFarmerInCooperativeError(payload.farmer_id, coop_id)
