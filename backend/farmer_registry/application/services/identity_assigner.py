"""Temporary identifier assignment for newly admitted farmers."""

from uuid import uuid4


class TempIdAssigner:
    """Issues the system-internal id a record carries until the ERP assigns one.

    Purely local: no store round-trip and no dependency on ERP issuance.
    """

    def assign(self) -> str:
        return str(uuid4())
