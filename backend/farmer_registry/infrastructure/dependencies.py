"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from farmer_registry.application.services import FarmerRegistryService
from farmer_registry.infrastructure.database.repositories import (
    SQLAlchemyFarmerRecordRepository,
)
from farmer_registry.infrastructure.database.session import get_db_session


async def get_farmer_registry_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[FarmerRegistryService, None]:
    """Provides a FarmerRegistryService bound to the request's session."""
    repository = SQLAlchemyFarmerRecordRepository(session)
    yield FarmerRegistryService(repository)
