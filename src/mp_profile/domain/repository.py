"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from collections.abc import Collection
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_profile.domain.models import Profile


class ProfileRepositoryProtocol(Protocol):
    async def get_profile_by_id(
        self, db: AsyncSession, profile_id: int
    ) -> Profile | None: ...

    async def get_profiles_by_ids(
        self, db: AsyncSession, profile_ids: Collection[int]
    ) -> dict[int, Profile]: ...
