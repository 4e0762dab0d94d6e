"""ProfileRepository — read-only profile lookups.

Balance mutations live in src/mp_settlement/infrastructure/ledger.py; nothing
here writes to the profiles table.
"""

from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.enums import ProfileType
from src.mp_profile.domain.models import Profile
from src.mp_profile.infrastructure.db_models import ProfileORM


def orm_to_profile(row: ProfileORM) -> Profile:
    return Profile(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        profession=row.profession,
        balance=row.balance,
        type=ProfileType(row.type),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class ProfileRepository:
    async def get_profile_by_id(
        self, db: AsyncSession, profile_id: int
    ) -> Profile | None:
        result = await db.execute(select(ProfileORM).where(ProfileORM.id == profile_id))
        row = result.scalar_one_or_none()
        return orm_to_profile(row) if row else None

    async def get_profiles_by_ids(
        self, db: AsyncSession, profile_ids: Collection[int]
    ) -> dict[int, Profile]:
        """Batch lookup with a single IN query. Ids with no row are absent from the result."""
        if not profile_ids:
            return {}
        result = await db.execute(
            select(ProfileORM).where(ProfileORM.id.in_(list(profile_ids)))
        )
        return {row.id: orm_to_profile(row) for row in result.scalars().all()}
