"""FastAPI dependency: get_current_profile.

Callers identify themselves with a ``profile_id`` request header. Usage in
any protected router:
    from src.mp_gateway.auth.dependencies import get_current_profile

    @router.get("/protected")
    async def protected(profile: Profile = Depends(get_current_profile)):
        ...
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from src.mp_common.database import MAX_ROW_ID, get_db_session
from src.mp_common.errors import UnauthorizedError
from src.mp_profile.domain.models import Profile
from src.mp_profile.infrastructure.persistence import ProfileRepository

_repo = ProfileRepository()


async def get_current_profile(
    profile_id: str | None = Header(None, convert_underscores=False),
    db: AsyncSession = Depends(get_db_session),
) -> Profile:
    """Resolve the ``profile_id`` header into a Profile.

    Raises UnauthorizedError (401) if the header is missing, not an integer,
    or names no existing profile.
    """
    if profile_id is None:
        raise UnauthorizedError()
    raw_id = profile_id.strip()
    # str.isdigit() also accepts non-ASCII digits such as "²"
    if not (raw_id.isascii() and raw_id.isdigit()) or int(raw_id) > MAX_ROW_ID:
        raise UnauthorizedError()

    profile = await _repo.get_profile_by_id(db, int(raw_id))
    if profile is None:
        raise UnauthorizedError()
    return profile
