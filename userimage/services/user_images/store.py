from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from userimage.db.models import User
from userimage.services.user_images.identifiers import Identifier


@dataclass(frozen=True)
class UserImageRecord:
    user_id: str
    profile_image: str | None


@dataclass(frozen=True)
class UpdateResult:
    user_id: str
    image_url: str | None
    matched: bool


class UserImageStore(Protocol):
    async def find_user(self, identifier: Identifier) -> UserImageRecord | None: ...

    async def set_profile_image(
        self,
        user_id: str,
        image_url: str | None,
        *,
        expected: str | None,
    ) -> UpdateResult: ...


class SqlUserImageStore:
    def __init__(self, db_session: AsyncSession) -> None:
        self._db_session = db_session

    async def find_user(self, identifier: Identifier) -> UserImageRecord | None:
        result = await self._db_session.execute(
            select(User.id, User.profile_image).where(User.id == identifier.key)
        )
        row = result.first()
        if row is None:
            return None
        return UserImageRecord(user_id=row.id, profile_image=row.profile_image)

    async def set_profile_image(
        self,
        user_id: str,
        image_url: str | None,
        *,
        expected: str | None,
    ) -> UpdateResult:
        stmt = (
            update(User)
            .where(User.id == user_id)
            .where(User.profile_image.is_not_distinct_from(expected))
            .values(profile_image=image_url, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._db_session.execute(stmt)
            await self._db_session.commit()
        except Exception:
            await self._db_session.rollback()
            raise
        return UpdateResult(user_id=user_id, image_url=image_url, matched=result.rowcount == 1)
