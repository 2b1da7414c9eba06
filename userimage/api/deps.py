from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from userimage.db.session import get_db_session
from userimage.services.user_images.store import SqlUserImageStore, UserImageStore
from userimage.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_user_image_store(
    db_session: AsyncSession = Depends(get_db_session),
) -> UserImageStore:
    return SqlUserImageStore(db_session)


def get_public_root(app_settings: Settings = Depends(get_app_settings)) -> str:
    return app_settings.public_dir


def get_max_upload_bytes(app_settings: Settings = Depends(get_app_settings)) -> int:
    return app_settings.profile_image_max_bytes
