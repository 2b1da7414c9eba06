from __future__ import annotations

from fastapi import APIRouter

from userimage.api.routers import user_images

router = APIRouter(prefix="/api")
router.include_router(user_images.router)
