from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException
from starlette.responses import Response

from userimage.api.deps import get_max_upload_bytes, get_public_root, get_user_image_store
from userimage.api.errors import ApiException
from userimage.api.responses import empty_response
from userimage.api.schemas import ImageUrlResponse, MessageResponse
from userimage.logging_utils import structured_log
from userimage.services.user_images import application as user_image_service
from userimage.services.user_images.exceptions import (
    InvalidRequestBody,
    NoFileUploaded,
    UserImageServiceError,
)
from userimage.services.user_images.store import UserImageStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["api-user-images"])
MULTIPART_CONTENT_TYPE = "multipart/form-data"
UPLOAD_FIELD_NAME = "file"


def _rejected(exc: UserImageServiceError, *, operation: str, user_id: str) -> ApiException:
    structured_log(
        logger, "warning" if exc.status_code >= 500 else "info", "api.user_images.rejected",
        operation=operation,
        raw_user_id=user_id,
        status_code=exc.status_code,
        code=exc.code,
    )
    return ApiException.from_service_error(exc)


async def _read_multipart_form(request: Request) -> FormData:
    content_type = request.headers.get("content-type", "")
    if not content_type.lower().startswith(MULTIPART_CONTENT_TYPE):
        raise InvalidRequestBody()
    try:
        return await request.form()
    except (MultiPartException, StarletteHTTPException, ValueError) as exc:
        raise InvalidRequestBody() from exc


def _uploaded_file(form: FormData) -> UploadFile:
    value = form.get(UPLOAD_FIELD_NAME)
    if not isinstance(value, UploadFile):
        raise NoFileUploaded()
    return value


@router.options("/{user_id}/image", include_in_schema=False)
async def user_image_preflight(user_id: str) -> Response:
    return empty_response()


@router.post(
    "/{user_id}/image",
    response_model=ImageUrlResponse,
)
async def upload_user_image(
    user_id: str,
    request: Request,
    store: UserImageStore = Depends(get_user_image_store),
    public_root: str = Depends(get_public_root),
    max_upload_bytes: int = Depends(get_max_upload_bytes),
):
    try:
        identifier = user_image_service.require_identifier(user_id)
        form = await _read_multipart_form(request)
        try:
            image = _uploaded_file(form)
            outcome = await user_image_service.upload_profile_image(
                store,
                identifier=identifier,
                upload=user_image_service.ImageUpload(
                    content_type=image.content_type,
                    size_bytes=image.size,
                    read=image.read,
                ),
                public_root=public_root,
                max_upload_bytes=max_upload_bytes,
            )
        finally:
            await form.close()
    except UserImageServiceError as exc:
        raise _rejected(exc, operation="upload", user_id=user_id) from exc

    return {"imageUrl": outcome.image_url}


@router.delete(
    "/{user_id}/image",
    response_model=MessageResponse,
)
async def clear_user_image(
    user_id: str,
    store: UserImageStore = Depends(get_user_image_store),
    public_root: str = Depends(get_public_root),
):
    try:
        identifier = user_image_service.require_identifier(user_id)
        await user_image_service.clear_profile_image(
            store,
            identifier=identifier,
            public_root=public_root,
        )
    except UserImageServiceError as exc:
        raise _rejected(exc, operation="clear", user_id=user_id) from exc

    return {"message": "OK"}
