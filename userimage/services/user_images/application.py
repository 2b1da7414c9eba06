from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import logging
from pathlib import Path

from userimage.logging_utils import structured_log
from userimage.services.user_images.exceptions import (
    ImageTooLarge,
    ImageUpdateConflict,
    InvalidIdentifier,
    PathResolutionError,
    UnexpectedFailure,
    UnsupportedMediaType,
    UserImageServiceError,
    UserNotFound,
)
from userimage.services.user_images.filenames import (
    extension_for_content_type,
    generate_image_filename,
    normalize_content_type,
)
from userimage.services.user_images.identifiers import Identifier, normalize_identifier
from userimage.services.user_images.paths import public_image_url, resolve_public_image_path
from userimage.services.user_images.storage import remove_image_file, write_image_file
from userimage.services.user_images.store import UserImageRecord, UserImageStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageUpload:
    content_type: str | None
    size_bytes: int | None
    read: Callable[[], Awaitable[bytes]]


@dataclass(frozen=True)
class UploadOutcome:
    user_id: str
    image_url: str
    size_bytes: int


def require_identifier(raw: str | None) -> Identifier:
    identifier = normalize_identifier(raw)
    if identifier is None:
        raise InvalidIdentifier()
    return identifier


def validate_upload(upload: ImageUpload, *, max_upload_bytes: int) -> str:
    content_type = normalize_content_type(upload.content_type)
    if extension_for_content_type(content_type) is None:
        raise UnsupportedMediaType()
    if upload.size_bytes is not None and upload.size_bytes > max_upload_bytes:
        raise ImageTooLarge(f"Uploaded image exceeds {max_upload_bytes} bytes")
    return content_type


async def _require_user(store: UserImageStore, identifier: Identifier) -> UserImageRecord:
    record = await store.find_user(identifier)
    if record is None:
        raise UserNotFound()
    return record


async def _discard_previous_image(record: UserImageRecord, *, public_root: str | Path) -> None:
    if not record.profile_image:
        return
    old_path = resolve_public_image_path(record.profile_image, public_root=public_root)
    if old_path is None:
        structured_log(
            logger, "warning", "user_images.old_image_unresolvable",
            user_id=record.user_id,
            image_url=record.profile_image,
        )
        return
    result = await remove_image_file(old_path)
    if result.failed:
        structured_log(
            logger, "warning", "user_images.old_file_cleanup_failed",
            user_id=record.user_id,
            image_url=record.profile_image,
            error=result.error,
        )


async def upload_profile_image(
    store: UserImageStore,
    *,
    identifier: Identifier,
    upload: ImageUpload,
    public_root: str | Path,
    max_upload_bytes: int,
) -> UploadOutcome:
    content_type = validate_upload(upload, max_upload_bytes=max_upload_bytes)
    data: bytes | None = None
    if upload.size_bytes is None:
        # Unknown declared size: read now so the limit is enforced before any side effect.
        data = await upload.read()
        if len(data) > max_upload_bytes:
            raise ImageTooLarge(f"Uploaded image exceeds {max_upload_bytes} bytes")

    filename = generate_image_filename(content_type)
    image_url = public_image_url(filename)
    save_path = resolve_public_image_path(image_url, public_root=public_root)
    if save_path is None:
        raise PathResolutionError()

    try:
        record = await _require_user(store, identifier)
        await _discard_previous_image(record, public_root=public_root)

        if data is None:
            data = await upload.read()
        written = await write_image_file(save_path, data)
        if not written.ok:
            structured_log(
                logger, "error", "user_images.write_failed",
                user_id=record.user_id,
                path=str(save_path),
                error=written.error,
            )
            raise UnexpectedFailure(written.error or "Failed to write image file")

        updated = await store.set_profile_image(
            record.user_id,
            image_url,
            expected=record.profile_image,
        )
        if not updated.matched:
            await remove_image_file(save_path)
            structured_log(
                logger, "warning", "user_images.update_conflict",
                user_id=record.user_id,
                image_url=image_url,
            )
            raise ImageUpdateConflict()
    except UserImageServiceError:
        raise
    except Exception as exc:
        structured_log(
            logger, "exception", "user_images.unexpected_failure",
            operation="upload",
            identifier_kind=identifier.kind,
        )
        raise UnexpectedFailure.from_exception(exc) from exc

    structured_log(
        logger, "info", "user_images.uploaded",
        user_id=record.user_id,
        identifier_kind=identifier.kind,
        image_url=image_url,
        content_type=content_type,
        size_bytes=written.size_bytes,
    )
    return UploadOutcome(user_id=record.user_id, image_url=image_url, size_bytes=written.size_bytes)


async def clear_profile_image(
    store: UserImageStore,
    *,
    identifier: Identifier,
    public_root: str | Path,
) -> None:
    try:
        record = await _require_user(store, identifier)
        await _discard_previous_image(record, public_root=public_root)
        updated = await store.set_profile_image(
            record.user_id,
            None,
            expected=record.profile_image,
        )
        if not updated.matched:
            structured_log(logger, "warning", "user_images.update_conflict", user_id=record.user_id)
            raise ImageUpdateConflict()
    except UserImageServiceError:
        raise
    except Exception as exc:
        structured_log(
            logger, "exception", "user_images.unexpected_failure",
            operation="clear",
            identifier_kind=identifier.kind,
        )
        raise UnexpectedFailure.from_exception(exc) from exc

    structured_log(
        logger, "info", "user_images.cleared",
        user_id=record.user_id,
        identifier_kind=identifier.kind,
        had_image=record.profile_image is not None,
    )
