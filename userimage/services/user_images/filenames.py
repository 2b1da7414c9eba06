from __future__ import annotations

import secrets

from userimage.services.user_images.exceptions import UnsupportedMediaType

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}
RANDOM_NAME_BYTES = 32


def normalize_content_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def extension_for_content_type(content_type: str | None) -> str | None:
    return ALLOWED_IMAGE_TYPES.get(normalize_content_type(content_type))


def generate_image_filename(content_type: str) -> str:
    # Stored names are public and unauthenticated, so they must not be guessable.
    extension = extension_for_content_type(content_type)
    if extension is None:
        raise UnsupportedMediaType()
    return f"{secrets.token_hex(RANDOM_NAME_BYTES)}.{extension}"
