from __future__ import annotations

import re

import pytest

from userimage.services.user_images.exceptions import UnsupportedMediaType
from userimage.services.user_images.filenames import (
    ALLOWED_IMAGE_TYPES,
    extension_for_content_type,
    generate_image_filename,
)


@pytest.mark.parametrize("content_type,extension", sorted(ALLOWED_IMAGE_TYPES.items()))
def test_generated_names_are_unique_and_keep_extension(content_type: str, extension: str) -> None:
    names = [generate_image_filename(content_type) for _ in range(1000)]

    assert len(set(names)) == len(names)
    pattern = re.compile(rf"[0-9a-f]{{64}}\.{extension}")
    assert all(pattern.fullmatch(name) for name in names)


def test_extension_lookup_ignores_case_and_parameters() -> None:
    assert extension_for_content_type(" Image/PNG; charset=binary") == "png"
    assert extension_for_content_type("image/jpeg") == "jpg"


@pytest.mark.parametrize("content_type", [None, "", "application/pdf", "image/svg+xml", "image/bmp"])
def test_extension_lookup_rejects_unlisted_types(content_type) -> None:
    assert extension_for_content_type(content_type) is None


def test_generate_image_filename_rejects_unlisted_type() -> None:
    with pytest.raises(UnsupportedMediaType, match="Only image files allowed"):
        generate_image_filename("application/pdf")
