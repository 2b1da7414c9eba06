from __future__ import annotations

from pathlib import Path

import pytest

from userimage.services.user_images.paths import (
    PUBLIC_IMAGE_PREFIX,
    public_image_url,
    resolve_public_image_path,
)


@pytest.mark.parametrize(
    "image_url",
    [
        None,
        "",
        42,
        b"/profile-images/abc.png",
        "/etc/passwd",
        "../../secret",
        "profile-images/abc.png",
        "/profile-images",
        "/profile-images/",
        "/profile-images/../etc/passwd",
        "/profile-images/a/../../secret",
        "/profile-images/./abc.png",
        "/profile-images//abc.png",
        "/profile-images/..\\secret",
        "/other-images/abc.png",
    ],
)
def test_resolve_rejects_urls_outside_public_image_dir(tmp_path: Path, image_url) -> None:
    assert resolve_public_image_path(image_url, public_root=tmp_path) is None


def test_resolve_maps_url_under_public_root(tmp_path: Path) -> None:
    resolved = resolve_public_image_path("/profile-images/abc.png", public_root=tmp_path)

    assert resolved is not None
    assert resolved.is_absolute()
    assert resolved == tmp_path.resolve() / "profile-images" / "abc.png"
    assert resolved.as_posix().endswith("profile-images/abc.png")


def test_resolve_rejects_symlink_escaping_image_dir(tmp_path: Path) -> None:
    image_dir = tmp_path / "profile-images"
    image_dir.mkdir()
    outside = tmp_path / "outside.png"
    outside.write_bytes(b"x")
    (image_dir / "link.png").symlink_to(outside)

    assert resolve_public_image_path("/profile-images/link.png", public_root=tmp_path) is None


def test_public_image_url_round_trips_through_resolver(tmp_path: Path) -> None:
    url = public_image_url("f" * 64 + ".webp")

    assert url.startswith(PUBLIC_IMAGE_PREFIX)
    assert resolve_public_image_path(url, public_root=tmp_path) is not None
