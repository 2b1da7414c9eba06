from __future__ import annotations

from pathlib import Path

PUBLIC_IMAGE_DIRNAME = "profile-images"
PUBLIC_IMAGE_PREFIX = f"/{PUBLIC_IMAGE_DIRNAME}/"


def public_image_url(filename: str) -> str:
    return f"{PUBLIC_IMAGE_PREFIX}{filename}"


def public_image_root(public_root: str | Path) -> Path:
    return (Path(public_root).expanduser().resolve() / PUBLIC_IMAGE_DIRNAME)


def resolve_public_image_path(image_url: object, *, public_root: str | Path) -> Path | None:
    """Map a stored ``/profile-images/...`` URL to its file under ``public_root``.

    Anything that is not a string rooted at the public image prefix, or that
    would step outside the image directory, resolves to ``None``. Suspicious
    segments are rejected outright instead of being cleaned up.
    """
    if not image_url or not isinstance(image_url, str):
        return None
    if not image_url.startswith(PUBLIC_IMAGE_PREFIX):
        return None

    relative = image_url[len(PUBLIC_IMAGE_PREFIX):]
    if not relative or "\\" in relative or "\x00" in relative:
        return None
    segments = relative.split("/")
    if any(segment in {"", ".", ".."} for segment in segments):
        return None

    image_root = public_image_root(public_root)
    candidate = image_root.joinpath(*segments)
    if image_root not in candidate.resolve().parents:
        return None
    return candidate
