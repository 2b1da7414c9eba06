from __future__ import annotations

from pathlib import Path

from userimage.services.user_images.identifiers import Identifier
from userimage.services.user_images.store import UpdateResult, UserImageRecord

CANONICAL_USER_ID = "507f1f77bcf86cd799439011"
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00"


class InMemoryUserImageStore:
    def __init__(self, users: dict[str, str | None] | None = None) -> None:
        self.users: dict[str, str | None] = dict(users or {})
        self.lookups: list[Identifier] = []
        self.updates: list[tuple[str, str | None]] = []

    async def find_user(self, identifier: Identifier) -> UserImageRecord | None:
        self.lookups.append(identifier)
        if identifier.key not in self.users:
            return None
        return UserImageRecord(user_id=identifier.key, profile_image=self.users[identifier.key])

    async def set_profile_image(
        self,
        user_id: str,
        image_url: str | None,
        *,
        expected: str | None,
    ) -> UpdateResult:
        if user_id not in self.users or self.users[user_id] != expected:
            return UpdateResult(user_id=user_id, image_url=image_url, matched=False)
        self.users[user_id] = image_url
        self.updates.append((user_id, image_url))
        return UpdateResult(user_id=user_id, image_url=image_url, matched=True)


def stored_files(image_dir: Path) -> list[str]:
    if not image_dir.exists():
        return []
    return sorted(path.name for path in image_dir.iterdir() if path.is_file())
