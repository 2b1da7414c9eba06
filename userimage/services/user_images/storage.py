from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


class DeleteStatus(StrEnum):
    REMOVED = "removed"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True)
class DeleteResult:
    path: Path
    status: DeleteStatus
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.status == DeleteStatus.FAILED


@dataclass(frozen=True)
class WriteResult:
    path: Path
    ok: bool
    size_bytes: int = 0
    error: str | None = None


def _remove_file(path: Path) -> DeleteResult:
    try:
        path.unlink()
    except FileNotFoundError:
        return DeleteResult(path=path, status=DeleteStatus.MISSING)
    except OSError as exc:
        return DeleteResult(path=path, status=DeleteStatus.FAILED, error=str(exc))
    return DeleteResult(path=path, status=DeleteStatus.REMOVED)


def _write_file(path: Path, data: bytes) -> WriteResult:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        return WriteResult(path=path, ok=False, error=str(exc))
    return WriteResult(path=path, ok=True, size_bytes=len(data))


async def remove_image_file(path: Path) -> DeleteResult:
    """Best-effort removal; a missing file counts as already removed."""
    return await asyncio.to_thread(_remove_file, path)


async def write_image_file(path: Path, data: bytes) -> WriteResult:
    return await asyncio.to_thread(_write_file, path, data)
