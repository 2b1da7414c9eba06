from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from userimage.db.base import Base


class User(Base):
    __tablename__ = "users"

    # Canonical ids are 24 lower-case hex characters; legacy keys are kept verbatim.
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    profile_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
