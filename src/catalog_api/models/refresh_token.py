from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from catalog_api.database.base import Base

if TYPE_CHECKING:
    from .user import User


class RefreshToken(Base):
    """
    The single active refresh token of a user.

    Only the SHA-256 digest of the issued token is stored. Login and refresh
    replace the row; logout deletes it.
    """
    __tablename__ = "refresh_token"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        unique=True,
        nullable=False
    )

    # hex sha256 of the raw token
    token: Mapped[str] = mapped_column(String(64), nullable=False)

    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    user: Mapped["User"] = relationship("User", back_populates="refresh_token")

    def __repr__(self) -> str:
        return f"<RefreshToken(id={self.id!r}, user_id={self.user_id!r})>"
