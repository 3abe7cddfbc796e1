from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from catalog_api.database.base import Base

# Avoid circular import issues when using type hints for related models
if TYPE_CHECKING:
    from .refresh_token import RefreshToken


class User(Base):
    """
    SQLAlchemy model for User.

    Catalog users authenticate with email + password. The password column only
    ever holds a bcrypt hash; the public projection (schemas.user.UserRead)
    never exposes it.
    """
    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Login identifier (unique, stored lowercase)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False
    )

    # bcrypt hash
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    # --- Relationships ---

    # One-to-one: at most one active refresh token per user
    refresh_token: Mapped["RefreshToken | None"] = relationship(
        "RefreshToken",
        back_populates="user",
        cascade="all, delete-orphan",
        uselist=False,
        lazy="select"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, email={self.email!r})>"
