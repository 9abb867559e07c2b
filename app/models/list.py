"""
List model.

Represents a named list. The only persisted entity.
"""

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Identity, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class List(Base):
    """
    List table.

    id and both timestamps are assigned by the database. updated_at only
    moves when the name actually changes (see ListRepository.update).
    """

    __tablename__ = "list"
    __table_args__ = (
        CheckConstraint("updated_at >= created_at", name="ck_list_updated_after_created"),
        CheckConstraint("length(trim(name)) > 0", name="ck_list_name_not_blank"),
    )

    # 64-bit store-assigned id, never reused
    id: Mapped[int] = mapped_column(
        BigInteger,
        Identity(always=False),
        primary_key=True,
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"List(id={self.id!r}, name={self.name!r})"
