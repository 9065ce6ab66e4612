"""
Gadget model - the rentable item record.
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime, Float
from sqlalchemy.orm import Mapped, mapped_column

from gadget_registry.db.base import Base


class Gadget(Base):
    """Gadget entity. availability=True means rentable; rented_by is set only while rented."""

    __tablename__ = "gadgets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_per_day: Mapped[float | None] = mapped_column(Float, nullable=True)
    availability: Mapped[bool] = mapped_column(default=True, nullable=False)
    owner: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    rented_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Timestamps come from the service clock, not the database
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Gadget(id={self.id}, name={self.name}, availability={self.availability})>"
