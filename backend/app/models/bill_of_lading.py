"""ORM models for master/house bills of lading and the extraction cache."""

import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum as SAEnum, JSON, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, utcnow


class ShipmentMode(str, enum.Enum):
    FCL = "FCL"
    LCL = "LCL"


class MBLCacheEntry(Base):
    """One extraction result per distinct file content. Write-once."""

    __tablename__ = "mbl_cache"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    file_hash: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    mbl_number: Mapped[str] = mapped_column(Text, nullable=False, default="")
    extracted_data: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)


class MBLRecord(Base):
    __tablename__ = "mbl"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Not unique at the schema level: dedup is a lookup-before-insert.
    mbl_number: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    mode: Mapped[ShipmentMode] = mapped_column(
        SAEnum(ShipmentMode, name="shipment_mode", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ShipmentMode.FCL,
    )
    mbl: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)


class HBLRecord(Base, TimestampMixin):
    __tablename__ = "hbl"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    hbl_number: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    mbl_number: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    shipment_id: Mapped[str] = mapped_column(String(100), nullable=False)
    hbl: Mapped[dict] = mapped_column(JSON, nullable=False)
