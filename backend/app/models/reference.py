"""Read-only operational reference data: bookings, shipments, shippers."""

import uuid

from sqlalchemy import Float, Integer, JSON, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    mbl_number: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    shipment_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)


class Shipment(Base):
    __tablename__ = "shipments"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    shipment_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    shipper_id: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    goods_description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    packages_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    gross_weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    net_weight: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    volume: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    marks_and_numbers: Mapped[str] = mapped_column(Text, nullable=False, default="")
    measurement: Mapped[str] = mapped_column(String(100), nullable=False, default="")


class Shipper(Base):
    __tablename__ = "shippers"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    shipper_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    shipper_name: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    shipper_address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    shipper_contact: Mapped[str] = mapped_column(String(200), nullable=False, default="")
