"""Initial schema: extraction cache, MBL/HBL stores and reference data

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "mbl_cache",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("file_hash", sa.String(64), nullable=False),
        sa.Column("mbl_number", sa.Text, nullable=False, server_default=""),
        sa.Column("extracted_data", sa.JSON, nullable=False),
        _created_at(),
    )
    op.create_index("ix_mbl_cache_file_hash", "mbl_cache", ["file_hash"])

    # mbl_number is not unique; dedup is lookup-before-insert
    op.create_table(
        "mbl",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("mbl_number", sa.Text, nullable=False),
        sa.Column(
            "mode",
            sa.Enum("FCL", "LCL", name="shipment_mode"),
            nullable=False,
            server_default="FCL",
        ),
        sa.Column("mbl", sa.JSON, nullable=False),
        _created_at(),
    )
    op.create_index("ix_mbl_mbl_number", "mbl", ["mbl_number"])

    op.create_table(
        "hbl",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("hbl_number", sa.Text, nullable=False),
        sa.Column("mbl_number", sa.Text, nullable=False),
        sa.Column("shipment_id", sa.String(100), nullable=False),
        sa.Column("hbl", sa.JSON, nullable=False),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_hbl_hbl_number", "hbl", ["hbl_number"])
    op.create_index("ix_hbl_mbl_number", "hbl", ["mbl_number"])

    # Reference data, owned by the booking system
    op.create_table(
        "bookings",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("mbl_number", sa.Text, nullable=False),
        sa.Column("shipment_ids", sa.JSON, nullable=False),
        sa.Column("status", sa.String(50), nullable=True),
    )
    op.create_index("ix_bookings_mbl_number", "bookings", ["mbl_number"])

    op.create_table(
        "shipments",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("shipment_id", sa.String(100), nullable=False),
        sa.Column("shipper_id", sa.String(100), nullable=False, server_default=""),
        sa.Column("goods_description", sa.Text, nullable=False, server_default=""),
        sa.Column("packages_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("gross_weight", sa.Float, nullable=False, server_default="0"),
        sa.Column("net_weight", sa.Float, nullable=False, server_default="0"),
        sa.Column("volume", sa.Float, nullable=False, server_default="0"),
        sa.Column("marks_and_numbers", sa.Text, nullable=False, server_default=""),
        sa.Column("measurement", sa.String(100), nullable=False, server_default=""),
    )
    op.create_index("ix_shipments_shipment_id", "shipments", ["shipment_id"])
    op.create_index("ix_shipments_shipper_id", "shipments", ["shipper_id"])

    op.create_table(
        "shippers",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("shipper_id", sa.String(100), nullable=False),
        sa.Column("shipper_name", sa.String(500), nullable=False, server_default=""),
        sa.Column("shipper_address", sa.Text, nullable=False, server_default=""),
        sa.Column("shipper_contact", sa.String(200), nullable=False, server_default=""),
    )
    op.create_index("ix_shippers_shipper_id", "shippers", ["shipper_id"])


def downgrade() -> None:
    op.drop_table("shippers")
    op.drop_table("shipments")
    op.drop_table("bookings")
    op.drop_table("hbl")
    op.drop_table("mbl")
    op.drop_table("mbl_cache")
    op.execute("DROP TYPE IF EXISTS shipment_mode")
