"""
Booking → Shipment → Shipper chain lookup.

Given an MBL number, finds the booking that references it, the shipments on
that booking and the shippers owning those shipments. Shipments whose shipper
cannot be found are dropped, not reported as errors.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ChainResolutionFailure
from app.models.reference import Booking, Shipment, Shipper
from app.schemas.mbl import ShipperDetail

logger = logging.getLogger("blconv.chain")


@dataclass
class ChainLink:
    """One fully resolved (shipment, shipper) pair."""

    shipment: Shipment
    shipper: Shipper


def shipper_detail(shipper: Shipper) -> ShipperDetail:
    return ShipperDetail(
        shipper_id=shipper.shipper_id,
        shipper_name=shipper.shipper_name,
        shipper_address=shipper.shipper_address,
        shipper_contact=shipper.shipper_contact,
    )


class ChainResolver:
    """Booking → Shipment → Shipper lookups over the reference tables."""

    async def find_booking(self, db: AsyncSession, mbl_number: str) -> Booking | None:
        result = await db.execute(
            select(Booking).where(Booking.mbl_number == mbl_number).limit(1)
        )
        return result.scalars().first()

    async def resolve(self, db: AsyncSession, mbl_number: str) -> list[ChainLink]:
        """Resolve every shipment on the MBL's booking to its shipper.

        Links follow the booking's shipment-id order. Each distinct shipper is
        fetched once even when several shipments share it.

        Raises:
            ChainResolutionFailure: no booking references ``mbl_number``.
        """
        booking = await self.find_booking(db, mbl_number)
        if booking is None:
            raise ChainResolutionFailure(mbl_number)

        shipment_ids = list(booking.shipment_ids or [])
        if not shipment_ids:
            return []

        shipments = (
            await db.execute(select(Shipment).where(Shipment.shipment_id.in_(shipment_ids)))
        ).scalars().all()

        position = {sid: i for i, sid in reversed(list(enumerate(shipment_ids)))}
        shipments = sorted(shipments, key=lambda s: (position.get(s.shipment_id, len(position)), s.shipment_id))

        # Unique shipper ids, first-seen order
        shipper_ids: list[str] = []
        for shipment in shipments:
            if shipment.shipper_id and shipment.shipper_id not in shipper_ids:
                shipper_ids.append(shipment.shipper_id)

        if not shipper_ids:
            return []

        shippers = (
            await db.execute(select(Shipper).where(Shipper.shipper_id.in_(shipper_ids)))
        ).scalars().all()
        shipper_by_id: dict[str, Shipper] = {}
        for shipper in shippers:
            shipper_by_id.setdefault(shipper.shipper_id, shipper)

        links: list[ChainLink] = []
        for shipment in shipments:
            shipper = shipper_by_id.get(shipment.shipper_id)
            if shipper is None:
                logger.debug(
                    "Shipment %s references unknown shipper %r, dropping",
                    shipment.shipment_id,
                    shipment.shipper_id,
                )
                continue
            links.append(ChainLink(shipment=shipment, shipper=shipper))

        return links

    async def lookup_shipper_details(self, db: AsyncSession, mbl_number: str) -> list[ShipperDetail]:
        """Distinct shippers linked to the MBL, in first-seen order."""
        details: list[ShipperDetail] = []
        seen: set[str] = set()
        for link in await self.resolve(db, mbl_number):
            if link.shipper.shipper_id in seen:
                continue
            seen.add(link.shipper.shipper_id)
            details.append(shipper_detail(link.shipper))
        return details
