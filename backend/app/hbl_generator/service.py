"""
HBL preview/generation service.

Flow:
  1. Fetch the MBL by number (404 if unknown)
  2. Fetch shipments and shippers for the requested shipper ids
  3. For each shipper id, in request order: map MBL + shipment + shipper → HBL,
     assign the next HBL number, store it
  4. Return every generated HBL

Shipper ids with no shipment or no shipper record are skipped and do not
consume an HBL number. A failed insert is logged; the HBL is still returned.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.document_converter.store import MBLStore
from app.errors import NotFound
from app.hbl_generator.mapper import generate_hbl_number, map_mbl_to_hbl
from app.hbl_generator.store import HBLStore
from app.models.bill_of_lading import HBLRecord
from app.models.reference import Shipment, Shipper
from app.schemas.hbl import HBLData, PreviewHBLResponse
from app.schemas.mbl import MBLData

logger = logging.getLogger("blconv.preview")


class HBLPreviewService:
    """Generates, stores and edits house bills for a converted MBL."""

    def __init__(self, settings: Settings):
        self.hbl_number_prefix = settings.hbl_number_prefix

    async def _shipments_by_shipper(self, db: AsyncSession, shipper_ids: list[str]) -> dict[str, Shipment]:
        shipments = (
            await db.execute(
                select(Shipment)
                .where(Shipment.shipper_id.in_(shipper_ids))
                .order_by(Shipment.shipment_id)
            )
        ).scalars().all()
        mapping: dict[str, Shipment] = {}
        for shipment in shipments:
            mapping.setdefault(shipment.shipper_id, shipment)
        return mapping

    async def _shippers_by_id(self, db: AsyncSession, shipper_ids: list[str]) -> dict[str, Shipper]:
        shippers = (
            await db.execute(select(Shipper).where(Shipper.shipper_id.in_(shipper_ids)))
        ).scalars().all()
        mapping: dict[str, Shipper] = {}
        for shipper in shippers:
            mapping.setdefault(shipper.shipper_id, shipper)
        return mapping

    async def preview(self, db: AsyncSession, mbl_number: str, shipper_ids: list[str]) -> PreviewHBLResponse:
        """Generate one HBL per resolvable shipper id.

        Raises:
            NotFound: no MBL exists for ``mbl_number``.
        """
        mbl_record = await MBLStore.find_by_mbl_number(db, mbl_number)
        if mbl_record is None:
            raise NotFound(f"MBL not found for number {mbl_number}", {"mbl_number": mbl_number})
        logger.info("Fetched MBL: %s", mbl_number)

        mbl = MBLData.model_validate(mbl_record.mbl)
        mode = mbl_record.mode.value if mbl_record.mode is not None else ""

        requested = list(dict.fromkeys(shipper_ids))
        shipment_by_shipper = await self._shipments_by_shipper(db, requested)
        shipper_by_id = await self._shippers_by_id(db, requested)

        hbl_list: list[HBLData] = []
        hbl_index = 1

        for shipper_id in shipper_ids:
            shipment = shipment_by_shipper.get(shipper_id)
            if shipment is None:
                logger.warning("No shipment found for shipper_id %s, skipping", shipper_id)
                continue
            shipper = shipper_by_id.get(shipper_id)
            if shipper is None:
                logger.warning("No shipper details found for shipper_id %s, skipping", shipper_id)
                continue

            hbl_number = generate_hbl_number(mbl_number, hbl_index, self.hbl_number_prefix)
            hbl_data = map_mbl_to_hbl(mbl, shipment, shipper, hbl_number, mode)

            try:
                await HBLStore.insert(db, hbl_number, mbl_number, shipment.shipment_id, hbl_data)
            except Exception as e:
                logger.warning("Failed to store HBL %s: %s", hbl_number, e)
            else:
                logger.info(
                    "HBL stored in DB: %s (shipment: %s, shipper: %s)",
                    hbl_number,
                    shipment.shipment_id,
                    shipper_id,
                )

            hbl_list.append(hbl_data)
            hbl_index += 1

        return PreviewHBLResponse(mbl_number=mbl_number, total_count=len(hbl_list), hbl_list=hbl_list)

    async def get_hbl(self, db: AsyncSession, hbl_number: str) -> HBLRecord:
        record = await HBLStore.find_by_hbl_number(db, hbl_number)
        if record is None:
            raise NotFound(f"HBL not found for number {hbl_number}", {"hbl_number": hbl_number})
        return record

    async def update_hbl(self, db: AsyncSession, hbl_number: str, data: HBLData) -> HBLRecord:
        record = await HBLStore.update(db, hbl_number, data)
        logger.info("HBL %s updated", hbl_number)
        return record
