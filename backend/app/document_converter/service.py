"""
MBL conversion service.

Flow:
  1. Hash file bytes → check MBL_Cache; on a hit, skip extraction
  2. Cache miss: release the DB connection, call the extraction service,
     then cache the result (best-effort)
  3. Map the flat extraction to the structured MBL document
  4. Insert the MBL unless one with the same MBL number already exists
  5. Resolve linked shippers via Booking → Shipment → Shipper
  6. Return the MBL number and shipper list
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.document_converter.cache import ExtractionCache
from app.document_converter.chain import ChainResolver
from app.document_converter.mapper import map_extraction_to_mbl
from app.document_converter.store import MBLStore
from app.errors import ChainResolutionFailure
from app.models.bill_of_lading import ShipmentMode
from app.schemas.mbl import ConvertMBLResponse, ShipperDetail
from app.schemas.mbl_extraction import get_mbl_extraction_schema
from app.services.document_service import compute_file_hash
from app.services.extraction_client import ExtractionClient

logger = logging.getLogger("blconv.convert")


class DocumentConvertService:
    """Orchestrates MBL extraction, deduplication and shipper lookup."""

    def __init__(self, extraction_client: ExtractionClient):
        self.extraction_client = extraction_client
        self.chain = ChainResolver()

    async def _extract(self, db: AsyncSession, file_bytes: bytes, filename: str) -> dict:
        file_hash = compute_file_hash(file_bytes)

        cached = await ExtractionCache.lookup(db, file_hash)
        if cached is not None:
            logger.info("CACHE HIT: file hash %s found in MBL_Cache, skipping extraction", file_hash[:12])
            return dict(cached.extracted_data)

        logger.info("CACHE MISS: file hash %s not found, calling extraction server", file_hash[:12])
        # The extraction call can take minutes; end the read-only transaction
        # so no pooled connection is held across it.
        await db.commit()
        extracted = await self.extraction_client.extract(
            file_bytes, filename, get_mbl_extraction_schema()
        )
        logger.info("MBL extraction completed for file: %s", filename)

        mbl_number = extracted.get("mbl_number")
        await ExtractionCache.store(
            db,
            file_hash,
            mbl_number if isinstance(mbl_number, str) else "",
            extracted,
        )
        return extracted

    async def convert(
        self,
        db: AsyncSession,
        file_bytes: bytes,
        filename: str,
        mode: ShipmentMode = ShipmentMode.FCL,
    ) -> ConvertMBLResponse:
        """Convert an uploaded MBL file.

        Raises:
            ExtractionFailure: the extraction service call failed. This is the
                only fatal error; cache writes and shipper lookup degrade
                quietly.
        """
        extracted = await self._extract(db, file_bytes, filename)

        mbl_doc = map_extraction_to_mbl(extracted, mode)
        mbl_number = mbl_doc.mbl.bill_of_lading_no
        logger.info("MBL number extracted: %s", mbl_number)

        existing = await MBLStore.find_by_mbl_number(db, mbl_number)
        if existing is None:
            await MBLStore.insert(db, mbl_doc)
            logger.info("MBL document stored in DB: %s", mbl_number)
        else:
            logger.info("MBL %s already exists in DB (id=%s), skipping insert", mbl_number, existing.id)

        shipper_list: list[ShipperDetail]
        try:
            shipper_list = await self.chain.lookup_shipper_details(db, mbl_number)
        except ChainResolutionFailure as e:
            logger.warning("Shipper lookup failed for MBL %s: %s", mbl_number, e)
            shipper_list = []

        return ConvertMBLResponse(mbl_number=mbl_number, shipper_list=shipper_list)
