"""Content-addressed cache of extraction results (MBL_Cache).

Keyed by the SHA-256 of the uploaded bytes. Entries are write-once and never
expire; a byte-for-byte identical upload skips the extraction service.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.bill_of_lading import MBLCacheEntry

logger = logging.getLogger("blconv.store")


class ExtractionCache:
    """Static lookup/store pair over the mbl_cache table."""

    @staticmethod
    async def lookup(db: AsyncSession, file_hash: str) -> MBLCacheEntry | None:
        result = await db.execute(
            select(MBLCacheEntry)
            .where(MBLCacheEntry.file_hash == file_hash)
            .order_by(MBLCacheEntry.created_at)
            .limit(1)
        )
        return result.scalars().first()

    @staticmethod
    async def store(
        db: AsyncSession,
        file_hash: str,
        mbl_number: str,
        extracted_data: dict[str, Any],
    ) -> bool:
        """Insert a cache entry. Returns False (and logs) instead of raising on failure."""
        entry = MBLCacheEntry(
            file_hash=file_hash,
            mbl_number=mbl_number or "",
            extracted_data=extracted_data,
        )
        try:
            async with db.begin_nested():
                db.add(entry)
        except Exception as e:
            logger.warning("Failed to save to MBL_Cache (hash=%s): %s", file_hash[:12], e)
            return False
        return True
