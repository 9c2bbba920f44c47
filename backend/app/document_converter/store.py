from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.bill_of_lading import MBLRecord
from app.schemas.mbl import MBLDocument


class MBLStore:
    """Persistence for master bills, looked up by MBL number."""

    @staticmethod
    async def find_by_mbl_number(db: AsyncSession, mbl_number: str) -> MBLRecord | None:
        # Oldest row is authoritative if a race ever produced duplicates.
        result = await db.execute(
            select(MBLRecord)
            .where(MBLRecord.mbl_number == mbl_number)
            .order_by(MBLRecord.created_at)
            .limit(1)
        )
        return result.scalars().first()

    @staticmethod
    async def insert(db: AsyncSession, document: MBLDocument) -> MBLRecord:
        record = MBLRecord(
            mbl_number=document.mbl.bill_of_lading_no,
            mode=document.mode,
            mbl=document.mbl.model_dump(mode="json"),
        )
        db.add(record)
        await db.flush()
        return record
