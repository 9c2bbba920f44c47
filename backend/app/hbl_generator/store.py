from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFound
from app.models.bill_of_lading import HBLRecord
from app.schemas.hbl import HBLData


class HBLStore:
    """Persistence for generated house bills, looked up by HBL number."""

    @staticmethod
    async def insert(
        db: AsyncSession,
        hbl_number: str,
        mbl_number: str,
        shipment_id: str,
        data: HBLData,
    ) -> HBLRecord:
        """Insert inside a savepoint so a failure leaves the session usable.

        Errors propagate to the caller, which decides whether they are fatal.
        """
        record = HBLRecord(
            hbl_number=hbl_number,
            mbl_number=mbl_number,
            shipment_id=shipment_id,
            hbl=data.model_dump(mode="json"),
        )
        async with db.begin_nested():
            db.add(record)
        return record

    @staticmethod
    async def find_by_hbl_number(db: AsyncSession, hbl_number: str) -> HBLRecord | None:
        # Re-running a preview inserts fresh rows under the same number;
        # the newest one is current.
        result = await db.execute(
            select(HBLRecord)
            .where(HBLRecord.hbl_number == hbl_number)
            .order_by(HBLRecord.created_at.desc())
            .limit(1)
        )
        return result.scalars().first()

    @staticmethod
    async def update(db: AsyncSession, hbl_number: str, data: HBLData) -> HBLRecord:
        """Replace the whole HBL field tree of the current row."""
        record = await HBLStore.find_by_hbl_number(db, hbl_number)
        if record is None:
            raise NotFound(f"HBL not found for number {hbl_number}", {"hbl_number": hbl_number})

        record.hbl = data.model_dump(mode="json")
        await db.flush()
        await db.refresh(record)
        return record
