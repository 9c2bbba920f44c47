from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db
from app.document_converter.store import MBLStore
from app.schemas.mbl import MBLDetail

router = APIRouter()


@router.get("/{mbl_number}", response_model=MBLDetail)
async def get_mbl(
    mbl_number: str,
    db: AsyncSession = Depends(get_db),
) -> MBLDetail:
    record = await MBLStore.find_by_mbl_number(db, mbl_number)
    if record is None:
        raise HTTPException(status_code=404, detail="MBL not found")
    return MBLDetail.model_validate(record)
