from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db, get_preview_service
from app.errors import NotFound
from app.hbl_generator.service import HBLPreviewService
from app.schemas.hbl import HBLData, HBLDetail, PreviewHBLRequest, PreviewHBLResponse

router = APIRouter()


@router.post("/preview/hbl", response_model=PreviewHBLResponse)
async def preview_hbl(
    request: PreviewHBLRequest,
    db: AsyncSession = Depends(get_db),
    service: HBLPreviewService = Depends(get_preview_service),
) -> PreviewHBLResponse:
    """Generate and store one HBL per shipper id for an already converted MBL."""
    if not request.mbl_number:
        raise HTTPException(status_code=400, detail="mbl_number is required")
    if not request.shipper_list:
        raise HTTPException(status_code=400, detail="shipper_list must contain at least one shipper_id")

    try:
        return await service.preview(db, request.mbl_number, request.shipper_list)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/hbl/{hbl_number}", response_model=HBLDetail)
async def get_hbl(
    hbl_number: str,
    db: AsyncSession = Depends(get_db),
    service: HBLPreviewService = Depends(get_preview_service),
) -> HBLDetail:
    try:
        record = await service.get_hbl(db, hbl_number)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    return HBLDetail.model_validate(record)


@router.put("/hbl/{hbl_number}", response_model=HBLDetail)
async def update_hbl(
    hbl_number: str,
    data: HBLData,
    db: AsyncSession = Depends(get_db),
    service: HBLPreviewService = Depends(get_preview_service),
) -> HBLDetail:
    """Replace the stored HBL field tree wholesale (user edits after preview)."""
    try:
        record = await service.update_hbl(db, hbl_number, data)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    return HBLDetail.model_validate(record)
