"""
Convert endpoint: turns an uploaded MBL into a stored MBL record.

Flow:
1. Validate form fields and the uploaded file
2. Run the conversion service (cache → extract → map → dedup → shipper lookup)
3. Return the MBL number and the linked shippers
"""

from fastapi import APIRouter, Depends, Form, HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.dependencies import get_convert_service, get_db
from app.document_converter.service import DocumentConvertService
from app.errors import ExtractionFailure
from app.models.bill_of_lading import ShipmentMode
from app.schemas.mbl import ConvertMBLResponse
from app.services.document_service import get_file_extension

router = APIRouter()


@router.post("/mbl", response_model=ConvertMBLResponse)
async def convert_mbl(
    file: UploadFile,
    from_doc: str = Form(...),
    to_doc: str = Form(...),
    mode: str = Form(...),
    db: AsyncSession = Depends(get_db),
    service: DocumentConvertService = Depends(get_convert_service),
) -> ConvertMBLResponse:
    if from_doc != "mbl":
        raise HTTPException(status_code=400, detail="from_doc must be 'mbl'")
    if to_doc != "hbl":
        raise HTTPException(status_code=400, detail="to_doc must be 'hbl'")
    if mode not in {m.value for m in ShipmentMode}:
        raise HTTPException(status_code=400, detail="mode must be 'FCL' or 'LCL'")

    if not file.filename:
        raise HTTPException(status_code=400, detail="file is required")

    file_ext = get_file_extension(file.filename)
    if file_ext not in settings.allowed_file_types:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{file_ext}' not allowed. Allowed: {', '.join(sorted(settings.allowed_file_types))}",
        )

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > settings.max_upload_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size: {settings.max_upload_size_mb}MB",
        )

    try:
        return await service.convert(db, content, file.filename, ShipmentMode(mode))
    except ExtractionFailure as e:
        raise HTTPException(status_code=502, detail=f"Extraction failed: {e.message}")
