from fastapi import Depends, Request

from app.config import settings
from app.database import get_db
from app.document_converter.service import DocumentConvertService
from app.hbl_generator.service import HBLPreviewService
from app.services.extraction_client import ExtractionClient

# Re-export get_db for use in Depends()
get_db = get_db


def get_extraction_client(request: Request) -> ExtractionClient:
    """The process-wide client created in the app lifespan."""
    return request.app.state.extraction_client


def get_convert_service(
    extraction_client: ExtractionClient = Depends(get_extraction_client),
) -> DocumentConvertService:
    return DocumentConvertService(extraction_client)


def get_preview_service() -> HBLPreviewService:
    return HBLPreviewService(settings)
