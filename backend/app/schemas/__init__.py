from app.schemas.hbl import HBLData, HBLDetail, PreviewHBLRequest, PreviewHBLResponse
from app.schemas.health import HealthResponse
from app.schemas.mbl import ConvertMBLResponse, MBLData, MBLDetail, MBLDocument, ShipperDetail

__all__ = [
    "ConvertMBLResponse",
    "HBLData",
    "HBLDetail",
    "HealthResponse",
    "MBLData",
    "MBLDetail",
    "MBLDocument",
    "PreviewHBLRequest",
    "PreviewHBLResponse",
    "ShipperDetail",
]
