from app.hbl_generator.mapper import generate_hbl_number, map_mbl_to_hbl
from app.hbl_generator.service import HBLPreviewService
from app.hbl_generator.store import HBLStore

__all__ = ["HBLPreviewService", "HBLStore", "generate_hbl_number", "map_mbl_to_hbl"]
