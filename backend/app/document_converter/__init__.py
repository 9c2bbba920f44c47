from app.document_converter.cache import ExtractionCache
from app.document_converter.chain import ChainLink, ChainResolver
from app.document_converter.field_reader import FieldReader
from app.document_converter.mapper import map_extraction_to_mbl
from app.document_converter.service import DocumentConvertService
from app.document_converter.store import MBLStore

__all__ = [
    "ChainLink",
    "ChainResolver",
    "DocumentConvertService",
    "ExtractionCache",
    "FieldReader",
    "MBLStore",
    "map_extraction_to_mbl",
]
