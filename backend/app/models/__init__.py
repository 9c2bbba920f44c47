from app.models.base import Base, TimestampMixin
from app.models.bill_of_lading import HBLRecord, MBLCacheEntry, MBLRecord, ShipmentMode
from app.models.reference import Booking, Shipment, Shipper

__all__ = [
    "Base",
    "TimestampMixin",
    "MBLCacheEntry",
    "MBLRecord",
    "HBLRecord",
    "ShipmentMode",
    "Booking",
    "Shipment",
    "Shipper",
]
