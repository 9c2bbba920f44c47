from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.models.bill_of_lading import ShipmentMode


# --- Master Bill of Lading field tree ---


class Carrier(BaseModel):
    name: str = ""
    scac_code: str = ""
    reference_no: str = ""


class Party(BaseModel):
    """Shipper block on the MBL (phone and fax)."""

    name: str = ""
    address: str = ""
    phone: str = ""
    fax: str = ""


class ConsigneeParty(BaseModel):
    """Consignee block on the MBL (phone and email)."""

    name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""


class NotifyParty(BaseModel):
    name: str = ""
    address: str = ""


class Routing(BaseModel):
    place_of_receipt: str = ""
    port_of_loading: str = ""
    port_of_discharge: str = ""
    place_of_delivery: str = ""


class VesselDetails(BaseModel):
    vessel_name: str = ""
    voyage_no: str = ""


class ShipmentDates(BaseModel):
    date_of_issue: str = ""
    place_of_issue: str = ""
    shipped_on_board_date: str = ""
    shipped_on_board_place: str = ""


class WeightMeasurement(BaseModel):
    value: float = 0.0
    unit: str = ""


class Cargo(BaseModel):
    container_no: str = ""
    container_type: str = ""
    seal_number: str = ""
    marks_and_numbers: str = ""
    number_of_packages: int = 0
    package_type: str = ""
    description_of_goods: str = ""
    hs_code: str = ""
    gross_weight: WeightMeasurement = Field(default_factory=lambda: WeightMeasurement(unit="KGS"))
    net_weight: WeightMeasurement = Field(default_factory=lambda: WeightMeasurement(unit="KGS"))
    measurement: WeightMeasurement = Field(default_factory=lambda: WeightMeasurement(unit="CBM"))


class OceanFreight(BaseModel):
    prepaid_amount: float = 0.0
    collect_amount: float = 0.0
    currency: str = ""


class FreightCharges(BaseModel):
    ocean_freight: OceanFreight = Field(default_factory=OceanFreight)


class MBLData(BaseModel):
    """All fields of a Master Bill of Lading."""

    bill_type: str = "MBL"
    bill_of_lading_no: str = Field("", description="Business key used for deduplication")
    packing_list_no: str = ""
    number_of_original_bls: int = 0
    terms_of_sale: str = ""
    freight_payment_type: str = Field("", description="prepaid or collect")
    carrier: Carrier = Field(default_factory=Carrier)
    shipper: Party = Field(default_factory=Party)
    consignee: ConsigneeParty = Field(default_factory=ConsigneeParty)
    notify_party: NotifyParty = Field(default_factory=NotifyParty)
    routing: Routing = Field(default_factory=Routing)
    vessel_details: VesselDetails = Field(default_factory=VesselDetails)
    shipment_dates: ShipmentDates = Field(default_factory=ShipmentDates)
    cargo: Cargo = Field(default_factory=Cargo)
    freight_charges: FreightCharges = Field(default_factory=FreightCharges)


class MBLDocument(BaseModel):
    """Mapped MBL ready for storage; the store assigns id and created_at."""

    mode: ShipmentMode = ShipmentMode.FCL
    mbl: MBLData


class MBLDetail(BaseModel):
    model_config = {"from_attributes": True}

    id: UUID
    mbl_number: str
    mode: ShipmentMode
    mbl: MBLData
    created_at: datetime


# --- Convert API ---


class ShipperDetail(BaseModel):
    shipper_id: str
    shipper_name: str
    shipper_address: str
    shipper_contact: str


class ConvertMBLResponse(BaseModel):
    mbl_number: str
    shipper_list: list[ShipperDetail]
