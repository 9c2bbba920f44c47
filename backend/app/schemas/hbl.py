from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class HBLCarrier(BaseModel):
    name: str = ""


class HBLParty(BaseModel):
    name: str = ""
    address: str = ""


class HBLRouting(BaseModel):
    place_of_receipt: str = ""
    port_of_loading: str = ""
    port_of_discharge: str = ""
    place_of_delivery: str = ""


class HBLVessel(BaseModel):
    """One vessel leg; an HBL may carry several."""

    vessel_name: str = ""
    voyage_no: str = ""


class HBLShipmentDates(BaseModel):
    place_and_date_of_issue: str = ""
    freight_payable_at: str = ""


class HBLWeightMeasurement(BaseModel):
    value: float = 0.0
    unit: str = ""


class HBLContainer(BaseModel):
    container_no: str = ""
    container_size: str = ""
    seal_no: str = ""
    package_count: int = 0
    package_type: str = ""
    marks_and_numbers: str = ""
    description_of_goods: str = ""
    hs_code: str = ""
    gross_weight: HBLWeightMeasurement = Field(default_factory=HBLWeightMeasurement)
    net_weight: HBLWeightMeasurement = Field(default_factory=HBLWeightMeasurement)
    measurement: HBLWeightMeasurement = Field(default_factory=HBLWeightMeasurement)


class HBLReeferDetails(BaseModel):
    temperature: str = ""
    humidity: str = ""
    ventilation: str = ""


class HBLShipmentSummary(BaseModel):
    total_containers_received: int = 0
    packages_received: int = 0


class HBLPortCharges(BaseModel):
    origin: str = ""
    destination: str = ""


class HBLFreightDetails(BaseModel):
    freight_status: str = ""
    free_time_at_destination: str = ""
    port_charges: HBLPortCharges = Field(default_factory=HBLPortCharges)


class HBLData(BaseModel):
    """All fields of a House Bill of Lading."""

    bill_type: str = "HBL"
    sea_waybill_no: str = ""
    carrier_reference: str = ""
    export_reference: str = ""
    consignee_reference: str = ""
    carrier: HBLCarrier = Field(default_factory=HBLCarrier)
    shipper: HBLParty = Field(default_factory=HBLParty)
    consignee: HBLParty = Field(default_factory=HBLParty)
    notify_party: HBLParty = Field(default_factory=HBLParty)
    forwarding_agent: HBLParty = Field(default_factory=HBLParty)
    movement_type: str = ""
    routing: HBLRouting = Field(default_factory=HBLRouting)
    vessel_details: list[HBLVessel] = Field(default_factory=list)
    shipment_dates: HBLShipmentDates = Field(default_factory=HBLShipmentDates)
    container_details: list[HBLContainer] = Field(default_factory=list)
    reefer_details: HBLReeferDetails = Field(default_factory=HBLReeferDetails)
    shipment_summary: HBLShipmentSummary = Field(default_factory=HBLShipmentSummary)
    freight_details: HBLFreightDetails = Field(default_factory=HBLFreightDetails)


class HBLDetail(BaseModel):
    model_config = {"from_attributes": True}

    id: UUID
    hbl_number: str
    mbl_number: str
    shipment_id: str
    hbl: HBLData
    created_at: datetime
    updated_at: datetime


# --- Preview API ---


class PreviewHBLRequest(BaseModel):
    mbl_number: str
    shipper_list: list[str] = Field(..., description="Shipper IDs, one HBL per shipper")


class PreviewHBLResponse(BaseModel):
    mbl_number: str
    total_count: int
    hbl_list: list[HBLData]
