"""
MBL + shipment + shipper → HBL field mapping.

Mapping rules:
  - HBL shipper          ← shippers table (the actual shipper for this HBL)
  - HBL forwarding_agent ← MBL shipper (the MBL shipper acts as forwarder)
  - HBL carrier          ← MBL carrier
  - HBL consignee        ← MBL consignee
  - HBL notify_party     ← MBL notify party
  - HBL routing          ← MBL routing
  - HBL vessel_details   ← MBL vessel details
  - HBL shipment_dates   ← MBL place/date of issue, port of discharge
  - HBL container info   ← MBL cargo (container no/type, seal, package type, HS code)
  - HBL cargo quantities ← shipments table (per-shipper cargo)
  - HBL freight_status   ← MBL freight payment type (amounts are not carried)
"""

from app.models.reference import Shipment, Shipper
from app.schemas.hbl import (
    HBLCarrier,
    HBLContainer,
    HBLData,
    HBLFreightDetails,
    HBLParty,
    HBLRouting,
    HBLShipmentDates,
    HBLShipmentSummary,
    HBLVessel,
    HBLWeightMeasurement,
)
from app.schemas.mbl import MBLData


def generate_hbl_number(mbl_number: str, index: int, prefix: str = "HBL") -> str:
    """HBL-{MBL_NUMBER}-001, HBL-{MBL_NUMBER}-002, ..."""
    return f"{prefix}-{mbl_number}-{index:03d}"


def map_mbl_to_hbl(
    mbl: MBLData,
    shipment: Shipment,
    shipper: Shipper,
    hbl_number: str,
    mode: str,
) -> HBLData:
    return HBLData(
        bill_type="HBL",
        sea_waybill_no=hbl_number,
        carrier_reference=mbl.bill_of_lading_no,
        export_reference=mbl.carrier.reference_no,
        movement_type=mode,
        carrier=HBLCarrier(name=mbl.carrier.name),
        shipper=HBLParty(name=shipper.shipper_name, address=shipper.shipper_address),
        consignee=HBLParty(name=mbl.consignee.name, address=mbl.consignee.address),
        notify_party=HBLParty(name=mbl.notify_party.name, address=mbl.notify_party.address),
        forwarding_agent=HBLParty(name=mbl.shipper.name, address=mbl.shipper.address),
        routing=HBLRouting(
            place_of_receipt=mbl.routing.place_of_receipt,
            port_of_loading=mbl.routing.port_of_loading,
            port_of_discharge=mbl.routing.port_of_discharge,
            place_of_delivery=mbl.routing.place_of_delivery,
        ),
        vessel_details=[
            HBLVessel(
                vessel_name=mbl.vessel_details.vessel_name,
                voyage_no=mbl.vessel_details.voyage_no,
            )
        ],
        shipment_dates=HBLShipmentDates(
            place_and_date_of_issue=f"{mbl.shipment_dates.place_of_issue}, {mbl.shipment_dates.date_of_issue}",
            freight_payable_at=mbl.routing.port_of_discharge,
        ),
        container_details=[
            HBLContainer(
                container_no=mbl.cargo.container_no,
                container_size=mbl.cargo.container_type,
                seal_no=mbl.cargo.seal_number,
                package_type=mbl.cargo.package_type,
                hs_code=mbl.cargo.hs_code,
                package_count=shipment.packages_count,
                marks_and_numbers=shipment.marks_and_numbers,
                description_of_goods=shipment.goods_description,
                gross_weight=HBLWeightMeasurement(value=shipment.gross_weight, unit="KGS"),
                net_weight=HBLWeightMeasurement(value=shipment.net_weight, unit="KGS"),
                measurement=HBLWeightMeasurement(value=shipment.volume, unit="CBM"),
            )
        ],
        shipment_summary=HBLShipmentSummary(
            total_containers_received=1,
            packages_received=shipment.packages_count,
        ),
        freight_details=HBLFreightDetails(freight_status=mbl.freight_payment_type),
    )
