"""Map the flat extraction result onto the structured MBL field tree."""

from collections.abc import Mapping
from typing import Any

from app.document_converter.field_reader import FieldReader
from app.models.bill_of_lading import ShipmentMode
from app.schemas.mbl import (
    Cargo,
    Carrier,
    ConsigneeParty,
    FreightCharges,
    MBLData,
    MBLDocument,
    NotifyParty,
    OceanFreight,
    Party,
    Routing,
    ShipmentDates,
    VesselDetails,
    WeightMeasurement,
)


def map_extraction_to_mbl(
    data: Mapping[str, Any], mode: ShipmentMode = ShipmentMode.FCL
) -> MBLDocument:
    """Build an MBLDocument from a flat extraction map.

    Missing or null keys get the declared default ("" / 0 / 0.0); nothing
    here raises on bad input.
    """
    f = FieldReader(data)

    return MBLDocument(
        mode=mode,
        mbl=MBLData(
            bill_type=f.get_str("bill_type", "MBL"),
            bill_of_lading_no=f.get_str("mbl_number"),
            packing_list_no=f.get_str("packing_list_no"),
            number_of_original_bls=f.get_int("number_of_original_bls"),
            terms_of_sale=f.get_str("terms_of_sale"),
            freight_payment_type=f.get_str("freight_payment_type"),
            carrier=Carrier(
                name=f.get_str("carrier_name"),
                scac_code=f.get_str("carrier_scac_code"),
                reference_no=f.get_str("carrier_reference_no"),
            ),
            shipper=Party(
                name=f.get_str("shipper_name"),
                address=f.get_str("shipper_address"),
                phone=f.get_str("shipper_phone"),
                fax=f.get_str("shipper_fax"),
            ),
            consignee=ConsigneeParty(
                name=f.get_str("consignee_name"),
                address=f.get_str("consignee_address"),
                phone=f.get_str("consignee_phone"),
                email=f.get_str("consignee_email"),
            ),
            notify_party=NotifyParty(
                name=f.get_str("notify_party_name"),
                address=f.get_str("notify_party_address"),
            ),
            routing=Routing(
                place_of_receipt=f.get_str("place_of_receipt"),
                port_of_loading=f.get_str("port_of_loading"),
                port_of_discharge=f.get_str("port_of_discharge"),
                place_of_delivery=f.get_str("place_of_delivery"),
            ),
            vessel_details=VesselDetails(
                vessel_name=f.get_str("vessel_name"),
                voyage_no=f.get_str("voyage_number"),
            ),
            shipment_dates=ShipmentDates(
                date_of_issue=f.get_str("date_of_issue"),
                place_of_issue=f.get_str("place_of_issue"),
                shipped_on_board_date=f.get_str("shipped_on_board_date"),
                shipped_on_board_place=f.get_str("shipped_on_board_place"),
            ),
            cargo=Cargo(
                container_no=f.get_str("container_number"),
                container_type=f.get_str("container_type"),
                seal_number=f.get_str("seal_number"),
                marks_and_numbers=f.get_str("marks_and_numbers"),
                number_of_packages=f.get_int("number_of_packages"),
                package_type=f.get_str("package_type"),
                description_of_goods=f.get_str("description_of_goods"),
                hs_code=f.get_str("hs_code"),
                gross_weight=WeightMeasurement(value=f.get_float("gross_weight_kgs"), unit="KGS"),
                net_weight=WeightMeasurement(value=f.get_float("net_weight_kgs"), unit="KGS"),
                measurement=WeightMeasurement(value=f.get_float("measurement_cbm"), unit="CBM"),
            ),
            freight_charges=FreightCharges(
                ocean_freight=OceanFreight(
                    prepaid_amount=f.get_float("ocean_freight_prepaid"),
                    collect_amount=f.get_float("ocean_freight_collect"),
                    currency=f.get_str("freight_currency"),
                ),
            ),
        ),
    )
