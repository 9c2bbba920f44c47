"""Flat field schema sent to the document extraction service.

The service receives every key with a null value and fills in whatever it can
read from the uploaded MBL (PDF or image).
"""

MBL_EXTRACTION_FIELDS: tuple[str, ...] = (
    # Bill basics
    "mbl_number",
    "bill_type",
    "packing_list_no",
    "number_of_original_bls",
    "terms_of_sale",
    "freight_payment_type",
    # Carrier
    "carrier_name",
    "carrier_scac_code",
    "carrier_reference_no",
    # Shipper
    "shipper_name",
    "shipper_address",
    "shipper_phone",
    "shipper_fax",
    # Consignee
    "consignee_name",
    "consignee_address",
    "consignee_phone",
    "consignee_email",
    # Notify party
    "notify_party_name",
    "notify_party_address",
    # Routing
    "place_of_receipt",
    "port_of_loading",
    "port_of_discharge",
    "place_of_delivery",
    # Vessel
    "vessel_name",
    "voyage_number",
    # Shipment dates
    "date_of_issue",
    "place_of_issue",
    "shipped_on_board_date",
    "shipped_on_board_place",
    # Cargo
    "container_number",
    "container_type",
    "seal_number",
    "marks_and_numbers",
    "number_of_packages",
    "package_type",
    "description_of_goods",
    "hs_code",
    "gross_weight_kgs",
    "net_weight_kgs",
    "measurement_cbm",
    # Freight
    "ocean_freight_prepaid",
    "ocean_freight_collect",
    "freight_currency",
)


def get_mbl_extraction_schema() -> dict[str, None]:
    """Return a fresh key -> None mapping of every MBL field to extract."""
    return dict.fromkeys(MBL_EXTRACTION_FIELDS)
