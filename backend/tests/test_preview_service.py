"""Tests for HBL generation from a stored MBL."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select

from app.config import Settings
from app.document_converter.mapper import map_extraction_to_mbl
from app.document_converter.store import MBLStore
from app.errors import NotFound
from app.hbl_generator.service import HBLPreviewService
from app.hbl_generator.store import HBLStore
from app.models.bill_of_lading import HBLRecord, ShipmentMode
from app.schemas.hbl import HBLData, HBLParty

from conftest import SAMPLE_MBL_EXTRACTION

MBL_NUMBER = "MAEU123456789"


@pytest.fixture
def service() -> HBLPreviewService:
    return HBLPreviewService(Settings())


@pytest.fixture
async def stored_mbl(db_session):
    doc = map_extraction_to_mbl(SAMPLE_MBL_EXTRACTION, ShipmentMode.LCL)
    return await MBLStore.insert(db_session, doc)


@pytest.fixture
async def three_shippers(seed_reference):
    # B has a shipper record but no shipment
    await seed_reference(
        shipments=[
            {"shipment_id": "S1", "shipper_id": "A", "packages_count": 10, "goods_description": "Toys"},
            {"shipment_id": "S3", "shipper_id": "C", "packages_count": 30, "goods_description": "Shoes"},
        ],
        shippers=[
            {"shipper_id": "A", "shipper_name": "A Corp"},
            {"shipper_id": "B", "shipper_name": "B Corp"},
            {"shipper_id": "C", "shipper_name": "C Corp"},
        ],
    )


async def test_unknown_mbl_raises_not_found(service, db_session):
    with pytest.raises(NotFound, match="MBL not found"):
        await service.preview(db_session, "NOPE", ["A"])


async def test_skipped_shipper_consumes_no_index(service, db_session, stored_mbl, three_shippers, caplog):
    with caplog.at_level("WARNING", logger="blconv.preview"):
        result = await service.preview(db_session, MBL_NUMBER, ["A", "B", "C"])

    assert result.mbl_number == MBL_NUMBER
    assert result.total_count == 2
    assert [h.sea_waybill_no for h in result.hbl_list] == [
        f"HBL-{MBL_NUMBER}-001",
        f"HBL-{MBL_NUMBER}-002",
    ]
    assert [h.shipper.name for h in result.hbl_list] == ["A Corp", "C Corp"]
    assert result.hbl_list[1].container_details[0].description_of_goods == "Shoes"
    assert result.hbl_list[0].movement_type == "LCL"

    warnings = [r for r in caplog.records if r.name == "blconv.preview" and r.levelname == "WARNING"]
    assert [r.getMessage() for r in warnings] == ["No shipment found for shipper_id B, skipping"]


async def test_request_order_drives_numbering(service, db_session, stored_mbl, three_shippers):
    result = await service.preview(db_session, MBL_NUMBER, ["C", "A"])
    assert [(h.sea_waybill_no, h.shipper.name) for h in result.hbl_list] == [
        (f"HBL-{MBL_NUMBER}-001", "C Corp"),
        (f"HBL-{MBL_NUMBER}-002", "A Corp"),
    ]


async def test_shipper_without_record_is_skipped(service, db_session, stored_mbl, seed_reference, caplog):
    await seed_reference(shipments=[{"shipment_id": "S9", "shipper_id": "Z"}])

    with caplog.at_level("WARNING", logger="blconv.preview"):
        result = await service.preview(db_session, MBL_NUMBER, ["Z"])

    assert result.total_count == 0
    assert result.hbl_list == []
    assert "No shipper details found for shipper_id Z, skipping" in caplog.text


async def test_generated_hbls_are_persisted(service, db_session, stored_mbl, three_shippers):
    await service.preview(db_session, MBL_NUMBER, ["A", "C"])

    rows = (await db_session.execute(select(HBLRecord).order_by(HBLRecord.hbl_number))).scalars().all()
    assert [(r.hbl_number, r.shipment_id, r.mbl_number) for r in rows] == [
        (f"HBL-{MBL_NUMBER}-001", "S1", MBL_NUMBER),
        (f"HBL-{MBL_NUMBER}-002", "S3", MBL_NUMBER),
    ]
    assert rows[0].hbl["shipper"]["name"] == "A Corp"


async def test_persistence_failure_does_not_abort(service, db_session, stored_mbl, three_shippers, caplog):
    original_insert = HBLStore.insert
    calls = []

    async def flaky_insert(db, hbl_number, *args, **kwargs):
        calls.append(hbl_number)
        if hbl_number.endswith("-001"):
            raise RuntimeError("disk full")
        return await original_insert(db, hbl_number, *args, **kwargs)

    with patch.object(HBLStore, "insert", staticmethod(flaky_insert)):
        with caplog.at_level("WARNING", logger="blconv.preview"):
            result = await service.preview(db_session, MBL_NUMBER, ["A", "C"])

    assert result.total_count == 2
    assert len(calls) == 2
    rows = (await db_session.execute(select(HBLRecord))).scalars().all()
    assert [r.hbl_number for r in rows] == [f"HBL-{MBL_NUMBER}-002"]
    assert f"Failed to store HBL HBL-{MBL_NUMBER}-001: disk full" in caplog.text


async def test_custom_prefix(db_session, stored_mbl, three_shippers):
    service = HBLPreviewService(Settings(hbl_number_prefix="HSE"))
    result = await service.preview(db_session, MBL_NUMBER, ["A"])
    assert result.hbl_list[0].sea_waybill_no == f"HSE-{MBL_NUMBER}-001"


async def test_get_and_update_hbl(service, db_session, stored_mbl, three_shippers):
    await service.preview(db_session, MBL_NUMBER, ["A"])
    hbl_number = f"HBL-{MBL_NUMBER}-001"

    record = await service.get_hbl(db_session, hbl_number)
    assert record.hbl["shipper"]["name"] == "A Corp"

    edited = HBLData.model_validate(record.hbl)
    edited.consignee = HBLParty(name="Edited Consignee", address="Somewhere")
    updated = await service.update_hbl(db_session, hbl_number, edited)

    assert updated.hbl["consignee"] == {"name": "Edited Consignee", "address": "Somewhere"}
    assert updated.hbl["shipper"]["name"] == "A Corp"


async def test_get_missing_hbl_raises(service, db_session):
    with pytest.raises(NotFound):
        await service.get_hbl(db_session, "HBL-NONE-001")


async def test_mbl_store_lookup_is_single_read(service, db_session, stored_mbl, three_shippers):
    with patch.object(MBLStore, "find_by_mbl_number", new=AsyncMock(return_value=stored_mbl)) as mock_find:
        await service.preview(db_session, MBL_NUMBER, ["A"])
    mock_find.assert_awaited_once_with(db_session, MBL_NUMBER)
