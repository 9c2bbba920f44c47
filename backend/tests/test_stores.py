"""Tests for the extraction cache, MBL store and HBL store."""

from unittest.mock import MagicMock

import pytest

from app.document_converter.cache import ExtractionCache
from app.document_converter.mapper import map_extraction_to_mbl
from app.document_converter.store import MBLStore
from app.errors import NotFound
from app.hbl_generator.store import HBLStore
from app.models.bill_of_lading import ShipmentMode
from app.schemas.hbl import HBLData, HBLParty
from app.services.document_service import compute_file_hash


class TestExtractionCache:
    async def test_lookup_miss(self, db_session):
        assert await ExtractionCache.lookup(db_session, compute_file_hash(b"never seen")) is None

    async def test_store_then_lookup(self, db_session):
        file_hash = compute_file_hash(b"%PDF mbl")

        assert await ExtractionCache.store(db_session, file_hash, "MBL1", {"mbl_number": "MBL1", "x": 1}) is True

        entry = await ExtractionCache.lookup(db_session, file_hash)
        assert entry is not None
        assert entry.mbl_number == "MBL1"
        assert entry.extracted_data == {"mbl_number": "MBL1", "x": 1}
        assert entry.created_at is not None

    async def test_store_with_empty_mbl_number(self, db_session):
        file_hash = compute_file_hash(b"unnumbered")
        assert await ExtractionCache.store(db_session, file_hash, "", {"carrier_name": "ACME"}) is True
        assert (await ExtractionCache.lookup(db_session, file_hash)).mbl_number == ""

    async def test_store_failure_returns_false_and_keeps_session_usable(self, db_session, caplog):
        # A dict holding a set cannot be serialised to JSON; the flush fails.
        with caplog.at_level("WARNING", logger="blconv.store"):
            stored = await ExtractionCache.store(db_session, compute_file_hash(b"bad"), "MBL1", {"bad": {1, 2}})
        assert stored is False
        assert "Failed to save to MBL_Cache" in caplog.text

        file_hash = compute_file_hash(b"good")
        assert await ExtractionCache.store(db_session, file_hash, "MBL2", {"mbl_number": "MBL2"}) is True
        assert (await ExtractionCache.lookup(db_session, file_hash)).mbl_number == "MBL2"


class TestMBLStore:
    async def test_insert_and_find(self, db_session):
        doc = map_extraction_to_mbl({"mbl_number": "MBL1", "carrier_name": "ACME"}, ShipmentMode.LCL)

        record = await MBLStore.insert(db_session, doc)
        assert record.id is not None
        assert record.created_at is not None

        found = await MBLStore.find_by_mbl_number(db_session, "MBL1")
        assert found.id == record.id
        assert found.mode == ShipmentMode.LCL
        assert found.mbl["carrier"]["name"] == "ACME"

    async def test_find_missing(self, db_session):
        assert await MBLStore.find_by_mbl_number(db_session, "NOPE") is None

    async def test_long_mbl_number_is_stored_whole(self, db_session):
        long_number = "MBL" + "9" * 400
        await MBLStore.insert(db_session, map_extraction_to_mbl({"mbl_number": long_number}))

        found = await MBLStore.find_by_mbl_number(db_session, long_number)
        assert found.mbl_number == long_number

    async def test_non_finite_weight_is_stored_as_zero(self, db_session):
        doc = map_extraction_to_mbl({"mbl_number": "MBL-NAN", "gross_weight_kgs": "NaN", "measurement_cbm": "inf"})
        await MBLStore.insert(db_session, doc)

        found = await MBLStore.find_by_mbl_number(db_session, "MBL-NAN")
        assert found.mbl["cargo"]["gross_weight"] == {"value": 0.0, "unit": "KGS"}
        assert found.mbl["cargo"]["measurement"] == {"value": 0.0, "unit": "CBM"}


class TestHBLStore:
    async def test_insert_find_update(self, db_session):
        data = HBLData(sea_waybill_no="HBL-MBL1-001", shipper=HBLParty(name="A Corp"))
        await HBLStore.insert(db_session, "HBL-MBL1-001", "MBL1", "S1", data)

        found = await HBLStore.find_by_hbl_number(db_session, "HBL-MBL1-001")
        assert found.shipment_id == "S1"
        assert found.hbl["shipper"]["name"] == "A Corp"

        replacement = HBLData(sea_waybill_no="HBL-MBL1-001", consignee=HBLParty(name="New Consignee"))
        updated = await HBLStore.update(db_session, "HBL-MBL1-001", replacement)

        # Whole tree replaced: the old shipper is gone
        assert updated.hbl["consignee"]["name"] == "New Consignee"
        assert updated.hbl["shipper"]["name"] == ""

    async def test_update_missing_raises(self, db_session):
        with pytest.raises(NotFound):
            await HBLStore.update(db_session, "HBL-NONE-001", HBLData())

    async def test_insert_failure_propagates(self, db_session):
        data = MagicMock()
        data.model_dump.return_value = {"bad": {1}}
        with pytest.raises(Exception):
            await HBLStore.insert(db_session, "HBL-X-001", "X", "S1", data)
        assert await HBLStore.find_by_hbl_number(db_session, "HBL-X-001") is None
