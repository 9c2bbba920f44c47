import json
from collections.abc import Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.models.base import Base
# Import all models so they register with Base.metadata for create_all
import app.models  # noqa: F401
from app.models.reference import Booking, Shipment, Shipper
from app.services.extraction_client import ExtractionClient

EXTRACTION_URL = "http://extraction.test/extract"


SAMPLE_MBL_EXTRACTION = {
    "mbl_number": "MAEU123456789",
    "bill_type": "MBL",
    "number_of_original_bls": "3",
    "freight_payment_type": "PREPAID",
    "carrier_name": "Maersk Line",
    "carrier_scac_code": "MAEU",
    "carrier_reference_no": "REF-77",
    "shipper_name": "Ocean Forwarding Ltd",
    "shipper_address": "12 Harbour Rd, Shanghai",
    "consignee_name": "Warehouse Solutions LLC",
    "consignee_address": "400 Dock St, Newark NJ",
    "notify_party_name": "Customs Broker Inc",
    "notify_party_address": "1 Port Ave, Newark NJ",
    "place_of_receipt": "Shanghai",
    "port_of_loading": "CNSHA",
    "port_of_discharge": "USNYC",
    "place_of_delivery": "Newark",
    "vessel_name": "Maersk Essen",
    "voyage_number": "001W",
    "date_of_issue": "2026-03-01",
    "place_of_issue": "Shanghai",
    "container_number": "MSKU1234567",
    "container_type": "40HC",
    "seal_number": "SL-998",
    "number_of_packages": 120,
    "package_type": "CARTONS",
    "description_of_goods": "Electronics",
    "hs_code": "8471",
    "gross_weight_kgs": "5000.5",
    "net_weight_kgs": 4800,
    "measurement_cbm": 25.0,
    "ocean_freight_prepaid": "2500",
    "ocean_freight_collect": None,
    "freight_currency": "USD",
}


class FakeExtractionService:
    """Stands in for the extraction server behind an httpx.MockTransport."""

    def __init__(self, payload: dict | None = None, status_code: int = 200):
        self.payload = payload if payload is not None else dict(SAMPLE_MBL_EXTRACTION)
        self.status_code = status_code
        self.requests: list[httpx.Request] = []
        # Called with each request before the response is built
        self.on_request: Callable[[httpx.Request], None] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="extraction exploded")
        return httpx.Response(200, content=json.dumps(self.payload))

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    # pysqlite/aiosqlite defer BEGIN; emit it ourselves so SAVEPOINTs nest correctly.
    @event.listens_for(engine.sync_engine, "connect")
    def _do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def fake_extraction() -> FakeExtractionService:
    return FakeExtractionService()


@pytest.fixture
async def extraction_client(fake_extraction):
    client = ExtractionClient(
        EXTRACTION_URL, timeout=5.0, transport=httpx.MockTransport(fake_extraction.handler)
    )
    yield client
    await client.aclose()


@pytest.fixture
async def client(db_session, extraction_client):
    from app.database import get_db
    from app.dependencies import get_extraction_client
    from app.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_extraction_client] = lambda: extraction_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def seed_reference(db_session):
    """Insert bookings/shipments/shippers. Returns an async callable."""

    async def _seed(
        bookings: list[dict] = (),
        shipments: list[dict] = (),
        shippers: list[dict] = (),
    ) -> None:
        for b in bookings:
            db_session.add(Booking(**{"status": "confirmed", **b}))
        for s in shipments:
            values = {
                "goods_description": "",
                "packages_count": 0,
                "gross_weight": 0.0,
                "net_weight": 0.0,
                "volume": 0.0,
                "marks_and_numbers": "",
                "measurement": "",
                **s,
            }
            db_session.add(Shipment(**values))
        for sh in shippers:
            values = {"shipper_address": "", "shipper_contact": "", **sh}
            db_session.add(Shipper(**values))
        await db_session.flush()

    return _seed


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return b"%PDF-1.4 fake master bill of lading\nB/L No: MAEU123456789\n"
