# tests/conftest.py
from datetime import datetime, timezone

import pytest

from landscout.adapters.memory_store import InMemoryParcelStore
from landscout.domain.analysis import ROIAnalysis
from landscout.domain.parcel import Broker, Coordinate, LandType, Parcel, PriceUnit
from landscout.services.app_state import LandScoutState
from fixtures.parcels import make_parcel


@pytest.fixture
def surat_plot() -> Parcel:
    return make_parcel(
        title="Surat Ring Road Plot",
        coordinate=Coordinate(latitude=21.2145, longitude=72.8302),
        address="Vesu, Surat",
        zone="R2",
        price=4500,
        notes="Upcoming metro corridor",
        broker=Broker(
            name="Rahul Patel",
            phone="+91-90000-12345",
            whatsapp="+91-90000-12345",
            reliability=4,
            notes="Has direct seller contact",
        ),
        reliability=4,
        photos=["file:///photos/a.jpg", "file:///photos/b.jpg"],
        created_at=datetime(2026, 1, 15, 9, 30, 12, 123456, tzinfo=timezone.utc),
    )

@pytest.fixture
def industrial_plot() -> Parcel:
    return make_parcel(
        title="Vadodara Industrial",
        address="Manjusar GIDC",
        land_type=LandType.INDUSTRIAL,
        zone="I1",
        price=2500,
        price_unit=PriceUnit.PER_SQUARE_YARD,
        reliability=5,
    )

@pytest.fixture
def default_analysis(surat_plot) -> ROIAnalysis:
    return ROIAnalysis.default_for(surat_plot.id)

@pytest.fixture
def store() -> InMemoryParcelStore:
    return InMemoryParcelStore()

@pytest.fixture
def state(store) -> LandScoutState:
    return LandScoutState(store, seed_samples=False)
