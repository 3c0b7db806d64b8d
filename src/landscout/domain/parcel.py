from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

MIN_RELIABILITY = 1
MAX_RELIABILITY = 5
DEFAULT_RELIABILITY = 3


class LandType(str, Enum):
    NA = "NA"
    AGRICULTURE = "Agriculture"
    INDUSTRIAL = "Industrial"
    OTHER = "Other"


class PriceUnit(str, Enum):
    # 1 var == 1 sq yard == 9 sq ft
    PER_SQUARE_FOOT = "INR_per_sqft"
    PER_SQUARE_YARD = "INR_per_sqyard"
    PER_VAR = "INR_per_var"


def _check_reliability(v: int) -> int:
    if not (MIN_RELIABILITY <= v <= MAX_RELIABILITY):
        raise ValueError(f"reliability must be between {MIN_RELIABILITY} and {MAX_RELIABILITY}")
    return v


class Coordinate(BaseModel):
    latitude: float
    longitude: float


class Broker(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str = ""
    phone: str = ""
    whatsapp: str = ""
    reliability: int = DEFAULT_RELIABILITY
    notes: str = ""

    @field_validator("reliability")
    @classmethod
    def _reliability_range(cls, v: int) -> int:
        return _check_reliability(v)


class Parcel(BaseModel):
    """
    A land pin recorded in the field.

    `id` and `created_at` are fixed at construction; everything else is
    editable. `price` is taken as-is (zero or negative prices are legal input
    for the ROI engine).
    """
    id: UUID = Field(default_factory=uuid4, frozen=True)
    title: str
    coordinate: Coordinate

    address: str = ""
    land_type: LandType = LandType.NA
    zone: str = Field(default="", description="Zoning label, e.g. R2 or I1")

    price: float = 0.0
    price_unit: PriceUnit = PriceUnit.PER_SQUARE_FOOT

    notes: str = ""
    broker: Broker | None = None
    reliability: int = DEFAULT_RELIABILITY
    photos: list[str] = Field(default_factory=list, description="Opaque photo URIs, in capture order")

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)

    @field_validator("reliability")
    @classmethod
    def _reliability_range(cls, v: int) -> int:
        return _check_reliability(v)
