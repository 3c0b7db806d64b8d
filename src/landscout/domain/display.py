from typing import Literal

from landscout.domain.parcel import LandType, PriceUnit

ReliabilityBand = Literal["high", "medium", "low"]

_PRICE_UNIT_LABELS: dict[PriceUnit, str] = {
    PriceUnit.PER_SQUARE_FOOT: "₹/sqft",
    PriceUnit.PER_SQUARE_YARD: "₹/sqyard",
    PriceUnit.PER_VAR: "₹/var",
}


def price_unit_label(unit: PriceUnit) -> str:
    return _PRICE_UNIT_LABELS[PriceUnit(unit)]


def land_type_label(land_type: LandType) -> str:
    return LandType(land_type).value


def reliability_band(score: int) -> ReliabilityBand:
    """
    Bucket a 1-5 reliability score the way the map colours pins:
      4-5 -> high (green), 2-3 -> medium (orange), anything else -> low (red)
    """
    if 4 <= score <= 5:
        return "high"
    if 2 <= score <= 3:
        return "medium"
    return "low"
