from dataclasses import dataclass
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# Starting point for a parcel nobody has analysed yet
DEFAULT_PLOT_SIZE_SQFT = 2000.0
DEFAULT_FSI = 2.0
DEFAULT_CONSTRUCTION_COST_PER_SQFT = 2200.0
DEFAULT_OTHER_COSTS = 500_000.0
DEFAULT_GOV_TAXES_PCT = 5.0
DEFAULT_AVG_SELL_PRICE_PER_SQFT = 3200.0


class ROIAnalysis(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    parcel_id: UUID = Field(..., description="Parcel this analysis belongs to")

    plot_size_sqft: float
    fsi: float = Field(..., description="Floor space index; buildable = plot * fsi")
    construction_cost_per_sqft: float
    other_costs: float
    gov_taxes_pct: float = Field(..., description="5 means 5%, applied to the full base cost")
    avg_sell_price_per_sqft: float

    @classmethod
    def default_for(cls, parcel_id: UUID) -> "ROIAnalysis":
        return cls(
            parcel_id=parcel_id,
            plot_size_sqft=DEFAULT_PLOT_SIZE_SQFT,
            fsi=DEFAULT_FSI,
            construction_cost_per_sqft=DEFAULT_CONSTRUCTION_COST_PER_SQFT,
            other_costs=DEFAULT_OTHER_COSTS,
            gov_taxes_pct=DEFAULT_GOV_TAXES_PCT,
            avg_sell_price_per_sqft=DEFAULT_AVG_SELL_PRICE_PER_SQFT,
        )


@dataclass
class SensitivityResult:
    sell_price_up_10: float    # ROI % with sell price +10%
    sell_price_down_10: float  # ROI % with sell price -10%
    cost_up_10: float          # ROI % with total cost +10%
    cost_down_10: float        # ROI % with total cost -10%


@dataclass
class ROISummary:
    buildable_area: float      # sqft
    construction_cost: float
    land_cost: float
    base_cost: float           # land + construction + other, before taxes
    total_cost: float          # base cost incl. gov taxes
    gross_revenue: float
    profit: float
    roi_percentage: float
    sensitivity: SensitivityResult
