from landscout.domain.analysis import ROIAnalysis, ROISummary, SensitivityResult
from landscout.domain.parcel import Parcel, PriceUnit

SQFT_PER_SQYARD = 9.0
SENSITIVITY_STEP = 0.10

# How many sqft one unit of the parcel's price covers
SQFT_PER_PRICE_UNIT: dict[PriceUnit, float] = {
    PriceUnit.PER_SQUARE_FOOT: 1.0,
    PriceUnit.PER_SQUARE_YARD: SQFT_PER_SQYARD,
    PriceUnit.PER_VAR: SQFT_PER_SQYARD,
}


def buildable_area(analysis: ROIAnalysis) -> float:
    return analysis.plot_size_sqft * analysis.fsi


def construction_cost(analysis: ROIAnalysis) -> float:
    return buildable_area(analysis) * analysis.construction_cost_per_sqft


def land_cost(parcel: Parcel, analysis: ROIAnalysis) -> float:
    """
    Parcel price converted to a total for the analysed plot size.
    - per sqft: price * plot
    - per sq yard / per var: price * (plot / 9)
    """
    unit = PriceUnit(parcel.price_unit)
    if unit is PriceUnit.PER_SQUARE_FOOT:
        return parcel.price * analysis.plot_size_sqft
    return parcel.price * (analysis.plot_size_sqft / SQFT_PER_PRICE_UNIT[unit])


def base_cost(parcel: Parcel, analysis: ROIAnalysis) -> float:
    return land_cost(parcel, analysis) + construction_cost(analysis) + analysis.other_costs


def total_cost(parcel: Parcel, analysis: ROIAnalysis) -> float:
    """
    Base cost plus government taxes.
    Tax is levied on the whole base (land + construction + other), not per bucket.
    """
    return base_cost(parcel, analysis) * (1 + analysis.gov_taxes_pct / 100.0)


def gross_revenue(analysis: ROIAnalysis) -> float:
    return buildable_area(analysis) * analysis.avg_sell_price_per_sqft


def profit(parcel: Parcel, analysis: ROIAnalysis) -> float:
    return gross_revenue(analysis) - total_cost(parcel, analysis)


def roi_percentage(parcel: Parcel, analysis: ROIAnalysis) -> float:
    """
    profit / total cost * 100.
    A zero total cost yields 0.0 regardless of profit.
    """
    total = total_cost(parcel, analysis)
    if total == 0:
        return 0.0
    return (profit(parcel, analysis) / total) * 100.0


def _ratio_pct(revenue: float, cost: float) -> float:
    if cost == 0:
        return float("nan")
    return (revenue - cost) / cost * 100.0


def sensitivity(parcel: Parcel, analysis: ROIAnalysis) -> SensitivityResult:
    """
    ROI % after moving one side of the deal by +/-10%, the other held fixed.

    Sell price bands scale revenue; cost bands scale total cost (and divide by
    the scaled cost). When total cost is 0 every band is NaN: the ratio is
    undefined and there is no meaningful number to show.
    """
    total = total_cost(parcel, analysis)
    revenue = gross_revenue(analysis)
    up = 1.0 + SENSITIVITY_STEP
    down = 1.0 - SENSITIVITY_STEP

    return SensitivityResult(
        sell_price_up_10=_ratio_pct(revenue * up, total),
        sell_price_down_10=_ratio_pct(revenue * down, total),
        cost_up_10=_ratio_pct(revenue, total * up),
        cost_down_10=_ratio_pct(revenue, total * down),
    )


def summarize(parcel: Parcel, analysis: ROIAnalysis) -> ROISummary:
    return ROISummary(
        buildable_area=buildable_area(analysis),
        construction_cost=construction_cost(analysis),
        land_cost=land_cost(parcel, analysis),
        base_cost=base_cost(parcel, analysis),
        total_cost=total_cost(parcel, analysis),
        gross_revenue=gross_revenue(analysis),
        profit=profit(parcel, analysis),
        roi_percentage=roi_percentage(parcel, analysis),
        sensitivity=sensitivity(parcel, analysis),
    )
