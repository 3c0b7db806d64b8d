# src/landscout/analysis/roi_batch.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from landscout.analysis.roi import SQFT_PER_PRICE_UNIT
from landscout.domain.analysis import ROIAnalysis
from landscout.domain.parcel import Parcel, PriceUnit

ROI_FRAME_COLUMNS = [
    "parcel_id",
    "title",
    "land_type",
    "zone",
    "reliability",
    "price",
    "sqft_per_price_unit",
    "plot_size_sqft",
    "fsi",
    "construction_cost_per_sqft",
    "other_costs",
    "gov_taxes_pct",
    "avg_sell_price_per_sqft",
]


@dataclass
class BatchROIResult:
    parcel_ids: np.ndarray
    buildable_area: np.ndarray
    land_cost: np.ndarray
    construction_cost: np.ndarray
    total_cost: np.ndarray
    gross_revenue: np.ndarray
    profit: np.ndarray
    roi_percentage: np.ndarray


@dataclass
class PortfolioMetrics:
    """
    Aggregated ROI stats across a set of parcels.

    This is the 'reduction' result of the per-parcel batch computation.
    """
    n_parcels: int
    total_cost_sum: float
    gross_revenue_sum: float
    profit_sum: float
    mean_roi: float
    p50_roi: float
    min_roi: float
    max_roi: float


def build_roi_frame(pairs: Iterable[tuple[Parcel, ROIAnalysis]]) -> pd.DataFrame:
    """
    Flatten (parcel, analysis) pairs into one row each.

    The price unit is resolved to a sqft divisor up front so the batch math
    never has to branch on the enum.
    """
    rows = []
    for parcel, analysis in pairs:
        rows.append(
            {
                "parcel_id": str(parcel.id),
                "title": parcel.title,
                "land_type": parcel.land_type.value,
                "zone": parcel.zone,
                "reliability": parcel.reliability,
                "price": parcel.price,
                "sqft_per_price_unit": SQFT_PER_PRICE_UNIT[PriceUnit(parcel.price_unit)],
                "plot_size_sqft": analysis.plot_size_sqft,
                "fsi": analysis.fsi,
                "construction_cost_per_sqft": analysis.construction_cost_per_sqft,
                "other_costs": analysis.other_costs,
                "gov_taxes_pct": analysis.gov_taxes_pct,
                "avg_sell_price_per_sqft": analysis.avg_sell_price_per_sqft,
            }
        )
    return pd.DataFrame(rows, columns=ROI_FRAME_COLUMNS)


def compute_roi_metrics_df(df: pd.DataFrame) -> BatchROIResult:
    """
    Vectorized ROI computation over a DataFrame built by build_roi_frame.

    Row-for-row this matches landscout.analysis.roi, including the zero-cost
    guard (ROI is 0 where total cost is 0).
    """
    price = df["price"].to_numpy(dtype=float)
    sqft_per_unit = df["sqft_per_price_unit"].to_numpy(dtype=float)
    plot = df["plot_size_sqft"].to_numpy(dtype=float)
    fsi = df["fsi"].to_numpy(dtype=float)
    build_cost_psf = df["construction_cost_per_sqft"].to_numpy(dtype=float)
    other = df["other_costs"].to_numpy(dtype=float)
    taxes_pct = df["gov_taxes_pct"].to_numpy(dtype=float)
    sell_psf = df["avg_sell_price_per_sqft"].to_numpy(dtype=float)

    buildable = plot * fsi
    construction = buildable * build_cost_psf

    # per-sqft rows divide by 1.0, which is exact
    land = price * (plot / sqft_per_unit)

    base = land + construction + other
    total = base * (1 + taxes_pct / 100.0)

    revenue = buildable * sell_psf
    prof = revenue - total

    roi = np.zeros_like(total, dtype=float)
    mask_cost = total != 0
    roi[mask_cost] = (prof[mask_cost] / total[mask_cost]) * 100.0

    return BatchROIResult(
        parcel_ids=df["parcel_id"].to_numpy(dtype=object),
        buildable_area=buildable,
        land_cost=land,
        construction_cost=construction,
        total_cost=total,
        gross_revenue=revenue,
        profit=prof,
        roi_percentage=roi,
    )


def summarize_portfolio(result: BatchROIResult) -> PortfolioMetrics:
    roi = np.asarray(result.roi_percentage, dtype=float)
    n = int(roi.shape[0])

    if n == 0:
        # Degenerate case: nothing to summarize.
        return PortfolioMetrics(
            n_parcels=0,
            total_cost_sum=0.0,
            gross_revenue_sum=0.0,
            profit_sum=0.0,
            mean_roi=float("nan"),
            p50_roi=float("nan"),
            min_roi=float("nan"),
            max_roi=float("nan"),
        )

    return PortfolioMetrics(
        n_parcels=n,
        total_cost_sum=float(np.sum(result.total_cost)),
        gross_revenue_sum=float(np.sum(result.gross_revenue)),
        profit_sum=float(np.sum(result.profit)),
        mean_roi=float(np.mean(roi)),
        p50_roi=float(np.quantile(roi, 0.50)),
        min_roi=float(np.min(roi)),
        max_roi=float(np.max(roi)),
    )
