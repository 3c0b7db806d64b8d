import math

import pytest

from landscout.analysis import roi
from landscout.domain.analysis import ROIAnalysis
from landscout.domain.parcel import PriceUnit
from fixtures.parcels import make_parcel


def _analysis(parcel, **overrides) -> ROIAnalysis:
    base = ROIAnalysis.default_for(parcel.id).model_dump()
    base.update(overrides)
    return ROIAnalysis(**base)


def test_end_to_end_surat_default_analysis(surat_plot, default_analysis):
    """
    4500 INR/sqft on the default 2000 sqft plot, FSI 2, 5% taxes.
    """
    s = roi.summarize(surat_plot, default_analysis)

    assert s.buildable_area == pytest.approx(4000.0)
    assert s.construction_cost == pytest.approx(8_800_000.0)
    assert s.land_cost == pytest.approx(9_000_000.0)
    assert s.base_cost == pytest.approx(18_300_000.0)
    assert s.total_cost == pytest.approx(19_215_000.0)
    assert s.gross_revenue == pytest.approx(12_800_000.0)
    assert s.profit == pytest.approx(-6_415_000.0)
    assert s.roi_percentage == pytest.approx(-33.3854, abs=1e-3)


def test_land_cost_per_sqft_uses_plot_directly():
    parcel = make_parcel(price=100.0, price_unit=PriceUnit.PER_SQUARE_FOOT)
    a = _analysis(parcel, plot_size_sqft=900.0)

    assert roi.land_cost(parcel, a) == pytest.approx(90_000.0)


def test_land_cost_sqyard_divides_plot_by_nine():
    parcel = make_parcel(price=2500.0, price_unit=PriceUnit.PER_SQUARE_YARD)
    a = _analysis(parcel, plot_size_sqft=1800.0)

    # 1800 sqft == 200 sq yards
    assert roi.land_cost(parcel, a) == pytest.approx(500_000.0)


def test_land_cost_var_equals_sqyard():
    yard = make_parcel(price=3333.33, price_unit=PriceUnit.PER_SQUARE_YARD)
    var = make_parcel(price=3333.33, price_unit=PriceUnit.PER_VAR)
    a = _analysis(yard, plot_size_sqft=1234.5)

    assert roi.land_cost(yard, a) == roi.land_cost(var, a)


def test_tax_applies_to_full_base_cost():
    parcel = make_parcel(price=10.0)
    a = _analysis(
        parcel,
        plot_size_sqft=1000.0,
        fsi=1.0,
        construction_cost_per_sqft=20.0,
        other_costs=5000.0,
        gov_taxes_pct=10.0,
    )

    # land 10k + construction 20k + other 5k = 35k, +10%
    assert roi.base_cost(parcel, a) == pytest.approx(35_000.0)
    assert roi.total_cost(parcel, a) == pytest.approx(38_500.0)


def test_roi_zero_when_total_cost_zero():
    parcel = make_parcel(price=0.0)
    a = _analysis(parcel, plot_size_sqft=0.0, other_costs=0.0)

    assert roi.total_cost(parcel, a) == 0
    assert roi.roi_percentage(parcel, a) == 0.0


def test_roi_zero_when_total_cost_zero_with_negative_profit():
    # construction 100k offset by -100k other costs => base 0, revenue negative
    parcel = make_parcel(price=0.0)
    a = _analysis(
        parcel,
        plot_size_sqft=1000.0,
        fsi=1.0,
        construction_cost_per_sqft=100.0,
        other_costs=-100_000.0,
        avg_sell_price_per_sqft=-50.0,
    )

    assert roi.total_cost(parcel, a) == 0
    assert roi.profit(parcel, a) < 0
    assert roi.roi_percentage(parcel, a) == 0.0


def test_roi_zero_when_taxes_cancel_base_cost():
    parcel = make_parcel(price=100.0)
    a = _analysis(parcel, gov_taxes_pct=-100.0)

    assert roi.base_cost(parcel, a) > 0
    assert roi.total_cost(parcel, a) == 0
    assert roi.roi_percentage(parcel, a) == 0.0


def test_negative_price_is_not_special_cased():
    parcel = make_parcel(price=-100.0)
    a = _analysis(parcel, plot_size_sqft=1000.0)

    assert roi.land_cost(parcel, a) == pytest.approx(-100_000.0)


def test_sensitivity_matches_band_formulas(surat_plot, default_analysis):
    total = roi.total_cost(surat_plot, default_analysis)
    revenue = roi.gross_revenue(default_analysis)

    s = roi.sensitivity(surat_plot, default_analysis)

    assert s.sell_price_up_10 == pytest.approx((revenue * 1.10 - total) / total * 100)
    assert s.sell_price_down_10 == pytest.approx((revenue * 0.90 - total) / total * 100)
    assert s.cost_up_10 == pytest.approx((revenue - total * 1.10) / (total * 1.10) * 100)
    assert s.cost_down_10 == pytest.approx((revenue - total * 0.90) / (total * 0.90) * 100)


def test_sensitivity_bands_bracket_base_roi(surat_plot, default_analysis):
    base = roi.roi_percentage(surat_plot, default_analysis)
    s = roi.sensitivity(surat_plot, default_analysis)

    assert s.sell_price_down_10 < base < s.sell_price_up_10
    assert s.cost_up_10 < base < s.cost_down_10


def test_sensitivity_nan_when_total_cost_zero():
    parcel = make_parcel(price=0.0)
    a = _analysis(parcel, plot_size_sqft=0.0, other_costs=0.0)

    s = roi.sensitivity(parcel, a)

    assert math.isnan(s.sell_price_up_10)
    assert math.isnan(s.sell_price_down_10)
    assert math.isnan(s.cost_up_10)
    assert math.isnan(s.cost_down_10)
