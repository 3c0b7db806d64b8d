from __future__ import annotations

import math
from typing import List, Optional
from uuid import UUID

import typer
from loguru import logger

from landscout.adapters.config import config
from landscout.adapters.json_store import JsonParcelStore
from landscout.domain.display import price_unit_label, reliability_band
from landscout.domain.parcel import LandType
from landscout.services.app_state import LandScoutState

app = typer.Typer(help="LandScout parcels: list pins, inspect ROI, portfolio totals.")

_state: LandScoutState | None = None


@app.callback()
def main(
    store: Optional[str] = typer.Option(
        None, "--store", help="Path to the pins JSON file (default: LANDSCOUT_STORE_PATH)"
    ),
    seed: bool = typer.Option(
        config.SEED_SAMPLE_PINS, "--seed/--no-seed", help="Seed demo pins when the store is empty"
    ),
) -> None:
    global _state
    path = store or config.STORE_PATH
    logger.debug("Opening parcel store", path=path)
    _state = LandScoutState(JsonParcelStore(path), seed_samples=seed)


def _get_state() -> LandScoutState:
    if _state is None:
        raise typer.Exit(code=1)
    return _state


def _fmt_pct(v: float) -> str:
    return "n/a" if math.isnan(v) else f"{v:.1f}%"


@app.command("list")
def list_cmd(
    land_type: List[LandType] = typer.Option([], "--type", help="Land type filter (repeatable)"),
    search: str = typer.Option("", "--search", help="Match title or zone"),
) -> None:
    """
    Print parcels matching the filters with their ROI.
    """
    state = _get_state()
    for lt in land_type:
        state.active_filters.add(lt)
    state.search_text = search

    parcels = state.filtered_parcels
    logger.info("Listing parcels", count=len(parcels), filters=[lt.value for lt in land_type], search=search)

    typer.echo("ID\tTitle\tType\tZone\tPrice\tReliability\tROI %")
    for p in parcels:
        roi = state.summary_for(p).roi_percentage
        typer.echo(
            f"{p.id}\t"
            f"{p.title}\t"
            f"{p.land_type.value}\t"
            f"{p.zone}\t"
            f"{p.price:,.0f} {price_unit_label(p.price_unit)}\t"
            f"{p.reliability} ({reliability_band(p.reliability)})\t"
            f"{roi:.1f}%"
        )


@app.command("roi")
def roi_cmd(parcel_id: str = typer.Argument(..., help="Parcel id")) -> None:
    """
    Print the full ROI breakdown and +/-10% sensitivity for one parcel.
    """
    state = _get_state()
    try:
        parcel = state.get_parcel(UUID(parcel_id))
    except ValueError:
        parcel = None
    if parcel is None:
        logger.error("Unknown parcel", parcel_id=parcel_id)
        raise typer.Exit(code=1)

    s = state.summary_for(parcel)
    typer.echo(f"{parcel.title} ({parcel.address})")
    typer.echo(f"Buildable Area: {s.buildable_area:,.0f} sqft")
    typer.echo(f"Land Cost: ₹{s.land_cost:,.0f}")
    typer.echo(f"Construction Cost: ₹{s.construction_cost:,.0f}")
    typer.echo(f"Total Cost: ₹{s.total_cost:,.0f}")
    typer.echo(f"Gross Revenue: ₹{s.gross_revenue:,.0f}")
    typer.echo(f"Profit: ₹{s.profit:,.0f}")
    typer.echo(f"ROI: {s.roi_percentage:.1f}%")
    typer.echo("Sensitivity (±10%)")
    typer.echo(f"  Sell Price +10% -> {_fmt_pct(s.sensitivity.sell_price_up_10)}")
    typer.echo(f"  Sell Price -10% -> {_fmt_pct(s.sensitivity.sell_price_down_10)}")
    typer.echo(f"  Cost +10% -> {_fmt_pct(s.sensitivity.cost_up_10)}")
    typer.echo(f"  Cost -10% -> {_fmt_pct(s.sensitivity.cost_down_10)}")


@app.command("portfolio")
def portfolio_cmd() -> None:
    """
    Aggregate ROI across every stored parcel.
    """
    m = _get_state().portfolio_metrics()
    typer.echo(f"Parcels: {m.n_parcels}")
    typer.echo(f"Total Cost: ₹{m.total_cost_sum:,.0f}")
    typer.echo(f"Gross Revenue: ₹{m.gross_revenue_sum:,.0f}")
    typer.echo(f"Profit: ₹{m.profit_sum:,.0f}")
    typer.echo(f"Mean ROI: {_fmt_pct(m.mean_roi)}")
    typer.echo(f"Median ROI: {_fmt_pct(m.p50_roi)}")


if __name__ == "__main__":
    app()
