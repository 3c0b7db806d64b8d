from __future__ import annotations

from uuid import UUID

from landscout.adapters.config import config
from landscout.adapters.logging_utils import context, get_logger
from landscout.analysis.roi import summarize
from landscout.analysis.roi_batch import (
    PortfolioMetrics,
    build_roi_frame,
    compute_roi_metrics_df,
    summarize_portfolio,
)
from landscout.domain.analysis import ROIAnalysis, ROISummary
from landscout.domain.parcel import LandType, Parcel
from landscout.domain.ports import ParcelStore
from landscout.services.analysis_cache import AnalysisCache
from landscout.services.samples import sample_parcels

logger = get_logger(__name__)


class LandScoutState:
    """
    Owner of the parcel collection, the current selection, the list filters
    and the per-parcel analysis cache.

    Every successful add/update/delete hands the full collection to the
    store before returning, so snapshots land in the same order as the
    mutations. Single-threaded by contract: callers serialize access.
    """

    def __init__(self, store: ParcelStore, *, seed_samples: bool | None = None) -> None:
        self._store = store
        self._cache = AnalysisCache()
        self.selected: Parcel | None = None
        self.active_filters: set[LandType] = set()
        self.search_text: str = ""

        self._parcels: list[Parcel] = list(store.load())

        if seed_samples is None:
            seed_samples = config.SEED_SAMPLE_PINS
        if not self._parcels and seed_samples:
            self._parcels = sample_parcels()
            logger.info("seeded sample parcels", extra=context(count=len(self._parcels)))
            self._persist()

    # ------------------------------------------------------------------
    # Collection
    @property
    def parcels(self) -> tuple[Parcel, ...]:
        return tuple(self._parcels)

    def get_parcel(self, parcel_id: UUID) -> Parcel | None:
        index = self._index_of(parcel_id)
        return None if index is None else self._parcels[index]

    def select(self, parcel: Parcel | None) -> None:
        self.selected = parcel

    def add_parcel(self, parcel: Parcel) -> None:
        self._parcels.append(parcel)
        self.selected = parcel
        self._persist()

    def update_parcel(self, parcel: Parcel) -> None:
        index = self._index_of(parcel.id)
        if index is None:
            return
        self._parcels[index] = parcel
        self.selected = parcel
        self._persist()

    def delete_parcel(self, parcel: Parcel) -> None:
        self._cache.evict(parcel.id)
        remaining = [p for p in self._parcels if p.id != parcel.id]
        if len(remaining) == len(self._parcels):
            return
        self._parcels = remaining
        self._persist()

    # ------------------------------------------------------------------
    # Filtering / search
    def toggle_filter(self, land_type: LandType) -> None:
        land_type = LandType(land_type)
        if land_type in self.active_filters:
            self.active_filters.remove(land_type)
        else:
            self.active_filters.add(land_type)

    def clear_filters(self) -> None:
        self.active_filters.clear()

    @property
    def filtered_parcels(self) -> list[Parcel]:
        """
        Land-type filters are OR'ed with each other and AND'ed with search.
        Search is a case-insensitive substring match on title or zone only.
        """
        needle = self.search_text.casefold()
        return [
            p for p in self._parcels
            if (not self.active_filters or p.land_type in self.active_filters)
            and (
                not needle
                or needle in p.title.casefold()
                or needle in p.zone.casefold()
            )
        ]

    # ------------------------------------------------------------------
    # Analyses
    def try_get_analysis(self, parcel: Parcel) -> ROIAnalysis | None:
        return self._cache.try_get(parcel.id)

    def analysis_for(self, parcel: Parcel) -> ROIAnalysis:
        return self._cache.get_or_create_default(parcel.id)

    def save_analysis(self, analysis: ROIAnalysis) -> None:
        self._cache.put(analysis)

    def summary_for(self, parcel: Parcel) -> ROISummary:
        return summarize(parcel, self.analysis_for(parcel))

    def portfolio_metrics(self) -> PortfolioMetrics:
        pairs = [(p, self.analysis_for(p)) for p in self.filtered_parcels]
        return summarize_portfolio(compute_roi_metrics_df(build_roi_frame(pairs)))

    # ------------------------------------------------------------------
    def _index_of(self, parcel_id: UUID) -> int | None:
        for i, p in enumerate(self._parcels):
            if p.id == parcel_id:
                return i
        return None

    def _persist(self) -> None:
        self._store.save(list(self._parcels))
