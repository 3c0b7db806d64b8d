from __future__ import annotations

from uuid import UUID

from landscout.domain.analysis import ROIAnalysis


class AnalysisCache:
    """
    One live ROIAnalysis per parcel id.

    Lookups never create anything; creation only happens through
    get_or_create_default(). An entry is never regenerated behind the
    caller's back: it stays until put() overwrites it or evict() drops it.
    """

    def __init__(self) -> None:
        self._items: dict[UUID, ROIAnalysis] = {}

    def try_get(self, parcel_id: UUID) -> ROIAnalysis | None:
        return self._items.get(parcel_id)

    def get_or_create_default(self, parcel_id: UUID) -> ROIAnalysis:
        existing = self._items.get(parcel_id)
        if existing is not None:
            return existing
        analysis = ROIAnalysis.default_for(parcel_id)
        self._items[parcel_id] = analysis
        return analysis

    def put(self, analysis: ROIAnalysis) -> None:
        self._items[analysis.parcel_id] = analysis

    def evict(self, parcel_id: UUID) -> ROIAnalysis | None:
        return self._items.pop(parcel_id, None)

    def __contains__(self, parcel_id: object) -> bool:
        return parcel_id in self._items

    def __len__(self) -> int:
        return len(self._items)
