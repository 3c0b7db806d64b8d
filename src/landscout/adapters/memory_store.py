from typing import Sequence

from landscout.adapters.json_store import dump_parcels, parse_parcels
from landscout.domain.parcel import Parcel


class InMemoryParcelStore:
    """
    Keeps every saved snapshot (serialized, in write order) instead of a file.

    Snapshots go through the same JSON encoding as the file store so tests see
    exactly what would have been written. `initial` preloads what load()
    returns before the first save and is not counted as a snapshot.
    """

    def __init__(self, initial: Sequence[Parcel] | None = None) -> None:
        self._initial = dump_parcels(initial) if initial else None
        self.snapshots: list[str] = []

    def save(self, parcels: Sequence[Parcel]) -> None:
        self.snapshots.append(dump_parcels(parcels))

    def load(self) -> list[Parcel]:
        latest = self.snapshots[-1] if self.snapshots else self._initial
        if latest is None:
            return []
        return parse_parcels(latest)

    def snapshot(self, index: int = -1) -> list[Parcel]:
        return parse_parcels(self.snapshots[index])
