# src/landscout/domain/ports.py
from __future__ import annotations

from typing import Protocol, Sequence

from landscout.domain.parcel import Parcel


# ----------------------------
# Parcel storage
# ----------------------------

class ParcelStore(Protocol):
    def save(self, parcels: Sequence[Parcel]) -> None:
        """Persist the full collection. Must not raise."""
        ...

    def load(self) -> list[Parcel]:
        """Return the last saved collection, or [] when there is none."""
        ...
