# src/landscout/adapters/json_store.py
from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Sequence
from uuid import UUID

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from landscout.adapters.logging_utils import context, get_logger
from landscout.domain.parcel import Broker, Coordinate, LandType, Parcel, PriceUnit

logger = get_logger(__name__)


# ---------- Wire records ----------

class _Record(BaseModel):
    # camelCase on disk, unknown keys tolerated so newer files still load
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class BrokerRecord(_Record):
    id: UUID
    name: str
    phone: str
    whatsapp: str
    reliability: int
    notes: str


class PinRecord(_Record):
    id: UUID
    title: str
    latitude: float
    longitude: float
    address: str
    land_type: LandType
    zone: str
    price: float
    price_unit: PriceUnit
    notes: str
    broker: BrokerRecord | None = None
    reliability: int
    photos: list[str]
    created_at: datetime

    @classmethod
    def from_parcel(cls, parcel: Parcel) -> "PinRecord":
        broker = None
        if parcel.broker is not None:
            broker = BrokerRecord(**parcel.broker.model_dump())
        return cls(
            id=parcel.id,
            title=parcel.title,
            latitude=parcel.coordinate.latitude,
            longitude=parcel.coordinate.longitude,
            address=parcel.address,
            land_type=parcel.land_type,
            zone=parcel.zone,
            price=parcel.price,
            price_unit=parcel.price_unit,
            notes=parcel.notes,
            broker=broker,
            reliability=parcel.reliability,
            photos=list(parcel.photos),
            created_at=parcel.created_at,
        )

    def to_parcel(self) -> Parcel:
        broker = Broker(**self.broker.model_dump()) if self.broker is not None else None
        return Parcel(
            id=self.id,
            title=self.title,
            coordinate=Coordinate(latitude=self.latitude, longitude=self.longitude),
            address=self.address,
            land_type=self.land_type,
            zone=self.zone,
            price=self.price,
            price_unit=self.price_unit,
            notes=self.notes,
            broker=broker,
            reliability=self.reliability,
            photos=list(self.photos),
            created_at=self.created_at,
        )


_pin_list = TypeAdapter(list[PinRecord])


def dump_parcels(parcels: Sequence[Parcel]) -> str:
    records = [PinRecord.from_parcel(p).model_dump(mode="json", by_alias=True) for p in parcels]
    return json.dumps(records, indent=2, sort_keys=True, ensure_ascii=False)


def parse_parcels(text: str) -> list[Parcel]:
    """Raises ValidationError on malformed content."""
    return [rec.to_parcel() for rec in _pin_list.validate_json(text)]


# ---------- Store ----------

class JsonParcelStore:
    """
    Whole-collection JSON file store.

    save() replaces the file atomically (temp file + fsync + os.replace), so a
    reader only ever sees the old or the new collection. Neither save() nor
    load() raises: this is a best-effort local cache and the in-memory state
    stays authoritative.
    """

    def __init__(self, path: str | Path = "land_pins.json") -> None:
        self.path = Path(path)

    def save(self, parcels: Sequence[Parcel]) -> None:
        path, count = str(self.path), len(parcels)
        tmp_name: str | None = None
        try:
            payload = dump_parcels(parcels)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
            logger.debug("saved parcels", extra=context(path=path, count=count))
        except (OSError, ValueError, TypeError):
            logger.exception("failed to save parcels", extra=context(path=path, count=count))
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("could not remove temp file", extra=context(tmp=tmp_name))

    def load(self) -> list[Parcel]:
        path = str(self.path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as err:
            logger.warning("failed to read parcels", extra=context(path=path, error=str(err)))
            return []

        try:
            parcels = parse_parcels(text)
        except ValidationError as err:
            logger.warning(
                "failed to parse parcels",
                extra=context(path=path, errors=err.error_count()),
            )
            return []

        logger.debug("loaded parcels", extra=context(path=path, count=len(parcels)))
        return parcels
