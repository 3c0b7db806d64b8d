# src/landscout/adapters/config.py
import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = {
    logging.getLevelName(lvl)
    for lvl in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL)
}


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # persistence
    STORE_PATH: str = Field(default="land_pins.json")

    # Seed the demo pins when the store comes back empty
    SEED_SAMPLE_PINS: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="LANDSCOUT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> Any:
        level = str(v or "INFO").strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("STORE_PATH", mode="before")
    @classmethod
    def _non_blank_path(cls, v: Any) -> Any:
        if v is None or not str(v).strip():
            raise ValueError("STORE_PATH must not be blank")
        return str(v).strip()


config = AppConfig()
