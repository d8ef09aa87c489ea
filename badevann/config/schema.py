"""Pydantic v2 models for user settings and temperature threshold tables."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OutputFormat(StrEnum):
    TEMP_ONLY = "tempOnly"
    SHORT = "short"
    LONG = "long"
    ISO = "iso"


class UserSettings(BaseModel):
    """User preferences, persisted as flat camelCase JSON."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    output_format: OutputFormat = Field(default=OutputFormat.LONG, alias="outputFormat")
    default_beach: str = Field(default="", alias="defaultBeach")
    beach_count: int = Field(default=20, ge=1, alias="beachCount")
    cache_timeout: int = Field(default=60, ge=0, alias="cacheTimeout")
    debug_mode: bool = Field(default=False, alias="debugMode")

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Band(BaseModel):
    """One temperature band. ``min`` is the inclusive lower bound; None catches the rest."""

    model_config = {"extra": "forbid"}

    name: str
    min: float | None = None
    symbol: str


class ThresholdConfig(BaseModel):
    model_config = {"extra": "forbid"}

    colors: list[Band]
    emojis: list[Band]

    @field_validator("colors", "emojis")
    @classmethod
    def _check_ordering(cls, bands: list[Band]) -> list[Band]:
        if not bands:
            raise ValueError("band table must not be empty")
        if bands[-1].min is not None:
            raise ValueError("last band must be a catch-all without 'min'")
        bounds = [b.min for b in bands[:-1]]
        if any(b is None for b in bounds):
            raise ValueError("only the last band may omit 'min'")
        if any(hi <= lo for hi, lo in zip(bounds, bounds[1:])):
            raise ValueError("band lower bounds must be strictly descending")
        return bands
