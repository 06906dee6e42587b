"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


class EventSourceKind(StrEnum):
    SEED = "seed"
    FILE = "file"


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.data.gov.sg"
    forecast_path: str = "/v1/environment/24-hour-weather-forecast"
    user_agent: str = "shoresquad/0.1.0"
    timeout: float = Field(default=10.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)
    primary_region: str = "east"
    fallback_region: str = "central"
    max_periods: int = Field(default=4, ge=0, le=4)


class DefaultsConfig(BaseModel):
    """Fallback values used when the forecast payload omits a field."""

    model_config = {"extra": "forbid"}

    temperature_low_c: int = 24
    temperature_high_c: int = 32
    humidity_low_pct: int = Field(default=60, ge=0, le=100)
    humidity_high_pct: int = Field(default=95, ge=0, le=100)


class EventsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: EventSourceKind = EventSourceKind.SEED
    source_path: str = ""
    fetch_delay_ms: int = Field(default=500, ge=0)
    join_delay_ms: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _file_source_needs_path(self) -> "EventsConfig":
        if self.source == EventSourceKind.FILE and not self.source_path:
            raise ValueError("events.source_path is required when source is 'file'")
        return self


class NotificationsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_active: int = Field(default=5, ge=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather: WeatherConfig = WeatherConfig()
    defaults: DefaultsConfig = DefaultsConfig()
    events: EventsConfig = EventsConfig()
    notifications: NotificationsConfig = NotificationsConfig()
