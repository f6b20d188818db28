"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

YR_BASE_URL = "http://api.yr.no/weatherapi/locationforecast/1.9"
DEFAULT_USER_AGENT = "yrweather/0.1.0"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    msl: int = 0  # metres above sea level
    enabled: bool = True


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = YR_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay_seconds: float = Field(default=5.0, ge=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    lang: str = "nb"
    strict: bool = False


class YrConfig(BaseModel):
    model_config = {"extra": "forbid"}

    client: ClientConfig = ClientConfig()
    forecast: ForecastConfig = ForecastConfig()
    locations: list[LocationConfig] = []

    def get_location(self, slug: str) -> LocationConfig:
        for loc in self.locations:
            if loc.slug == slug:
                return loc
        raise KeyError(f"Unknown location: {slug}")
