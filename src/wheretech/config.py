"""Runtime configuration for WhereTech."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="WHERETECH_", env_file=".env", extra="ignore")

    app_name: str = "wheretech"
    log_level: str = "WARNING"
    catalog_base_url: str = Field(
        default="https://pokeapi.co/api/v2/pokemon",
        description="Creature catalog endpoint; the numeric id is appended as a path segment.",
    )
    catalog_timeout_seconds: float | None = Field(
        default=5.0,
        description="Upper bound on a single catalog lookup. Unset to wait indefinitely.",
    )
    encounter_rate: float = Field(default=0.2, ge=0.0, le=1.0)
    max_creature_id: int = Field(default=898, ge=1)
    capture_notice_delay_seconds: float = 0.5
    telemetry_enabled: bool = True


settings = Settings()
