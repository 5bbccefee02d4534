"""
Configuration management for heatcalc.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEATCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Design conditions (CIBSE Guide A style defaults)
    internal_design_temp: float = Field(default=21.0, description="Living space design temperature (°C)")
    internal_design_temp_bedroom: float = Field(default=18.0, description="Bedroom design temperature (°C)")
    default_region: str = Field(default="southeast", description="Climate region for unrecognised postcodes")

    # Costing defaults
    default_system_type: Literal["heatPump", "boiler"] = Field(default="heatPump")
    default_emitter_type: Literal["radiator", "underfloor", "heatpump"] = Field(default="heatpump")
    include_grants: bool = Field(default=True, description="Apply Boiler Upgrade Scheme grant to heat pumps")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for the CLI")
    log_to_file: bool = Field(default=False)


# Global settings instance
settings = Settings()
