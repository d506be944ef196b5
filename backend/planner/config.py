"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

REFERENCE_DIR = Path(__file__).parent / "reference"


class Settings(BaseSettings):
    """Planning engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Reference data
    reference_dir: Path = REFERENCE_DIR

    # Region scoring weights
    vibe_weight: float = 0.7
    proximity_weight: float = 0.3
    neutral_score: int = 50
    recommended_region_count: int = 3

    # Approximate length of Japan (km)
    proximity_ceiling_km: float = 2000.0

    # Distance warning threshold (km)
    far_region_distance_km: float = 800.0

    # Builder limits
    max_vibes: int = 5
    max_interests: int = 5

    # Refinement
    refinement_max_additions: int = 2
    refinement_rest_buffer_min: int = 30
    refinement_default_duration_min: int = 90


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
