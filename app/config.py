"""
Application configuration settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Area catalog
    GEOJSON_PATH: str = "data/geojson/uttarakhand-districts.geojson"
    AREA_ID_PROPERTY: str = "id"
    AREA_NAME_PROPERTY: str = "name"

    # Metric table - JSON or CSV; synthetic metrics are generated when unset
    METRICS_PATH: Optional[str] = None
    SYNTHETIC_SEED: int = Field(42, ge=0)
    SYNTHETIC_RANDOM: bool = False  # True ignores the seed; tables differ on every load

    # API settings
    API_V1_PREFIX: str = "/api"
    PROJECT_NAME: str = "Demographic Choropleth API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # Rankings
    DEFAULT_RANK_LIMIT: int = 20
    MAX_RANK_LIMIT: int = 1000

    # Initial map view (Uttarakhand)
    MAP_CENTER_LAT: float = 30.0668
    MAP_CENTER_LNG: float = 79.0193
    MAP_ZOOM: int = 8

    @property
    def base_dir(self) -> Path:
        """Get base directory of the project."""
        return Path(__file__).parent.parent

    def resolve_path(self, path: str) -> Path:
        """Resolve a relative data path against the project root."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.base_dir / candidate

    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()
