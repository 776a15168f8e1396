"""Engine configuration settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Application
    APP_NAME: str = "WiFi Coverage Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Units
    DEFAULT_PIXELS_PER_METER: float = 20.0  # Fallback when the caller's scale is unusable

    # Receiver model
    DEFAULT_RECEIVER_HEIGHT_M: float = 1.0  # Client device height (phone/laptop)

    # Coverage indicator
    DEFAULT_COVERAGE_THRESHOLD_DBM: float = -75.0

    # Grid sampling
    GRID_RESOLUTION_2D: int = 8  # pixels per overlay cell
    GRID_RESOLUTION_3D: int = 20  # pixels per mesh segment, coarser for performance
    SAMPLING_WORKERS: int = 1  # >1 partitions grid rows across threads

    class Config:
        env_file = ".env"
        env_prefix = "WIFI_COVERAGE_"
        case_sensitive = True


# Global settings instance
settings = Settings()
