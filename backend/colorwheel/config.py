"""
ColorWheel Configuration
Manages environment variables and defaults for the harmony service.
"""
import os
from typing import List


class Config:
    """Configuration class for ColorWheel services."""

    # Service identity
    SERVICE_NAME: str = "colorwheel-harmony"
    VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = os.environ.get("COLORWHEEL_LOG_LEVEL", "INFO")
    LOG_SERIALIZE: bool = bool(int(os.environ.get("COLORWHEEL_LOG_SERIALIZE", "0")))

    # Picker defaults (initial state of the wheel)
    DEFAULT_BRIGHTNESS: float = float(os.environ.get("COLORWHEEL_DEFAULT_BRIGHTNESS", "1.0"))
    DEFAULT_COMBINATION: str = os.environ.get("COLORWHEEL_DEFAULT_COMBINATION", "analogous")

    # Reject out-of-range channels at the API boundary instead of passing
    # them through the permissive conversions
    STRICT_RANGES: bool = bool(int(os.environ.get("COLORWHEEL_STRICT_RANGES", "1")))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "COLORWHEEL_ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
    )

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("COLORWHEEL_METRICS_ENABLED", "1")))

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Parse the comma-separated origin list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_brightness(cls, brightness: float) -> bool:
        """Validate brightness parameter."""
        return 0.0 <= brightness <= 1.0

    @classmethod
    def validate_channel(cls, value: float) -> bool:
        """Validate a normalized color channel."""
        return 0.0 <= value <= 1.0

    @classmethod
    def validate_distance(cls, distance: float) -> bool:
        """Validate polar distance; values past the rim are capped later."""
        return distance >= 0.0


# Global config instance
config = Config()
