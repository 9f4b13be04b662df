"""Application settings."""

from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

# Browser key-value stores cap out around 5 MiB per origin
DEFAULT_MAX_PAYLOAD_BYTES = 5 * 1024 * 1024


class Settings(BaseSettings):
    """Runtime configuration, read from GLOWLOG_* environment variables."""

    data_dir: Path = DATA_DIR
    playback_interval_ms: int = 600
    max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES
    timezone: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GLOWLOG_", env_file=".env", extra="ignore"
    )

    @property
    def tz(self) -> tzinfo | None:
        """Configured zone, or None for the machine's local zone."""
        if not self.timezone:
            return None
        return ZoneInfo(self.timezone)

    @property
    def playback_interval(self) -> float:
        """Playback tick interval in seconds."""
        return self.playback_interval_ms / 1000


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
