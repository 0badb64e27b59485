from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    DATA_DIR, DB_FILENAME, POOL_SIZE, PORT).
    """

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Basic app metadata
    app_name: str = "Rate Directory"
    debug: bool = False
    version: str = "0.1.0"

    # Data & persistence
    data_dir: Path = Path("data")
    db_filename: str = "rates.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided

    # Store connection pool
    pool_size: int = Field(10, ge=1, le=100)
    pool_timeout_seconds: float = Field(5.0, gt=0)

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Optional front page (index.html) and initial rate rows
    static_dir: Optional[Path] = None
    seed_file: Optional[Path] = None

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        if self.static_dir is not None and not self.static_dir.is_dir():
            raise ValueError(f"static_dir '{self.static_dir}' is not a directory")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
