from pathlib import Path
from typing import ClassVar, Literal, Self

from pydantic import BaseModel, Field

DATA_DIR = Path.cwd().resolve().joinpath("data")
CONFIG_FILE = DATA_DIR / "config.json"
DEFAULT_API_URL = "https://api.quotable.io/random"


class Config(BaseModel):
    _cache: ClassVar[Self | None] = None

    api_url: str = Field(default=DEFAULT_API_URL, description="Endpoint returning a random quote as JSON")
    request_timeout: float | None = Field(
        default=10.0, description="Timeout in seconds for a quote request, null to wait forever"
    )
    proxy: str | None = Field(default=None, description="Optional proxy server URL used for quote requests")
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level for console"
    )
    log_dir: Path | None = Field(default=None, description="Optional directory for daily rotated log files")

    @classmethod
    def load(cls) -> Self:
        if cls._cache is None:
            cls._cache = (
                cls.model_validate_json(CONFIG_FILE.read_text("utf-8")) if CONFIG_FILE.is_file() else cls()
            )
        return cls._cache
