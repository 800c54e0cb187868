"""Application configuration via Pydantic Settings.

NOTE: env variable names are mapped explicitly (PORT, COUNTER_FILE,
DATABASE_URL, etc.) to avoid silent misconfiguration.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_INDEX_PAGE = Path(__file__).parent / "static" / "index.html"


class Settings(BaseSettings):
    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")

    # Counter store
    counter_backend: Literal["file", "sql"] = Field(default="file", validation_alias="COUNTER_BACKEND")
    counter_file: str = Field(default="db.txt", validation_alias="COUNTER_FILE")
    database_url: str = Field(
        default="sqlite+aiosqlite:///./likes.db",
        validation_alias="DATABASE_URL",
    )

    # Live channel
    broadcast_send_timeout: float = Field(default=5.0, gt=0, validation_alias="BROADCAST_SEND_TIMEOUT")
    broadcast_http_likes: bool = Field(default=False, validation_alias="BROADCAST_HTTP_LIKES")

    # App
    index_page: str = Field(default=str(DEFAULT_INDEX_PAGE), validation_alias="INDEX_PAGE")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
