from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="lightbnb_",
    )
    log_level: str = "info"
    database_uri: str = ":memory:"
    database_read_only: bool = False
    duckdb_threads: Optional[int] = None
    deployment_root_path: Optional[str] = None
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    reload: bool = False


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    return _Settings()
