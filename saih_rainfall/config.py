from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_URL = "https://www.chguadalquivir.es/saih/LluviaTabla.aspx"
DEFAULT_TABLE_ID = "ContentPlaceHolder1_GridLluviaTiempoReal"
DEFAULT_USER_AGENT = "saih-rainfall/0.1"


class AppSettings(BaseSettings):
    app_name: str = "SAIH Rainfall API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Remote page
    source_url: str = DEFAULT_SOURCE_URL
    table_id: str = DEFAULT_TABLE_ID
    fetch_timeout_connect_s: float = 5.0
    fetch_timeout_read_s: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT

    # Readings stay valid for this long before a refetch
    cache_ttl_s: float = 600.0

    # Extra gauge-name substrings mapped to a province code, e.g. {"PRESA X": "JA"}
    province_exceptions: Dict[str, str] = {}

    # .env support and prefix for clarity
    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
