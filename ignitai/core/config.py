from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "IgnitAI Backend"
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    database_url: str = "sqlite:///./ignitai.db"
    upload_dir: str = "uploads"

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_fallback_model: Optional[str] = "gpt-3.5-turbo"
    openai_timeout_seconds: float = 8.0

    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    smtp_from: Optional[str] = None
    notify_email: Optional[str] = None

    feedback_company: str = "IgnitAI"

    basic_session_ttl_seconds: int = 3600
    advanced_session_ttl_seconds: int = 7200
    session_sweep_interval_seconds: int = 300

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def mail_sender(self) -> Optional[str]:
        return self.smtp_from or self.smtp_user


settings = Settings()
