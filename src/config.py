from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "FactorScope"
    debug: bool = False
    log_level: str = "INFO"

    # Celery broker and result backend (Redis)
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"

    # Page fetching
    http_timeout: int = 30
    user_agent: str = "Mozilla/5.0 (compatible; FactorScopeBot/1.0; +https://example.com/bot)"

    # Factor execution
    factor_timeout: float = 2.0  # seconds per analyzer call
    factor_workers: int = 4  # threads for analyzer calls, shared by every run in a process
    circuit_failure_threshold: int = 3
    circuit_reset_timeout: float = 60.0  # seconds before an open circuit is probed
    progress_delay: float = 0.5  # pause between factors so progress is readable
    analysis_time_limit: int = 60  # hard limit for one analysis task, seconds

    # API
    cors_origins: list[str] = ["*"]


settings = Settings()
