from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Lumen"
    debug: bool = False
    log_level: str = "INFO"

    # Site home URL, used to tell internal links from external ones
    site_url: str | None = None

    # Analysis
    # Check toggles keyed by check id, e.g. ANALYSIS_CHECKS='{"og_cards": false}'
    analysis_checks: dict[str, bool] = {}
    enable_advanced_checks: bool = True
    analysis_workers: int = 1
    check_timeout_seconds: float | None = None

    # Scoring multipliers keyed by check id (0-10, default 1.0)
    scoring_weights: dict[str, float] = {}

    # Redis / Celery
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"

    # Seconds before a worker kills a task, and how long results are kept
    celery_task_time_limit: int = 600
    celery_result_expires: int = 86400

    # Bulk audits
    bulk_audit_max_documents: int = 200


settings = Settings()
