from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Harness configuration settings.

    Every field can be overridden with an ``OTEL_GOLDEN_``-prefixed environment
    variable. The update flag also honours the bare ``UPDATE_GOLDEN`` variable
    used by the golden regeneration workflow.
    """
    model_config = SettingsConfigDict(
        env_prefix="OTEL_GOLDEN_",
        env_file=".env",
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    # Logging
    log_level: str = "INFO"

    # Golden files
    golden_dir: str = "tests/__golden__"
    update_golden: bool = Field(
        default=False,
        validation_alias=AliasChoices("UPDATE_GOLDEN", "OTEL_GOLDEN_UPDATE_GOLDEN"),
    )

    # Comparison policy
    ignored_attributes: List[str] = Field(
        default_factory=lambda: ["session.id", "log.record.uid", "user_agent.original"]
    )
    simplified_scopes: List[str] = Field(
        default_factory=lambda: ["@opentelemetry/instrumentation-document-load"]
    )

    # Export endpoints intercepted by the capture layer
    traces_url_pattern: str = r"http://localhost:3001/v1/traces$"
    logs_url_pattern: str = r"http://localhost:3001/v1/logs$"


settings = Settings()


def update_golden_enabled() -> bool:
    """Read the update flag fresh from the environment."""
    return Settings().update_golden
