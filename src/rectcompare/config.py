"""Configuration management for rectcompare."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECTCOMPARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Report labels
    first_label: str = "A"
    second_label: str = "B"

    @property
    def labels(self) -> tuple[str, str]:
        """Labels for the first and second rectangle of a comparison."""
        return (self.first_label, self.second_label)


settings = Settings()
