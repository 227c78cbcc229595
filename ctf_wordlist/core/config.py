"""
Configuration management for the CTF wordlist generator using Pydantic settings.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FetchConfig(BaseModel):
    """Context page fetching settings."""

    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    requests_per_second: float = Field(
        default=1.0,
        gt=0,
        description="Pacing applied to context page requests"
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36",
        description="User agent sent with every request"
    )
    verify_ssl: bool = Field(default=True)
    follow_redirects: bool = Field(default=True)


class OutputConfig(BaseModel):
    """Wordlist output settings."""

    output_directory: str = Field(default=".", description="Directory the wordlist is written to")


class Config(BaseSettings):
    """Main configuration class for the CTF wordlist generator."""

    # Application settings
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Component configurations
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = SettingsConfigDict(
        env_prefix="CTF_WORDLIST_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    def is_debug_mode(self) -> bool:
        """Check if debug mode is enabled."""
        return self.debug


# Global configuration instance
config = Config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config


def reload_config() -> Config:
    """Reload the configuration from environment variables."""
    global config
    config = Config()
    return config
