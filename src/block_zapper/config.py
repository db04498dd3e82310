"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
The zapping engine itself never reads these values: every policy input is passed
explicitly. Settings only provide defaults for the CLI and logging setup.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Zap defaults (CLI)
    default_zap_mode: str = "selective"  # "selective" | "mega"
    default_keep_media: bool = True

    # Output
    output_indent: int = 2

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
