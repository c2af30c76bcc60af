"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class BankalpyConfig(BaseSettings):
    """Bankalpy domain model configuration"""

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Account identity allocation
    account_id_start: int = 0  # First issued id is start + 1
    account_id_thread_safe: bool = True

    class Config:
        env_prefix = "BANKALPY_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankalpyConfig()


def get_config() -> BankalpyConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankalpyConfig:
    """Reload configuration from environment"""
    global config
    config = BankalpyConfig()
    return config
