"""
Configuration loader for groovyfox.

Loads settings from config.yaml and merges environment variables for API keys.
"""

import os
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _validate_level(v: str) -> str:
    if v.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
    return v.upper()


class RecognizerConfig(BaseModel):
    """Intent recognizer configuration."""

    provider: str = "openai"
    model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    max_tokens: int = 300
    max_retries: int = Field(default=3, ge=1)
    retry_delay: float = Field(default=1.0, ge=0.0)

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        valid_providers = {"openai", "keyword"}
        if v.lower() not in valid_providers:
            raise ValueError(
                f"Invalid recognizer provider: {v}. Must be one of {valid_providers}"
            )
        return v.lower()


class TranscriptConfig(BaseModel):
    """Transcript store configuration."""

    database_path: str = "./groovyfox.db"
    timeout: float = 30


class CatalogConfig(BaseModel):
    """Reference data configuration."""

    path: Optional[str] = None
    fallback_sample_size: int = Field(default=3, ge=1)


class BotConfig(BaseModel):
    """Bot persona configuration."""

    name: str = "Foxy"
    conversation_id: str = "console"
    sender_id: str = "user"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = "./logs/groovyfox.log"
    console: bool = False
    max_bytes: int = 5 * 1_048_576
    backup_count: int = 3
    third_party_level: str = "WARNING"

    @field_validator("level", "third_party_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        return _validate_level(v)


class GroovyFoxConfig(BaseModel):
    """Complete groovyfox configuration."""

    recognizer: RecognizerConfig = Field(default_factory=RecognizerConfig)
    transcripts: TranscriptConfig = Field(default_factory=TranscriptConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    bot: BotConfig = Field(default_factory=BotConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _resolve_env_vars(data: Any) -> Any:
    """
    Recursively resolve environment variable placeholders in config data.

    Replaces ${VAR_NAME} with the value from os.environ.

    Args:
        data: Configuration data (dict, list, or primitive)

    Returns:
        Data with environment variables resolved
    """
    if isinstance(data, dict):
        return {k: _resolve_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars(item) for item in data]
    elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
        env_var = data[2:-1]
        return os.getenv(env_var, data)
    return data


def load_config(config_path: Optional[str] = None) -> GroovyFoxConfig:
    """
    Load and validate groovyfox configuration.

    Reads from GROOVYFOX_CONFIG_PATH environment variable or the provided path,
    defaulting to 'config.yaml'. Validates using Pydantic models and checks
    the environment variables the chosen recognizer needs.

    Args:
        config_path: Optional path to config file. If not provided, uses
                    GROOVYFOX_CONFIG_PATH env var or defaults to 'config.yaml'

    Returns:
        GroovyFoxConfig: Validated configuration instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If required environment variables are missing
        yaml.YAMLError: If config file is invalid YAML
        pydantic.ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = os.getenv("GROOVYFOX_CONFIG_PATH", "config.yaml")

    if not os.path.exists(config_path):
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}. "
            f"Please ensure the file exists or set GROOVYFOX_CONFIG_PATH correctly."
        )

    with open(config_path, "r", encoding="utf-8") as f:
        raw_config = yaml.safe_load(f) or {}

    config_data = _resolve_env_vars(raw_config)
    config = GroovyFoxConfig(**config_data)

    required_env_vars = {}
    if config.recognizer.provider == "openai":
        required_env_vars["OPENAI_API_KEY"] = (
            "Get your API key from https://platform.openai.com/api-keys"
        )

    missing_vars = []
    for var_name, help_text in required_env_vars.items():
        if not os.getenv(var_name):
            missing_vars.append(f"  - {var_name}: {help_text}")

    if missing_vars:
        raise ValueError(
            "Required environment variables are not set:\n" + "\n".join(missing_vars)
        )

    return config
