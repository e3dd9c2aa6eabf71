"""Configuration management.

``Configuration`` is the immutable object handed to the SDK. It can be built
directly, through the fluent ``ConfigurationBuilder``, or loaded from
environment variables (with .env file support) via ``Settings``.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings

from atoship.config.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_BACKOFF,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from atoship.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Environment configuration (ATOSHIP_* variables)."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_backoff: float = DEFAULT_RETRY_BACKOFF
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True

    # Webhook Configuration
    webhook_secret: Optional[str] = None

    class Config:
        """Pydantic config."""

        env_prefix = "ATOSHIP_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


def mask_secret(value: str) -> str:
    """Mask all but the first and last four characters."""
    if len(value) > 8:
        return f"{value[:4]}****{value[-4:]}"
    return "****"


class Configuration(BaseModel):
    """Immutable SDK configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_backoff: float = DEFAULT_RETRY_BACKOFF
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True

    def __init__(self, api_key: str, **options: Any):
        try:
            super().__init__(api_key=api_key, **options)
        except PydanticValidationError as e:
            first = e.errors()[0]
            message = first.get("ctx", {}).get("error") or first["msg"]
            raise ConfigurationError(str(message)) from e

    @field_validator("api_key")
    @classmethod
    def _check_api_key(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("API key cannot be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        parsed = urlparse(value or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Base URL must be a valid URL")
        return value.rstrip("/")

    @model_validator(mode="after")
    def _check_limits(self) -> "Configuration":
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        if self.max_retries < 0:
            raise ValueError("Max retries cannot be negative")
        if self.retry_backoff < 0:
            raise ValueError("Retry backoff cannot be negative")
        return self

    @classmethod
    def builder(cls) -> "ConfigurationBuilder":
        return ConfigurationBuilder()

    @classmethod
    def with_api_key(cls, api_key: str) -> "Configuration":
        """Configuration with default settings."""
        return cls(api_key)

    @classmethod
    def from_env(cls, settings: Optional[Settings] = None) -> "Configuration":
        """Load configuration from ATOSHIP_* environment variables."""
        settings = settings or Settings()
        if not settings.api_key:
            raise ConfigurationError("API key is required (set ATOSHIP_API_KEY)")
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            retry_backoff=settings.retry_backoff,
            debug=settings.debug,
            user_agent=settings.user_agent,
            verify_ssl=settings.verify_ssl,
        )

    @property
    def masked_api_key(self) -> str:
        return mask_secret(self.api_key)

    def with_masked_api_key(self) -> "Configuration":
        """Copy of this configuration with the API key masked for logging."""
        return self.model_copy(update={"api_key": self.masked_api_key})

    def to_dict(self, mask_api_key: bool = False) -> Dict[str, Any]:
        data = self.model_dump()
        if mask_api_key:
            data["api_key"] = self.masked_api_key
        return data

    def __str__(self) -> str:
        return (
            f"Configuration{{base_url={self.base_url}, timeout={self.timeout}, "
            f"max_retries={self.max_retries}, debug={str(self.debug).lower()}, "
            f"verify_ssl={str(self.verify_ssl).lower()}}}"
        )

    def __repr__(self) -> str:
        return f"Configuration(api_key='{self.masked_api_key}', base_url='{self.base_url}')"


class ConfigurationBuilder:
    """Fluent builder for Configuration instances."""

    def __init__(self):
        self._api_key: Optional[str] = None
        self._options: Dict[str, Any] = {}

    def api_key(self, api_key: str) -> "ConfigurationBuilder":
        self._api_key = api_key
        return self

    def base_url(self, base_url: str) -> "ConfigurationBuilder":
        self._options["base_url"] = base_url
        return self

    def timeout(self, timeout: float) -> "ConfigurationBuilder":
        self._options["timeout"] = timeout
        return self

    def max_retries(self, max_retries: int) -> "ConfigurationBuilder":
        self._options["max_retries"] = max_retries
        return self

    def retry_backoff(self, retry_backoff: float) -> "ConfigurationBuilder":
        self._options["retry_backoff"] = retry_backoff
        return self

    def debug(self, debug: bool = True) -> "ConfigurationBuilder":
        self._options["debug"] = debug
        return self

    def user_agent(self, user_agent: str) -> "ConfigurationBuilder":
        self._options["user_agent"] = user_agent
        return self

    def verify_ssl(self, verify_ssl: bool = True) -> "ConfigurationBuilder":
        self._options["verify_ssl"] = verify_ssl
        return self

    def build(self) -> Configuration:
        """Build the configuration.

        Raises:
            ConfigurationError: If the API key is missing or a value is invalid
        """
        if self._api_key is None:
            raise ConfigurationError("API key is required")
        return Configuration(self._api_key, **self._options)
