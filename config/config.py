from __future__ import annotations

from functools import lru_cache
from typing import Any, List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from s_types import s_errors

__all__ = ["Settings", "get_settings", "load_settings"]

_PROTECTED = frozenset({"NEO4J_PASSWORD"})


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    NEO4J_REST_ENDPOINT: str = "http://localhost:7474/db/data"
    NEO4J_USERNAME: Optional[str] = None
    NEO4J_PASSWORD: Optional[str] = None
    NEO4J_REST_TIMEOUT: float = Field(default=30.0, gt=0)
    NEO4J_REST_RETRY_ATTEMPTS: int = Field(default=3, ge=1)

    @field_validator("NEO4J_REST_ENDPOINT")
    @classmethod
    def _check_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"REST endpoint must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    def to_dict(self, hide_protected: bool = True) -> dict:
        result = {}
        for k, v in self.model_dump().items():
            if hide_protected and k in _PROTECTED and v is not None:
                result[k] = "***"
            else:
                result[k] = v
        return result

    @classmethod
    def get_available_params(cls) -> List[str]:
        return list(cls.model_fields.keys())

    def __repr__(self):
        items = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{self.__class__.__name__}({items})"


def load_settings(**overrides: Any) -> Settings:
    """
    Build a fresh Settings from the environment, applying explicit overrides.

    Raises:
        UnexpectedConfigParam: an override names an unknown setting.
        ConfigError: a value fails validation.
    """
    available = Settings.get_available_params()
    for key in overrides:
        if key not in available:
            raise s_errors.UnexpectedConfigParam(key)
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise s_errors.ConfigError(f"Invalid client configuration: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
