from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import json


class Settings(BaseSettings):
    # Environment
    environment: str = Field(default="development")

    # Logging
    log_level: Optional[str] = Field(default=None)
    log_file: Optional[str] = Field(default=None)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # CORS
    cors_origins: List[str] = Field(default=["http://localhost:5173"])

    # In-memory store
    store_shards: int = Field(default=16)

    # Rate limiting (AI endpoints)
    ai_rate_limit: str = Field(default="30/minute")
    rate_limit_enabled: bool = Field(default=True)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator("store_shards")
    @classmethod
    def validate_store_shards(cls, v):
        if v < 1:
            raise ValueError("STORE_SHARDS must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        if v is None:
            return v
        if v.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return v.upper()

    @property
    def effective_log_level(self) -> str:
        # 本番環境ではINFO、それ以外はDEBUG
        if self.log_level:
            return self.log_level
        return "INFO" if self.environment == "production" else "DEBUG"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )
