"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolchainConfig(BaseModel):
    """Node.js toolchain configuration."""

    node_path: str | None = None
    npx_path: str | None = None
    probe_timeout: int = Field(10, ge=1, le=600, description="Version probe timeout in seconds")
    lock_files: list[str] = ["yarn.lock", "package-lock.json"]

    @field_validator("lock_files")
    @classmethod
    def validate_lock_files(cls, v: list[str]) -> list[str]:
        """Validate lock file names against the known package managers."""
        from ..utils.files import LockFile

        known = {lock_file.value for lock_file in LockFile}
        if not v:
            raise ValueError("At least one lock file must be configured")
        for name in v:
            if name not in known:
                raise ValueError(f"Unknown lock file: {name}. Expected one of {sorted(known)}")
        return v


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("nodejs-lambda-utils.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()


class UtilsConfig(BaseSettings):
    """Root configuration for nodejs-lambda-utils."""

    toolchain: ToolchainConfig = ToolchainConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="NODEJS_UTILS_",
        env_file=".env",
        env_nested_delimiter="__",
    )
