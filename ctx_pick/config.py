"""Runtime configuration: working directory plus merged settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

from .errors import ConfigError
from .settings import SettingsManager

LOG_LEVEL_ENV = "CTX_PICK_LOG_LEVEL"
LOG_PATH_ENV = "CTX_PICK_LOG_PATH"


class SkeletonSettings(BaseModel):
    depth: int = Field(default=4, ge=0, description="Depth used by --skeleton")
    mode: Literal["depth", "tags"] = "depth"


class OutputSettings(BaseModel):
    clipboard: bool = True
    max_ambiguous_shown: int = Field(default=8, ge=1)


class ResolutionSettings(BaseModel):
    jobs: int = Field(default=1, ge=1)


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    path: Path | None = None


class Config(BaseModel):
    """Everything a ctx-pick run needs besides its inputs.

    Attributes:
        working_dir: Anchor for all relative resolution (the process CWD)
        skeleton: Default skeleton depth and mode
        output: Clipboard and error-report options
        resolution: Resolver concurrency
        logging: Console level and optional JSONL log path
    """

    working_dir: Path
    skeleton: SkeletonSettings = Field(default_factory=SkeletonSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    resolution: ResolutionSettings = Field(default_factory=ResolutionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(
        cls,
        working_dir: Path | None = None,
        settings_manager: SettingsManager | None = None,
        environ: dict[str, str] | None = None,
    ) -> Config:
        """Build a Config from the CWD, settings files and environment.

        Args:
            working_dir: Override for the working directory (default: CWD)
            settings_manager: Source of merged settings (default: standard scopes)
            environ: Environment mapping (default: os.environ)

        Raises:
            ConfigError: The CWD cannot be determined or settings are invalid
        """
        if working_dir is None:
            try:
                working_dir = Path.cwd()
            except OSError as e:
                raise ConfigError(f"Failed to determine current working directory: {e}") from e

        if settings_manager is None:
            settings_manager = SettingsManager(project_dir=working_dir / ".ctx-pick")
        environ = os.environ if environ is None else environ

        data: dict[str, Any] = settings_manager.get_merged_settings()
        log_overrides: dict[str, Any] = {}
        if environ.get(LOG_LEVEL_ENV):
            log_overrides["level"] = environ[LOG_LEVEL_ENV].upper()
        if environ.get(LOG_PATH_ENV):
            log_overrides["path"] = environ[LOG_PATH_ENV]
        if log_overrides:
            logging_section = data.get("logging")
            data["logging"] = {**(logging_section if isinstance(logging_section, dict) else {}), **log_overrides}

        try:
            return cls(working_dir=working_dir, **data)
        except (ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid settings: {e}") from e
