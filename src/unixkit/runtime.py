"""Runtime context & bootstrap utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from unixkit.domain.models import Settings
from unixkit.errors import ConfigurationError
from unixkit.infrastructure.logging import setup_logging

DEFAULT_CONFIG_PATH = Path("unixkit.yaml")


@dataclass(slots=True)
class RuntimeConfig:
    raw: dict[str, Any]
    path: Path
    settings: Settings = field(default_factory=Settings)


class AppContext:
    _instance: AppContext | None = None

    def __init__(self, config: RuntimeConfig):
        self.config = config

    @property
    def settings(self) -> Settings:
        return self.config.settings

    @classmethod
    def init(cls, config: RuntimeConfig) -> AppContext:
        cls._instance = cls(config)
        return cls._instance

    @classmethod
    def get(cls) -> AppContext:
        if cls._instance is None:
            raise RuntimeError("AppContext not initialized")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


def load_config(path: Path) -> RuntimeConfig:
    if not path.exists():
        return RuntimeConfig(raw={}, path=path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: config root must be a mapping")
    try:
        settings = Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc
    return RuntimeConfig(raw=data, path=path, settings=settings)


def bootstrap(force: bool = False, *, log_level: str | None = None, json_logs: bool = False) -> AppContext:
    if not force:
        try:
            return AppContext.get()
        except RuntimeError:
            pass
    load_dotenv(override=False)
    setup_logging(log_level, json_logs, force=force)
    cfg_path = Path(os.getenv("UNIXKIT_CONFIG", str(DEFAULT_CONFIG_PATH)))
    config = load_config(cfg_path)
    return AppContext.init(config)


def settings() -> Settings:
    """Current settings, bootstrapping with defaults if nothing ran yet."""
    return bootstrap().settings


__all__ = ["AppContext", "RuntimeConfig", "bootstrap", "load_config", "settings"]
