"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from q_alloc.config.domain.config import AllocatorConfig
from q_alloc.config.domain.observer import ConfigObserver
from q_alloc.config.infrastructure.env_interpolation import EnvResolver
from q_alloc.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AllocatorConfig from a YAML file."""

    def __init__(
        self, observer: ConfigObserver, environ: Mapping[str, str] | None = None
    ) -> None:
        self._observer = observer
        self._environ = environ

    def load(self, path: Path) -> AllocatorConfig:
        """
        Load, interpolate, validate, and return an AllocatorConfig.

        Relative paths inside the config are resolved against the config file's
        directory.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not a mapping or the schema is violated.
            yaml.YAMLError: if the file is not valid YAML.
        """
        raw = _parse_yaml(path=path)
        if not isinstance(raw, dict):
            raise ConfigValidationError("top-level YAML value must be a mapping")
        resolver = EnvResolver(environ=self._environ)
        resolved = resolver.resolve(raw)
        if resolver.missing:
            raise MissingEnvVarsError(resolver.missing)
        cfg = _build_config(resolved=resolved)
        cfg = _resolve_relative_paths(cfg=cfg, base_dir=path.parent)
        if cfg.smtp is None:
            self._observer.config_smtp_missing_warning()
        self._observer.config_loaded(name=cfg.name, version=cfg.version)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc


def _build_config(resolved: Any) -> AllocatorConfig:
    try:
        return AllocatorConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_relative_paths(cfg: AllocatorConfig, base_dir: Path) -> AllocatorConfig:
    def _resolve(p: Path) -> Path:
        return p if p.is_absolute() else base_dir / p

    return cfg.model_copy(
        update={
            "storage": cfg.storage.model_copy(
                update={"data_dir": _resolve(cfg.storage.data_dir)}
            ),
            "question_bank": cfg.question_bank.model_copy(
                update={"path": _resolve(cfg.question_bank.path)}
            ),
            "roster": cfg.roster.model_copy(update={"path": _resolve(cfg.roster.path)}),
        }
    )
