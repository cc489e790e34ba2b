"""Configuration loader with ENV:VAR_NAME resolution."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PRODUCT_STUDIO_CONFIG"


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


def _resolve(value: Any) -> Any:
    """Recursively resolve ENV:VAR_NAME references."""
    if isinstance(value, str) and value.startswith("ENV:"):
        var = value[4:]
        resolved = os.environ.get(var)
        if resolved is None:
            logger.debug("Environment variable %s not set (value stays None)", var)
        return resolved
    if isinstance(value, dict):
        return {k: _resolve(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve(v) for v in value]
    return value


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class SimulationConfig:
    scan_delay_seconds: float = 2.0
    generate_delay_seconds: float = 3.0


@dataclass
class ScannerConfig:
    min_search_volume: int = 30000
    max_competition: int = 50
    min_buying_intent: int = 50
    top_n: int = 6


@dataclass
class CatalogConfig:
    path: str | None = None


@dataclass
class StorageConfig:
    reports_dir: str = "reports"


@dataclass
class RuntimeConfig:
    timezone: str = "UTC"
    log_level: str = "INFO"


@dataclass
class AppConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


def _number(section: dict, key: str, default: Any, cast: type) -> Any:
    raw = section.get(key, default)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {key}: {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"{key} must not be negative (got {value})")
    return value


def _section(raw: dict, name: str) -> dict:
    sec = raw.get(name) or {}
    if not isinstance(sec, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return sec


def config_from_dict(raw: dict) -> AppConfig:
    raw = _resolve(raw)
    cfg = AppConfig()

    srv = _section(raw, "server")
    origins = srv.get("cors_origins", ["*"])
    if isinstance(origins, str):
        origins = [o.strip() for o in origins.split(",") if o.strip()]
    cfg.server = ServerConfig(
        host=srv.get("host") or "0.0.0.0",
        port=_number(srv, "port", 8000, int),
        cors_origins=list(origins or ["*"]),
    )

    sim = _section(raw, "simulation")
    cfg.simulation = SimulationConfig(
        scan_delay_seconds=_number(sim, "scan_delay_seconds", 2.0, float),
        generate_delay_seconds=_number(sim, "generate_delay_seconds", 3.0, float),
    )

    scn = _section(raw, "scanner")
    cfg.scanner = ScannerConfig(
        min_search_volume=_number(scn, "min_search_volume", 30000, int),
        max_competition=_number(scn, "max_competition", 50, int),
        min_buying_intent=_number(scn, "min_buying_intent", 50, int),
        top_n=_number(scn, "top_n", 6, int),
    )

    cat = _section(raw, "catalog")
    cfg.catalog = CatalogConfig(path=cat.get("path") or None)

    sto = _section(raw, "storage")
    cfg.storage = StorageConfig(reports_dir=sto.get("reports_dir") or "reports")

    rt = _section(raw, "runtime")
    cfg.runtime = RuntimeConfig(
        timezone=rt.get("timezone") or "UTC",
        log_level=str(rt.get("log_level") or "INFO"),
    )
    return cfg


def load_config(path: str | Path) -> AppConfig:
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Top level of {path} must be a mapping")

    cfg = config_from_dict(raw)
    logging.basicConfig(level=getattr(logging, cfg.runtime.log_level.upper(), logging.INFO))
    return cfg


def config_from_env() -> AppConfig:
    """Load the file named by PRODUCT_STUDIO_CONFIG, or fall back to defaults."""
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        logger.debug("%s not set, using default configuration", CONFIG_ENV_VAR)
        return AppConfig()
    return load_config(path)
