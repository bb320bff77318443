"""Simple configuration loader for astar2d."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class LoggingConfig:
    """Log levels applied at bootstrap."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class DemoConfig:
    """Defaults for the ``show`` and ``png`` commands."""

    scenario: str = "l_shape"
    colour: bool = False
    png_out: str = "runs/path.png"
    png_cell: int = 10


@dataclass
class BenchmarkConfig:
    """Defaults for the ``bench`` and ``profile`` commands."""

    iterations: int = 100
    profile_out: str = "profile.prof"


@dataclass
class Config:
    """Top level configuration dataclass."""

    logging: LoggingConfig
    demo: DemoConfig
    benchmark: BenchmarkConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    log_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (log_data.get("module_levels") or {}).items()
        },
    )

    demo_data = data.get("demo", {}) or {}
    demo = DemoConfig(
        scenario=str(demo_data.get("scenario", "l_shape")),
        colour=bool(demo_data.get("colour", False)),
        png_out=str(demo_data.get("png_out", "runs/path.png")),
        png_cell=int(demo_data.get("png_cell", 10)),
    )

    bench_data = data.get("benchmark", {}) or {}
    benchmark = BenchmarkConfig(
        iterations=int(bench_data.get("iterations", 100)),
        profile_out=str(bench_data.get("profile_out", "profile.prof")),
    )

    return Config(logging=logging_cfg, demo=demo, benchmark=benchmark)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "LoggingConfig",
    "DemoConfig",
    "BenchmarkConfig",
    "load_config",
]
