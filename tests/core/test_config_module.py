from pathlib import Path

from astar2d.config import (
    CONFIG,
    BenchmarkConfig,
    DemoConfig,
    LoggingConfig,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert isinstance(CONFIG.demo, DemoConfig)
    assert isinstance(CONFIG.benchmark, BenchmarkConfig)
    assert CONFIG.demo.scenario == "l_shape"
    assert CONFIG.benchmark.iterations == 100


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}
    assert cfg.demo == DemoConfig()
    assert cfg.benchmark == BenchmarkConfig()


def test_values_are_read_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    astar2d.search.a_star: ERROR\n"
        "demo:\n"
        "  scenario: hill\n"
        "  colour: true\n"
        "benchmark:\n"
        "  iterations: 7\n"
    )
    cfg = load_config(path)
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"astar2d.search.a_star": "ERROR"}
    assert cfg.demo.scenario == "hill"
    assert cfg.demo.colour is True
    assert cfg.demo.png_cell == 10
    assert cfg.benchmark.iterations == 7
    assert cfg.benchmark.profile_out == "profile.prof"


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).demo.scenario == "l_shape"
