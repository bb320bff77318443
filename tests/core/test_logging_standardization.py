import logging
from pathlib import Path

from astar2d import main


def test_bootstrap_configures_levels(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  global_level: WARNING\n"
        "  module_levels:\n"
        "    astar2d.test_module: DEBUG\n"
    )
    main.bootstrap(path)
    assert logging.getLogger().getEffectiveLevel() == logging.WARNING
    assert logging.getLogger("astar2d.test_module").level == logging.DEBUG


def test_bootstrap_reads_config_path_from_environment(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "other.yaml"
    path.write_text("demo:\n  scenario: spikes\n")
    monkeypatch.setenv("ASTAR2D_CONFIG", str(path))
    cfg = main.bootstrap()
    assert cfg.demo.scenario == "spikes"


def test_invalid_module_level_is_reported(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  global_level: INFO\n"
        "  module_levels:\n"
        "    astar2d.other: LOUD\n"
    )
    warnings: list[str] = []
    monkeypatch.setattr(main.logger, "warning", lambda msg, *args: warnings.append(msg % args))
    main.bootstrap(path)
    assert warnings == ["Invalid log level 'LOUD' for module 'astar2d.other' in config."]
