"""Command line entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence
import logging
import os
import sys

from dotenv import load_dotenv

from .config import Config, load_config, CONFIG_PATH
from .utils.cli.command_parser import parse_command, read_commands
from .utils.cli.commands import execute
from .utils.cli.terminal_view import get_view


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(cfg: Config) -> None:
    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    # Apply per-module levels if defined
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> Config:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv("ASTAR2D_CONFIG") or CONFIG_PATH
    cfg = load_config(Path(config_path))
    configure_logging(cfg)
    logger.debug("[Bootstrap] Configuration loaded from %s", config_path)
    return cfg


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    cfg = bootstrap()
    state: Dict[str, Any] = {"running": True, "config": cfg}
    get_view().colour = cfg.demo.colour

    if args:
        text = " ".join(args)
        cmd = parse_command(text if text.startswith("/") else "/" + text)
        if cmd is None:
            logger.error("No command given. Type /help for available commands.")
            return 1
        execute(cmd.name, cmd.args, state)
        return 1 if state.get("failed") else 0

    logger.info("Type /help for commands, /quit to exit.")
    try:
        for cmd in read_commands(sys.stdin):
            execute(cmd.name, cmd.args, state)
            if not state["running"]:
                break
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
