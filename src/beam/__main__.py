"""Demo entrypoint: drives a Door from config to show stop/stop-default."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from beam import __version__
from beam.config import Config, cfg, load_config_with_env
from beam.door import Door, DoorKnock
from beam.events import Event


def setup_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Configure loguru. Replace default logging."""
    logger.remove()
    logger.enable("beam")
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else level,
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | {message}"
        ),
    )


def reload_config(config_path: Path) -> Config:
    """Load config from path and update global cfg."""
    data = load_config_with_env(config_path)
    cfg.reload(data)
    return cfg


def run_door(config: Config) -> bool:
    """Knock once per configured visitor, then try to open the door."""
    door = Door()

    def on_knock(evt: DoorKnock) -> None:
        logger.info("{} knocked", evt.who)

    def on_before_open(evt: Event) -> None:
        if config.door_locked:
            logger.info("Door is locked")
            evt.stop_default()

    def on_open(evt: Event) -> None:
        logger.info("Door opened")

    door.on("knock", on_knock)
    door.on("before_open", on_before_open)
    door.on("open", on_open)

    for who in config.door_visitors:
        door.knock(who)
    return door.open()


def main() -> None:
    """Main entrypoint."""
    parser = argparse.ArgumentParser(description="Beam: event emitter door demo")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args()

    setup_logging(args.verbose)

    if not args.config.exists():
        logger.error("Config file not found: {}", args.config)
        sys.exit(1)

    config = reload_config(args.config)
    setup_logging(args.verbose, config.log_level)
    logger.info("Config loaded from {}", args.config)

    opened = run_door(config)
    sys.exit(0 if opened else 1)


if __name__ == "__main__":
    main()
