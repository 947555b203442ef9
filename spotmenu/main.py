"""
spotmenu - control Spotify from rofi.

    spotmenu [--theme PATH]
    spotmenu setup [--host HOST] [--port PORT]
"""

import argparse
import logging
import sys
from typing import List, Optional

from spotmenu import __version__
from spotmenu.core.app import App
from spotmenu.core.config import Config, ConfigManager
from spotmenu.core.errors import (
    AuthError,
    ConfigNotFound,
    ConfigurationError,
    FatalSessionError,
    LauncherProtocolError,
    SetupCancelled,
)
from spotmenu.core.logger import setup_logging
from spotmenu.ui.launcher import Rofi
from spotmenu.ui.setup import DEFAULT_HOST, DEFAULT_PORT, run_setup
from spotmenu.ui.theme import resolve_theme
from spotmenu.ui.views.base import Session
from spotmenu.ui.views.navigator import run

logger = logging.getLogger("spotmenu")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spotmenu", description="Control Spotify from rofi."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--theme", default="", help="Set a custom rofi theme")
    parser.add_argument(
        "--log-level", default="INFO", help="Log level for the log file (default: INFO)"
    )

    commands = parser.add_subparsers(dest="command")
    setup = commands.add_parser("setup", help="Starts the setup process")
    setup.add_argument(
        "--host", default=DEFAULT_HOST, help="The host of the http callback server."
    )
    setup.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="The port of the http callback server."
    )
    return parser


def load_or_setup(config_manager: ConfigManager, host: str, port: int) -> Config:
    """Load the configuration, running setup first when it is missing or incomplete."""
    try:
        config = config_manager.load()
    except ConfigNotFound:
        logger.info("No configuration found, starting setup")
        return run_setup(config_manager, host, port)

    if config.is_incomplete():
        logger.info("Configuration incomplete, starting setup")
        return run_setup(config_manager, host, port)
    return config


def start(args: argparse.Namespace, config_manager: ConfigManager):
    if args.command == "setup":
        run_setup(config_manager, args.host, args.port)
        return

    config = load_or_setup(config_manager, DEFAULT_HOST, DEFAULT_PORT)
    config.fill_defaults()

    rofi = Rofi(theme=resolve_theme(args.theme, config.theme))
    app = App.from_config(config, config_manager)
    run(Session(app=app, rofi=rofi))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        start(args, ConfigManager())
    except SetupCancelled:
        print("Setup cancelled.")
        return 0
    except KeyboardInterrupt:
        return 0
    except (ConfigurationError, AuthError) as e:
        logger.error(f"Startup failed: {e}")
        print(f"spotmenu: {e}", file=sys.stderr)
        return 1
    except (LauncherProtocolError, FatalSessionError) as e:
        logger.critical(f"Session aborted: {e}", exc_info=True)
        return 1
    except OSError as e:
        logger.error(f"Startup failed: {e}")
        print(f"spotmenu: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
