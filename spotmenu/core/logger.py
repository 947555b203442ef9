import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


def default_log_dir() -> Path:
    state_home = os.environ.get("XDG_STATE_HOME")
    if state_home:
        return Path(state_home) / "spotmenu"
    return Path.home() / ".local" / "state" / "spotmenu"


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None):
    """Configure logging for the entire application."""
    log_dir = Path(log_dir) if log_dir else default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "spotmenu.log"

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            RotatingFileHandler(
                log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
            ),
            # No StreamHandler: stdout is read back by rofi and the setup prompts
        ],
    )

    # Suppress noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logging.getLogger("spotmenu")
