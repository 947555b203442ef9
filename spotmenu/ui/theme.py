"""
rofi theme selection.

rofi needs a file path, so the bundled theme is copied to
`<tmp>/spotmenu/theme.rasi` before use.
"""

import logging
import tempfile
from pathlib import Path
from typing import Optional

from spotmenu.core.store import write_text_atomic

logger = logging.getLogger("Theme")

BUNDLED_THEME = Path(__file__).parent / "theme.rasi"


def install_bundled_theme(target_dir: Optional[Path] = None) -> Path:
    """Copy the bundled theme where rofi can read it; return its path."""
    target_dir = Path(target_dir) if target_dir else Path(tempfile.gettempdir()) / "spotmenu"
    path = target_dir / "theme.rasi"
    write_text_atomic(path, BUNDLED_THEME.read_text(encoding="utf-8"), mode=0o644)
    logger.debug(f"Installed bundled theme at {path}")
    return path


def resolve_theme(cli_theme: str = "", config_theme: str = "", target_dir: Optional[Path] = None) -> str:
    """Pick the theme: command line first, then config, then the bundled one."""
    if cli_theme:
        return cli_theme
    if config_theme:
        return config_theme
    return str(install_bundled_theme(target_dir))
