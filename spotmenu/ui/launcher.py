"""
rofi launcher wrapper.

One `LauncherSession.run()` is one blocking `rofi -dmenu` invocation. The
exit status and the printed line are translated into an Outcome:

    0    -> Selected (or Back when the ".." row was chosen)
    1    -> Cancelled
    >=10 -> CustomKey, the (status - 10)th configured keybinding

Any other status is a protocol violation and raises LauncherProtocolError.
"""

import logging
import subprocess
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

from spotmenu.core.errors import LauncherProtocolError

logger = logging.getLogger("Launcher")

BACK_ROW = ".."

STATUS_SELECTED = 0
STATUS_CANCELLED = 1
STATUS_KB_CUSTOM = 10


@dataclass(frozen=True)
class Row:
    """One selectable line: displayed title plus an opaque value."""

    title: str
    value: str = ""


@dataclass(frozen=True)
class Keybinding:
    action: str
    key: str
    description: str = ""


@dataclass(frozen=True)
class Selected:
    row: Row


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class CustomKey:
    key: str
    action: str
    row: Row


Outcome = Union[Selected, Cancelled, Back, CustomKey]


class Rofi:
    """Spawns rofi processes. Holds the theme for every invocation."""

    def __init__(
        self,
        executable: str = "rofi",
        theme: Optional[str] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.executable = executable
        self.theme = theme
        self._runner = runner

    def theme_args(self) -> List[str]:
        if self.theme:
            return ["-theme", self.theme]
        return []

    def select(self, args: Sequence[str], lines: Sequence[str]) -> Tuple[int, str]:
        """Run `rofi <args>` with `lines` on stdin; return (status, output)."""
        stdin = "".join(f"{line}\n" for line in lines)
        try:
            proc = self._runner(
                [self.executable, *args],
                input=stdin,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise LauncherProtocolError(f"Could not start {self.executable}: {e}") from e

        return proc.returncode, (proc.stdout or "").strip()

    def error(self, message: str):
        """Show an error message box."""
        args = ["-e", message, *self.theme_args()]
        try:
            self._runner(
                [self.executable, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            logger.error(f"Could not show error '{message}': {e}")


@dataclass
class LauncherSession:
    """Per-screen rofi configuration plus the remembered cursor position."""

    rofi: Rofi
    prompt: str = ""
    message: str = ""
    filter: str = ""
    rows: List[Row] = field(default_factory=list)
    show_back: bool = False
    keybindings: List[Keybinding] = field(default_factory=list)
    ignore_case: bool = False
    no_custom: bool = False
    markup_rows: bool = False
    previous_selection: int = 0

    def build_args(self) -> List[str]:
        args = ["-dmenu", *self.rofi.theme_args()]

        if self.prompt:
            args += ["-p", self.prompt]
        if self.message:
            args += ["-mesg", self.message]
        if self.filter:
            args += ["-filter", self.filter]
        if self.ignore_case:
            args.append("-i")
        if self.no_custom:
            args.append("-no-custom")
        if self.markup_rows:
            args.append("-markup-rows")

        for i, binding in enumerate(self.keybindings, start=1):
            args += [f"-kb-custom-{i}", binding.key]

        selected = self.previous_selection
        # Skip the back row when there is something else to select
        if self.show_back and self.rows:
            selected += 1
        args += ["-selected-row", str(selected)]

        return args

    def find_selection(self, title: str) -> Tuple[Row, int]:
        """Re-identify the chosen title; unknown text becomes a valueless Row."""
        for i, row in enumerate(self.rows):
            if row.title == title:
                return row, i
        return Row(title=title), 0

    def lines(self) -> List[str]:
        titles = [row.title for row in self.rows]
        if self.show_back:
            return [BACK_ROW, *titles]
        return titles

    def run(self) -> Outcome:
        status, output = self.rofi.select(self.build_args(), self.lines())
        selection, index = self.find_selection(output)
        self.previous_selection = index
        logger.debug(f"rofi exited {status} with {output!r}")

        if status == STATUS_SELECTED:
            if self.show_back and selection.title == BACK_ROW and index == 0:
                return Back()
            return Selected(selection)

        if status == STATUS_CANCELLED:
            return Cancelled()

        if status >= STATUS_KB_CUSTOM:
            key_index = status - STATUS_KB_CUSTOM
            if key_index >= len(self.keybindings):
                raise LauncherProtocolError(
                    f"rofi reported custom key {key_index + 1}, "
                    f"only {len(self.keybindings)} configured"
                )
            binding = self.keybindings[key_index]
            return CustomKey(key=binding.key, action=binding.action, row=selection)

        raise LauncherProtocolError(f"received invalid rofi status: {status}")
