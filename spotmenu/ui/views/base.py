"""
View base class and the navigation primitives shared by every view.

A screen never calls another screen directly. `render()` runs one rofi
round trip and returns the next `Transition` (or None to end the session);
the Navigator loop performs the hand-off. Parent links are registry keys,
so a child never keeps its parent alive.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from spotmenu.core.app import App
from spotmenu.core.errors import SpotifyError
from spotmenu.ui.formatting import format_keybindings
from spotmenu.ui.launcher import Keybinding, LauncherSession, Outcome, Rofi

logger = logging.getLogger("Views")


@dataclass(frozen=True)
class Prefetched:
    """Activation payload carrying an entity that is already loaded."""

    entity: Any


@dataclass(frozen=True)
class LookupKey:
    """Activation payload carrying an id the screen has to fetch itself."""

    key: str


ActivationPayload = Union[None, Prefetched, LookupKey]


@dataclass
class Transition:
    view: "View"
    payload: ActivationPayload = None


class ViewRegistry:
    """Named screens of one session."""

    def __init__(self):
        self._views: Dict[str, "View"] = {}

    def register(self, view: "View") -> "View":
        if view.key in self._views:
            raise ValueError(f"View already registered: {view.key}")
        self._views[view.key] = view
        return view

    def get(self, key: str) -> "View":
        return self._views[key]

    def __contains__(self, key: str) -> bool:
        return key in self._views

    def __iter__(self) -> Iterator["View"]:
        return iter(list(self._views.values()))

    def __len__(self) -> int:
        return len(self._views)


@dataclass
class Session:
    """Everything a screen needs: app context, rofi, and the screen registry."""

    app: App
    rofi: Rofi
    views: ViewRegistry = field(default_factory=ViewRegistry)


class View:
    """One navigable menu state."""

    def __init__(self, session: Session, key: str, title: str = "", **launcher_options):
        self.session = session
        self.app = session.app
        self.key = key
        self.title = title
        self.launcher = LauncherSession(session.rofi, prompt=title, **launcher_options)
        self.children: List["View"] = []
        self._parent_key: Optional[str] = None
        session.views.register(self)

    def __repr__(self):
        return f"<{type(self).__name__} {self.key}>"

    # Navigation -------------------------------------------------------

    def set_parent(self, parent: "View"):
        self._parent_key = parent.key

    @property
    def parent(self) -> Optional["View"]:
        if self._parent_key is None:
            return None
        return self.session.views.get(self._parent_key)

    def back(self) -> Optional[Transition]:
        """Hand control to the parent screen; without one the session ends."""
        parent = self.parent
        if parent is None:
            return None
        return Transition(parent)

    def stay(self, payload: ActivationPayload = None) -> Transition:
        return Transition(self, payload)

    def own(self, child: "View") -> "View":
        self.children.append(child)
        return child

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        raise NotImplementedError

    # Helpers ----------------------------------------------------------

    @property
    def config(self):
        return self.app.config

    @property
    def icons(self):
        return self.app.config.icons

    def bind(self, action: str, description: str) -> Keybinding:
        return Keybinding(
            action=action,
            key=getattr(self.config.keybindings, action),
            description=description,
        )

    def with_help(self, message: str = "") -> str:
        if not (self.config.show_keybindings and self.launcher.keybindings):
            return message
        help_line = format_keybindings(self.launcher.keybindings)
        if message:
            return f"{message}\n{help_line}"
        return help_line

    def show(self, message: str = "") -> Outcome:
        """Run one blocking rofi round trip with the current rows."""
        self.launcher.message = self.with_help(message)
        return self.launcher.run()

    def notify(self, message: str, error: Optional[Exception] = None):
        """Show `message` in rofi; the cause only goes to the log."""
        if error is not None:
            logger.error(f"{self.key}: {message} ({error})")
        self.session.rofi.error(message)

    def attempt(self, message: str, action, *args) -> bool:
        """Run a Web API action; notify with `message` when it fails."""
        try:
            action(*args)
        except SpotifyError as e:
            self.notify(message, e)
            return False
        return True
