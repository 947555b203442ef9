import logging
from typing import Optional

from spotmenu.core.config import Device as SavedDevice
from spotmenu.core.errors import ConfigurationError, SpotifyError
from spotmenu.ui.launcher import Back, Cancelled, Row, Selected
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import ActivationPayload, Session, Transition, View

logger = logging.getLogger("Views")


class DevicesView(View):
    """Lists the available playback devices and saves the chosen one."""

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(
            session, key, title, show_back=True, no_custom=True, ignore_case=True
        )

    def current_device(self) -> str:
        name = self.config.device.name
        if name:
            return f"Current device: {name}"
        return "No device selected"

    def select(self, row: Row):
        previous = self.config.device
        self.config.device = SavedDevice(id=row.value, name=row.title)
        try:
            self.app.config_manager.save(self.config)
        except ConfigurationError as e:
            self.config.device = previous
            self.notify(messages.SELECT_DEVICE_ERROR, e)
            return

        self.app.player.set_device(row.value)
        logger.info(f"Selected device {row.title} ({row.value})")

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        try:
            devices = self.app.client.get_devices()
        except SpotifyError as e:
            self.notify(messages.GET_DEVICES_ERROR, e)
            return self.back()

        if not devices:
            self.notify(messages.NO_DEVICES_FOUND)
            return self.back()

        self.launcher.rows = [Row(title=d.name, value=d.id) for d in devices]
        outcome = self.show(self.current_device())

        if isinstance(outcome, (Back, Cancelled)):
            return self.back()

        if isinstance(outcome, Selected) and outcome.row.value:
            self.select(outcome.row)

        return self.stay()
