import logging
from typing import List, Optional

from spotmenu.core.errors import SpotifyError
from spotmenu.core.models import Page
from spotmenu.ui.launcher import Back, Cancelled, CustomKey, Row, Selected
from spotmenu.ui.views.base import ActivationPayload, Session, Transition, View

logger = logging.getLogger("Views")

PAGE_SIZE = 10


class PagedView(View):
    """A view over a paginated library collection.

    `total_pages` is `total // page_size`: a trailing partial page is not
    counted, so 25 items at 10 per page give 2 pages.
    """

    page_size = PAGE_SIZE
    fetch_error = ""

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(
            session, key, title, show_back=True, no_custom=True, ignore_case=True
        )
        self.page = 1
        self.total_pages = 0
        self.items: list = []
        self.launcher.keybindings = [
            self.bind("next_page", "Next page"),
            self.bind("previous_page", "Previous page"),
        ]

    # Subclass hooks -----------------------------------------------------

    def fetch(self, limit: int, offset: int) -> Page:
        raise NotImplementedError

    def format_rows(self, items: list) -> List[Row]:
        raise NotImplementedError

    def on_select(self, row: Row) -> Optional[Transition]:
        raise NotImplementedError

    def on_key(self, action: str, row: Row) -> Optional[Transition]:
        return self.stay()

    # Paging ---------------------------------------------------------------

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def next_page(self):
        if self.page < self.total_pages:
            self.page += 1

    def previous_page(self):
        if self.page > 1:
            self.page -= 1

    def reset(self):
        self.page = 1

    def load(self) -> bool:
        try:
            result = self.fetch(self.page_size, self.offset)
        except SpotifyError as e:
            self.notify(self.fetch_error, e)
            return False

        self.items = result.items
        self.total_pages = result.total // self.page_size
        self.launcher.rows = self.format_rows(result.items)
        self.launcher.prompt = f"{self.title} {self.page}/{self.total_pages}"
        logger.debug(f"{self.key}: page {self.page}/{self.total_pages} of {result.total} items")
        return True

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        if not self.load():
            self.reset()
            return self.back()

        outcome = self.show()

        if isinstance(outcome, (Back, Cancelled)):
            self.reset()
            return self.back()

        if isinstance(outcome, CustomKey):
            if outcome.action == "next_page":
                self.next_page()
                return self.stay()
            if outcome.action == "previous_page":
                self.previous_page()
                return self.stay()
            return self.on_key(outcome.action, outcome.row)

        if isinstance(outcome, Selected):
            return self.on_select(outcome.row)

        return self.stay()
