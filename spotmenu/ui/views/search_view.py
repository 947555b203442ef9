"""
Search prompt and the shared behaviour of the two result lists.

The track and album result views are built once and switched between with
the toggle_search_type key; both keep the query and the parent of the view
that started the search.
"""

import logging
from typing import Optional

from spotmenu.core.errors import SpotifyError
from spotmenu.ui.launcher import Back, Cancelled, CustomKey, Row, Selected
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import ActivationPayload, Session, Transition, View

logger = logging.getLogger("Views")


class SearchView(View):
    """Free text prompt; remembers the last query as the initial filter."""

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(session, key, title, show_back=True)
        self.results_key = ""

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        outcome = self.show()

        if isinstance(outcome, (Back, Cancelled)):
            return self.back()

        if not isinstance(outcome, Selected):
            return self.stay()

        query = outcome.row.title
        self.launcher.filter = query
        if not query:
            self.notify(messages.SEARCH_EMPTY)
            return self.stay()

        logger.info(f"Searching for {query!r}")
        results = self.session.views.get(self.results_key)
        results.set_parent(self)
        results.set_query(query)
        return Transition(results)


class SearchResultsView(View):
    """Results for one query. Subclasses run the search and handle selection."""

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(
            session, key, title, show_back=True, no_custom=True, ignore_case=True
        )
        self.query = ""
        self.toggle_key = ""

    def set_query(self, query: str):
        self.query = query

    def search(self):
        """Fill the launcher rows for the current query."""
        raise NotImplementedError

    def on_select(self, row: Row) -> Optional[Transition]:
        raise NotImplementedError

    def on_key(self, action: str, row: Row) -> Optional[Transition]:
        return self.stay()

    def toggle(self) -> Transition:
        """Show the same query as the other result type."""
        other = self.session.views.get(self.toggle_key)
        parent = self.parent
        if parent is not None:
            other.set_parent(parent)
        other.set_query(self.query)
        return Transition(other)

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        if not self.query:
            return self.back()

        try:
            self.search()
        except SpotifyError as e:
            self.notify(messages.SEARCH_ERROR, e)
            return self.back()

        outcome = self.show()

        if isinstance(outcome, (Back, Cancelled)):
            return self.back()

        if isinstance(outcome, CustomKey):
            if outcome.action == "toggle_search_type":
                return self.toggle()
            return self.on_key(outcome.action, outcome.row)

        if isinstance(outcome, Selected):
            return self.on_select(outcome.row)

        return self.stay()
