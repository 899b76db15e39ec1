"""
Presentation state for gnews.

NewsViewModel sits between a FeedSource and whatever renders the list. It
holds the selected category, the outcome of the latest fetch and the items to
display, and tells subscribers when the state or the title changes.
"""
import logging
from dataclasses import dataclass
from datetime import tzinfo
from enum import Enum
from typing import Callable, List, Optional, Tuple

from gnews.core.article import Article, FilterType
from gnews.core.errors import FeedError
from gnews.fetchers.google_news import FeedSource
from gnews.formatters.dates import DISPLAY_TIMEZONE, format_pub_date

# Configure logging
logger = logging.getLogger(__name__)

STATE_SIGNAL = "state"
TITLE_SIGNAL = "title"

Listener = Callable[[str, object], None]


@dataclass(frozen=True)
class ViewItem:
    """
    Display-ready projection of an Article. Hashable so lists can be diffed.
    """
    title: str
    link: str
    source: str
    pub_date: Optional[str]


class LoadStatus(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class LoadState:
    """
    Outcome of the most recent load request.
    """
    status: LoadStatus
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> "LoadState":
        return cls(LoadStatus.LOADING)

    @classmethod
    def loaded(cls) -> "LoadState":
        return cls(LoadStatus.LOADED)

    @classmethod
    def error(cls, message: str) -> "LoadState":
        return cls(LoadStatus.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.status is LoadStatus.ERROR


def to_view_item(article: Article, tz: tzinfo = DISPLAY_TIMEZONE) -> ViewItem:
    """
    Map an Article to a ViewItem, formatting its publication date.

    Args:
        article: The parsed article
        tz: Timezone the date is shown in

    Returns:
        The ViewItem; pub_date is None when the date cannot be parsed
    """
    return ViewItem(
        title=article.title,
        link=article.link,
        source=article.source,
        pub_date=format_pub_date(article.pub_date_str, tz),
    )


class NewsViewModel:
    """
    State machine behind the article list.

    Transitions: loading -> loaded on success, loading -> error on failure,
    and back to loading only through load() or reload(). Overlapping loads are
    not serialized; whichever finishes last decides the final state.
    """
    def __init__(self, source: FeedSource, tz: tzinfo = DISPLAY_TIMEZONE):
        """
        Initialize the NewsViewModel.

        Args:
            source: Where articles come from
            tz: Timezone used for publication dates
        """
        self._source = source
        self._tz = tz
        self._filter_type = FilterType.TOP
        self._title = FilterType.TOP.label
        self._state: Optional[LoadState] = None
        self._view_items: Tuple[ViewItem, ...] = ()
        self._listeners: List[Listener] = []
        self._in_flight = 0

    @property
    def filter_type(self) -> FilterType:
        return self._filter_type

    @property
    def title(self) -> str:
        return self._title

    @property
    def state(self) -> Optional[LoadState]:
        """None until the first load starts."""
        return self._state

    @property
    def view_items(self) -> Tuple[ViewItem, ...]:
        return self._view_items

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for state and title changes.

        Listeners are called synchronously as listener(signal, value) where
        signal is 'state' or 'title'. Rendering code running on another
        thread has to hand the call over itself.

        Args:
            listener: Callable receiving (signal, value)

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, signal: str, value: object) -> None:
        for listener in list(self._listeners):
            listener(signal, value)

    def _set_state(self, state: LoadState) -> None:
        self._state = state
        self._emit(STATE_SIGNAL, state)

    def _set_filter_type(self, filter_type: FilterType) -> None:
        self._filter_type = filter_type
        if self._title != filter_type.label:
            self._title = filter_type.label
            self._emit(TITLE_SIGNAL, self._title)

    async def load(self, filter_type: FilterType) -> None:
        """
        Fetch the articles of a category and publish them.

        On failure the previously loaded items stay in place and the state
        becomes error with a readable message.

        Args:
            filter_type: The category to show
        """
        if self._in_flight:
            logger.warning(
                f"Loading {filter_type.name} while {self._in_flight} earlier load(s) are pending; "
                "the last one to finish wins"
            )
        self._in_flight += 1
        try:
            self._set_filter_type(filter_type)
            self._set_state(LoadState.loading())

            try:
                articles = await self._source.fetch(filter_type)
            except FeedError as e:
                logger.warning(f"Failed to load {filter_type.name}: {e}")
                self._set_state(LoadState.error(str(e)))
                return
            except Exception as e:
                logger.exception(f"Unexpected error loading {filter_type.name}: {e}")
                self._set_state(LoadState.error(str(e) or type(e).__name__))
                return

            self._view_items = tuple(to_view_item(article, self._tz) for article in articles)
            logger.debug(f"Loaded {len(self._view_items)} items for {filter_type.name}")
            self._set_state(LoadState.loaded())
        finally:
            self._in_flight -= 1

    async def reload(self) -> None:
        """Load the current category again."""
        await self.load(self._filter_type)
