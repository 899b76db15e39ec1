"""
Terminal rendering for gnews.
"""
import sys
from typing import Optional, Sequence, TextIO

from gnews.core.article import FilterType
from gnews.core.view_model import (
    STATE_SIGNAL,
    TITLE_SIGNAL,
    LoadState,
    LoadStatus,
    NewsViewModel,
    ViewItem,
)


def format_item(item: ViewItem, show_link: bool = True) -> str:
    """
    Format one list row: the title, then '[source] date', then the link.
    """
    lines = [item.title, f"  [{item.source}] {item.pub_date or ''}".rstrip()]
    if show_link and item.link:
        lines.append(f"  {item.link}")
    return "\n".join(lines)


def format_categories(filter_types: Sequence[FilterType] = tuple(FilterType)) -> str:
    """Numbered category menu, starting at 1."""
    return "\n".join(
        f"{index:>2}. {filter_type.label} ({filter_type.name.lower()})"
        for index, filter_type in enumerate(filter_types, 1)
    )


class ConsoleView:
    """
    Renders a NewsViewModel to text streams.

    The list is only redrawn after a successful load; errors are reported on
    the error stream and the last list stays as it was.
    """
    def __init__(self,
                 view_model: NewsViewModel,
                 out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None,
                 show_links: bool = True):
        self.view_model = view_model
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.show_links = show_links
        self._unsubscribe = view_model.subscribe(self.on_change)

    def close(self):
        self._unsubscribe()

    def on_change(self, signal: str, value: object) -> None:
        if signal == TITLE_SIGNAL:
            print(f"== {value} ==", file=self.out)
        elif signal == STATE_SIGNAL:
            self.render_state(value)

    def render_state(self, state: LoadState) -> None:
        if state.status is LoadStatus.LOADING:
            print(f"Loading {self.view_model.title}...", file=self.out)
        elif state.status is LoadStatus.LOADED:
            self.render_items()
        else:
            print(f"エラー: {state.message}", file=self.err)

    def render_items(self) -> None:
        items = self.view_model.view_items
        if not items:
            print("(no articles)", file=self.out)
            return
        for item in items:
            print(format_item(item, self.show_links), file=self.out)
        self.out.flush()
