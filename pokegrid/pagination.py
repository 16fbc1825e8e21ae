from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Sequence, Tuple, TypeVar

from pokegrid import config

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow:
    """Page numbers offered as direct-jump buttons, plus the ellipsis flags."""

    pages: Tuple[int, ...]
    show_first: bool
    show_last: bool


@dataclass(frozen=True)
class PageMetadata:
    showing_start: int
    showing_end: int
    total_items: int

    def caption(self, noun: str = "Pokémon") -> str:
        if self.total_items == 0:
            return f"No {noun} found"
        return f"Showing {self.showing_start}–{self.showing_end} of {self.total_items} {noun}"


class Paginator(Generic[T]):
    """Fixed-size pages over a list, with a bounded window of page buttons.

    The current page snaps back to 1 whenever the number of items changes;
    reordering the same items keeps the page.
    """

    def __init__(
        self,
        items: Sequence[T] = (),
        page_size: int = config.PAGE_SIZE,
        max_visible_pages: int = config.MAX_VISIBLE_PAGES,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        if max_visible_pages <= 0:
            raise ValueError(f"max_visible_pages must be positive, got {max_visible_pages}")
        self.page_size = page_size
        self.max_visible_pages = max_visible_pages
        self._items: List[T] = list(items)
        self._current_page = 1

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_items(self) -> int:
        return len(self._items)

    @property
    def total_pages(self) -> int:
        return max(1, -(-self.total_items // self.page_size))

    @property
    def is_first_page(self) -> bool:
        return self._current_page == 1

    @property
    def is_last_page(self) -> bool:
        return self._current_page == self.total_pages

    def set_items(self, items: Sequence[T]) -> bool:
        """Replace the items. Returns True when this reset the page to 1."""
        previous = len(self._items)
        self._items = list(items)
        if len(self._items) != previous and self._current_page != 1:
            self._current_page = 1
            return True
        return False

    def go_to_page(self, page: int) -> bool:
        if page < 1 or page > self.total_pages or page == self._current_page:
            return False
        self._current_page = page
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self._current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self._current_page - 1)

    def first_page(self) -> bool:
        return self.go_to_page(1)

    def last_page(self) -> bool:
        return self.go_to_page(self.total_pages)

    def visible_slice(self) -> List[T]:
        start = (self._current_page - 1) * self.page_size
        return self._items[start:start + self.page_size]

    def page_window(self) -> PageWindow:
        total = self.total_pages
        width = self.max_visible_pages
        if total <= width:
            return PageWindow(tuple(range(1, total + 1)), False, False)

        current = self._current_page
        half = width // 2
        if current <= half + 1:
            first, last = 1, width
        elif current >= total - half:
            first, last = total - width + 1, total
        else:
            first, last = current - half, current - half + width - 1
        return PageWindow(
            pages=tuple(range(first, last + 1)),
            show_first=current > half + 1,
            show_last=current < total - half,
        )

    def metadata(self) -> PageMetadata:
        total = self.total_items
        if total == 0:
            return PageMetadata(0, 0, 0)
        start = (self._current_page - 1) * self.page_size + 1
        return PageMetadata(start, min(self._current_page * self.page_size, total), total)
