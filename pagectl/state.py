from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from pagectl._logging import warn_once
from pagectl.pagemath import clamp, is_valid_page_candidate, total_pages

if TYPE_CHECKING:
    from pagectl.pagination import PaginationConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Owned(str, enum.Enum):
    External = "external"
    Internal = "internal"


class MergedValue(Generic[T]):
    """A state field that is either supplied by the host or held internally

    An external value is mirrored on every reconcile and is never written
    locally; `set` only updates internally owned values.
    """

    def __init__(self, default: T) -> None:
        self.owner = Owned.Internal
        self.value = default

    def resolve(self, external: Optional[T]) -> None:
        if external is None:
            self.owner = Owned.Internal
        else:
            self.owner = Owned.External
            self.value = external

    @property
    def controlled(self) -> bool:
        return self.owner is Owned.External

    def set(self, value: T) -> None:
        if not self.controlled:
            self.value = value


class StateController(object):
    def __init__(self, config: PaginationConfig) -> None:
        self.config = config
        self._page_size: MergedValue[int] = MergedValue(config.default_page_size)
        self._current: MergedValue[int] = MergedValue(config.default_current)
        self.reconcile(config)

    def reconcile(self, config: PaginationConfig) -> None:
        """Read a fresh config, resolving ownership of each field"""
        self.config = config
        self._page_size.resolve(config.page_size)
        self._current.resolve(config.current)

        if self._current.controlled and config.on_change is None:
            warn_once(
                logger,
                "A controlled `current` was given without an `on_change` handler. "
                "The pagination will be read-only.",
            )

        clamped = self._post_state(self._current.value)
        if clamped != self._current.value:
            logger.debug(f"Clamping current page {self._current.value} -> {clamped}")
            self._current.set(clamped)

    def _post_state(self, page: int) -> int:
        return max(1, min(page, self.total_pages))

    @property
    def page_size(self) -> int:
        return self._page_size.value

    @property
    def current(self) -> int:
        return self._post_state(self._current.value)

    @property
    def total_pages(self) -> int:
        return total_pages(self.config.total, self.page_size)

    @property
    def has_prev(self) -> bool:
        return self.current > 1

    @property
    def has_next(self) -> bool:
        return self.current < self.total_pages

    @property
    def current_owner(self) -> Owned:
        return self._current.owner

    @property
    def page_size_owner(self) -> Owned:
        return self._page_size.owner

    def accepts(self, page) -> bool:
        return not self.config.disabled and is_valid_page_candidate(
            page, self.current, self.config.total
        )

    def set_page(self, page) -> int:
        """Request a page change

        Returns the page the control moved to (in controlled mode, the page
        requested from the host), or the current page if the request was
        rejected.
        """
        current = self.current
        if not self.accepts(page):
            logger.debug(f"Rejected page {page!r} (current {current})")
            return current

        new_page = clamp(page, self.total_pages)
        if new_page != current:
            self._current.set(new_page)
            logger.debug(f"Page {current} -> {new_page}")
            if self.config.on_change is not None:
                self.config.on_change(new_page, self.page_size)
        return new_page

    def set_page_size(self, size: int) -> int:
        """Change the page size, moving the current page back if it no longer exists

        Both notifications are always sent since consumers have to refetch
        even when the page number itself is unchanged. A host owned page size
        is only requested; the page follows once the host supplies it.
        """
        current = self.current
        fallback = total_pages(self.config.total, size)
        next_current = fallback if current > fallback and fallback != 0 else current

        if not self._page_size.controlled:
            self._page_size.set(size)
            self._current.set(next_current)
        logger.debug(f"Page size -> {size}, page {current} -> {next_current}")

        if self.config.on_change is not None:
            self.config.on_change(next_current, size)
        if self.config.on_show_size_change is not None:
            self.config.on_show_size_change(next_current, size)
        return next_current
