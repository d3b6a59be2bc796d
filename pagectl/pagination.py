"""
Pagination control state

    >>> pagination = Pagination(PaginationConfig(total=500, default_current=25))
    >>> [str(m) for m in pagination.view().markers]
    ['1', 'jump-prev(20)', '23', '24', '25', '26', '27', 'jump-next(30)', '50']

A renderer reads `view()` and wires user events back through the `on_*`
callbacks (or `dispatch`). Host applications receive `on_change` and
`on_show_size_change` notifications from the config.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

import pydantic

from pagectl import events, var
from pagectl.dispatch import InteractionDispatcher
from pagectl.markers import PageMarker
from pagectl.pager import build_page_markers, jump_next_page, jump_prev_page
from pagectl.pagemath import item_range, size_options
from pagectl.quick_jump import KeyKind, Number
from pagectl.state import StateController

PageCallback = Callable[[int, int], Any]


class PaginationConfig(pydantic.BaseModel):
    total: int = 0
    current: Optional[int] = None
    default_current: int = var.DEFAULT_CURRENT
    page_size: Optional[int] = None
    default_page_size: int = var.DEFAULT_PAGE_SIZE
    disabled: bool = False

    show_less_items: bool = False
    show_prev_next_jumpers: bool = True
    show_size_changer: Optional[bool] = None
    total_boundary_show_size_changer: int = var.TOTAL_BOUNDARY_SHOW_SIZE_CHANGER
    show_quick_jumper: bool = False
    hide_on_single_page: bool = False
    simple: bool = False
    page_size_options: list[int] = pydantic.Field(
        default_factory=lambda: list(var.DEFAULT_PAGE_SIZE_OPTIONS)
    )

    on_change: Optional[PageCallback] = None
    on_show_size_change: Optional[PageCallback] = None


class PaginationView(pydantic.BaseModel):
    """Everything a renderer needs for one evaluation"""

    model_config = pydantic.ConfigDict(frozen=True)

    markers: list[PageMarker]
    total: int
    total_pages: int
    current: int
    page_size: int
    disabled: bool
    simple: bool
    hidden: bool

    has_prev: bool
    has_next: bool
    prev_disabled: bool
    next_disabled: bool
    prev_page: int
    next_page: int
    jump_prev_page: int
    jump_next_page: int
    show_less_items: bool

    quick_jump_value: Optional[Number]
    show_quick_jumper: bool
    show_size_changer: bool
    page_size_options: list[int]
    item_range: tuple[int, int]


class Pagination(object):
    def __init__(self, config: Optional[PaginationConfig] = None) -> None:
        self.config = config or PaginationConfig()
        self.controller = StateController(self.config)
        self.dispatcher = InteractionDispatcher(self.controller)

    def update(self, config: PaginationConfig) -> None:
        self.config = config
        self.controller.reconcile(config)

    def update_with(self, **kwargs) -> None:
        """Re-supply the current config with some fields changed"""
        self.update(self.config.model_copy(update=kwargs))

    def view(self) -> PaginationView:
        config = self.config
        current = self.controller.current
        page_size = self.controller.page_size
        n_pages = self.controller.total_pages
        has_prev = self.controller.has_prev
        has_next = self.controller.has_next

        if config.simple:
            next_disabled = not has_next
        else:
            next_disabled = not has_next or not n_pages

        show_size_changer = config.show_size_changer
        if show_size_changer is None:
            show_size_changer = config.total > config.total_boundary_show_size_changer

        return PaginationView(
            markers=build_page_markers(
                current,
                n_pages,
                show_less_items=config.show_less_items,
                show_jumpers=config.show_prev_next_jumpers,
            ),
            total=config.total,
            total_pages=n_pages,
            current=current,
            page_size=page_size,
            disabled=config.disabled,
            simple=config.simple,
            hidden=config.hide_on_single_page and config.total <= page_size,
            has_prev=has_prev,
            has_next=has_next,
            prev_disabled=not has_prev or not n_pages,
            next_disabled=next_disabled,
            prev_page=current - 1 if current - 1 > 0 else 0,
            next_page=current + 1 if current + 1 < n_pages else n_pages,
            jump_prev_page=jump_prev_page(current, config.show_less_items),
            jump_next_page=jump_next_page(current, n_pages, config.show_less_items),
            show_less_items=config.show_less_items,
            quick_jump_value=self.dispatcher.quick_jumper.pending,
            show_quick_jumper=config.show_quick_jumper and config.total > page_size,
            show_size_changer=show_size_changer,
            page_size_options=size_options(config.page_size_options, page_size),
            item_range=item_range(current, page_size, config.total),
        )

    @property
    def current(self) -> int:
        return self.controller.current

    @property
    def page_size(self) -> int:
        return self.controller.page_size

    @property
    def total_pages(self) -> int:
        return self.controller.total_pages

    def dispatch(self, event: events.Event) -> int:
        return self.dispatcher.dispatch(event)

    def on_page_click(self, page: int) -> int:
        return self.dispatcher.go_to(page)

    def on_prev_click(self) -> int:
        return self.dispatcher.prev()

    def on_next_click(self) -> int:
        return self.dispatcher.next()

    def on_jump_prev_click(self) -> int:
        return self.dispatcher.jump_prev()

    def on_jump_next_click(self) -> int:
        return self.dispatcher.jump_next()

    def on_page_size_select(self, size: int) -> int:
        return self.dispatcher.change_page_size(size)

    def on_quick_jump_key(self, raw: str, key: KeyKind = KeyKind.Other) -> int:
        return self.dispatcher.quick_jump_key(raw, key)

    def on_quick_jump_blur(self, raw: str) -> int:
        return self.dispatcher.quick_jump_blur(raw)

    def on_quick_jump_confirm(self) -> int:
        return self.dispatcher.quick_jump_confirm()
