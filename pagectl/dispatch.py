from __future__ import annotations

import logging

from pagectl import events
from pagectl.pager import jump_next_page, jump_prev_page
from pagectl.quick_jump import KeyKind, Number, QuickJumper
from pagectl.state import StateController

logger = logging.getLogger(__name__)


class InteractionDispatcher(object):
    """Translates user actions into guarded calls on the state controller"""

    def __init__(self, controller: StateController) -> None:
        self.controller = controller
        self.quick_jumper = QuickJumper(commit=self.go_to, value=controller.current)

    @property
    def show_less_items(self) -> bool:
        return self.controller.config.show_less_items

    def go_to(self, page: Number) -> int:
        accepted = self.controller.accepts(page)
        new_page = self.controller.set_page(page)
        if accepted:
            self.quick_jumper.sync(new_page)
        return new_page

    def prev(self) -> int:
        if self.controller.has_prev:
            return self.go_to(self.controller.current - 1)
        return self.controller.current

    def next(self) -> int:
        if self.controller.has_next:
            return self.go_to(self.controller.current + 1)
        return self.controller.current

    def jump_prev(self) -> int:
        return self.go_to(jump_prev_page(self.controller.current, self.show_less_items))

    def jump_next(self) -> int:
        return self.go_to(
            jump_next_page(
                self.controller.current,
                self.controller.total_pages,
                self.show_less_items,
            )
        )

    def change_page_size(self, size: int) -> int:
        if self.controller.config.disabled:
            logger.debug(f"Ignoring page size {size} while disabled")
            return self.controller.current
        new_page = self.controller.set_page_size(size)
        self.quick_jumper.sync(new_page)
        return new_page

    def quick_jump_key(self, raw: str, key: KeyKind) -> int:
        self.quick_jumper.key_up(raw, key, self.controller.total_pages)
        return self.controller.current

    def quick_jump_blur(self, raw: str) -> int:
        self.quick_jumper.blur(raw, self.controller.total_pages)
        return self.controller.current

    def quick_jump_confirm(self) -> int:
        self.quick_jumper.confirm()
        return self.controller.current

    def dispatch(self, event: events.Event) -> int:
        """Apply an event, returning the current page afterwards"""
        if isinstance(event, events.PrevPage):
            self.prev()
        elif isinstance(event, events.NextPage):
            self.next()
        elif isinstance(event, events.JumpPrev):
            self.jump_prev()
        elif isinstance(event, events.JumpNext):
            self.jump_next()
        elif isinstance(event, events.GoToPage):
            self.go_to(event.page)
        elif isinstance(event, events.ChangePageSize):
            self.change_page_size(event.size)
        elif isinstance(event, events.QuickJumpKey):
            self.quick_jump_key(event.raw, event.key)
        elif isinstance(event, events.QuickJumpBlur):
            self.quick_jump_blur(event.raw)
        elif isinstance(event, events.QuickJumpConfirm):
            self.quick_jump_confirm()
        elif isinstance(event, events.UserInput):
            return self.dispatch(event.to_event())
        else:
            logger.info(f"Unknown event {event}")
        return self.controller.current
