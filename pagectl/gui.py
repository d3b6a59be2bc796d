"""
Interactive pagination in the terminal

The curses front end is only a renderer: every key press becomes an event
that is handed to `Pagination.dispatch`, and each frame is drawn from
`Pagination.view()`.
"""
from __future__ import annotations

import curses
import curses.textpad
import logging
from typing import Optional

import pydantic

from pagectl import events, key_handlers, var
from pagectl._logging import CursesHandler
from pagectl.locales import EN_US, Locale
from pagectl.pagination import Pagination, PaginationConfig
from pagectl.render import render_text, titles

logger = logging.getLogger(__name__)


class Windows(pydantic.BaseModel):
    main: curses.window
    status: curses.window
    debug: curses.window

    class Config:
        arbitrary_types_allowed = True


def apply_layout(stdscr: curses.window) -> Windows:
    max_y, max_x = stdscr.getmaxyx()
    main_height = max(1, max_y - 1 - var.LOG_LINES)
    return Windows(
        main=stdscr.derwin(main_height, max_x, 0, 0),
        status=stdscr.derwin(1, max_x, main_height, 0),
        debug=stdscr.derwin(var.LOG_LINES, max_x, main_height + 1, 0),
    )


def write_line(window: curses.window, msg: str, y: int = 0) -> None:
    _, max_x = window.getmaxyx()
    window.addstr(y, 1, msg[: max_x - 2])


def prompt(window: curses.window, msg: str) -> Optional[str]:
    """Read a line of text in the given window, None if cancelled"""
    window.clear()
    write_line(window, msg)
    window.refresh()

    _, max_x = window.getmaxyx()
    resp_window = window.derwin(1, max(1, max_x - len(msg) - 2), 0, 1 + len(msg))
    resp_input = curses.textpad.Textbox(resp_window)
    curses.curs_set(1)
    try:
        resp_input.edit()
    except KeyboardInterrupt:
        return None
    else:
        return resp_input.gather().strip()
    finally:
        curses.curs_set(0)
        del resp_window
        window.clear()


def prompt_label(request: events.RequestInput, pagination: Pagination, locale: Locale) -> str:
    if request.kind is events.JumpToPage:
        return f"{locale.jump_to}: "
    options = "/".join(str(size) for size in pagination.view().page_size_options)
    return f"{locale.page_size} ({options}): "


def draw(windows: Windows, pagination: Pagination, locale: Locale) -> None:
    view = pagination.view()
    first, last = view.item_range

    windows.main.clear()
    write_line(windows.main, f"{locale.page} {view.current}/{view.total_pages}", y=1)
    write_line(windows.main, f"Showing items {first}-{last} of {view.total}", y=2)
    hints = titles(locale, view.show_less_items)
    write_line(
        windows.main,
        f"[h] {hints['prev']}  [l] {hints['next']}  "
        f"[H] {hints['jump-prev']}  [L] {hints['jump-next']}  "
        f"[p] {locale.jump_to}  [s] {locale.page_size}  [q] Quit",
        y=4,
    )
    windows.main.refresh()

    windows.status.clear()
    write_line(windows.status, render_text(view, locale=locale))
    windows.status.refresh()


def run(
    stdscr: curses.window,
    pagination: Pagination,
    locale: Locale = EN_US,
    debug: bool = False,
) -> None:
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.refresh()

    windows = apply_layout(stdscr)
    handler = key_handlers.default_handler

    log_handler: Optional[CursesHandler] = None
    if debug:
        log_handler = CursesHandler()
        log_handler.set_screen(windows.debug)
        log_handler.setLevel(logging.DEBUG)
        logging.getLogger("pagectl").addHandler(log_handler)
        logging.getLogger("pagectl").setLevel(logging.DEBUG)

    def log(msg: str) -> None:
        windows.debug.clear()
        write_line(windows.debug, msg)
        windows.debug.refresh()

    try:
        while True:
            draw(windows, pagination, locale)
            event = handler.handle(stdscr.getch())
            if event is None:
                continue
            elif isinstance(event, events.QuitEvent):
                break
            elif isinstance(event, events.LogEvent):
                log(event.msg)
            elif isinstance(event, events.RequestInput):
                resp = prompt(windows.status, prompt_label(event, pagination, locale))
                if not resp:
                    continue
                try:
                    user_input = event.kind.from_str(resp)
                except ValueError:
                    # Prompts silently reject invalid values
                    continue
                pagination.dispatch(user_input)
            else:
                pagination.dispatch(event)
    except KeyboardInterrupt:
        pass
    finally:
        if log_handler is not None:
            logging.getLogger("pagectl").removeHandler(log_handler)


def main(config: PaginationConfig, locale: Locale = EN_US, debug: bool = False) -> None:
    def on_change(page: int, page_size: int) -> None:
        logger.info(f"Page changed to {page} ({page_size} per page)")

    def on_show_size_change(page: int, page_size: int) -> None:
        logger.info(f"Page size changed to {page_size}")

    pagination = Pagination(
        config.model_copy(
            update={"on_change": on_change, "on_show_size_change": on_show_size_change}
        )
    )

    def run_fn(stdscr: curses.window) -> None:
        run(stdscr, pagination, locale=locale, debug=debug)

    curses.wrapper(run_fn)
