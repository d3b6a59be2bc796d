"""
Plain text rendering of a pagination view

    < 1 ••• 23 24 [25] 26 27 ••• 50 >

Active page is bracketed, disabled items are parenthesized.
"""
from __future__ import annotations

from typing import Callable, Optional, Union

from pagectl.locales import EN_US, Locale
from pagectl.markers import MarkerKind, PageMarker
from pagectl.pagination import PaginationView

ELLIPSIS = "•••"
PREV = "<"
NEXT = ">"

Icon = Union[str, Callable[[PaginationView], str], None]
ItemRender = Callable[[int, str, str], Optional[str]]
ShowTotal = Callable[[int, tuple[int, int]], str]


def resolve_icon(icon: Icon, default: str, view: PaginationView) -> str:
    """Icons are either literal text or a factory called with the view"""
    if icon is None:
        return default
    if callable(icon):
        return icon(view)
    return icon


def default_item_render(page: int, kind: str, default: str) -> Optional[str]:
    return default


def titles(locale: Locale, show_less_items: bool) -> dict[str, str]:
    return {
        "prev": locale.prev_page,
        "next": locale.next_page,
        MarkerKind.JumpPrev.value: locale.prev_3 if show_less_items else locale.prev_5,
        MarkerKind.JumpNext.value: locale.next_3 if show_less_items else locale.next_5,
    }


def _decorate(text: str, active: bool = False, disabled: bool = False) -> str:
    if active:
        return f"[{text}]"
    if disabled:
        return f"({text})"
    return text


def render_marker(
    marker: PageMarker,
    item_render: ItemRender,
    jump_prev_icon: str,
    jump_next_icon: str,
) -> Optional[str]:
    if marker.kind is MarkerKind.JumpPrev:
        return item_render(marker.page, marker.kind.value, jump_prev_icon)
    elif marker.kind is MarkerKind.JumpNext:
        return item_render(marker.page, marker.kind.value, jump_next_icon)
    text = item_render(marker.page, marker.kind.value, str(marker.page))
    if text is None:
        return None
    return _decorate(text, active=marker.active, disabled=marker.disabled)


def render_text(
    view: PaginationView,
    locale: Locale = EN_US,
    item_render: Optional[ItemRender] = None,
    prev_icon: Icon = None,
    next_icon: Icon = None,
    jump_prev_icon: Icon = None,
    jump_next_icon: Icon = None,
    show_total: Optional[ShowTotal] = None,
) -> str:
    if view.hidden:
        return ""

    item_render = item_render or default_item_render
    parts: list[Optional[str]] = []

    if show_total is not None:
        parts.append(show_total(view.total, view.item_range))

    prev = item_render(view.prev_page, "prev", resolve_icon(prev_icon, PREV, view))
    if prev is not None:
        parts.append(_decorate(prev, disabled=view.prev_disabled))

    if view.simple:
        pending = "" if view.quick_jump_value is None else view.quick_jump_value
        parts.append(f"{pending}/{view.total_pages}")
    else:
        jump_prev = resolve_icon(jump_prev_icon, ELLIPSIS, view)
        jump_next = resolve_icon(jump_next_icon, ELLIPSIS, view)
        parts.extend(
            render_marker(marker, item_render, jump_prev, jump_next)
            for marker in view.markers
        )

    next_ = item_render(view.next_page, "next", resolve_icon(next_icon, NEXT, view))
    if next_ is not None:
        parts.append(_decorate(next_, disabled=view.next_disabled))

    if view.show_size_changer and not view.simple:
        parts.append(f"{view.page_size} {locale.items_per_page}")
    if view.show_quick_jumper and not view.simple:
        pending = "" if view.quick_jump_value is None else view.quick_jump_value
        parts.append(f"{locale.jump_to} {pending}".rstrip())

    text = " ".join(part for part in parts if part)
    if view.disabled:
        return _decorate(text, disabled=True)
    return text
