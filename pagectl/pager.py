"""
Build the ordered page bar for a current page

With 50 pages, current page 25 and the default buffer of 2

    1 «23 24 [25] 26 27» 50
      ^ jump-prev      ^ jump-next

Small page counts (<= 3 + 2 * buffer) show every page. Larger counts show a
window of 1 + 2 * buffer pages around the current page, pinned to the start or
end of the range when the current page is close to either, plus the first and
last page and jump markers over the collapsed gaps.
"""
from __future__ import annotations

import logging

from pagectl.markers import MarkerKind, PageMarker
from pagectl.pagemath import buffer_size, jump_distance

logger = logging.getLogger(__name__)


def jump_prev_page(current: int, show_less_items: bool = False) -> int:
    return max(1, current - jump_distance(show_less_items))


def jump_next_page(current: int, n_pages: int, show_less_items: bool = False) -> int:
    return min(n_pages, current + jump_distance(show_less_items))


def _window(current: int, n_pages: int, buffer: int) -> tuple[int, int]:
    left = max(1, current - buffer)
    right = min(current + buffer, n_pages)
    if current - 1 <= buffer:
        right = 1 + buffer * 2
    # Applied second so the end pin wins if both apply
    if n_pages - current <= buffer:
        left = n_pages - buffer * 2
    return left, right


def build_page_markers(
    current: int,
    n_pages: int,
    show_less_items: bool = False,
    show_jumpers: bool = True,
) -> list[PageMarker]:
    buffer = buffer_size(show_less_items)

    if n_pages <= 3 + buffer * 2:
        if not n_pages:
            return [PageMarker(kind=MarkerKind.Page, page=1, disabled=True)]
        return [
            PageMarker(kind=MarkerKind.Page, page=i, active=current == i)
            for i in range(1, n_pages + 1)
        ]

    left, right = _window(current, n_pages, buffer)
    collapsed_prev = current - 1 >= buffer * 2 and current != 1 + 2
    collapsed_next = n_pages - current >= buffer * 2 and current != n_pages - 2

    # First pass: (kind, page) pairs only
    raw: list[tuple[MarkerKind, int]] = [
        (MarkerKind.Page, i) for i in range(left, right + 1)
    ]
    window_first, window_last = raw[0], raw[-1]
    if collapsed_prev and show_jumpers:
        raw.insert(0, (MarkerKind.JumpPrev, jump_prev_page(current, show_less_items)))
    if collapsed_next and show_jumpers:
        raw.append((MarkerKind.JumpNext, jump_next_page(current, n_pages, show_less_items)))
    if left != 1:
        raw.insert(0, (MarkerKind.Page, 1))
    if right != n_pages:
        raw.append((MarkerKind.Page, n_pages))

    # Second pass: flags
    markers = [
        PageMarker(
            kind=kind,
            page=page,
            active=kind is MarkerKind.Page and page == current,
            after_jump_prev=collapsed_prev and (kind, page) == window_first,
            before_jump_next=collapsed_next and (kind, page) == window_last,
        )
        for kind, page in raw
    ]
    logger.debug(f"Built {len(markers)} markers for page {current}/{n_pages}")
    return markers
