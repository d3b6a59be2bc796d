"""
Stateless page arithmetic
"""
import math

from pagectl import var


def is_integer(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def total_pages(total, page_size) -> int:
    """Number of pages needed to show total items, 0 for an empty or degenerate list

    >>> total_pages(500, 10)
    50
    >>> total_pages(0, 10)
    0
    """
    if not is_integer(total) or not is_integer(page_size):
        return 0
    if total <= 0 or page_size <= 0:
        return 0
    return int((total - 1) // page_size + 1)


def is_valid_page_candidate(page, current: int, total) -> bool:
    return is_integer(page) and page != current and is_integer(total) and total > 0


def clamp(page: int, n_pages: int) -> int:
    if n_pages <= 0:
        return 1
    return int(min(max(page, 1), n_pages))


def buffer_size(show_less_items: bool) -> int:
    return var.BUFFER_SIZE_LESS_ITEMS if show_less_items else var.BUFFER_SIZE


def jump_distance(show_less_items: bool) -> int:
    return var.JUMP_DISTANCE_LESS_ITEMS if show_less_items else var.JUMP_DISTANCE


def item_range(current: int, page_size: int, total: int) -> tuple[int, int]:
    """1-indexed first and last item shown on the current page"""
    if not total_pages(total, page_size):
        return 0, 0
    first = (current - 1) * page_size + 1
    last = total if current * page_size > total else current * page_size
    return first, last


def size_options(options: list[int], page_size: int) -> list[int]:
    """Page size choices, with the current size added in order if missing"""
    if page_size in options:
        return list(options)
    return sorted([*options, page_size])
