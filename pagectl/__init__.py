from .events import Event
from .markers import MarkerKind, PageMarker
from .pagination import Pagination, PaginationConfig, PaginationView
from .pager import build_page_markers
from .pagemath import total_pages
from .quick_jump import KeyKind
from .state import Owned, StateController


__all__ = [
    "Event",
    "KeyKind",
    "MarkerKind",
    "Owned",
    "PageMarker",
    "Pagination",
    "PaginationConfig",
    "PaginationView",
    "StateController",
    "build_page_markers",
    "total_pages",
]
