from __future__ import annotations

import enum

import pydantic


class MarkerKind(str, enum.Enum):
    Page = "page"
    JumpPrev = "jump-prev"
    JumpNext = "jump-next"


class PageMarker(pydantic.BaseModel):
    """
    One entry of the page bar, in left to right order.

    For jump markers `page` is the page the marker moves to when activated.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    kind: MarkerKind
    page: int
    active: bool = False
    disabled: bool = False
    after_jump_prev: bool = False
    before_jump_next: bool = False

    @property
    def key(self) -> tuple[MarkerKind, int]:
        return (self.kind, self.page)

    def __str__(self) -> str:
        if self.kind is MarkerKind.Page:
            return f"{self.page}"
        return f"{self.kind.value}({self.page})"
