from __future__ import annotations

from typing import Any, Generic, Type, TypeVar

import pydantic
from typing_extensions import Self

from pagectl.quick_jump import KeyKind

T = TypeVar("T")


class Event(pydantic.BaseModel):
    def __str__(self) -> str:
        return f"{self.__class__.__name__}"


class QuitEvent(Event):
    pass


class LogEvent(Event):
    msg: str

    def model_post_init(self, __context: Any) -> None:
        assert len(self.msg.split("\n")) == 1
        return super().model_post_init(__context)


class PrevPage(Event):
    pass


class NextPage(Event):
    pass


class JumpPrev(Event):
    pass


class JumpNext(Event):
    pass


class GoToPage(Event):
    page: int

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.page})"


class ChangePageSize(Event):
    size: int

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.size})"


class QuickJumpKey(Event):
    raw: str
    key: KeyKind = KeyKind.Other


class QuickJumpBlur(Event):
    raw: str


class QuickJumpConfirm(Event):
    pass


class UserInput(Event, Generic[T]):
    value: T

    def __str__(self) -> str:
        return f"{self.__class__.__name__}"

    @classmethod
    def from_str(cls: Type[Self], value: str) -> Self:
        raise NotImplementedError

    def to_event(self) -> Event:
        raise NotImplementedError


class JumpToPage(UserInput[str]):
    """Raw text typed into the jump prompt, validated by the quick jumper"""

    @classmethod
    def from_str(cls, value: str) -> JumpToPage:
        return cls(value=value)

    def to_event(self) -> Event:
        return QuickJumpKey(raw=self.value, key=KeyKind.Enter)


class SetPageSize(UserInput[int]):
    @classmethod
    def from_str(cls, value: str) -> SetPageSize:
        size = int(value)
        if size <= 0:
            raise ValueError(f"Invalid page size {value}")
        return cls(value=size)

    def to_event(self) -> Event:
        return ChangePageSize(size=self.value)


class RequestInput(Event):
    kind: Type[JumpToPage] | Type[SetPageSize]

    def __str__(self) -> str:
        return f"Input({self.kind.__name__})"
