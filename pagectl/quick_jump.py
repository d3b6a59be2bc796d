"""
Validation of typed page numbers

The quick jumper holds the last accepted value of a text field. Typing
updates it; nothing moves until the value is committed with Enter, the
arrow keys, leaving the field or the go button.
"""
from __future__ import annotations

import enum
import logging
import math
from typing import Callable, Optional, Union

from pagectl.pagemath import is_integer

logger = logging.getLogger(__name__)

Number = Union[int, float]


class KeyKind(str, enum.Enum):
    Enter = "enter"
    Up = "up"
    Down = "down"
    Other = "other"


class NotANumber(ValueError):
    pass


def parse_number(raw: str) -> Optional[Number]:
    """Parse the field contents, None when the field is empty

    Raises NotANumber for anything that is not a finite number.
    """
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        raise NotANumber(raw)
    if not math.isfinite(value):
        raise NotANumber(raw)
    return int(value) if is_integer(value) else value


class QuickJumper(object):
    def __init__(self, commit: Callable[[Number], int], value: Optional[Number] = 1) -> None:
        self._commit = commit
        self.pending = value

    def coerce(self, raw: str, n_pages: int) -> Optional[Number]:
        try:
            value = parse_number(raw)
        except NotANumber:
            logger.debug(f"Ignoring non-numeric input {raw!r}")
            return self.pending
        if value is None:
            return None
        if value >= n_pages:
            return n_pages
        return value

    def _accept(self, raw: str, n_pages: int) -> Optional[Number]:
        """Update the pending value, returning it if it can be committed"""
        value = self.coerce(raw, n_pages)
        if value != self.pending:
            self.pending = value
        try:
            parsed = parse_number(raw)
        except NotANumber:
            return None
        if parsed is None:
            return None
        return value

    def key_up(self, raw: str, key: KeyKind, n_pages: int) -> Optional[int]:
        """Handle the field after a key press

        Returns the resulting page if something was committed.
        """
        value = self._accept(raw, n_pages)
        if value is None or key is KeyKind.Other:
            return None
        if key is KeyKind.Enter:
            return self.commit(value)
        elif key is KeyKind.Up:
            return self.commit(value - 1)
        elif key is KeyKind.Down:
            return self.commit(value + 1)
        return None

    def blur(self, raw: str, n_pages: int) -> Optional[int]:
        value = self._accept(raw, n_pages)
        if value is None:
            return None
        return self.commit(value)

    def confirm(self) -> Optional[int]:
        if self.pending is None:
            return None
        return self.commit(self.pending)

    def commit(self, value: Number) -> int:
        return self._commit(value)

    def sync(self, page: int) -> None:
        self.pending = page
