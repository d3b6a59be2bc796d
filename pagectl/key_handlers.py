import curses
from typing import Optional

import pydantic

from pagectl import events


class KeyHandler(pydantic.BaseModel):
    title: str = "Pagination"
    mapping: dict[tuple[int, ...], tuple[events.Event, bool]]

    @staticmethod
    def _key_to_str(key: int) -> Optional[str]:
        if key in range(32, 127):
            return chr(key)
        return None

    @staticmethod
    def _keys_to_str(keys: tuple[int, ...]) -> str:
        return "|".join([str(keyname) for key in keys if (keyname := KeyHandler._key_to_str(key))])

    def help(self) -> str:
        return "; ".join([
            f"[{KeyHandler._keys_to_str(keys)}]: {event}"
            for keys, (event, show_help) in self.mapping.items()
            if show_help
        ])

    def handle_unknown(self, ch: int) -> Optional[events.Event]:
        return events.LogEvent(msg=f"Unknown key {ch}")

    def handle(self, ch: int) -> Optional[events.Event]:
        if ch == ord("?"):
            return events.LogEvent(msg=self.help())

        for keys, (event, _) in self.mapping.items():
            if ch in keys:
                return event

        return self.handle_unknown(ch)


default_handler = KeyHandler(
    mapping={
        (ord("q"),): (events.QuitEvent(), True),
        (curses.KEY_LEFT, ord("h")): (events.PrevPage(), True),
        (curses.KEY_RIGHT, ord("l")): (events.NextPage(), True),
        (ord("H"),): (events.JumpPrev(), True),
        (ord("L"),): (events.JumpNext(), True),
        (ord("p"), ord("g")): (events.RequestInput(kind=events.JumpToPage), True),
        (ord("s"),): (events.RequestInput(kind=events.SetPageSize), True),
    }
)
