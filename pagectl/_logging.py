import logging


_WARNED: set[str] = set()


def warn_once(logger: logging.Logger, msg: str) -> None:
    """Log a development warning the first time it is seen

    These flag misuse by the caller but are never fatal.
    """
    if msg in _WARNED:
        return
    _WARNED.add(msg)
    logger.warning(f"Warning: {msg}")


def reset_warnings() -> None:
    _WARNED.clear()


class CursesHandler(logging.Handler):
    """Handling logging in curses window

    from https://stackoverflow.com/a/28102809
    """

    def __init__(self):
        logging.Handler.__init__(self)
        self.screen = None

    def set_screen(self, screen):
        screen.refresh()
        screen.scrollok(True)
        screen.idlok(True)
        screen.leaveok(True)
        self.screen = screen

    def emit(self, record):
        if self.screen is None:
            return
        try:
            msg = self.format(record)
            _, max_x = self.screen.getmaxyx()
            self.screen.addstr("\n{}".format(msg[: max_x - 1]))
            self.screen.refresh()
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception:
            self.handleError(record)
