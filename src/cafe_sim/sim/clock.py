# sim/clock.py
from cafe_sim.domain.errors import InvalidTime

MIN = 1
HOUR = 60 * MIN
DAY = 24 * HOUR


def minutes(x: int) -> int:
    return x * MIN


def hours(x: int) -> int:
    return x * HOUR


def hhmm(h: int, m: int = 0) -> int:
    return hours(h) + minutes(m)


def check_time(t: int) -> int:
    """Return t unchanged if it is a minute of a single day, else raise InvalidTime."""
    if isinstance(t, bool) or not isinstance(t, int):
        raise InvalidTime(f"time must be whole minutes, got {t!r}")
    if not 0 <= t < DAY:
        raise InvalidTime(f"time out of day range: {t}")
    return t


def parse_hhmm(text: str) -> int:
    if len(text) != 5 or text[2] != ":":
        raise InvalidTime(f"invalid time format (expected HH:MM): {text!r}")
    hh, mm = text[:2], text[3:]
    if not (hh.isascii() and hh.isdigit() and mm.isascii() and mm.isdigit()):
        raise InvalidTime(f"time contains non-digit characters: {text!r}")
    h, m = int(hh), int(mm)
    if h > 23:
        raise InvalidTime(f"hours out of range (0-23): {text!r}")
    if m > 59:
        raise InvalidTime(f"minutes out of range (0-59): {text!r}")
    return hhmm(h, m)


def format_hhmm(t: int) -> str:
    return f"{(t // HOUR) % 24:02d}:{t % HOUR:02d}"


def format_duration(m: int) -> str:
    # durations are not wrapped at midnight
    return f"{m // HOUR:02d}:{m % HOUR:02d}"
