# sim/event.py
from dataclasses import dataclass
from enum import Enum, IntEnum

from cafe_sim.sim.clock import check_time


class EventKind(IntEnum):
    CLIENT_ARRIVED = 1
    CLIENT_SAT = 2
    CLIENT_WAITING = 3
    CLIENT_LEFT = 4
    CLIENT_EJECTED = 11
    CLIENT_RESEATED = 12
    ERROR = 13


class Direction(Enum):
    INCOMING = "incoming"  # read from the day's input
    OUTGOING = "outgoing"  # synthesized while handling another event


@dataclass(frozen=True)
class BaseEvent:
    t: int  # minutes since midnight

    def __post_init__(self):
        check_time(self.t)

    @property
    def kind(self) -> EventKind:
        raise NotImplementedError

    @property
    def direction(self) -> Direction:
        return Direction.INCOMING

    def body(self) -> str:
        """Kind-specific payload as printed after the event header."""
        return ""
