# app/events.py
from dataclasses import dataclass
from enum import Enum

from cafe_sim.domain.entities.client import check_client_name
from cafe_sim.sim.event import BaseEvent, Direction, EventKind


class Refusal(str, Enum):
    NOT_OPEN_YET = "NotOpenYet"
    YOU_SHALL_NOT_PASS = "YouShallNotPass"
    PLACE_IS_BUSY = "PlaceIsBusy"
    CLIENT_UNKNOWN = "ClientUnknown"
    I_CAN_WAIT_NO_LONGER = "ICanWaitNoLonger!"
    YOU_ALREADY_AT_TABLE = "YouAlreadyAtTable!"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClientEvent(BaseEvent):
    client: str

    def __post_init__(self):
        super().__post_init__()
        check_client_name(self.client)

    def body(self) -> str:
        return self.client


# Incoming only
@dataclass(frozen=True)
class ClientArrived(ClientEvent):
    @property
    def kind(self) -> EventKind:
        return EventKind.CLIENT_ARRIVED


@dataclass(frozen=True)
class ClientWaiting(ClientEvent):
    @property
    def kind(self) -> EventKind:
        return EventKind.CLIENT_WAITING


# Incoming (2) when the client picks a table, outgoing (12) when a waiting
# client is given the table that was just vacated.
@dataclass(frozen=True)
class ClientSat(ClientEvent):
    table: int
    origin: Direction = Direction.INCOMING

    @property
    def direction(self) -> Direction:
        return self.origin

    @property
    def kind(self) -> EventKind:
        if self.origin is Direction.INCOMING:
            return EventKind.CLIENT_SAT
        return EventKind.CLIENT_RESEATED

    def body(self) -> str:
        return f"{self.client} {self.table}"


# Incoming (4) for a normal departure, outgoing (11) for an ejection from a
# full queue or at closing time.
@dataclass(frozen=True)
class ClientLeft(ClientEvent):
    origin: Direction = Direction.INCOMING

    @property
    def direction(self) -> Direction:
        return self.origin

    @property
    def kind(self) -> EventKind:
        if self.origin is Direction.INCOMING:
            return EventKind.CLIENT_LEFT
        return EventKind.CLIENT_EJECTED


@dataclass(frozen=True)
class Error(BaseEvent):
    message: str

    @property
    def kind(self) -> EventKind:
        return EventKind.ERROR

    @property
    def direction(self) -> Direction:
        return Direction.OUTGOING

    def body(self) -> str:
        return str(self.message)
