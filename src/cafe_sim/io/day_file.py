# io/day_file.py
"""Reader for the day file.

    <tables count>
    <opening HH:MM> <closing HH:MM>
    <hourly rate>
    HH:MM <kind> <args...>      one event per line, kinds 1-4

The first line that cannot be read is reported as MalformedLine.
"""

from collections.abc import Iterable
from pathlib import Path

from cafe_sim.app.events import ClientArrived, ClientLeft, ClientSat, ClientWaiting
from cafe_sim.config.models import ScenarioModel
from cafe_sim.domain.errors import InvalidConfig, MalformedLine
from cafe_sim.sim.clock import parse_hhmm
from cafe_sim.sim.event import BaseEvent, EventKind


def _positive_int(tok: str) -> int:
    if not (tok.isascii() and tok.isdigit()) or int(tok) < 1:
        raise ValueError(f"expected a positive integer, got {tok!r}")
    return int(tok)


def parse_event(raw: str, tables_count: int | None = None) -> BaseEvent:
    """Parse one incoming event line; table ids are range checked when tables_count is given."""
    toks = raw.split()
    try:
        if len(toks) < 3:
            raise ValueError("expected 'HH:MM <kind> <args>'")
        t = parse_hhmm(toks[0])
        kind, args = toks[1], toks[2:]
        if kind == str(int(EventKind.CLIENT_SAT)):
            if len(args) != 2:
                raise ValueError("kind 2 takes a client name and a table id")
            table = _positive_int(args[1])
            if tables_count is not None and table > tables_count:
                raise ValueError(f"table {table} out of range 1..{tables_count}")
            return ClientSat(t=t, client=args[0], table=table)

        simple = {
            str(int(EventKind.CLIENT_ARRIVED)): ClientArrived,
            str(int(EventKind.CLIENT_WAITING)): ClientWaiting,
            str(int(EventKind.CLIENT_LEFT)): ClientLeft,
        }
        if kind not in simple:
            raise ValueError(f"invalid incoming kind: {kind!r}")
        if len(args) != 1:
            raise ValueError(f"kind {kind} takes a single client name")
        return simple[kind](t=t, client=args[0])
    except ValueError as exc:
        raise MalformedLine(raw, str(exc)) from exc


def read_day(lines: Iterable[str]) -> tuple[ScenarioModel, list[BaseEvent]]:
    lines = [line.rstrip("\r\n") for line in lines]
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) < 3:
        raise MalformedLine(lines[-1] if lines else "", "missing day header")

    tables_line, hours_line, rate_line = lines[:3]
    try:
        tables_count = _positive_int(tables_line.strip())
    except ValueError as exc:
        raise MalformedLine(tables_line, str(exc)) from exc
    try:
        opening, closing = hours_line.split()
        opening_time, closing_time = parse_hhmm(opening), parse_hhmm(closing)
    except ValueError as exc:
        raise MalformedLine(hours_line, str(exc)) from exc
    try:
        hourly_rate = _positive_int(rate_line.strip())
    except ValueError as exc:
        raise MalformedLine(rate_line, str(exc)) from exc

    try:
        model = ScenarioModel.model_validate(
            {
                "cafe": {
                    "tables_count": tables_count,
                    "opening_time": opening_time,
                    "closing_time": closing_time,
                    "hourly_rate": hourly_rate,
                }
            }
        )
    except ValueError as exc:
        raise InvalidConfig(str(exc)) from exc

    events = [parse_event(raw, tables_count) for raw in lines[3:]]
    return model, events


def read_day_file(path: str | Path) -> tuple[ScenarioModel, list[BaseEvent]]:
    with open(path, encoding="utf-8") as fp:
        return read_day(fp)
