# io/render.py
"""Console text for events and day records, one string per output line."""

from cafe_sim.io.business_events import DayOpened, DayReport, TableSummary
from cafe_sim.sim.clock import format_duration, format_hhmm
from cafe_sim.sim.event import BaseEvent


def render_event(ev: BaseEvent) -> str:
    return f"{format_hhmm(ev.t)} {int(ev.kind)} {ev.body()}"


def render_table(row: TableSummary) -> str:
    return f"{row.table} {row.revenue} {format_duration(row.occupied_minutes)}"


def render_lines(rec) -> list[str]:
    if isinstance(rec, BaseEvent):
        return [render_event(rec)]
    if isinstance(rec, DayOpened):
        return [format_hhmm(rec.t)]
    if isinstance(rec, DayReport):
        return [
            *(render_event(ev) for ev in rec.departures),
            format_hhmm(rec.t),
            *(render_table(row) for row in rec.tables),
        ]
    raise TypeError(f"cannot render {type(rec).__name__}")
