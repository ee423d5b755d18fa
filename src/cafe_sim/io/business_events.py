# cafe_sim/io/business_events.py

from dataclasses import dataclass, field

from cafe_sim.sim.event import BaseEvent


# Records emitted around the replay (not applied by the handler!)
@dataclass(frozen=True)
class DayOpened:
    t: int  # opening time
    tables_count: int


@dataclass(frozen=True)
class TableSummary:
    table: int
    revenue: int
    occupied_minutes: int


@dataclass(frozen=True)
class DayReport:
    t: int  # closing time
    tables: tuple[TableSummary, ...]
    total_revenue: int
    # forced departures at closing, in closing order
    departures: tuple[BaseEvent, ...] = field(default_factory=tuple)

    def table(self, table: int) -> TableSummary:
        return self.tables[table - 1]
