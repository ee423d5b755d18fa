# domain/state.py
from collections import deque
from dataclasses import dataclass, field

from cafe_sim.domain.errors import InvalidTable


@dataclass
class CafeState:
    tables_count: int
    opening_time: int
    closing_time: int
    hourly_rate: int

    present: set[str] = field(default_factory=set)  # arrived, not yet departed
    table_of: dict[str, int] = field(default_factory=dict)  # client -> table, seated only
    occupied_since: dict[int, int] = field(default_factory=dict)  # table -> start of stay
    waiting: deque[str] = field(default_factory=deque)  # FIFO of client names

    daily_minutes: dict[int, int] = field(default_factory=dict)
    daily_revenue: dict[int, int] = field(default_factory=dict)
    total_revenue: int = 0

    def is_open(self, t: int) -> bool:
        return self.opening_time <= t < self.closing_time

    def has_free_table(self) -> bool:
        return len(self.table_of) < self.tables_count

    def check_table(self, table: int) -> int:
        if isinstance(table, bool) or not isinstance(table, int):
            raise InvalidTable(f"table id must be an integer, got {table!r}")
        if not 1 <= table <= self.tables_count:
            raise InvalidTable(f"incorrect table id: {table} (tables 1..{self.tables_count})")
        return table

    def is_table_free(self, table: int) -> bool:
        self.check_table(table)
        return table not in self.occupied_since

    def table_ids(self) -> range:
        return range(1, self.tables_count + 1)

    # ---- assignment (table_of and occupied_since always move together) ----

    def seat(self, client: str, table: int, t: int) -> None:
        self.table_of[client] = table
        self.occupied_since[table] = t

    def unseat(self, client: str) -> tuple[int, int]:
        """Drop the client's assignment; return (table, start of stay)."""
        table = self.table_of.pop(client)
        return table, self.occupied_since.pop(table)

    def drop_waiting(self, client: str) -> None:
        if client in self.waiting:
            self.waiting.remove(client)
