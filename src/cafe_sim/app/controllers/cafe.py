# cafe_sim/app/controllers/cafe.py

from cafe_sim.app.events import (
    ClientArrived,
    ClientLeft,
    ClientSat,
    ClientWaiting,
    Error,
    Refusal,
)
from cafe_sim.app.protocols import PricingPolicy
from cafe_sim.domain.entities.client import closing_order_key
from cafe_sim.domain.state import CafeState
from cafe_sim.io.business_events import DayReport, TableSummary
from cafe_sim.policy.pricing import HourlyPricingPolicy
from cafe_sim.sim.event import BaseEvent, Direction


class CafeHandler:
    """Applies events to a CafeState.

    Every handler returns the events it produced, in emission order: Error
    events for refused requests and the outgoing ClientSat / ClientLeft it
    synthesized. Synthesized events are applied here, before returning.
    """

    def __init__(self, state: CafeState, pricing: PricingPolicy | None = None):
        self.state = state
        self.pricing = pricing or HourlyPricingPolicy(state.hourly_rate)

    def interpret(self, ev: BaseEvent) -> list[BaseEvent]:
        match ev:
            case ClientArrived():
                return self.on_client_arrived(ev)
            case ClientSat(origin=Direction.INCOMING):
                return self.on_client_sat(ev)
            case ClientSat():
                return self.on_client_reseated(ev)
            case ClientWaiting():
                return self.on_client_waiting(ev)
            case ClientLeft(origin=Direction.INCOMING):
                return self.on_client_left(ev)
            case ClientLeft():
                return self.on_client_ejected(ev)
            case Error():
                return []
            case _:
                raise TypeError(f"unsupported event: {type(ev).__name__}")

    # ------------ day boundaries --------------

    def open_day(self) -> None:
        s = self.state
        for table in s.table_ids():
            s.daily_revenue[table] = 0
            s.daily_minutes[table] = 0

    def close_day(self) -> DayReport:
        s = self.state
        departures: list[BaseEvent] = []
        for client in sorted(s.present, key=closing_order_key):
            ev = ClientLeft(t=s.closing_time, client=client, origin=Direction.OUTGOING)
            departures.append(ev)
            departures.extend(self.interpret(ev))

        report = DayReport(
            t=s.closing_time,
            tables=tuple(
                TableSummary(
                    table=table,
                    revenue=s.daily_revenue.get(table, 0),
                    occupied_minutes=s.daily_minutes.get(table, 0),
                )
                for table in s.table_ids()
            ),
            total_revenue=s.total_revenue,
            departures=tuple(departures),
        )
        s.daily_revenue.clear()
        s.daily_minutes.clear()
        s.occupied_since.clear()
        return report

    # ------------ helpers --------------

    def _settle(self, client: str, t: int) -> int:
        """Close out the client's current stay; return the table it freed."""
        s = self.state
        table, since = s.unseat(client)
        used = max(t - since, 0)  # seated after the closing time
        fee = self.pricing.charge(used)
        s.daily_minutes[table] = s.daily_minutes.get(table, 0) + used
        s.daily_revenue[table] = s.daily_revenue.get(table, 0) + fee
        s.total_revenue += fee
        s.present.discard(client)
        return table

    def _apply(self, ev: BaseEvent) -> list[BaseEvent]:
        return [ev, *self.interpret(ev)]

    # ------------ event handlers --------------

    def on_client_arrived(self, ev: ClientArrived):
        s = self.state
        if ev.client in s.present:
            return [Error(t=ev.t, message=Refusal.YOU_SHALL_NOT_PASS)]
        if not s.is_open(ev.t):
            return [Error(t=ev.t, message=Refusal.NOT_OPEN_YET)]
        s.present.add(ev.client)
        return []

    def on_client_sat(self, ev: ClientSat):
        s = self.state
        if not s.is_table_free(ev.table):
            return [Error(t=ev.t, message=Refusal.PLACE_IS_BUSY)]
        if ev.client not in s.present:
            return [Error(t=ev.t, message=Refusal.CLIENT_UNKNOWN)]
        if ev.client in s.table_of:
            # moving tables: the old stay is billed now
            self._settle(ev.client, ev.t)
            s.present.add(ev.client)
        s.drop_waiting(ev.client)
        s.seat(ev.client, ev.table, ev.t)
        return []

    def on_client_reseated(self, ev: ClientSat):
        # issued only for the head of the queue onto a table just vacated
        self.state.seat(ev.client, ev.table, ev.t)
        return []

    def on_client_waiting(self, ev: ClientWaiting):
        s = self.state
        if s.has_free_table():
            return [Error(t=ev.t, message=Refusal.I_CAN_WAIT_NO_LONGER)]
        if ev.client in s.table_of:
            return [Error(t=ev.t, message=Refusal.YOU_ALREADY_AT_TABLE)]
        if len(s.waiting) >= s.tables_count:
            return self._apply(ClientLeft(t=ev.t, client=ev.client, origin=Direction.OUTGOING))
        if ev.client in s.waiting:
            return []
        if ev.client not in s.present:
            return [Error(t=ev.t, message=Refusal.CLIENT_UNKNOWN)]
        s.waiting.append(ev.client)
        return []

    def on_client_left(self, ev: ClientLeft):
        s = self.state
        if ev.client not in s.present:
            return [Error(t=ev.t, message=Refusal.CLIENT_UNKNOWN)]
        if ev.client not in s.table_of:
            s.present.discard(ev.client)
            s.drop_waiting(ev.client)
            return []

        table = self._settle(ev.client, ev.t)
        if not s.waiting:
            return []
        nxt = s.waiting.popleft()
        return self._apply(
            ClientSat(t=ev.t, client=nxt, table=table, origin=Direction.OUTGOING)
        )

    def on_client_ejected(self, ev: ClientLeft):
        s = self.state
        if ev.client not in s.table_of:
            s.present.discard(ev.client)
            s.drop_waiting(ev.client)
            return []
        # no promotion from the queue on forced departures
        self._settle(ev.client, ev.t)
        return []
