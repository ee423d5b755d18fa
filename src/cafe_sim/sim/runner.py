# sim/runner.py

import time
from collections.abc import Callable, Iterable, Sequence

from cafe_sim.app.controllers.cafe import CafeHandler
from cafe_sim.domain.errors import CafeError, OutOfOrder
from cafe_sim.io.business_events import DayOpened, DayReport
from cafe_sim.sim.event import BaseEvent
from cafe_sim.sim.hooks import NoopHooks, RunnerHooks

Emit = Callable[[object], None]


def validate_order(events: Sequence[BaseEvent]) -> None:
    """Raise OutOfOrder for the first event earlier than its predecessor."""
    for i in range(1, len(events)):
        if events[i].t < events[i - 1].t:
            raise OutOfOrder(events[i], index=i)


class DayRunner:
    """Replays one business day: open, apply every event in order, close."""

    def __init__(
        self,
        handler: CafeHandler,
        hooks: RunnerHooks | None = None,
        emit: Emit | None = None,
    ):
        self.handler = handler
        self._hooks = hooks or NoopHooks()
        self._emit = emit or (lambda rec: None)
        self._t = handler.state.opening_time
        self._seq = 0

    @property
    def now(self) -> int:
        return self._t

    def run(self, events: Iterable[BaseEvent]) -> DayReport:
        events = list(events)
        state = self.handler.state
        try:
            validate_order(events)
        except OutOfOrder as exc:
            self._hooks.error(exc.event, exc=exc, index=exc.index)
            raise

        self._t, self._seq = state.opening_time, 0
        t0 = time.perf_counter()
        self._hooks.run_start(events=len(events), tables=state.tables_count)

        self.handler.open_day()
        opened = DayOpened(t=state.opening_time, tables_count=state.tables_count)
        self._hooks.day_open(opened)
        self._emit(opened)

        for ev in events:
            self.step(ev)

        report = self.handler.close_day()
        self._hooks.day_close(report)
        self._emit(report)

        self._hooks.run_end(
            processed=self._seq,
            last_t=self._t,
            total_revenue=state.total_revenue,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return report

    def step(self, ev: BaseEvent) -> list[BaseEvent]:
        self._seq += 1
        self._t = ev.t
        self._hooks.dispatch_start(ev, seq=self._seq)
        t1 = time.perf_counter()
        try:
            out = self.handler.interpret(ev)
        except CafeError as exc:
            self._hooks.error(ev, exc=exc, seq=self._seq)
            raise
        self._hooks.dispatch_end(ev, out_events=out, ms=(time.perf_counter() - t1) * 1000)
        self._emit(ev)
        for nxt in out:
            self._emit(nxt)
        return out
