from typing import Protocol

from cafe_sim.sim.event import BaseEvent


class RunnerHooks(Protocol):
    def run_start(self, *, events, tables): ...
    def run_end(self, *, processed, last_t, total_revenue, wall_ms): ...
    def day_open(self, rec, **kw): ...
    def day_close(self, report, **kw): ...
    def dispatch_start(self, ev: BaseEvent, *, seq): ...
    def dispatch_end(self, ev: BaseEvent, *, out_events, ms): ...
    def error(self, ev: BaseEvent | None, *, exc: BaseException, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def day_open(self, *_, **__):
        pass

    def day_close(self, *_, **__):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def dispatch_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
