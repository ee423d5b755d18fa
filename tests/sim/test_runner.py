import pytest

from cafe_sim.app.build import open_day
from cafe_sim.app.controllers.cafe import CafeHandler
from cafe_sim.app.events import ClientArrived, ClientLeft, ClientSat, Error
from cafe_sim.domain.errors import InvalidTable, OutOfOrder
from cafe_sim.io.business_events import DayOpened, DayReport
from cafe_sim.io.recorder import MemorySink, Recorder
from cafe_sim.sim.clock import hhmm
from cafe_sim.sim.hooks import NoopHooks
from cafe_sim.sim.runner import DayRunner, validate_order


# --- test hook that records dispatch order & errors ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []
        self.errors = []
        self.closed = None

    def dispatch_start(self, ev, *, seq):
        self.trace.append((seq, ev.t, type(ev).__name__))

    def day_close(self, report, **_):
        self.closed = report

    def error(self, ev, *, exc, **kw):
        self.errors.append((ev, type(exc).__name__))


def _runner(tables=2, hooks=None):
    state = open_day(hhmm(10), hhmm(22), tables, 100)
    sink = MemorySink()
    runner = DayRunner(CafeHandler(state), hooks=hooks, emit=Recorder(sink).emit)
    return runner, state, sink


def test_runner_replays_in_order_and_closes():
    hooks = TraceHooks()
    runner, state, sink = _runner(hooks=hooks)
    events = [
        ClientArrived(t=hhmm(9), client="early"),
        ClientArrived(t=hhmm(10), client="alice"),
        ClientSat(t=hhmm(10), client="alice", table=1),
        ClientLeft(t=hhmm(11), client="alice"),
    ]

    report = runner.run(events)

    assert [name for _, _, name in hooks.trace] == [
        "ClientArrived",
        "ClientArrived",
        "ClientSat",
        "ClientLeft",
    ]
    assert [seq for seq, _, _ in hooks.trace] == [1, 2, 3, 4]
    assert runner.now == hhmm(11)
    assert hooks.closed is report
    assert report.total_revenue == 100
    assert state.total_revenue == 100

    recs = sink.records
    assert isinstance(recs[0], DayOpened)
    assert isinstance(recs[-1], DayReport)
    # the refused arrival is followed by its error
    assert recs[1] == events[0]
    assert isinstance(recs[2], Error) and recs[2].message == "NotOpenYet"


def test_validate_order_reports_first_offender():
    evs = [
        ClientArrived(t=hhmm(10), client="a"),
        ClientArrived(t=hhmm(12), client="b"),
        ClientArrived(t=hhmm(11), client="c"),
        ClientArrived(t=hhmm(9), client="d"),
    ]
    with pytest.raises(OutOfOrder) as info:
        validate_order(evs)
    assert info.value.index == 2
    assert info.value.event.client == "c"

    # equal times are fine
    validate_order([ClientArrived(t=600, client="a"), ClientArrived(t=600, client="b")])


def test_out_of_order_applies_nothing():
    hooks = TraceHooks()
    runner, state, sink = _runner(hooks=hooks)
    with pytest.raises(OutOfOrder):
        runner.run(
            [
                ClientArrived(t=hhmm(11), client="a"),
                ClientArrived(t=hhmm(10), client="b"),
            ]
        )
    assert state.present == set()
    assert sink.records == []
    assert hooks.trace == []
    assert hooks.errors and hooks.errors[0][1] == "OutOfOrder"


def test_invalid_table_aborts_the_run():
    hooks = TraceHooks()
    runner, state, _ = _runner(tables=2, hooks=hooks)
    with pytest.raises(InvalidTable):
        runner.run(
            [
                ClientArrived(t=hhmm(10), client="a"),
                ClientSat(t=hhmm(10), client="a", table=3),
            ]
        )
    assert hooks.errors[0][1] == "InvalidTable"
    assert hooks.closed is None


def test_second_run_restarts_sequence_numbers():
    hooks = TraceHooks()
    runner, _, _ = _runner(hooks=hooks)
    day = [
        ClientArrived(t=hhmm(10), client="a"),
        ClientLeft(t=hhmm(12), client="a"),
    ]
    runner.run(day)
    runner.run(day[:1])

    assert [seq for seq, _, _ in hooks.trace] == [1, 2, 1]
    assert runner.now == hhmm(10)
