# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum

from cafe_sim.app.events import Error
from cafe_sim.sim.clock import format_hhmm
from cafe_sim.sim.event import Direction
from cafe_sim.sim.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=_jsonable)


def _jsonable(v):
    if isinstance(v, Enum):
        return v.value
    return str(v)


def _default_json_logger(name="cafe_sim", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class DayLogging(NoopHooks):
    """
    Structured JSON logs for the day replay: lifecycle, refusals and forced
    departures at INFO, every dispatch at DEBUG when debug is on.
    """

    def __init__(
        self,
        run_id: str = "local",
        scenario: str | None = None,
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.scenario, self.debug = run_id, scenario, debug
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        if self.scenario:
            payload["scenario"] = self.scenario
        if extra.get("t") is not None:
            payload["clock"] = format_hhmm(extra["t"])
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev):
        base = {"t": getattr(ev, "t", None), "kind": int(ev.kind)}
        if is_dataclass(ev):
            evd = asdict(ev)
            evd.pop("t", None)
            base.update(evd)
        return base

    # --------------------------------------------------------

    def run_start(self, *, events: int, tables: int):
        self._emit("INFO", "run_start", events=events, tables=tables)

    def run_end(self, *, processed: int, **extra):
        self._emit("INFO", "run_end", processed=processed, **extra)

    def day_open(self, rec, **_):
        self._emit("INFO", "day_open", t=rec.t, tables=rec.tables_count)

    def day_close(self, report, **_):
        for ev in report.departures:
            self._emit("INFO", "forced_departure", **self._shape_event(ev))
        self._emit(
            "INFO",
            "day_close",
            t=report.t,
            total_revenue=report.total_revenue,
            tables=[asdict(row) for row in report.tables],
        )

    def dispatch_start(self, ev, *, seq: int):
        if self.debug:
            self._emit("DEBUG", type(ev).__name__, **self._shape_event(ev), seq=seq)

    def dispatch_end(self, ev, *, out_events, ms: float):
        for out in out_events:
            if isinstance(out, Error):
                self._emit("INFO", "refusal", **self._shape_event(out), cause=type(ev).__name__)
            elif out.direction is Direction.OUTGOING:
                self._emit("INFO", type(out).__name__, **self._shape_event(out))
        if self.debug:
            self._emit("DEBUG", "dispatch_done", produced=len(out_events), ms=round(ms, 3))

    def error(self, ev, *, exc: BaseException, **extra):
        shaped = self._shape_event(ev) if ev is not None else {}
        name = type(ev).__name__ if ev is not None else None
        self._emit("ERROR", "run_error", event=name, error=str(exc), **shaped, **extra)
