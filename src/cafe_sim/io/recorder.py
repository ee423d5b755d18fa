# io/recorder.py
import sys

from cafe_sim.app.protocols import Sink
from cafe_sim.io.render import render_lines


class TextSink:
    def __init__(self, fp=None):
        self.fp = fp or sys.stdout

    def write(self, rec) -> None:
        for line in render_lines(rec):
            self.fp.write(line + "\n")


class MemorySink:
    def __init__(self):
        self.records: list = []

    def write(self, rec) -> None:
        self.records.append(rec)

    def lines(self) -> list[str]:
        return [line for rec in self.records for line in render_lines(rec)]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (TextSink(),)

    def emit(self, rec) -> None:
        for s in self.sinks:
            s.write(rec)
