# cafe_sim/app/cli.py
import argparse
import sys

from cafe_sim.app.build import build
from cafe_sim.config.models import LogModel
from cafe_sim.domain.errors import CafeError, MalformedLine, OutOfOrder
from cafe_sim.io.day_file import read_day_file
from cafe_sim.io.recorder import Recorder, TextSink
from cafe_sim.io.render import render_event


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cafe-sim",
        description="Replay one day of a computer cafe and print the per-table report.",
    )
    p.add_argument("day_file", help="path to the day file")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="emit JSON logs to stderr at this level",
    )
    p.add_argument("--run-id", default="local")
    return p


def main(argv: list[str] | None = None) -> int:
    args = make_parser().parse_args(argv)
    out = sys.stdout
    try:
        model, events = read_day_file(args.day_file)
    except OSError as exc:
        print(f"Cannot open file: {args.day_file} ({exc.strerror})", file=sys.stderr)
        return 1
    except MalformedLine as exc:
        print(exc.line, file=sys.stderr)
        return 1
    except CafeError as exc:
        print(exc, file=sys.stderr)
        return 1

    update = {"run_id": args.run_id}
    if args.log_level:
        update["log"] = LogModel(level=args.log_level, debug=args.log_level == "DEBUG")
    model = model.model_copy(update=update)

    app = build(model, recorder=Recorder(TextSink(out)), use_logging=bool(args.log_level))
    try:
        app.runner.run(events)
    except OutOfOrder as exc:
        print(render_event(exc.event), file=out)
        return 1
    except CafeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
