# cafe_sim/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from cafe_sim.app.controllers.cafe import CafeHandler
from cafe_sim.config.models import CafeModel, ScenarioModel
from cafe_sim.domain.errors import InvalidConfig
from cafe_sim.domain.state import CafeState
from cafe_sim.io.kernel_logging import DayLogging
from cafe_sim.io.recorder import Recorder, TextSink
from cafe_sim.policy.pricing import HourlyPricingPolicy
from cafe_sim.sim.hooks import NoopHooks
from cafe_sim.sim.runner import DayRunner


@dataclass
class App:
    model: ScenarioModel
    state: CafeState
    handler: CafeHandler
    recorder: Recorder
    runner: DayRunner


def _validated(cls, data):
    try:
        return cls.model_validate(data)
    except ValidationError as exc:
        raise InvalidConfig(str(exc)) from exc


def open_day(opening_time, closing_time, tables_count: int, hourly_rate: int) -> CafeState:
    cafe = _validated(
        CafeModel,
        {
            "opening_time": opening_time,
            "closing_time": closing_time,
            "tables_count": tables_count,
            "hourly_rate": hourly_rate,
        },
    )
    return CafeState(
        tables_count=cafe.tables_count,
        opening_time=cafe.opening_time,
        closing_time=cafe.closing_time,
        hourly_rate=cafe.hourly_rate,
    )


def build(
    cfg: ScenarioModel | Mapping,
    *,
    recorder: Recorder | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else _validated(ScenarioModel, cfg)

    # 1) State & pricing
    c = model.cafe
    state = open_day(c.opening_time, c.closing_time, c.tables_count, c.hourly_rate)
    handler = CafeHandler(state, pricing=HourlyPricingPolicy(c.hourly_rate))

    # 2) Output & hooks
    recorder = recorder or Recorder(TextSink())
    hooks = (
        DayLogging(
            run_id=model.run_id,
            scenario=model.name,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Runner
    runner = DayRunner(handler, hooks=hooks, emit=recorder.emit)

    return App(model, state, handler, recorder, runner)
