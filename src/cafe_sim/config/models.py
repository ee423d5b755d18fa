from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cafe_sim.domain.errors import InvalidTime
from cafe_sim.sim.clock import check_time, parse_hhmm


class CafeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    tables_count: int = Field(ge=1)
    opening_time: int  # minutes since midnight; "HH:MM" accepted
    closing_time: int
    hourly_rate: int = Field(ge=1)

    @field_validator("opening_time", "closing_time", mode="before")
    @classmethod
    def _minutes(cls, v):
        # ValueError subclasses surface as pydantic validation errors
        if isinstance(v, str):
            return parse_hhmm(v)
        if isinstance(v, int) and not isinstance(v, bool):
            return check_time(v)
        raise InvalidTime(f"expected minutes or 'HH:MM', got {v!r}")


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "day"
    run_id: str = "local"
    cafe: CafeModel
    log: LogModel = LogModel()
