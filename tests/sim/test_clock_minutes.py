import pytest

from cafe_sim.domain.errors import InvalidTime
from cafe_sim.sim.clock import (
    DAY,
    check_time,
    format_duration,
    format_hhmm,
    hhmm,
    parse_hhmm,
)


def test_parse_and_format_hhmm():
    assert parse_hhmm("09:00") == 540
    assert parse_hhmm("00:00") == 0
    assert parse_hhmm("23:59") == DAY - 1
    assert format_hhmm(hhmm(9, 5)) == "09:05"
    assert format_hhmm(0) == "00:00"


@pytest.mark.parametrize("text", ["9:00", "24:00", "12:60", "ab:cd", "12-30", "", "12:3a"])
def test_parse_hhmm_rejects(text):
    with pytest.raises(InvalidTime):
        parse_hhmm(text)


def test_duration_is_not_wrapped():
    assert format_duration(358) == "05:58"
    assert format_duration(0) == "00:00"
    assert format_duration(DAY) == "24:00"


@pytest.mark.parametrize("t", [-1, DAY, 1.5, True, "10:00"])
def test_check_time_rejects(t):
    with pytest.raises(InvalidTime):
        check_time(t)
