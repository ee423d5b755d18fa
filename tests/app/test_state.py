import pytest

from cafe_sim.domain.errors import InvalidTable
from cafe_sim.domain.state import CafeState


def _state(tables=2):
    return CafeState(tables_count=tables, opening_time=600, closing_time=1320, hourly_rate=10)


def test_is_open_bounds():
    s = _state()
    assert not s.is_open(599)
    assert s.is_open(600)
    assert s.is_open(1319)
    assert not s.is_open(1320)


def test_table_queries():
    s = _state(tables=2)
    assert s.is_table_free(1) and s.is_table_free(2)
    s.seat("a", 1, 600)
    assert not s.is_table_free(1)
    assert s.has_free_table()
    s.seat("b", 2, 610)
    assert not s.has_free_table()
    assert s.unseat("a") == (1, 600)
    assert s.is_table_free(1)
    assert s.table_of == {"b": 2} and s.occupied_since == {2: 610}


@pytest.mark.parametrize("table", [0, 3, -1, "1", True])
def test_is_table_free_rejects_missing_tables(table):
    with pytest.raises(InvalidTable):
        _state(tables=2).is_table_free(table)


def test_drop_waiting_is_idempotent():
    s = _state()
    s.waiting.extend(["a", "b"])
    s.drop_waiting("a")
    s.drop_waiting("a")
    assert list(s.waiting) == ["b"]
