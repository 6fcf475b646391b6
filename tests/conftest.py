import datetime as dt
import time

import pytest

from anotherday.config import AppConfig

UTC = dt.timezone.utc


def fixed_clock(*args):
    moment = dt.datetime(*args, tzinfo=UTC)
    return lambda: moment


@pytest.fixture
def cfg(tmp_path):
    return AppConfig(store_dir=str(tmp_path / "store"), timezone="UTC")


@pytest.fixture
def noon_clock():
    # Wednesday
    return fixed_clock(2018, 6, 20, 12, 0, 0)


@pytest.fixture
def host_berlin(monkeypatch):
    # host zone as a POSIX rule: CET, CEST from last Sunday of March to last Sunday of October
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "CET-1CEST,M3.5.0,M10.5.0/3")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
