import datetime as dt
import os

import pytest

from anotherday.config import AppConfig
from anotherday.core.entry_codec import EntryCodec
from anotherday.services.log_service import LogService, parse_local_time
from anotherday.storage.day_log import DayLogStore
from anotherday.storage.repos import EntryRepo
from conftest import fixed_clock


def make_service(cfg, clock):
    store = DayLogStore(cfg)
    return LogService(EntryRepo(store, EntryCodec(cfg)), cfg, clock=clock), store


@pytest.fixture
def berlin(tmp_path):
    return AppConfig(store_dir=str(tmp_path), timezone="Europe/Berlin")


def lines(store, day):
    return store.read_day_text(day).splitlines()


def test_parse_local_time():
    assert parse_local_time("09:05") == dt.time(9, 5)
    assert parse_local_time(" 17:45:30 ") == dt.time(17, 45, 30)
    with pytest.raises(ValueError):
        parse_local_time("25:00")
    with pytest.raises(ValueError):
        parse_local_time("noon")


def test_task_is_stored_in_utc_under_local_day(berlin):
    service, store = make_service(berlin, fixed_clock(2018, 6, 20, 10, 15, 30))
    entry = service.start_task("acme", "review PR", task_id="JIRA-12")

    assert entry.time == dt.time(10, 15, 30)
    assert lines(store, "2018-06-20") == ["task|10:15:30|acme|review PR|JIRA-12"]


def test_explicit_time_is_local(berlin):
    service, store = make_service(berlin, fixed_clock(2018, 6, 20, 10, 15, 30))
    service.start_task("acme", "standup", at="09:00")
    service.take_break(at="12:30:15")

    assert lines(store, "2018-06-20") == [
        "task|07:00:00|acme|standup",
        "break|10:30:15",
    ]


def test_local_day_differs_from_utc_day(berlin):
    # 01:30 local on the 21st
    service, store = make_service(berlin, fixed_clock(2018, 6, 20, 23, 30, 0))
    service.take_break()
    assert lines(store, "2018-06-21") == ["break|23:30:00"]
    assert not os.path.isfile(store.path_for("2018-06-20"))


def test_fields_are_trimmed_and_blank_id_dropped(cfg, noon_clock):
    service, store = make_service(cfg, noon_clock)
    entry = service.start_task("  acme ", " deploy ", task_id="  ")
    assert entry.id is None
    assert lines(store, "2018-06-20") == ["task|12:00:00|acme|deploy"]


@pytest.mark.parametrize("project,label", [("", "x"), ("acme", "   ")])
def test_empty_fields_rejected(cfg, noon_clock, project, label):
    service, store = make_service(cfg, noon_clock)
    with pytest.raises(ValueError):
        service.start_task(project, label)
    assert not os.path.isfile(store.path_for("2018-06-20"))


def test_bad_time_rejected(cfg, noon_clock):
    service, store = make_service(cfg, noon_clock)
    with pytest.raises(ValueError, match="Invalid time"):
        service.take_break(at="later")


def test_explicit_time_in_host_zone(tmp_path, host_berlin):
    cfg = AppConfig(store_dir=str(tmp_path), timezone=None)
    service, store = make_service(cfg, fixed_clock(2018, 11, 1, 12, 0, 0))
    service.take_break(at="09:00")
    assert lines(store, "2018-11-01") == ["break|08:00:00"]
