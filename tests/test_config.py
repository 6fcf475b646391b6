import dataclasses
import datetime as dt

import pytest

from anotherday.config import AppConfig


def test_defaults():
    cfg = AppConfig()
    assert cfg.separator == "|"
    assert cfg.min_duration_hours == 0.5
    assert cfg.week_start == 6
    assert cfg.store_dir.endswith("another-day")


def test_from_env_overrides(tmp_path):
    cfg = AppConfig.from_env(
        {
            "ANOTHER_DAY_DIR": str(tmp_path),
            "ANOTHER_DAY_TZ": "Europe/Berlin",
            "ANOTHER_DAY_WEEK_START": "0",
        }
    )
    assert cfg.store_dir == str(tmp_path)
    assert cfg.timezone == "Europe/Berlin"
    assert cfg.week_start == 0
    offset = cfg.localize(dt.datetime(2018, 6, 20)).utcoffset()
    assert offset == dt.timedelta(hours=2)


def test_from_env_empty_uses_defaults():
    assert AppConfig.from_env({}) == AppConfig()


def test_from_env_rejects_unknown_zone():
    with pytest.raises(ValueError, match="ANOTHER_DAY_TZ"):
        AppConfig.from_env({"ANOTHER_DAY_TZ": "Mars/Olympus_Mons"})


@pytest.mark.parametrize("raw", ["7", "-1", "sunday"])
def test_from_env_rejects_bad_week_start(raw):
    with pytest.raises(ValueError, match="ANOTHER_DAY_WEEK_START"):
        AppConfig.from_env({"ANOTHER_DAY_WEEK_START": raw})


def test_config_is_immutable():
    cfg = AppConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.separator = ";"
