from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from finpro.sensor_data import SensorData, ms_to_time_point, time_point_to_ms


def test_str_format():
    data = SensorData(1000, 25.5, 55.1, 500.0)
    assert str(data) == (
        "Timestamp (ms): 1000, Temp: 25.50 C, Humidity: 55.10 %, Light: 500.00 lux"
    )


def test_str_contains_timestamp_and_units():
    data = SensorData(1234567890, 20.0, 40.0, 200.0)
    text = str(data)
    assert text.startswith("Timestamp (ms): 1234567890")
    assert text.endswith(" lux")
    assert " C, " in text and " %, " in text


def test_equality():
    assert SensorData(1, 2.0, 3.0, 4.0) == SensorData(1, 2.0, 3.0, 4.0)
    assert not SensorData(1, 2.0, 3.0, 4.0) == SensorData(1, 2.0, 3.0, 5.0)


def test_frozen():
    data = SensorData(1, 2.0, 3.0, 4.0)
    with pytest.raises(FrozenInstanceError):
        data.temperature = 10.0
    assert data.temperature == 2.0
    assert data == SensorData(1, 2.0, 3.0, 4.0)


def test_epoch_is_zero():
    assert ms_to_time_point(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert time_point_to_ms(ms_to_time_point(0)) == 0


@pytest.mark.parametrize("ms", [0, 1, 999, 1_000, 1234567890, 1_700_000_000_123, -5_000])
def test_round_trip(ms):
    assert time_point_to_ms(ms_to_time_point(ms)) == ms


def test_naive_treated_as_utc():
    aware = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    naive = aware.replace(tzinfo=None)
    assert time_point_to_ms(naive) == time_point_to_ms(aware)


def test_sub_millisecond_truncated():
    base = ms_to_time_point(5_000)
    assert time_point_to_ms(base + timedelta(microseconds=999)) == 5_000


def test_now_is_monotonic_with_offsets():
    now = datetime.now(timezone.utc)
    a = time_point_to_ms(now)
    b = time_point_to_ms(now + timedelta(seconds=1))
    assert b - a == 1000