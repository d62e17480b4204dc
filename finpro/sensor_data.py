"""Sensor readings and millisecond timestamp helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class SensorData:
    """One reading from the environmental sensors."""

    timestamp_ms: int
    temperature: float
    humidity: float
    light_intensity: float

    def __str__(self) -> str:
        return (
            f"Timestamp (ms): {self.timestamp_ms}"
            f", Temp: {self.temperature:.2f} C"
            f", Humidity: {self.humidity:.2f} %"
            f", Light: {self.light_intensity:.2f} lux"
        )


def time_point_to_ms(tp: datetime) -> int:
    """Return milliseconds since the Unix epoch, truncated toward zero.

    Naive datetimes are taken to be in UTC.
    """
    if tp.tzinfo is None:
        tp = tp.replace(tzinfo=timezone.utc)
    delta = tp - _EPOCH
    total_us = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    if total_us < 0:
        return -(-total_us // 1000)
    return total_us // 1000


def ms_to_time_point(ms: int) -> datetime:
    """Return the UTC datetime that lies ``ms`` milliseconds after the epoch."""
    return _EPOCH + timedelta(milliseconds=ms)