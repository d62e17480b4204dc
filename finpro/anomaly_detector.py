"""Threshold-based anomaly detection for sensor readings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from finpro.sensor_data import SensorData


@dataclass
class AnomalyThresholds:
    """Acceptable ranges for each measured quantity."""

    min_temp: float = 15.0  # degrees Celsius
    max_temp: float = 30.0
    min_humidity: float = 30.0  # percent
    max_humidity: float = 70.0
    min_light: float = 100.0  # lux
    max_light: float = 1000.0


class AnomalyDetector:
    """Flags readings that fall outside configured thresholds."""

    def __init__(self, thresholds: AnomalyThresholds | None = None) -> None:
        self.thresholds = thresholds if thresholds is not None else AnomalyThresholds()

    def is_anomalous(self, data: SensorData) -> bool:
        """Return True if any quantity lies outside its range."""
        t = self.thresholds
        if data.temperature < t.min_temp or data.temperature > t.max_temp:
            return True
        if data.humidity < t.min_humidity or data.humidity > t.max_humidity:
            return True
        if data.light_intensity < t.min_light or data.light_intensity > t.max_light:
            return True
        return False

    def find_anomalies(self, data_batch: Iterable[SensorData]) -> list[SensorData]:
        """Return the anomalous readings, in their original order."""
        return [data for data in data_batch if self.is_anomalous(data)]