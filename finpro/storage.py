"""Binary persistence of sensor readings and JSON anomaly reports."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Iterable

from finpro.sensor_data import SensorData

_RECORD = struct.Struct("<qddd")
RECORD_SIZE = _RECORD.size


class StorageError(Exception):
    """Raised when a storage file cannot be opened or written."""


def _pack(data: SensorData) -> bytes:
    return _RECORD.pack(
        data.timestamp_ms, data.temperature, data.humidity, data.light_intensity
    )


def sensor_data_to_json(data: SensorData) -> str:
    """Render one reading as an indented JSON object with two-decimal values."""
    return (
        "  {\n"
        f'    "timestamp_ms": {data.timestamp_ms},\n'
        f'    "temperature": {data.temperature:.2f},\n'
        f'    "humidity": {data.humidity:.2f},\n'
        f'    "lightIntensity": {data.light_intensity:.2f}\n'
        "  }"
    )


class DataStorage:
    """Appends readings to a binary file and writes anomaly reports."""

    def __init__(
        self, binary_file_path: str | os.PathLike, json_report_path: str | os.PathLike
    ) -> None:
        self.binary_file_path = Path(binary_file_path)
        self.json_report_path = Path(json_report_path)

    def store_data(self, data: SensorData) -> None:
        """Append one reading to the binary file."""
        self.store_data_batch([data])

    def store_data_batch(self, data_batch: Iterable[SensorData]) -> None:
        """Append several readings to the binary file, in order."""
        try:
            with self.binary_file_path.open("ab") as out:
                for data in data_batch:
                    out.write(_pack(data))
        except OSError as exc:
            raise StorageError(
                f"cannot write binary file {self.binary_file_path}: {exc}"
            ) from exc

    def load_all_data(self) -> list[SensorData]:
        """Read every complete record; a missing or unreadable file gives []."""
        try:
            raw = self.binary_file_path.read_bytes()
        except OSError:
            return []
        usable = len(raw) - len(raw) % RECORD_SIZE
        return [SensorData(*fields) for fields in _RECORD.iter_unpack(raw[:usable])]

    def export_anomalies_to_json(self, anomalies: Iterable[SensorData]) -> None:
        """Write the given readings to the JSON report file, replacing it."""
        body = ",\n".join(sensor_data_to_json(data) for data in anomalies)
        try:
            with self.json_report_path.open("w", encoding="utf-8") as report:
                report.write("[\n" + body + "\n]\n")
        except OSError as exc:
            raise StorageError(
                f"cannot write JSON report {self.json_report_path}: {exc}"
            ) from exc