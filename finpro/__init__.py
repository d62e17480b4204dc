"""Sensor readings: anomaly detection, binary storage, JSON reports and a TCP reporting client."""

__version__ = "0.1.0"

__all__ = ["anomaly_detector", "client", "sensor_data", "storage"]