# finpro

Tools for working with environmental sensor readings: temperature,
humidity and light intensity, each stamped with a time in milliseconds
since the epoch.

The package provides:

- `finpro.sensor_data`: the frozen `SensorData` record (`timestamp_ms`,
  `temperature`, `humidity`, `light_intensity`), plus `time_point_to_ms`
  and `ms_to_time_point` to convert between `datetime` values and
  millisecond timestamps. Naive datetimes are taken to be UTC.
- `finpro.anomaly_detector`: `AnomalyDetector`, which flags readings
  outside configurable `AnomalyThresholds`. The default limits are
  15–30 °C, 30–70 % humidity and 100–1000 lux.
- `finpro.storage`: `DataStorage`, which appends readings to a binary
  file, loads them back and writes anomaly reports as JSON. Write
  failures raise `StorageError`.
- `finpro.client`: `Client`, which simulates sensor readings and sends
  them line by line to a TCP server, retrying the connection as needed.
  Failures raise `ClientError`.

## Detecting anomalies

```python
from finpro.sensor_data import SensorData
from finpro.anomaly_detector import AnomalyDetector, AnomalyThresholds

detector = AnomalyDetector(AnomalyThresholds())

readings = [
    SensorData(1716300000000, 25.0, 50.0, 500.0),   # within limits
    SensorData(1716300001000, 10.0, 50.0, 500.0),   # too cold
    SensorData(1716300002000, 25.0, 80.0, 500.0),   # too humid
]

anomalies = detector.find_anomalies(readings)
print(len(anomalies))  # 2
print(anomalies[0])
# Timestamp (ms): 1716300001000, Temp: 10.00 C, Humidity: 50.00 %, Light: 500.00 lux
```

`AnomalyDetector()` with no argument uses the default thresholds.
`is_anomalous` checks a single reading: it is anomalous when any value
lies strictly below its minimum or strictly above its maximum.
`find_anomalies` keeps the anomalous readings in their original order.

## Storing readings and exporting reports

```python
from finpro.storage import DataStorage

storage = DataStorage("readings.bin", "anomalies.json")
storage.store_data_batch(readings)
loaded = storage.load_all_data()          # [] if the file is missing
storage.export_anomalies_to_json(anomalies)
```

Each call to `store_data` or `store_data_batch` appends to what is
already in the binary file. Every record is 32 bytes, little-endian: a
64-bit signed timestamp followed by three 64-bit floats (temperature,
humidity, light intensity). `load_all_data` returns every complete
record and ignores a trailing partial one.

`export_anomalies_to_json` replaces the report file with a JSON array of
objects holding `timestamp_ms`, `temperature`, `humidity` and
`lightIntensity`, the three measurements written to two decimal places.
`sensor_data_to_json` renders a single such object.

## Sending readings to a server

```python
from finpro.client import Client

with Client("127.0.0.1", 9999) as client:
    client.connect(3, 500)
    client.send_data(client.read_sensor_data())
```

Each reading is sent as one line, as produced by `format_wire`, e.g.
`temp:25.50,hum:55.10,light:500.00,ts:1234567890`. `connect` defaults to
10 attempts one second apart. `send_data` tries once to reconnect if the
client is not connected. `receive_response` returns the next chunk the
server sent, or `""` when the server has closed the connection.
`Client.run` loops forever, sending a simulated reading every five
seconds and reconnecting when the connection is lost; it reports its
progress through the `logging` module.

## What this package does not do

There is no server that receives readings, and no command-line program:
the package is used as a library.