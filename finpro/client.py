"""TCP client that streams simulated sensor readings to a collector server."""

from __future__ import annotations

import logging
import random
import socket
import time

from finpro.sensor_data import SensorData

logger = logging.getLogger(__name__)

SEND_INTERVAL_SECONDS = 5
_RECV_SIZE = 1023


class ClientError(Exception):
    """Raised when the client cannot connect, send or receive."""


def format_wire(data: SensorData) -> str:
    """Render a reading in the line format sent to the server (without newline)."""
    return (
        f"temp:{data.temperature:.2f}"
        f",hum:{data.humidity:.2f}"
        f",light:{data.light_intensity:.2f}"
        f",ts:{data.timestamp_ms}"
    )


class Client:
    """Connects to a server and sends sensor readings as text lines."""

    def __init__(self, server_ip: str, server_port: int) -> None:
        self.server_ip = server_ip
        self.server_port = server_port
        self._sock: socket.socket | None = None
        self._rng = random.Random()

    def read_sensor_data(self) -> SensorData:
        """Produce a simulated reading stamped with the current time."""
        return SensorData(
            timestamp_ms=time.time_ns() // 1_000_000,
            temperature=self._rng.uniform(18.0, 30.0),
            humidity=self._rng.uniform(30.0, 70.0),
            light_intensity=self._rng.uniform(100.0, 1000.0),
        )

    def connect(self, max_retries: int = 10, retry_delay_ms: int = 1000) -> None:
        """Connect to the server, retrying; raise ClientError if every attempt fails."""
        if self._sock is not None:
            logger.info("Already connected.")
            return

        delay = retry_delay_ms / 1000.0
        for attempt in range(max_retries):
            try:
                address = socket.gethostbyname(self.server_ip)
            except OSError as exc:
                logger.error(
                    "Invalid address / hostname resolution failed for %s: %s",
                    self.server_ip,
                    exc,
                )
                time.sleep(delay)
                continue

            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)
            try:
                sock.connect((address, self.server_port))
            except OSError as exc:
                sock.close()
                logger.error("Connection attempt %d failed: %s", attempt + 1, exc)
                if attempt < max_retries - 1:
                    logger.info("Retrying in %s seconds...", delay)
                    time.sleep(delay)
                continue

            self._sock = sock
            logger.info(
                "Successfully connected to server %s:%d",
                self.server_ip,
                self.server_port,
            )
            return

        raise ClientError(
            f"failed to connect to {self.server_ip}:{self.server_port} "
            f"after {max_retries} attempts"
        )

    def send_data(self, data: SensorData) -> None:
        """Send one reading as a line, reconnecting once if not connected."""
        if self._sock is None:
            logger.warning("Not connected to server; attempting to reconnect...")
            self.connect(1, 0)

        payload = (format_wire(data) + "\n").encode("ascii")
        assert self._sock is not None
        try:
            self._sock.sendall(payload)
        except OSError as exc:
            self.disconnect()
            raise ClientError(f"send failed: {exc}") from exc

    def receive_response(self) -> str:
        """Return the next chunk the server sent, or "" if it closed the connection."""
        if self._sock is None:
            raise ClientError("not connected to server; cannot receive data")
        try:
            chunk = self._sock.recv(_RECV_SIZE)
        except OSError as exc:
            self.disconnect()
            raise ClientError(f"receive failed: {exc}") from exc
        if not chunk:
            logger.info("Server closed the connection.")
            self.disconnect()
            return ""
        return chunk.decode("utf-8", errors="replace")

    def disconnect(self) -> None:
        """Close the connection if one is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def run(self) -> None:
        """Read and send a reading every few seconds, forever."""
        while True:
            if self._sock is None:
                logger.info("Client not connected. Attempting to connect...")
                try:
                    self.connect()
                except ClientError:
                    logger.info("Failed to connect. Will retry later.")
                    time.sleep(SEND_INTERVAL_SECONDS * 2)
                    continue

            current = self.read_sensor_data()
            logger.info("Read sensor data: %s", format_wire(current))
            try:
                self.send_data(current)
            except ClientError as exc:
                logger.error("Failed to send data: %s", exc)
            else:
                logger.info("Data successfully sent to server.")

            time.sleep(SEND_INTERVAL_SECONDS)

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()