"""Serial port sink — writes log lines to a named serial port via pyserial.

Every write opens the port, sends one line, optionally blocks for one
reply line, and closes the port again.  There is no read timeout: a
caller that waits for a reply that never comes blocks indefinitely.
"""

from __future__ import annotations

import logging

import serial
from serial.tools import list_ports

from pslog.errors import SinkUnavailable

logger = logging.getLogger(__name__)


class SerialPortSink:
    """Line-oriented writer for host serial ports.

    Parameters
    ----------
    encoding:
        Encoding applied to outgoing and incoming lines.
    newline:
        Line terminator appended to every write.
    """

    def __init__(self, encoding: str = "utf-8", newline: str = "\r\n") -> None:
        self._encoding = encoding
        self._newline = newline

    @staticmethod
    def list_ports() -> list[str]:
        """Return the device names of all serial ports on this host."""
        return sorted(info.device for info in list_ports.comports())

    def port_exists(self, port: str) -> bool:
        return port in self.list_ports()

    def write(
        self,
        port: str,
        data: str,
        *,
        baudrate: int = 9600,
        parity: str = serial.PARITY_NONE,
        bytesize: int = serial.EIGHTBITS,
        stopbits: float = serial.STOPBITS_ONE,
        wait: bool = False,
    ) -> str | None:
        """Write *data* as one line to *port*.

        Returns the reply line (without its terminator) when *wait* is
        True, otherwise ``None``.

        Raises
        ------
        SinkUnavailable
            If the port cannot be opened or written.
        """
        try:
            with serial.Serial(
                port=port,
                baudrate=baudrate,
                parity=parity,
                bytesize=bytesize,
                stopbits=stopbits,
                timeout=None,
            ) as conn:
                conn.write((data + self._newline).encode(self._encoding))
                conn.flush()
                logger.debug("SerialPortSink: wrote %d chars to %s", len(data), port)
                if not wait:
                    return None
                reply = conn.readline()
        except (serial.SerialException, OSError, ValueError) as exc:
            raise SinkUnavailable(f"serial port {port} unavailable: {exc}") from exc
        return reply.decode(self._encoding, errors="replace").rstrip("\r\n")
