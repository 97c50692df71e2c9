"""Broadcast sink adapters."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Broadcast:
    """A broadcast handed to a sink."""

    action: str
    extra_key: str | None = None
    extra_value: str | None = None


class LoggingBroadcastAdapter:
    """Records broadcasts and logs them instead of delivering them."""

    def __init__(self):
        self.sent: list[Broadcast] = []

    def send(
        self, action: str, extra_key: str | None = None, extra_value: str | None = None
    ) -> None:
        self.sent.append(Broadcast(action, extra_key, extra_value))
        logger.info("broadcast %s (extra %s=%s)", action, extra_key, extra_value)


class AdbBroadcastAdapter:
    """Sends broadcasts to a device with `adb shell am broadcast`.

    The adb process is started and left to run; delivery is not awaited.
    Finished children are reaped on the next send.
    """

    def __init__(self, serial: str | None = None, adb_path: str = "adb"):
        self._serial = serial
        self._adb_path = adb_path
        self._pending: list[subprocess.Popen] = []

    def is_available(self) -> bool:
        return shutil.which(self._adb_path) is not None

    def build_command(
        self, action: str, extra_key: str | None = None, extra_value: str | None = None
    ) -> list[str]:
        args = [self._adb_path]
        if self._serial:
            args += ["-s", self._serial]
        # adb shell joins arguments into one remote command line
        args += ["shell", "am", "broadcast", "-a", shlex.quote(action)]
        if extra_key:
            args += ["--es", shlex.quote(extra_key), shlex.quote(extra_value or "")]
        return args

    def send(
        self, action: str, extra_key: str | None = None, extra_value: str | None = None
    ) -> None:
        args = self.build_command(action, extra_key, extra_value)
        logger.debug("spawning %s", " ".join(args))
        self._reap()
        self._pending.append(
            subprocess.Popen(args, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        )

    def _reap(self) -> None:
        self._pending = [proc for proc in self._pending if proc.poll() is None]
