"""Runs an input on a poll interval and writes its metrics to stdout."""

import logging
import sys
import threading
from typing import Optional, TextIO

from .accumulator import Accumulator, LineProtocolAccumulator

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 120.0


class Shim:
    def __init__(
        self,
        plugin,
        acc: Optional[Accumulator] = None,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self.plugin = plugin
        self.acc = acc or LineProtocolAccumulator()
        self.stdin = stdin or sys.stdin
        self._stop = threading.Event()
        self.cycles = 0

    def stop(self) -> None:
        self._stop.set()

    def gather_once(self) -> None:
        """Run one poll cycle; errors raised by the plugin are reported, not raised."""
        self.cycles += 1
        try:
            self.plugin.gather(self.acc)
        except Exception as e:
            logger.exception(f"Unexpected error during gather: {e}")
            self.acc.add_error(e)

    def run(self, poll_interval: Optional[float] = DEFAULT_POLL_INTERVAL) -> None:
        """Poll every ``poll_interval`` seconds until stopped.

        With ``poll_interval=None`` a gather is triggered by every line read
        from stdin, and the loop ends at end of input.
        """
        if poll_interval is None:
            logger.info("Poll interval disabled, gathering on stdin input")
            for _ in self.stdin:
                if self._stop.is_set():
                    break
                self.gather_once()
            return

        logger.info(f"Polling every {poll_interval}s")
        while not self._stop.is_set():
            self.gather_once()
            self._stop.wait(poll_interval)
