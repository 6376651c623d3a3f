"""Message phase and time unit enums."""

from enum import Enum


class MessageType(str, Enum):
    """Place a log is emitted from."""

    SEND = "S"  # right before making a call or sending a request
    ACK = "A"  # start of handling, used to measure transport latency
    FINISH = "F"  # end of handling, completes a call


class TimeNotation(str, Enum):
    """Units for instrumentation overrides."""

    NANOSECONDS = "ns"
    MICROSECONDS = "\u00b5s"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"

    def render(self, value: int) -> str:
        """Render ``value`` with this unit suffix, e.g. ``2001µs``."""
        return f"{int(value)}{self.value}"
