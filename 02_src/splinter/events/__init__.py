"""Splinter event builders."""

from .base import BaseLog
from .operation import (
    BroadcastSendLog,
    BroadcastStartLog,
    BroadcastStopLog,
    CallLog,
    OperationLog,
    StartLog,
    StopLog,
)
from .request import RequestLog

__all__ = [
    "BaseLog",
    # Operation style
    "OperationLog",
    "CallLog",
    "StartLog",
    "StopLog",
    "BroadcastSendLog",
    "BroadcastStartLog",
    "BroadcastStopLog",
    # Request style
    "RequestLog",
]
