"""Builders for splinter logs, single-line trace events for drawing graphs."""

from .config import (
    SplinterSettings,
    configure,
    is_enabled,
    load_settings,
    set_enabled,
)
from .escaping import escape, escape_user_data
from .events import (
    BaseLog,
    BroadcastSendLog,
    BroadcastStartLog,
    BroadcastStopLog,
    CallLog,
    OperationLog,
    RequestLog,
    StartLog,
    StopLog,
)
from .models import EventShape, MessageType, TimeNotation
from .serializer import build_line, serialize
from .user_data import UserData

__all__ = [
    # Configuration
    "SplinterSettings",
    "configure",
    "is_enabled",
    "load_settings",
    "set_enabled",
    # Escaping
    "escape",
    "escape_user_data",
    # Events
    "BaseLog",
    "OperationLog",
    "CallLog",
    "StartLog",
    "StopLog",
    "BroadcastSendLog",
    "BroadcastStartLog",
    "BroadcastStopLog",
    "RequestLog",
    # Models
    "EventShape",
    "MessageType",
    "TimeNotation",
    # Serialization
    "build_line",
    "serialize",
    "UserData",
]
