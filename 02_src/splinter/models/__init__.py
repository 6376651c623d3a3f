"""Data models for splinter log lines."""

from .notation import MessageType, TimeNotation
from .shapes import (
    MISSING_OPERATION,
    MISSING_REQUEST,
    MISSING_TASK,
    OPERATION_SHAPE,
    REQUEST_SHAPE,
    EventShape,
)

__all__ = [
    # Notation
    "MessageType",
    "TimeNotation",
    # Shapes
    "EventShape",
    "OPERATION_SHAPE",
    "REQUEST_SHAPE",
    "MISSING_TASK",
    "MISSING_OPERATION",
    "MISSING_REQUEST",
]
