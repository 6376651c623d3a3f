"""Serialization of splinter events into log lines.

Both the builder flow (event objects) and the one-shot ``log()`` entry
points go through ``build_line``. Values passed in must already be escaped.

Fields are emitted in a fixed order, each as ``<key>=<value>;``::

    task, primary, message type, alias/operation, component,
    instrumentation, multicast, user data...

Parts are collected and joined once; ``str.join`` sizes the result before
copying, so the line is allocated a single time.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from . import config
from .models import MISSING_TASK, EventShape, MessageType

if TYPE_CHECKING:
    from .events.base import BaseLog


def build_line(
    shape: EventShape,
    task: str | None,
    primary: str | None,
    secondary: str | None = None,
    component: str | None = None,
    instrumentation: str | None = None,
    multicast: bool = False,
    message_type: MessageType | None = None,
    user_data: Sequence[str | None] = (),
    user_data_size: int | None = None,
) -> str:
    """
    Build a log line from escaped values.

    Args:
        shape: Key table of the event shape.
        task: Escaped task name; missing becomes ``_MISSING_TASK_``.
        primary: Escaped operation, broadcast id or request id; missing becomes
                 the shape's sentinel.
        secondary: Escaped operation alias (operation shape) or operation
                   (request shape).
        component: Escaped component override.
        instrumentation: Formatted instrumentation override.
        multicast: Emit the multicast flag (operation shape only).
        message_type: Message phase, SEND when missing or unknown (operation
                      shape only).
        user_data: Interleaved escaped keys and values.
        user_data_size: Number of valid entries in ``user_data``; defaults to
                        its length.

    Returns:
        The log line, or an empty string when log creation is disabled.
    """
    if not config.is_enabled():
        return ""

    if not task:
        task = MISSING_TASK
    if not primary:
        primary = shape.missing_primary

    parts = [shape.task_key, "=", task, ";", shape.primary_key, "=", primary, ";"]

    if shape.message_type_key is not None:
        try:
            message_type = MessageType(message_type)
        except ValueError:
            message_type = MessageType.SEND
        parts += [shape.message_type_key, "=", message_type.value, ";"]
    if secondary is not None:
        parts += [shape.secondary_key, "=", secondary, ";"]
    if component is not None:
        parts += [shape.component_key, "=", component, ";"]
    if instrumentation is not None:
        parts += [shape.instrumentation_key, "=", instrumentation, ";"]
    if multicast and shape.multicast_key is not None:
        parts += [shape.multicast_key, "=1;"]

    if user_data_size is None:
        user_data_size = len(user_data)
    user_data_size -= user_data_size % 2
    for i in range(0, user_data_size, 2):
        value = user_data[i + 1]
        parts += [user_data[i], "=", value if value is not None else "", ";"]

    return "".join(parts)


def serialize(event: "BaseLog") -> str:
    """
    Build the log line of an event.

    Missing task and primary key sentinels are written back to the event, so
    a later ``with_task`` or ``with_operation`` call replaces them.
    """
    if not config.is_enabled():
        return ""

    if not event.task:
        event.task = MISSING_TASK
    if not event.primary:
        event.primary = event.shape.missing_primary

    items, count = event.user_data.snapshot()
    return build_line(
        event.shape,
        event.task,
        event.primary,
        secondary=event.secondary,
        component=event.component_override,
        instrumentation=event.instrumentation_override,
        multicast=event.multicast,
        message_type=event.message_type,
        user_data=items,
        user_data_size=count,
    )
