"""Shared builder behavior of splinter events."""

from collections.abc import Mapping
from typing import Any

from .. import config
from ..escaping import escape, missing_key
from ..models import EventShape, MessageType, TimeNotation
from ..serializer import serialize
from ..user_data import UserData

_NO_VALUE = object()


class BaseLog:
    """
    Mutable splinter event, built incrementally and rendered with build().

    Every ``with_*`` method returns the event itself and does nothing while
    log creation is disabled. Values are escaped when they are set. No method
    raises on bad input; missing values are replaced with placeholders.

    Not thread-safe.
    """

    shape: EventShape

    def __init__(self, task: Any = None, primary: Any = None):
        self.task: str | None = escape(task)
        self.primary: str | None = escape(primary)
        self.secondary: str | None = None
        self.component_override: str | None = None
        self.instrumentation_override: str | None = None
        self.message_type: MessageType | None = None
        self.multicast = False
        self.user_data = UserData()

    def with_task(self, value: Any) -> "BaseLog":
        """
        New task name, replacing the existing one.

        The task name groups all logs of the same graph and is used as its
        title.
        """
        if not config.is_enabled():
            return self

        self.task = escape(value)
        return self

    def with_component_override(self, value: Any) -> "BaseLog":
        """
        Pretend the log comes from another component.

        Accepts a name or a class, in which case the class name is used.
        """
        if not config.is_enabled():
            return self

        if isinstance(value, type):
            value = value.__name__
        self.component_override = escape(value)
        return self

    def with_instrumentation_override(
        self, value: int, time_notation: TimeNotation | None = None
    ) -> "BaseLog":
        """
        Provide a measured latency instead of the one derived from timestamps.

        On a start (ACK) log it is treated as transport latency, on a stop
        (FINISH) log as processing latency. Milliseconds when no unit is given.
        A value that is not an integer leaves the override unchanged.
        """
        if not config.is_enabled():
            return self

        try:
            value = int(value)
        except (TypeError, ValueError, OverflowError):
            return self

        try:
            time_notation = TimeNotation(time_notation)
        except ValueError:
            time_notation = TimeNotation.MILLISECONDS
        self.instrumentation_override = time_notation.render(value)
        return self

    def with_user_data(self, key: Any, value: Any = _NO_VALUE) -> "BaseLog":
        """
        Add user data displayed alongside the graph.

        Called with a key and a value, adds one pair; a missing key is replaced
        with ``_MISSING_KEY_<n>``. Called with a mapping, adds each of its
        entries in order; None or an empty mapping adds nothing.
        """
        if not config.is_enabled():
            return self

        if value is _NO_VALUE:
            if key is None or isinstance(key, Mapping):
                for k, v in (key or {}).items():
                    self._add_user_data(k, v)
                return self
            value = None

        self._add_user_data(key, value)
        return self

    def _add_user_data(self, key: Any, value: Any) -> None:
        key = escape(key)
        if not key:
            key = missing_key(self.user_data.pair_count())
        self.user_data.add_pair(key, escape(value))

    def build(self) -> str:
        """Build the log line, ready to be passed to any logger."""
        return serialize(self)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(task={self.task!r}, primary={self.primary!r}, "
            f"user_data={self.user_data.pair_count()})"
        )
