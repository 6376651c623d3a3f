"""Request-style splinter events."""

from typing import Any

from .. import config
from ..escaping import escape, escape_user_data
from ..models import REQUEST_SHAPE
from ..serializer import build_line
from .base import BaseLog


class RequestLog(BaseLog):
    """
    Splinter log identified by a task and a request id.

    A request is a message sent by one component and received by another.
    Both sides log the same request id so the two can be connected; either
    side may also name the operation the request is made for, which labels
    the edge.

    ::

                      Task

        +---------+ operation  +---------+
        |Component+----------->+Component|
        +---------+    0ms     +---------+
    """

    shape = REQUEST_SHAPE

    def __init__(self, task: Any = None, request_id: Any = None, operation: Any = None):
        super().__init__(task, request_id)
        self.secondary = escape(operation)

    @property
    def request_id(self) -> str | None:
        return self.primary

    @property
    def operation(self) -> str | None:
        return self.secondary

    def with_request_id(self, value: Any) -> "RequestLog":
        """New request id, shared by the sending and the receiving side."""
        if not config.is_enabled():
            return self

        self.primary = escape(value)
        return self

    def with_operation(self, value: Any) -> "RequestLog":
        """New operation name, replacing the existing one."""
        if not config.is_enabled():
            return self

        self.secondary = escape(value)
        return self

    @staticmethod
    def log(
        task: Any, request_id: Any, operation: Any = None, *user_key_value_pairs: Any
    ) -> str:
        """Build a request log line in one step."""
        if not config.is_enabled():
            return ""

        return build_line(
            REQUEST_SHAPE,
            escape(task),
            escape(request_id),
            secondary=escape(operation),
            user_data=escape_user_data(user_key_value_pairs),
        )
