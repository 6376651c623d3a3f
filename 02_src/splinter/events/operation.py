"""Operation-style splinter events and their convenience shapes.

A call between two components is traced with one log before the call and
one when it completes::

    class CoffeeMaker:
        def brew_coffee(self):
            logger.info(CallLog("Coffee Time", "pumpWater"))
            self.water_pump.pump_water()

    class WaterPump:
        def pump_water(self):
            ...
            logger.info(StopLog("Coffee Time", "pumpWater"))

A broadcast is traced with one log before it is sent, and a start (optional)
and stop log in each recipient::

    logger.info(BroadcastSendLog("Coffee Time", broadcast.id))
    ...
    logger.info(BroadcastStartLog("Coffee Time", broadcast.id, "chime"))
    logger.info(BroadcastStopLog("Coffee Time", broadcast.id, "chime"))
"""

from typing import Any

from .. import config
from ..escaping import escape, escape_user_data
from ..models import OPERATION_SHAPE, MessageType
from ..serializer import build_line
from .base import BaseLog


def _log(
    task: Any,
    primary: Any,
    message_type: MessageType,
    alias: Any = None,
    multicast: bool = False,
    user_key_value_pairs: tuple = (),
) -> str:
    return build_line(
        OPERATION_SHAPE,
        escape(task),
        escape(primary),
        secondary=escape(alias),
        multicast=multicast,
        message_type=message_type,
        user_data=escape_user_data(user_key_value_pairs),
    )


class OperationLog(BaseLog):
    """
    Splinter log identified by a task, an operation and a message type.

    The operation names the function or request and labels the edge between
    two components. The message type says where the log is emitted from:
    SEND right before a call, ACK at the start of handling, FINISH at its end.
    """

    shape = OPERATION_SHAPE

    def __init__(
        self,
        task: Any = None,
        operation: Any = None,
        message_type: MessageType | None = None,
    ):
        super().__init__(task, operation)
        try:
            self.message_type = MessageType(message_type)
        except ValueError:
            self.message_type = MessageType.SEND

    @property
    def operation(self) -> str | None:
        return self.primary

    @property
    def operation_alias(self) -> str | None:
        return self.secondary

    def with_operation(self, value: Any) -> "OperationLog":
        """New operation name, replacing the existing one."""
        if not config.is_enabled():
            return self

        self.primary = escape(value)
        return self

    def with_operation_alias(self, value: Any) -> "OperationLog":
        """
        Alias of the operation.

        Disambiguates starts and stops sharing one operation id, e.g. each
        recipient of a broadcast names the function it serves.
        """
        if not config.is_enabled():
            return self

        self.secondary = escape(value)
        return self

    def with_multicast(self, value: bool) -> "OperationLog":
        """Mark that more than one recipient may answer the operation."""
        if not config.is_enabled():
            return self

        self.multicast = bool(value)
        return self


class CallLog(OperationLog):
    """Emitted right before calling another component."""

    def __init__(self, task: Any = None, operation: Any = None):
        super().__init__(task, operation, MessageType.SEND)

    @staticmethod
    def log(task: Any, operation: Any, *user_key_value_pairs: Any) -> str:
        """Build a call log line in one step."""
        if not config.is_enabled():
            return ""

        return _log(task, operation, MessageType.SEND,
                    user_key_value_pairs=user_key_value_pairs)


class StartLog(OperationLog):
    """Emitted at the start of handling a call."""

    def __init__(self, task: Any = None, operation: Any = None):
        super().__init__(task, operation, MessageType.ACK)

    @staticmethod
    def log(task: Any, operation: Any, *user_key_value_pairs: Any) -> str:
        """Build a start log line in one step."""
        if not config.is_enabled():
            return ""

        return _log(task, operation, MessageType.ACK,
                    user_key_value_pairs=user_key_value_pairs)


class StopLog(OperationLog):
    """Emitted at the end of handling a call."""

    def __init__(self, task: Any = None, operation: Any = None):
        super().__init__(task, operation, MessageType.FINISH)

    @staticmethod
    def log(task: Any, operation: Any, *user_key_value_pairs: Any) -> str:
        """Build a stop log line in one step."""
        if not config.is_enabled():
            return ""

        return _log(task, operation, MessageType.FINISH,
                    user_key_value_pairs=user_key_value_pairs)


class BroadcastSendLog(OperationLog):
    """Emitted right before sending a broadcast to one or more recipients."""

    def __init__(self, task: Any = None, broadcast_id: Any = None):
        super().__init__(task, broadcast_id, MessageType.SEND)
        self.multicast = True

    @staticmethod
    def log(task: Any, broadcast_id: Any, *user_key_value_pairs: Any) -> str:
        """Build a broadcast send log line in one step."""
        if not config.is_enabled():
            return ""

        return _log(task, broadcast_id, MessageType.SEND, multicast=True,
                    user_key_value_pairs=user_key_value_pairs)


class BroadcastStartLog(OperationLog):
    """Emitted by a recipient when it starts handling a broadcast."""

    def __init__(self, task: Any = None, broadcast_id: Any = None, operation: Any = None):
        super().__init__(task, broadcast_id, MessageType.ACK)
        self.secondary = escape(operation)

    @staticmethod
    def log(
        task: Any, broadcast_id: Any, operation: Any, *user_key_value_pairs: Any
    ) -> str:
        """Build a broadcast start log line in one step."""
        if not config.is_enabled():
            return ""

        return _log(task, broadcast_id, MessageType.ACK, alias=operation,
                    user_key_value_pairs=user_key_value_pairs)


class BroadcastStopLog(OperationLog):
    """Emitted by a recipient when it finishes handling a broadcast."""

    def __init__(self, task: Any = None, broadcast_id: Any = None, operation: Any = None):
        super().__init__(task, broadcast_id, MessageType.FINISH)
        self.secondary = escape(operation)

    @staticmethod
    def log(
        task: Any, broadcast_id: Any, operation: Any, *user_key_value_pairs: Any
    ) -> str:
        """Build a broadcast stop log line in one step."""
        if not config.is_enabled():
            return ""

        return _log(task, broadcast_id, MessageType.FINISH, alias=operation,
                    user_key_value_pairs=user_key_value_pairs)
