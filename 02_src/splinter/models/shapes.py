"""Key tables for the two event shapes."""

from dataclasses import dataclass

MISSING_TASK = "_MISSING_TASK_"
MISSING_OPERATION = "_MISSING_OPERATION_"
MISSING_REQUEST = "_MISSING_REQUEST_"


@dataclass(frozen=True)
class EventShape:
    """Reserved keys and sentinels of one event shape.

    Both shapes share one serializer; a shape without message type or
    multicast support leaves those keys as None.
    """

    name: str
    task_key: str
    primary_key: str
    secondary_key: str  # operation alias or request operation
    component_key: str
    instrumentation_key: str
    missing_primary: str
    message_type_key: str | None = None
    multicast_key: str | None = None


OPERATION_SHAPE = EventShape(
    name="operation",
    task_key="$SPG$+T",
    primary_key="+O",
    secondary_key="+OA",
    component_key="+C^",
    instrumentation_key="+I^",
    missing_primary=MISSING_OPERATION,
    message_type_key="+M",
    multicast_key="+MC",
)

REQUEST_SHAPE = EventShape(
    name="request",
    task_key="$SPG$_T",
    primary_key="_R",
    secondary_key="_O",
    component_key="_C^",
    instrumentation_key="_I^",
    missing_primary=MISSING_REQUEST,
)
