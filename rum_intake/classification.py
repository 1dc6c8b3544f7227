"""Classification predicates for intake requests and the events they carry.

Every predicate reads the wire-contract field paths directly (``intakeType``,
inner ``type``, ``telemetry.status``, ``telemetry.type``) and accepts either a
validated model or the raw decoded mapping. The request-level and RUM
batch-level classifiers are total and mutually exclusive; the two telemetry
predicates are independent filters and an event may satisfy both.
"""

from enum import Enum
from typing import Any, Mapping, Optional


class IntakeType(str, Enum):
    """Telemetry pipeline that produced an intake request."""
    LOGS = "logs"
    RUM = "rum"
    REPLAY = "replay"


class RumEventKind(str, Enum):
    """Kind of an element found in a RUM intake batch."""
    ACTION = "action"
    ERROR = "error"
    RESOURCE = "resource"
    VIEW = "view"
    OTHER = "other"
    TELEMETRY = "telemetry"


TELEMETRY_TYPE = "telemetry"
TELEMETRY_ERROR_STATUS = "error"
TELEMETRY_CONFIGURATION_TYPE = "configuration"

_RUM_KINDS_BY_TYPE = {
    "action": RumEventKind.ACTION,
    "error": RumEventKind.ERROR,
    "resource": RumEventKind.RESOURCE,
    "view": RumEventKind.VIEW,
}


def _read(value: Any, wire_name: str, attr_name: Optional[str] = None) -> Any:
    """Read a field from a raw mapping (by wire name) or a model (by attribute)."""
    if isinstance(value, Mapping):
        if wire_name in value:
            return value[wire_name]
        return value.get(attr_name) if attr_name else None
    return getattr(value, attr_name or wire_name, None)


#
# Requests
#

def classify_intake_request(request: Any) -> Optional[IntakeType]:
    """Return the pipeline an intake request belongs to, or None if untagged."""
    tag = _read(request, "intakeType", "intake_type")
    try:
        return IntakeType(tag)
    except ValueError:
        return None


def is_logs_intake_request(request: Any) -> bool:
    return classify_intake_request(request) is IntakeType.LOGS


def is_rum_intake_request(request: Any) -> bool:
    return classify_intake_request(request) is IntakeType.RUM


def is_replay_intake_request(request: Any) -> bool:
    return classify_intake_request(request) is IntakeType.REPLAY


#
# RUM batch elements
#

def is_telemetry_event(event: Any) -> bool:
    return _read(event, "type") == TELEMETRY_TYPE


def is_rum_event(event: Any) -> bool:
    return not is_telemetry_event(event)


def classify_batch_event(event: Any) -> RumEventKind:
    """Classify one element of a RUM intake batch.

    Telemetry is checked first; anything else is a RUM event, split by its
    inner ``type``. Types outside action/error/resource/view map to OTHER.
    """
    if is_telemetry_event(event):
        return RumEventKind.TELEMETRY
    return _RUM_KINDS_BY_TYPE.get(_read(event, "type"), RumEventKind.OTHER)


def is_rum_action_event(event: Any) -> bool:
    return classify_batch_event(event) is RumEventKind.ACTION


def is_rum_error_event(event: Any) -> bool:
    return classify_batch_event(event) is RumEventKind.ERROR


def is_rum_resource_event(event: Any) -> bool:
    return classify_batch_event(event) is RumEventKind.RESOURCE


def is_rum_view_event(event: Any) -> bool:
    return classify_batch_event(event) is RumEventKind.VIEW


#
# Telemetry
#

def is_telemetry_error_event(event: Any) -> bool:
    if not is_telemetry_event(event):
        return False
    return _read(_read(event, "telemetry"), "status") == TELEMETRY_ERROR_STATUS


def is_telemetry_configuration_event(event: Any) -> bool:
    if not is_telemetry_event(event):
        return False
    return _read(_read(event, "telemetry"), "type") == TELEMETRY_CONFIGURATION_TYPE
