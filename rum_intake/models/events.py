"""Pydantic models for events carried by logs and RUM intake requests.

Event models only pin down the fields the registry classifies on; every other
emitted attribute is kept as-is (``extra="allow"``) so scenario assertions can
inspect the exact payload the monitored page sent.
"""

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from ..classification import classify_batch_event


class IntakeEvent(BaseModel):
    """Common configuration for decoded intake events."""

    model_config = ConfigDict(extra="allow", frozen=True)


class LogsEvent(IntakeEvent):
    """Log event emitted by the logs SDK."""

    message: str = Field(description="Log message")
    status: str = Field(default="info", description="Log status (debug, info, warn, error)")
    date: Optional[int] = Field(default=None, description="Event timestamp in milliseconds")
    origin: Optional[str] = Field(
        default=None,
        description="Where the log came from (logger, console, network, ...)"
    )
    view: Dict[str, Any] = Field(default_factory=dict, description="View context")


class RumEventBase(IntakeEvent):
    """Attributes shared by every RUM event."""

    type: str = Field(description="RUM event type")
    date: Optional[int] = Field(default=None, description="Event timestamp in milliseconds")
    application: Dict[str, Any] = Field(default_factory=dict, description="Application context")
    session: Dict[str, Any] = Field(default_factory=dict, description="Session context")
    view: Dict[str, Any] = Field(default_factory=dict, description="View context")
    action: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Action context (the action an event is attached to)"
    )


class RumActionEvent(RumEventBase):
    type: Literal["action"] = "action"
    action: Dict[str, Any] = Field(description="Action attributes (id, type, target, frustration)")


class RumErrorEvent(RumEventBase):
    type: Literal["error"] = "error"
    error: Dict[str, Any] = Field(description="Error attributes (message, source, stack)")


class RumResourceEvent(RumEventBase):
    type: Literal["resource"] = "resource"
    resource: Dict[str, Any] = Field(description="Resource attributes (type, url, duration)")


class RumViewEvent(RumEventBase):
    type: Literal["view"] = "view"
    view: Dict[str, Any] = Field(description="View attributes (id, url, counters)")


class RumOtherEvent(RumEventBase):
    """RUM event whose type is not classified further (long_task, vital, ...)."""


class TelemetryPayload(BaseModel):
    """Nested ``telemetry`` object of a telemetry event.

    ``status`` and ``type`` are independent: an error report carries
    ``status="error"``, a configuration report carries ``type="configuration"``,
    and nothing prevents both being set.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    status: Optional[str] = Field(default=None, description="Telemetry status (debug, error)")
    type: Optional[str] = Field(default=None, description="Telemetry type (log, configuration)")
    message: Optional[str] = Field(default=None, description="Telemetry message")


class TelemetryEvent(IntakeEvent):
    """Diagnostic event the SDK reports about itself, batched with RUM events."""

    type: Literal["telemetry"] = "telemetry"
    date: Optional[int] = Field(default=None, description="Event timestamp in milliseconds")
    service: Optional[str] = Field(default=None, description="Reporting service")
    source: Optional[str] = Field(default=None, description="Reporting SDK source")
    version: Optional[str] = Field(default=None, description="Reporting SDK version")
    telemetry: TelemetryPayload = Field(
        default_factory=TelemetryPayload,
        description="Telemetry content"
    )


RumEvent = Union[RumActionEvent, RumErrorEvent, RumResourceEvent, RumViewEvent, RumOtherEvent]


def _batch_event_tag(value: Any) -> str:
    return classify_batch_event(value).value


RumBatchEvent = Annotated[
    Union[
        Annotated[RumActionEvent, Tag("action")],
        Annotated[RumErrorEvent, Tag("error")],
        Annotated[RumResourceEvent, Tag("resource")],
        Annotated[RumViewEvent, Tag("view")],
        Annotated[RumOtherEvent, Tag("other")],
        Annotated[TelemetryEvent, Tag("telemetry")],
    ],
    Discriminator(_batch_event_tag),
]
