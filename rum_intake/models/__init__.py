"""Data models for decoded intake requests, events and replay segments."""

from .events import (
    IntakeEvent,
    LogsEvent,
    RumActionEvent,
    RumBatchEvent,
    RumErrorEvent,
    RumEvent,
    RumEventBase,
    RumOtherEvent,
    RumResourceEvent,
    RumViewEvent,
    TelemetryEvent,
    TelemetryPayload,
)
from .intake import (
    IntakeRequest,
    LogsIntakeRequest,
    ReplayIntakeRequest,
    RumIntakeRequest,
    parse_intake_request,
)
from .replay import (
    BrowserSegment,
    BrowserSegmentMetadata,
    BrowserSegmentMetadataAndSegmentSizes,
)

__all__ = [
    "IntakeEvent",
    "LogsEvent",
    "RumActionEvent",
    "RumBatchEvent",
    "RumErrorEvent",
    "RumEvent",
    "RumEventBase",
    "RumOtherEvent",
    "RumResourceEvent",
    "RumViewEvent",
    "TelemetryEvent",
    "TelemetryPayload",
    "IntakeRequest",
    "LogsIntakeRequest",
    "ReplayIntakeRequest",
    "RumIntakeRequest",
    "parse_intake_request",
    "BrowserSegment",
    "BrowserSegmentMetadata",
    "BrowserSegmentMetadataAndSegmentSizes",
]
