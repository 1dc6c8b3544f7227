"""Intake capture and classification registry for end-to-end browser tests.

The monitored page sends logs, RUM events and session-replay segments to a
mock collection endpoint. The endpoint's transport layer decodes each delivery
and pushes it here; scenario assertions read typed, ordered views back.

Main Components:
- Data Models: Pydantic models for intake requests and events (models/)
- Classification: Predicates splitting requests and events by type
- Intake Registry: Append-only store with the typed query surface
- Configuration: YAML loading with environment overrides (config/)

Usage:
    from rum_intake import IntakeRegistry

    registry = IntakeRegistry()
    registry.push(request)
    assert len(registry.rum_action_events) == 1
"""

__version__ = "1.0.0"

from .classification import IntakeType, RumEventKind
from .config import ConfigLoadError, RegistryConfig, create_registry, load_registry_config
from .models import (
    BrowserSegment,
    BrowserSegmentMetadataAndSegmentSizes,
    IntakeRequest,
    LogsEvent,
    LogsIntakeRequest,
    ReplayIntakeRequest,
    RumActionEvent,
    RumErrorEvent,
    RumEvent,
    RumIntakeRequest,
    RumOtherEvent,
    RumResourceEvent,
    RumViewEvent,
    TelemetryEvent,
    TelemetryPayload,
    parse_intake_request,
)
from .registry import IntakeRegistry, ReplayBridgePolicy, ReplayBridgeViolationError

__all__ = [
    # Registry
    "IntakeRegistry",
    "ReplayBridgePolicy",
    "ReplayBridgeViolationError",

    # Classification
    "IntakeType",
    "RumEventKind",

    # Data models
    "IntakeRequest",
    "LogsIntakeRequest",
    "RumIntakeRequest",
    "ReplayIntakeRequest",
    "LogsEvent",
    "RumEvent",
    "RumActionEvent",
    "RumErrorEvent",
    "RumResourceEvent",
    "RumViewEvent",
    "RumOtherEvent",
    "TelemetryEvent",
    "TelemetryPayload",
    "BrowserSegment",
    "BrowserSegmentMetadataAndSegmentSizes",
    "parse_intake_request",

    # Configuration
    "ConfigLoadError",
    "RegistryConfig",
    "create_registry",
    "load_registry_config",
]
