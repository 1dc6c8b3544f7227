"""Intake registry storing decoded intake requests for scenario assertions.

The transport layer pushes one decoded request per HTTP delivery; scenarios
read typed, ordered views back out. Views are recomputed on every access and
hold deep copies, so they are never stale and never alias stored entries.
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Tuple, TypeVar, Union

from .classification import (
    is_logs_intake_request,
    is_replay_intake_request,
    is_rum_action_event,
    is_rum_error_event,
    is_rum_event,
    is_rum_intake_request,
    is_rum_resource_event,
    is_rum_view_event,
    is_telemetry_configuration_event,
    is_telemetry_error_event,
    is_telemetry_event,
)
from .models import (
    BrowserSegment,
    LogsEvent,
    LogsIntakeRequest,
    ReplayIntakeRequest,
    RumActionEvent,
    RumErrorEvent,
    RumEvent,
    RumIntakeRequest,
    RumResourceEvent,
    RumViewEvent,
    TelemetryEvent,
)

logger = logging.getLogger(__name__)

AnyIntakeRequest = Union[LogsIntakeRequest, RumIntakeRequest, ReplayIntakeRequest]

ModelT = TypeVar("ModelT")


def _detached(models: Iterable[ModelT]) -> List[ModelT]:
    """Deep copies of stored models; views never share nested dicts or lists with stored entries."""
    return [model.model_copy(deep=True) for model in models]


class ReplayBridgePolicy(str, Enum):
    """What to do with a replay request flagged as delivered over the bridge."""
    ACCEPT = "accept"
    WARN = "warn"
    RAISE = "raise"


class ReplayBridgeViolationError(Exception):
    """Exception raised when a bridged replay request is pushed under the raise policy."""
    pass


class IntakeRegistry:
    """Store data sent to the intake and expose helpers to access it."""

    def __init__(self, replay_bridge_policy: Union[ReplayBridgePolicy, str] = ReplayBridgePolicy.ACCEPT):
        """Initialize an empty registry.

        Args:
            replay_bridge_policy: Handling of replay requests flagged as bridged.
                ``accept`` stores them silently, ``warn`` stores them and logs a
                warning, ``raise`` rejects them.
        """
        self.replay_bridge_policy = ReplayBridgePolicy(replay_bridge_policy)
        self._requests: List[AnyIntakeRequest] = []
        self._lock = threading.Lock()

    def push(self, request: AnyIntakeRequest) -> None:
        """Append a decoded intake request.

        Args:
            request: Request decoded by the transport layer

        Raises:
            ReplayBridgeViolationError: Only under the ``raise`` policy, for a
                replay request flagged as bridged
        """
        if is_replay_intake_request(request) and request.is_bridge:
            self._check_replay_bridge(request)

        with self._lock:
            self._requests.append(request)
            total = len(self._requests)

        logger.debug(f"Intake request stored: {request.intake_type} (bridge={request.is_bridge}, total={total})")

    def _check_replay_bridge(self, request: ReplayIntakeRequest) -> None:
        message = f"Replay request delivered over the bridge transport: {request.filename}"
        if self.replay_bridge_policy == ReplayBridgePolicy.RAISE:
            raise ReplayBridgeViolationError(message)
        if self.replay_bridge_policy == ReplayBridgePolicy.WARN:
            logger.warning(message)

    def reset(self) -> None:
        """Remove every stored request."""
        with self._lock:
            cleared = len(self._requests)
            self._requests.clear()

        if cleared:
            logger.debug(f"Intake registry reset ({cleared} requests dropped)")

    empty = reset

    @property
    def requests(self) -> Tuple[AnyIntakeRequest, ...]:
        """Copy of all stored requests in push order."""
        return tuple(_detached(self._snapshot()))

    @property
    def is_empty(self) -> bool:
        """True when no request has been pushed since creation or the last reset."""
        with self._lock:
            return not self._requests

    @property
    def has_only_bridge_requests(self) -> bool:
        """True when every stored request came through the bridge (vacuously true when empty)."""
        return all(request.is_bridge for request in self._snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._requests)

    def _snapshot(self) -> List[AnyIntakeRequest]:
        with self._lock:
            return list(self._requests)

    def _select_requests(self, predicate: Callable[[Any], bool]) -> List[AnyIntakeRequest]:
        return [request for request in self._snapshot() if predicate(request)]

    def _select_rum_batch_events(self, predicate: Callable[[Any], bool]) -> List[Any]:
        return [
            event
            for request in self._select_requests(is_rum_intake_request)
            for event in request.events
            if predicate(event)
        ]

    #
    # Logs
    #

    @property
    def logs_requests(self) -> List[LogsIntakeRequest]:
        return _detached(self._select_requests(is_logs_intake_request))

    @property
    def logs_events(self) -> List[LogsEvent]:
        return _detached(
            event
            for request in self._select_requests(is_logs_intake_request)
            for event in request.events
        )

    #
    # RUM
    #

    @property
    def rum_requests(self) -> List[RumIntakeRequest]:
        return _detached(self._select_requests(is_rum_intake_request))

    @property
    def rum_events(self) -> List[RumEvent]:
        return _detached(self._select_rum_batch_events(is_rum_event))

    @property
    def rum_action_events(self) -> List[RumActionEvent]:
        return _detached(self._select_rum_batch_events(is_rum_action_event))

    @property
    def rum_error_events(self) -> List[RumErrorEvent]:
        return _detached(self._select_rum_batch_events(is_rum_error_event))

    @property
    def rum_resource_events(self) -> List[RumResourceEvent]:
        return _detached(self._select_rum_batch_events(is_rum_resource_event))

    @property
    def rum_view_events(self) -> List[RumViewEvent]:
        return _detached(self._select_rum_batch_events(is_rum_view_event))

    #
    # Telemetry
    #

    @property
    def telemetry_events(self) -> List[TelemetryEvent]:
        return _detached(self._select_rum_batch_events(is_telemetry_event))

    @property
    def telemetry_error_events(self) -> List[TelemetryEvent]:
        return _detached(self._select_rum_batch_events(is_telemetry_error_event))

    @property
    def telemetry_configuration_events(self) -> List[TelemetryEvent]:
        return _detached(self._select_rum_batch_events(is_telemetry_configuration_event))

    #
    # Replay
    #

    @property
    def replay_requests(self) -> List[ReplayIntakeRequest]:
        return _detached(self._select_requests(is_replay_intake_request))

    @property
    def replay_segments(self) -> List[BrowserSegment]:
        return _detached(request.segment for request in self._select_requests(is_replay_intake_request))

    def get_stats(self) -> Dict[str, int]:
        """Get intake statistics.

        Returns:
            Dictionary with request and event counts per view
        """
        logs_requests = self._select_requests(is_logs_intake_request)
        return {
            'total_requests': len(self),
            'logs_requests': len(logs_requests),
            'rum_requests': len(self._select_requests(is_rum_intake_request)),
            'replay_requests': len(self._select_requests(is_replay_intake_request)),
            'logs_events': sum(len(request.events) for request in logs_requests),
            'rum_events': len(self._select_rum_batch_events(is_rum_event)),
            'rum_action_events': len(self._select_rum_batch_events(is_rum_action_event)),
            'rum_error_events': len(self._select_rum_batch_events(is_rum_error_event)),
            'rum_resource_events': len(self._select_rum_batch_events(is_rum_resource_event)),
            'rum_view_events': len(self._select_rum_batch_events(is_rum_view_event)),
            'telemetry_events': len(self._select_rum_batch_events(is_telemetry_event)),
            'telemetry_error_events': len(self._select_rum_batch_events(is_telemetry_error_event)),
            'telemetry_configuration_events': len(
                self._select_rum_batch_events(is_telemetry_configuration_event)
            ),
        }

    def __repr__(self) -> str:
        """String representation of the intake registry."""
        stats = self.get_stats()
        return (
            f"IntakeRegistry(total={stats['total_requests']}, "
            f"logs={stats['logs_requests']}, "
            f"rum={stats['rum_requests']}, "
            f"replay={stats['replay_requests']})"
        )
