"""Integration tests driving the registry the way end-to-end scenarios do.

Each test replays the intake traffic a monitored page would emit (already
decoded by the transport layer) and asserts through the query surface only.
"""

from rum_intake import IntakeRegistry, create_registry, parse_intake_request
from tests.factories import (
    make_action_event,
    make_error_event,
    make_logs_request,
    make_replay_request,
    make_resource_event,
    make_rum_request,
    make_segment,
    make_telemetry_event,
    make_view_event,
)


class TestIntakeScenarios:
    """End-to-end style scenarios over a single registry."""

    def test_logs_batch(self, registry):
        """One logs delivery with two events."""
        registry.push(make_logs_request(["first", "second"]))

        assert len(registry.logs_events) == 2
        assert len(registry.logs_requests) == 1

    def test_rum_batch_with_telemetry(self, registry):
        """One RUM delivery interleaving an error telemetry event."""
        registry.push(make_rum_request([
            make_action_event(),
            make_telemetry_event(status="error"),
            make_view_event(),
        ]))

        assert [event.type for event in registry.rum_events] == ["action", "view"]
        assert len(registry.rum_action_events) == 1
        assert len(registry.rum_view_events) == 1
        assert len(registry.telemetry_events) == 1
        assert len(registry.telemetry_error_events) == 1
        assert len(registry.telemetry_configuration_events) == 0

    def test_replay_segment(self, registry):
        """One replay delivery exposes its segment."""
        segment = make_segment()
        registry.push(make_replay_request(segment))

        assert len(registry.replay_segments) == 1
        assert registry.replay_segments[0] == segment

    def test_mixed_transports(self, registry):
        """A bridged logs delivery followed by a direct RUM delivery."""
        registry.push(make_logs_request(is_bridge=True))
        registry.push(make_rum_request([make_view_event()], is_bridge=False))

        assert not registry.has_only_bridge_requests

    def test_fresh_registry(self):
        """A freshly built registry exposes empty views."""
        registry = create_registry()

        assert registry.is_empty
        assert registry.has_only_bridge_requests
        assert registry.logs_events == []
        assert registry.rum_events == []
        assert registry.telemetry_events == []
        assert registry.replay_segments == []

    def test_reset_between_scenarios(self, registry):
        """Only traffic pushed after a reset remains visible."""
        registry.push(make_logs_request(["stale"]))
        registry.push(make_rum_request([make_action_event("stale")]))
        registry.push(make_replay_request())

        registry.reset()
        registry.push(make_rum_request([make_action_event("fresh")]))

        assert len(registry) == 1
        assert registry.logs_events == []
        assert registry.replay_segments == []
        assert [event.action["id"] for event in registry.rum_action_events] == ["fresh"]


class TestActionCollectionScenario:
    """Click tracking traffic as decoded from raw intake payloads."""

    def _push_raw(self, registry: IntakeRegistry, events, is_bridge=False):
        registry.push(parse_intake_request({
            "intakeType": "rum",
            "isBridge": is_bridge,
            "events": events,
        }))

    def test_action_associated_with_request(self, registry):
        """A click triggering a fetch links the resource to the action."""
        self._push_raw(registry, [make_view_event(), make_action_event("click-1")])
        self._push_raw(registry, [
            make_resource_event("document"),
            make_resource_event("fetch", action_id="click-1"),
            make_telemetry_event(telemetry_type="configuration"),
        ])

        actions = registry.rum_action_events
        fetches = [event for event in registry.rum_resource_events if event.resource["type"] == "fetch"]

        assert len(actions) == 1
        assert actions[0].action["target"] == {"name": "click me"}
        assert len(fetches) == 1
        assert fetches[0].action["id"] == actions[0].action["id"]
        assert len(registry.telemetry_configuration_events) == 1

    def test_error_click(self, registry):
        """An error thrown by a click handler reports an error event and frustration."""
        action = make_action_event()
        action["action"]["frustration"] = {"type": ["error_click"]}
        action["action"]["error"] = {"count": 1}
        view = make_view_event()
        view["view"]["frustration"] = {"count": 1}

        self._push_raw(registry, [action, make_error_event("Foo"), view])

        assert registry.rum_action_events[0].action["frustration"]["type"] == ["error_click"]
        assert registry.rum_error_events[0].error["message"] == "Foo"
        assert registry.rum_view_events[0].view["frustration"]["count"] == 1

    def test_view_action_counts(self, registry):
        """Each view reports the actions that started while it was active."""
        self._push_raw(registry, [
            make_action_event(),
            make_view_event("https://example.com/", action_count=1),
            make_view_event("https://example.com/other-view", action_count=0),
        ])

        views = {event.view["url"]: event for event in registry.rum_view_events}
        assert views["https://example.com/"].view["action"]["count"] == 1
        assert views["https://example.com/other-view"].view["action"]["count"] == 0

    def test_bridge_only_run(self, registry):
        """A run delivered entirely through the bridge."""
        self._push_raw(registry, [make_view_event()], is_bridge=True)
        registry.push(make_logs_request(is_bridge=True))

        assert registry.has_only_bridge_requests
