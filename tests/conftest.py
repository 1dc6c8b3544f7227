"""Shared test fixtures and configuration for intake registry tests."""

import pytest
from pathlib import Path
import sys

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rum_intake.registry import IntakeRegistry
from tests.factories import (
    make_action_event,
    make_error_event,
    make_resource_event,
    make_telemetry_event,
    make_view_event,
)


@pytest.fixture
def registry():
    """Fresh intake registry for each test."""
    registry = IntakeRegistry()
    yield registry
    registry.reset()


@pytest.fixture
def mixed_rum_batch():
    """RUM batch interleaving every event kind with telemetry."""
    return [
        make_action_event(),
        make_telemetry_event(status="error"),
        make_view_event(),
        make_resource_event(),
        make_telemetry_event(telemetry_type="configuration"),
        make_error_event(),
        {"type": "long_task", "long_task": {"duration": 60}},
    ]


@pytest.fixture
def temp_config_file(tmp_path):
    """Write a registry config file and return its path."""
    def _write(content):
        config_path = tmp_path / "intake.yaml"
        config_path.write_text(content)
        return config_path
    return _write
