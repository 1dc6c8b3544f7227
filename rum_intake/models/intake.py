"""Pydantic models for decoded intake requests.

An intake request is one HTTP delivery to the mock collection endpoint, already
decoded by the transport layer. The ``intakeType`` tag selects exactly one of
three variants; wire field names are kept as aliases so raw decoded payloads
validate unchanged.
"""

from typing import Annotated, Any, Literal, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

from ..classification import classify_intake_request
from .events import LogsEvent, RumBatchEvent
from .replay import BrowserSegment, BrowserSegmentMetadataAndSegmentSizes


class IntakeRequestBase(BaseModel):
    """Common configuration for intake request variants."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class LogsIntakeRequest(IntakeRequestBase):
    """Batch of log events."""

    intake_type: Literal["logs"] = Field(default="logs", alias="intakeType")
    is_bridge: bool = Field(alias="isBridge", description="Delivered through the bridge transport")
    events: Tuple[LogsEvent, ...] = Field(default=(), description="Log events in emission order")


class RumIntakeRequest(IntakeRequestBase):
    """Batch of RUM events interleaved with telemetry events."""

    intake_type: Literal["rum"] = Field(default="rum", alias="intakeType")
    is_bridge: bool = Field(alias="isBridge", description="Delivered through the bridge transport")
    events: Tuple[RumBatchEvent, ...] = Field(
        default=(),
        description="RUM and telemetry events in emission order"
    )


class ReplayIntakeRequest(IntakeRequestBase):
    """Upload of a single session-replay segment.

    Replay is never delivered through the bridge transport, so producers must
    leave ``is_bridge`` False. The registry decides what to do when they don't.
    """

    intake_type: Literal["replay"] = Field(default="replay", alias="intakeType")
    is_bridge: bool = Field(default=False, alias="isBridge")
    segment: BrowserSegment = Field(description="Decoded replay segment")
    metadata: BrowserSegmentMetadataAndSegmentSizes = Field(
        description="Segment metadata and sizes sent with the upload"
    )
    filename: str = Field(description="Multipart filename of the segment")
    encoding: str = Field(description="Multipart encoding of the segment")
    mimetype: str = Field(description="Multipart mimetype of the segment")


def _intake_request_tag(value: Any) -> Any:
    intake_type = classify_intake_request(value)
    return intake_type.value if intake_type is not None else None


IntakeRequest = Annotated[
    Union[
        Annotated[LogsIntakeRequest, Tag("logs")],
        Annotated[RumIntakeRequest, Tag("rum")],
        Annotated[ReplayIntakeRequest, Tag("replay")],
    ],
    Discriminator(_intake_request_tag),
]

_intake_request_adapter = TypeAdapter(IntakeRequest)


def parse_intake_request(data: Mapping[str, Any]) -> Union[LogsIntakeRequest, RumIntakeRequest, ReplayIntakeRequest]:
    """Validate an already-decoded intake payload into its request variant.

    Args:
        data: Decoded request mapping, keyed by wire names (``intakeType``,
            ``isBridge``, ...)

    Returns:
        The matching LogsIntakeRequest, RumIntakeRequest or ReplayIntakeRequest

    Raises:
        pydantic.ValidationError: If the tag is unknown or fields are missing
    """
    return _intake_request_adapter.validate_python(data)
