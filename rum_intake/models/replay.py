"""Pydantic models for session-replay segments and their sizing metadata."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class BrowserSegmentMetadata(BaseModel):
    """Identifies a replay segment and the time range it covers."""

    model_config = ConfigDict(extra="allow", frozen=True)

    application: Dict[str, Any] = Field(default_factory=dict, description="Application ({id})")
    session: Dict[str, Any] = Field(default_factory=dict, description="Session ({id})")
    view: Dict[str, Any] = Field(default_factory=dict, description="View ({id})")
    start: int = Field(description="Timestamp of the first record in milliseconds")
    end: int = Field(description="Timestamp of the last record in milliseconds")
    records_count: int = Field(description="Number of records in the segment")
    creation_reason: str = Field(
        description="Why the segment was flushed (init, segment_duration_limit, ...)"
    )
    index_in_view: int = Field(default=0, description="Position of the segment within its view")
    has_full_snapshot: bool = Field(
        default=False,
        description="Whether the segment contains a full DOM snapshot"
    )
    source: str = Field(default="browser", description="Recording source")


class BrowserSegment(BrowserSegmentMetadata):
    """A recorded chunk of session replay."""

    records: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Recorded replay records"
    )


class BrowserSegmentMetadataAndSegmentSizes(BrowserSegmentMetadata):
    """Segment metadata as sent alongside the segment upload."""

    raw_segment_size: int = Field(description="Uncompressed segment size in bytes")
    compressed_segment_size: int = Field(description="Compressed segment size in bytes")
