"""Data models for decoded SMAF containers."""

from smafkit.models.container import Container, ContentInfo, Metadata
from smafkit.models.track import TrackChunk, TrackKind

__all__ = [
    "Container",
    "ContentInfo",
    "Metadata",
    "TrackChunk",
    "TrackKind",
]
