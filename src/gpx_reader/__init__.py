"""Parse GPX 1.1 documents into pydantic models."""

from .core.gpx import GPX_NAMESPACE, GPX_VERSION, parse_gpx
from .errors import (
    GpxParseError,
    MalformedNumberError,
    UnexpectedRootError,
    UnsupportedVersionError,
)
from .models import (
    Gpx,
    GpxAuthor,
    GpxBounds,
    GpxCopyright,
    GpxEmail,
    GpxLink,
    GpxMetadata,
    GpxRoute,
    GpxTrack,
    GpxTrackSegment,
    GpxWaypoint,
)

__all__ = [
    "GPX_NAMESPACE",
    "GPX_VERSION",
    "parse_gpx",
    "GpxParseError",
    "MalformedNumberError",
    "UnexpectedRootError",
    "UnsupportedVersionError",
    "Gpx",
    "GpxAuthor",
    "GpxBounds",
    "GpxCopyright",
    "GpxEmail",
    "GpxLink",
    "GpxMetadata",
    "GpxRoute",
    "GpxTrack",
    "GpxTrackSegment",
    "GpxWaypoint",
]
