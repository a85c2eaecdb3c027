"""Pydantic domain models for a GPX 1.1 document.

Optional scalars left out of the source document keep their zero/empty
default, so callers cannot tell ``<sat>0</sat>`` from a missing ``<sat>``.

``extensions`` fields hold the original ``<extensions>`` element. Elements
compare by identity, so two parses of the same document are not equal when
either carries extensions. JSON dumps render them as serialized XML.
"""

from typing import Annotated, Literal, Optional
from xml.etree.ElementTree import Element, tostring

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

Extensions = Annotated[
    Element,
    PlainSerializer(
        lambda elem: tostring(elem, encoding="unicode"),
        return_type=str,
        when_used="json",
    ),
]


class GpxEmail(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    domain: str = ""


class GpxLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str = ""
    text: str = ""
    link_type: str = ""


class GpxAuthor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: GpxEmail = Field(default_factory=GpxEmail)
    # The schema allows one link per person, unlike the other elements.
    link: GpxLink = Field(default_factory=GpxLink)


class GpxCopyright(BaseModel):
    model_config = ConfigDict(frozen=True)

    author: str = ""
    year: str = ""
    license: str = ""


class GpxBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    minlat: float = 0.0
    minlon: float = 0.0
    maxlat: float = 0.0
    maxlon: float = 0.0


class GpxMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = ""
    desc: str = ""
    author: GpxAuthor = Field(default_factory=GpxAuthor)
    copyright: GpxCopyright = Field(default_factory=GpxCopyright)
    links: tuple[GpxLink, ...] = Field(default_factory=tuple)
    time: str = ""
    keywords: str = ""
    bounds: GpxBounds = Field(default_factory=GpxBounds)
    extensions: Optional[Extensions] = None


class GpxWaypoint(BaseModel):
    """A wpt, rtept or trkpt element."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    lat: float
    lon: float
    ele: float = 0.0
    time: str = ""
    magvar: float = 0.0
    geoidheight: float = 0.0
    name: str = ""
    cmt: str = ""
    desc: str = ""
    src: str = ""
    links: tuple[GpxLink, ...] = Field(default_factory=tuple)
    sym: str = ""
    waypoint_type: str = ""
    fix: str = ""
    sat: int = 0
    hdop: float = 0.0
    vdop: float = 0.0
    pdop: float = 0.0
    ageofdgpsdata: float = 0.0
    dgpsid: int = 0
    extensions: Optional[Extensions] = None


class GpxRoute(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = ""
    cmt: str = ""
    desc: str = ""
    src: str = ""
    links: tuple[GpxLink, ...] = Field(default_factory=tuple)
    number: int = 0
    route_type: str = ""
    extensions: Optional[Extensions] = None
    points: tuple[GpxWaypoint, ...] = Field(default_factory=tuple)


class GpxTrackSegment(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    points: tuple[GpxWaypoint, ...] = Field(default_factory=tuple)
    extensions: Optional[Extensions] = None


class GpxTrack(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = ""
    cmt: str = ""
    desc: str = ""
    src: str = ""
    links: tuple[GpxLink, ...] = Field(default_factory=tuple)
    number: int = 0
    track_type: str = ""
    extensions: Optional[Extensions] = None
    segments: tuple[GpxTrackSegment, ...] = Field(default_factory=tuple)


class Gpx(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    version: Literal["1.1"] = "1.1"
    creator: str = ""
    metadata: GpxMetadata = Field(default_factory=GpxMetadata)
    waypoints: tuple[GpxWaypoint, ...] = Field(default_factory=tuple)
    routes: tuple[GpxRoute, ...] = Field(default_factory=tuple)
    tracks: tuple[GpxTrack, ...] = Field(default_factory=tuple)
    extensions: Optional[Extensions] = None

    def summary(self) -> dict:
        return {
            "version": self.version,
            "creator": self.creator,
            "waypoints": len(self.waypoints),
            "routes": len(self.routes),
            "route_points": sum(len(r.points) for r in self.routes),
            "tracks": len(self.tracks),
            "track_segments": sum(len(t.segments) for t in self.tracks),
            "track_points": sum(
                len(s.points) for t in self.tracks for s in t.segments
            ),
        }
