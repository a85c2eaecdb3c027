"""GPX 1.1 parsing.

Maps the XML tree onto the models in ``gpx_reader.models`` with one small
function per schema type, composed by recursive descent:
gpx -> metadata/wpt/rte/trk -> author/copyright/link/bounds, and
wpt-shaped points inside rte and trkseg.
"""

import logging
import re
from typing import Optional, Union
from xml.etree.ElementTree import Element

from gpx_reader.errors import (
    MalformedNumberError,
    UnexpectedRootError,
    UnsupportedVersionError,
)
from gpx_reader.models import (
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
from .xml import attr, child, child_text, children, inner_text, load_root, local_name

logger = logging.getLogger(__name__)

GPX_VERSION = "1.1"
GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"

_WAYPOINT_TEXT_FIELDS = {
    "time": "time",
    "name": "name",
    "cmt": "cmt",
    "desc": "desc",
    "src": "src",
    "sym": "sym",
    "type": "waypoint_type",
    "fix": "fix",
}
_WAYPOINT_FLOAT_FIELDS = (
    "ele", "magvar", "geoidheight", "hdop", "vdop", "pdop", "ageofdgpsdata",
)
_WAYPOINT_INT_FIELDS = ("sat", "dgpsid")

# ASCII decimal literals only, no "_" separators or surrounding whitespace.
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_float(text: str, field: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise MalformedNumberError(field, text)
    return float(text)


def _to_int(text: str, field: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise MalformedNumberError(field, text)
    return int(text)


def _float_attr(elem: Element, name: str) -> float:
    return _to_float(attr(elem, name), f"{local_name(elem)}.{name}")


def _optional_float(elem: Element, tag: str) -> Optional[float]:
    node = child(elem, tag)
    if node is None:
        return None
    return _to_float(inner_text(node), f"{local_name(elem)}.{tag}")


def _optional_int(elem: Element, tag: str) -> Optional[int]:
    node = child(elem, tag)
    if node is None:
        return None
    return _to_int(inner_text(node), f"{local_name(elem)}.{tag}")


def _extensions(elem: Element) -> Optional[Element]:
    return child(elem, "extensions")


def _links(elem: Element) -> tuple[GpxLink, ...]:
    return tuple(_parse_link(link) for link in children(elem, "link"))


def _parse_email(elem: Element) -> GpxEmail:
    return GpxEmail(id=attr(elem, "id"), domain=attr(elem, "domain"))


def _parse_link(elem: Element) -> GpxLink:
    return GpxLink(
        href=attr(elem, "href"),
        text=child_text(elem, "text"),
        link_type=child_text(elem, "type"),
    )


def _parse_author(elem: Element) -> GpxAuthor:
    """Parse a personType element. Only the first <link> is kept."""
    fields = {"name": child_text(elem, "name")}

    email = child(elem, "email")
    if email is not None:
        fields["email"] = _parse_email(email)

    link = child(elem, "link")
    if link is not None:
        fields["link"] = _parse_link(link)

    return GpxAuthor(**fields)


def _parse_copyright(elem: Element) -> GpxCopyright:
    return GpxCopyright(
        author=attr(elem, "author"),
        year=child_text(elem, "year"),
        license=child_text(elem, "license"),
    )


def _parse_bounds(elem: Element) -> GpxBounds:
    return GpxBounds(
        minlat=_float_attr(elem, "minlat"),
        minlon=_float_attr(elem, "minlon"),
        maxlat=_float_attr(elem, "maxlat"),
        maxlon=_float_attr(elem, "maxlon"),
    )


def _parse_metadata(elem: Element) -> GpxMetadata:
    fields = {
        "name": child_text(elem, "name"),
        "desc": child_text(elem, "desc"),
        "time": child_text(elem, "time"),
        "keywords": child_text(elem, "keywords"),
        "links": _links(elem),
        "extensions": _extensions(elem),
    }

    author = child(elem, "author")
    if author is not None:
        fields["author"] = _parse_author(author)

    copyright_ = child(elem, "copyright")
    if copyright_ is not None:
        fields["copyright"] = _parse_copyright(copyright_)

    bounds = child(elem, "bounds")
    if bounds is not None:
        fields["bounds"] = _parse_bounds(bounds)

    return GpxMetadata(**fields)


def _parse_waypoint(elem: Element) -> GpxWaypoint:
    """Parse a wpt, rtept or trkpt element.

    lat and lon are required; every other field is optional and keeps its
    model default when the element is missing.
    """
    fields = {
        "lat": _float_attr(elem, "lat"),
        "lon": _float_attr(elem, "lon"),
        "links": _links(elem),
        "extensions": _extensions(elem),
    }

    for tag, name in _WAYPOINT_TEXT_FIELDS.items():
        fields[name] = child_text(elem, tag)

    for tag in _WAYPOINT_FLOAT_FIELDS:
        value = _optional_float(elem, tag)
        if value is not None:
            fields[tag] = value

    for tag in _WAYPOINT_INT_FIELDS:
        value = _optional_int(elem, tag)
        if value is not None:
            fields[tag] = value

    return GpxWaypoint(**fields)


def _parse_route(elem: Element) -> GpxRoute:
    number = _optional_int(elem, "number")
    return GpxRoute(
        name=child_text(elem, "name"),
        cmt=child_text(elem, "cmt"),
        desc=child_text(elem, "desc"),
        src=child_text(elem, "src"),
        links=_links(elem),
        number=number if number is not None else 0,
        route_type=child_text(elem, "type"),
        extensions=_extensions(elem),
        points=tuple(_parse_waypoint(p) for p in children(elem, "rtept")),
    )


def _parse_track_segment(elem: Element) -> GpxTrackSegment:
    return GpxTrackSegment(
        points=tuple(_parse_waypoint(p) for p in children(elem, "trkpt")),
        extensions=_extensions(elem),
    )


def _parse_track(elem: Element) -> GpxTrack:
    number = _optional_int(elem, "number")
    return GpxTrack(
        name=child_text(elem, "name"),
        cmt=child_text(elem, "cmt"),
        desc=child_text(elem, "desc"),
        src=child_text(elem, "src"),
        links=_links(elem),
        number=number if number is not None else 0,
        track_type=child_text(elem, "type"),
        extensions=_extensions(elem),
        segments=tuple(_parse_track_segment(s) for s in children(elem, "trkseg")),
    )


def parse_gpx(data: Union[str, bytes]) -> Gpx:
    """Parse a GPX 1.1 document into a ``Gpx`` model.

    Args:
        data: The complete XML document as text or bytes.

    Returns:
        Gpx: The fully populated document.

    Raises:
        xml.etree.ElementTree.ParseError: The input is not well-formed XML.
        UnexpectedRootError: The root element is not <gpx>.
        UnsupportedVersionError: The version attribute is not "1.1".
        MalformedNumberError: A numeric attribute or element is not a number.
    """
    root = load_root(data)

    tag = local_name(root)
    if tag != "gpx":
        logger.debug("Rejecting document with root element <%s>", tag)
        raise UnexpectedRootError(tag)

    version = attr(root, "version")
    if version != GPX_VERSION:
        logger.debug("Rejecting GPX document with version %r", version)
        raise UnsupportedVersionError(version, expected=GPX_VERSION)

    fields = {
        "version": GPX_VERSION,
        "creator": attr(root, "creator"),
        "extensions": _extensions(root),
    }

    metadata = child(root, "metadata")
    if metadata is not None:
        fields["metadata"] = _parse_metadata(metadata)

    fields["waypoints"] = tuple(_parse_waypoint(w) for w in children(root, "wpt"))
    fields["routes"] = tuple(_parse_route(r) for r in children(root, "rte"))
    fields["tracks"] = tuple(_parse_track(t) for t in children(root, "trk"))

    gpx = Gpx(**fields)
    logger.debug("Parsed GPX document: %s", gpx.summary())
    return gpx
