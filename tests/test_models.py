"""Tests for the GPX Pydantic models."""
import pytest
from pydantic import ValidationError


class TestGpxWaypoint:
    def test_lat_lon_required(self):
        from gpx_reader.models import GpxWaypoint
        with pytest.raises(ValidationError):
            GpxWaypoint()

    def test_optional_fields_default_empty(self):
        from gpx_reader.models import GpxWaypoint
        wp = GpxWaypoint(lat=47.6, lon=-122.3)
        assert wp.ele == 0.0
        assert wp.name == ""
        assert wp.waypoint_type == ""
        assert wp.sat == 0
        assert wp.dgpsid == 0
        assert wp.links == ()
        assert wp.extensions is None

    def test_frozen(self):
        from gpx_reader.models import GpxWaypoint
        wp = GpxWaypoint(lat=47.6, lon=-122.3)
        with pytest.raises(ValidationError):
            wp.lat = 0.0

    def test_links_are_immutable(self):
        from gpx_reader.models import GpxLink, GpxWaypoint
        wp = GpxWaypoint(lat=0.0, lon=0.0, links=[GpxLink(href="a")])
        assert wp.links == (GpxLink(href="a"),)
        with pytest.raises(AttributeError):
            wp.links.append(GpxLink(href="b"))
        with pytest.raises(TypeError):
            wp.links[0] = GpxLink(href="b")

    def test_links_reject_wrong_type(self):
        from gpx_reader.models import GpxWaypoint
        with pytest.raises(ValidationError):
            GpxWaypoint(lat=0.0, lon=0.0, links=["not a link"])


class TestGpx:
    def test_defaults(self):
        from gpx_reader.models import Gpx
        g = Gpx()
        assert g.version == "1.1"
        assert g.creator == ""
        assert g.waypoints == ()
        assert g.routes == ()
        assert g.tracks == ()
        assert g.metadata.name == ""
        assert g.metadata.bounds.minlat == 0.0

    def test_version_must_be_1_1(self):
        from gpx_reader.models import Gpx
        with pytest.raises(ValidationError):
            Gpx(version="1.0")

    def test_extensions_accepts_element(self):
        from xml.etree.ElementTree import Element
        from gpx_reader.models import Gpx
        ext = Element("extensions")
        assert Gpx(extensions=ext).extensions is ext

    def test_summary_counts(self):
        from gpx_reader.models import (
            Gpx, GpxRoute, GpxTrack, GpxTrackSegment, GpxWaypoint,
        )
        p = GpxWaypoint(lat=1.0, lon=2.0)
        g = Gpx(
            creator="test",
            waypoints=[p],
            routes=[GpxRoute(points=[p, p])],
            tracks=[GpxTrack(segments=[
                GpxTrackSegment(points=[p, p, p]),
                GpxTrackSegment(points=[p]),
            ])],
        )
        assert g.summary() == {
            "version": "1.1",
            "creator": "test",
            "waypoints": 1,
            "routes": 1,
            "route_points": 2,
            "tracks": 1,
            "track_segments": 2,
            "track_points": 4,
        }


class TestGpxAuthor:
    def test_nested_defaults(self):
        from gpx_reader.models import GpxAuthor
        a = GpxAuthor()
        assert a.email.id == ""
        assert a.email.domain == ""
        assert a.link.href == ""


class TestExtensions:
    def test_json_dump_serializes_element(self):
        import json
        from xml.etree.ElementTree import Element, SubElement
        from gpx_reader.models import GpxTrackSegment
        ext = Element("extensions")
        SubElement(ext, "gap").text = "true"
        seg = GpxTrackSegment(extensions=ext)
        dumped = json.loads(seg.model_dump_json())
        assert dumped == {"points": [], "extensions": "<extensions><gap>true</gap></extensions>"}

    def test_python_dump_keeps_element(self):
        from xml.etree.ElementTree import Element
        from gpx_reader.models import Gpx
        ext = Element("extensions")
        assert Gpx(extensions=ext).model_dump()["extensions"] is ext

    def test_missing_extensions_dump_as_null(self):
        import json
        from gpx_reader.models import Gpx
        assert json.loads(Gpx().model_dump_json())["extensions"] is None
