"""Tests for the Rectangle value object."""

from cssbuilder.objects import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_get_area(self):
        assert Rectangle(10, 20).get_area() == 200

    def test_area_tracks_field_changes(self):
        r = Rectangle(2, 3)
        r.width = 5
        assert r.get_area() == 15

    def test_zero_sized(self):
        assert Rectangle(0, 7).get_area() == 0

    def test_keyword_construction(self):
        assert Rectangle(width=1.5, height=4) == Rectangle(1.5, 4)
