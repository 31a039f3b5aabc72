"""Tests for drawing surfaces.

Tests:
- Protocol conformance
- Command recording and polygon reconstruction
- SVG path generation, save/restore state and translation
- XML validity of rendered grids
"""

import math
import xml.etree.ElementTree as ET

import pytest

from gridsurface import DrawingSurface, Grid, RecordingSurface, SvgSurface

SVG_NS = "{http://www.w3.org/2000/svg}"


class TestRecordingSurface:

    def test_is_drawing_surface(self):
        assert isinstance(RecordingSurface(), DrawingSurface)
        assert isinstance(SvgSurface(10, 10), DrawingSurface)

    def test_records_calls(self):
        surface = RecordingSurface()
        surface.move_to(1, 2)
        surface.line_to(3, 4)
        surface.set_source_rgba(1, 0, 0)
        assert surface.commands == [
            ("move_to", (1, 2)),
            ("line_to", (3, 4)),
            ("set_source_rgba", (1, 0, 0, 1.0)),
        ]
        assert surface.calls("line_to") == [(3, 4)]

    def test_polygons(self):
        surface = RecordingSurface()
        surface.move_to(0, 0)
        surface.line_to(1, 0)
        surface.line_to(1, 1)
        surface.close_path()
        surface.set_source_rgba(0, 1, 0, 1)
        surface.fill_preserve()
        surface.stroke()
        assert surface.polygons() == [([(0, 0), (1, 0), (1, 1)], (0, 1, 0, 1))]

    def test_clear(self):
        surface = RecordingSurface()
        surface.save()
        surface.clear()
        assert surface.commands == []


class TestSvgSurface:

    def test_fill_then_stroke(self):
        surface = SvgSurface(100, 100)
        surface.move_to(0, 0)
        surface.line_to(10, 0)
        surface.line_to(10, 10)
        surface.close_path()
        surface.set_source_rgba(1, 0, 0, 1)
        surface.fill_preserve()
        surface.set_line_width(1)
        surface.set_source_rgba(0, 0, 0, 1)
        surface.stroke()
        assert surface.elements == [
            '<path d="M0.00,0.00 L10.00,0.00 L10.00,10.00 Z" fill="#ff0000" stroke="none"/>',
            '<path d="M0.00,0.00 L10.00,0.00 L10.00,10.00 Z" fill="none" stroke="#000000" '
            'stroke-width="1.00" stroke-linejoin="round"/>',
        ]

    def test_translate_and_restore(self):
        surface = SvgSurface(100, 100)
        surface.save()
        surface.translate(10, 20)
        surface.move_to(1, 1)
        surface.restore()
        surface.line_to(1, 1)
        surface.stroke()
        assert surface.elements[0].startswith('<path d="M11.00,21.00 L1.00,1.00"')

    def test_restore_keeps_path(self):
        surface = SvgSurface(100, 100)
        surface.save()
        surface.move_to(0, 0)
        surface.line_to(5, 5)
        surface.set_line_width(3)
        surface.restore()
        surface.stroke()
        assert 'd="M0.00,0.00 L5.00,5.00"' in surface.elements[0]
        assert 'stroke-width="2.00"' in surface.elements[0]

    def test_unbalanced_restore(self):
        with pytest.raises(RuntimeError):
            SvgSurface(10, 10).restore()

    def test_translucent_color(self):
        surface = SvgSurface(10, 10)
        surface.move_to(0, 0)
        surface.line_to(1, 1)
        surface.set_source_rgba(0, 0, 1, 0.5)
        surface.fill()
        assert 'fill="rgba(0,0,255,0.50)"' in surface.elements[0]

    def test_full_circle_uses_two_arcs(self):
        surface = SvgSurface(10, 10)
        surface.arc(5, 5, 2, 0, 2 * math.pi)
        surface.fill()
        d = surface.elements[0].split('d="')[1].split('"')[0]
        assert d.startswith("M7.00,5.00")
        assert d.count("A") == 2

    def test_empty_path_emits_nothing(self):
        surface = SvgSurface(10, 10)
        surface.fill()
        surface.stroke()
        assert surface.elements == []


class TestSvgRender:

    def test_rendered_grid_is_valid_svg(self):
        grid = Grid()
        grid.set_grid_size(6)
        grid.set_origin(200, 200)
        surface = SvgSurface(400, 400, background=(1, 1, 1, 1))
        drawn = grid.render(surface)

        root = ET.fromstring(surface.to_svg())
        assert root.tag == f"{SVG_NS}svg"
        assert root.attrib["viewBox"] == "0 0 400 400"
        assert len(root.findall(f"{SVG_NS}rect")) == 1
        assert len(root.findall(f"{SVG_NS}path")) == 2 * drawn

    def test_save_svg(self, tmp_path):
        grid = Grid()
        grid.set_grid_size(3)
        surface = SvgSurface(200, 200)
        grid.render(surface)
        out = tmp_path / "surface.svg"
        surface.save_svg(out)
        assert out.read_text(encoding="utf-8") == surface.to_svg()

    def test_save_pdf(self, tmp_path):
        try:
            import cairosvg  # noqa: F401
        except (ImportError, OSError):
            pytest.skip("cairosvg not available")
        grid = Grid()
        grid.set_grid_size(3)
        grid.set_origin(100, 100)
        surface = SvgSurface(200, 200)
        grid.render(surface)
        out = tmp_path / "surface.pdf"
        surface.save_pdf(out)
        assert out.read_bytes().startswith(b"%PDF")
