"""Unit tests for the layout engine.

Uses a small in-memory outline provider whose units per em equal the font
size, so font units map one-to-one onto canvas units.
"""

from unittest.mock import MagicMock

import pytest

from extrudemark.config import BrandSettings
from extrudemark.core.layout import LayoutEngine
from extrudemark.core.text import is_whitespace, iter_clusters
from extrudemark.domain import Close, GlyphOutline, LayoutMode, LineTo, MoveTo, Point
from extrudemark.exceptions import GlyphNotFoundError

ADVANCE = 10


class FakeProvider:
    """Every letter is an 8x8 box with a 10-unit advance."""

    def __init__(self, kerning: dict[tuple[str, str], float] | None = None) -> None:
        self._kerning = kerning or {}

    @property
    def units_per_em(self) -> int:
        return 100

    def char_to_outline(self, char: str) -> GlyphOutline:
        if char == " ":
            return GlyphOutline(commands=(), advance_width=ADVANCE)
        if not char.isalpha():
            raise GlyphNotFoundError(char)
        commands = (
            MoveTo(Point(0, 0)),
            LineTo(Point(0, 8)),
            LineTo(Point(8, 8)),
            LineTo(Point(8, 0)),
            Close(),
        )
        return GlyphOutline(commands=commands, advance_width=ADVANCE)

    def kerning(self, prev: str, curr: str) -> float:
        return self._kerning.get((prev, curr), 0.0)


def make_settings(**options) -> BrandSettings:
    base = {"fontSize": 100, "tracking": 0}
    base.update(options)
    return BrandSettings.from_options(base)


class TestTextClusters:
    """Tests for grapheme cluster iteration."""

    def test_plain_text(self):
        assert list(iter_clusters("AB C")) == ["A", "B", " ", "C"]

    def test_decomposed_accent_is_composed(self):
        assert list(iter_clusters("Cafe\u0301")) == ["C", "a", "f", "\u00e9"]

    def test_mark_without_precomposed_form_stays_attached(self):
        assert list(iter_clusters("x\u0301y")) == ["x\u0301", "y"]

    def test_leading_mark(self):
        assert list(iter_clusters("\u0301a")) == ["\u0301", "a"]

    def test_is_whitespace(self):
        assert is_whitespace(" ")
        assert is_whitespace("\t")
        assert not is_whitespace("A")


class TestMeasure:
    """Tests for LayoutEngine.measure."""

    def test_measure_includes_spaces_and_tracking(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        assert engine.measure("A B", font_size=100, tracking=0) == 30
        assert engine.measure("A B", font_size=100, tracking=2) == 36

    def test_measure_scales_with_font_size(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        assert engine.measure("AB", font_size=50, tracking=0) == 10

    def test_measure_applies_kerning(self):
        engine = LayoutEngine(FakeProvider({("A", "V"): -2}), make_settings())
        assert engine.measure("AV", font_size=100, tracking=0) == 18


class TestAutoLayout:
    """Tests for auto-sized wordmark layout."""

    def test_space_advances_without_drawing(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        result = engine.layout_wordmark("A B")
        assert len(result.geometries) == 2
        assert result.geometries[0].placement.origin == Point(0, 0)
        assert result.geometries[1].placement.origin == Point(20, 0)
        assert [g.placement.index for g in result.geometries] == [0, 1]

    def test_kerning_moves_next_glyph(self):
        engine = LayoutEngine(FakeProvider({("A", "V"): -2}), make_settings())
        result = engine.layout_wordmark("AV")
        assert result.geometries[1].placement.origin.x == 8

    def test_front_maps_to_y_down_canvas(self):
        engine = LayoutEngine(FakeProvider(), make_settings(tilt=0))
        front = engine.layout_wordmark("A").geometries[0].front
        assert front[0] == MoveTo(Point(0, 0))
        assert front[1] == LineTo(Point(0, -8))

    def test_translation_moves_content_to_origin(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        result = engine.layout_wordmark("AB")
        assert result.mode == LayoutMode.AUTO
        assert result.bounds is not None
        assert result.translate_x == -result.bounds.min_x
        assert result.translate_y == -result.bounds.min_y
        assert result.width == pytest.approx(result.bounds.width)
        assert result.height == pytest.approx(result.bounds.height)

    def test_bounds_cover_rotated_front_and_back(self):
        engine = LayoutEngine(FakeProvider(), make_settings(tilt=30))
        result = engine.layout_wordmark("ABC")
        assert result.bounds is not None
        for geometry in result.geometries:
            rotation = geometry.placement.rotation
            for face in geometry.faces:
                for vertex in face.polygon:
                    assert result.bounds.contains(vertex.rotated(geometry.center, rotation))

    def test_without_jitter_offsets_match_depth_angle(self):
        engine = LayoutEngine(
            FakeProvider(),
            make_settings(tilt=0, depthJitter=0, depthVariance=0, depthX=12, depthY=-5),
        )
        geometry = engine.layout_wordmark("A").geometries[0]
        assert geometry.placement.rotation == 0
        assert geometry.placement.offset.x == pytest.approx(12.0)
        assert geometry.placement.offset.y == pytest.approx(-5.0)

    def test_empty_text(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        result = engine.layout_wordmark("")
        assert result.is_empty
        assert result.bounds is None
        assert result.width == 0
        assert result.height == 0

    def test_whitespace_only_text(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        result = engine.layout_wordmark("   ")
        assert result.is_empty
        assert result.bounds is None

    def test_missing_glyph_raises(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        with pytest.raises(GlyphNotFoundError):
            engine.layout_wordmark("A1")


class TestDeterminism:
    """Tests for seeded reproducibility."""

    def test_same_seed_same_layout(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        assert engine.layout_wordmark("ABC", seed=7) == engine.layout_wordmark("ABC", seed=7)

    def test_separate_engines_agree(self):
        first = LayoutEngine(FakeProvider(), make_settings(seed=11)).layout_wordmark("ABC")
        second = LayoutEngine(FakeProvider(), make_settings(seed=11)).layout_wordmark("ABC")
        assert first == second

    def test_seed_changes_rotation(self):
        engine = LayoutEngine(FakeProvider(), make_settings())
        first = engine.layout_wordmark("ABC", seed=1)
        second = engine.layout_wordmark("ABC", seed=2)
        assert [g.placement.rotation for g in first.geometries] != [
            g.placement.rotation for g in second.geometries
        ]

    def test_rotation_within_tilt(self):
        engine = LayoutEngine(FakeProvider(), make_settings(tilt=10))
        result = engine.layout_wordmark("ABCDEFGH")
        for geometry in result.geometries:
            assert -5.0 <= geometry.placement.rotation < 5.0


class TestFixedLayout:
    """Tests for fixed-canvas wordmark and icon layout."""

    def test_text_centered_by_measured_width(self):
        engine = LayoutEngine(FakeProvider(), make_settings(width=100, height=50))
        result = engine.layout_wordmark("AB")
        assert result.mode == LayoutMode.FIXED
        assert result.width == 100
        assert result.height == 50
        assert result.translate_x == 0
        origin = result.geometries[0].placement.origin
        assert origin.x == 40
        assert origin.y == pytest.approx(34.0)

    def test_four_glyphs_in_hundred_wide_canvas(self):
        engine = LayoutEngine(FakeProvider(), make_settings(width=100, height=50))
        result = engine.layout_wordmark("ABCD")
        assert [g.placement.origin.x for g in result.geometries] == [30, 40, 50, 60]

    def test_empty_fixed_canvas(self):
        engine = LayoutEngine(FakeProvider(), make_settings(width=100, height=50))
        result = engine.layout_wordmark("")
        assert result.is_empty
        assert result.bounds is None
        assert (result.width, result.height) == (100, 50)

    def test_explicit_baseline(self):
        engine = LayoutEngine(FakeProvider(), make_settings(width=100, height=50, baseline=20))
        result = engine.layout_wordmark("A")
        assert result.geometries[0].placement.origin.y == 20

    def test_icon(self):
        engine = LayoutEngine(FakeProvider(), make_settings(depthJitter=0))
        result = engine.layout_icon("A")
        assert result.mode == LayoutMode.FIXED
        assert result.width == 256
        assert result.height == 256
        placement = result.geometries[0].placement
        assert placement.rotation == -6
        assert placement.font_size == pytest.approx(256 * 0.62)
        assert placement.origin.y == pytest.approx(256 * 0.70)

    def test_icon_is_not_jittered(self):
        """The icon ignores the seed."""
        first = LayoutEngine(FakeProvider(), make_settings(seed=1)).layout_icon("A")
        second = LayoutEngine(FakeProvider(), make_settings(seed=2)).layout_icon("A")
        assert first == second

    def test_icon_uses_configured_text(self):
        engine = LayoutEngine(FakeProvider(), make_settings(iconText="Q"))
        result = engine.layout_icon()
        assert result.geometries[0].placement.character == "Q"


class TestLayoutLogging:
    """Tests for per-glyph log events."""

    def test_layout_without_logger_is_silent(self, capsys):
        engine = LayoutEngine(FakeProvider(), make_settings())
        engine.layout_wordmark("AB")
        engine.layout_wordmark("AB", seed=3)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_placed_glyphs_reported_to_render_logger(self):
        render_logger = MagicMock()
        engine = LayoutEngine(FakeProvider(), make_settings(), render_logger=render_logger)
        engine.layout_wordmark("A B")
        assert render_logger.log_glyph.call_count == 2
        first = render_logger.log_glyph.call_args_list[0]
        assert first.args == ("A",)
        assert first.kwargs["x"] == 0
        assert first.kwargs["faces"] == 4
