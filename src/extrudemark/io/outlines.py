"""Outline providers: characters to path commands and metrics.

This module provides the OutlineProvider protocol consumed by the layout
engine and two implementations:

- FontOutlineProvider: reads TTF/OTF fonts with fonttools
- BlockOutlineProvider: built-in block letters for runs without a font
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import DecomposingRecordingPen
from fontTools.ttLib import TTFont

from extrudemark.domain import (
    Close,
    CubicTo,
    GlyphOutline,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadTo,
)
from extrudemark.exceptions import FontLoadError, GlyphNotFoundError, MalformedOutlineError


class OutlineProvider(Protocol):
    """Source of glyph outlines and metrics in font units."""

    @property
    def units_per_em(self) -> int: ...

    def char_to_outline(self, char: str) -> GlyphOutline: ...

    def kerning(self, prev: str, curr: str) -> float: ...


def recording_to_commands(recording: Iterable[tuple[str, tuple[Any, ...]]]) -> tuple[PathCommand, ...]:
    """Convert a RecordingPen recording to path commands.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (xn, yn)))  # Quadratic, n-1 off-curve points
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ())
    - ('endPath', ())  # Open subpath

    TrueType runs of off-curve points are split at their implied on-curve
    points, and cubic "super-Bezier" segments into plain cubics. A contour made
    only of off-curve points starts at the midpoint of its last and first
    points.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        Tuple of path commands

    Raises:
        MalformedOutlineError: For empty quadratic contours or unknown pen
            operations
    """
    commands: list[PathCommand] = []

    for operator, args in recording:
        if operator == "moveTo":
            commands.append(MoveTo(Point(*args[0])))

        elif operator == "lineTo":
            commands.append(LineTo(Point(*args[0])))

        elif operator == "qCurveTo":
            if args[-1] is None:
                off_curve = tuple(args[:-1])
                if not off_curve:
                    raise MalformedOutlineError("Quadratic contour without any points")
                # All off-curve: start at the implied point between last and first
                (x0, y0), (x1, y1) = off_curve[-1], off_curve[0]
                start = (0.5 * (x0 + x1), 0.5 * (y0 + y1))
                commands.append(MoveTo(Point(*start)))
                for control, point in decomposeQuadraticSegment(off_curve + (start,)):
                    commands.append(QuadTo(Point(*control), Point(*point)))
                continue
            if len(args) == 1:
                commands.append(LineTo(Point(*args[0])))
                continue
            for control, point in decomposeQuadraticSegment(args):
                commands.append(QuadTo(Point(*control), Point(*point)))

        elif operator == "curveTo":
            if len(args) == 1:
                commands.append(LineTo(Point(*args[0])))
                continue
            if len(args) == 2:
                commands.append(QuadTo(Point(*args[0]), Point(*args[1])))
                continue
            segments = [args] if len(args) == 3 else decomposeSuperBezierSegment(args)
            for c1, c2, point in segments:
                commands.append(CubicTo(Point(*c1), Point(*c2), Point(*point)))

        elif operator == "closePath":
            commands.append(Close())

        elif operator == "endPath":
            continue

        else:
            raise MalformedOutlineError(f"Unsupported pen operation '{operator}'")

    return tuple(commands)


class FontOutlineProvider:
    """Outline provider backed by a TTF/OTF font.

    Kerning is read from the legacy 'kern' table (format 0) and from GPOS
    pair adjustment lookups referenced by the 'kern' feature.

    Example:
        with FontOutlineProvider.from_path(Path("font.ttf")) as provider:
            outline = provider.char_to_outline("A")
    """

    def __init__(self, font: TTFont) -> None:
        """Initialize the provider.

        Args:
            font: A loaded fonttools TTFont
        """
        self._font = font
        self._glyph_set = font.getGlyphSet()
        self._cmap = font.getBestCmap() or {}
        self._metrics = font["hmtx"].metrics
        self._kern_pairs = _kern_table_pairs(font)
        self._pair_subtables = _gpos_kern_subtables(font)
        self._kern_cache: dict[tuple[str, str], float] = {}

    @classmethod
    def from_path(cls, font_path: Path) -> "FontOutlineProvider":
        """Load a font file.

        Args:
            font_path: Path to the TTF or OTF font file

        Returns:
            Provider for the font

        Raises:
            FontLoadError: If the file is missing or not a usable font
        """
        if not font_path.exists():
            raise FontLoadError(str(font_path), "file not found")

        try:
            font = TTFont(str(font_path))
            return cls(font)
        except Exception as e:
            raise FontLoadError(str(font_path), str(e)) from e

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    def glyph_name(self, char: str) -> str:
        """Map a single character to its glyph name.

        Raises:
            GlyphNotFoundError: If the character is not in the cmap
        """
        if len(char) != 1:
            raise GlyphNotFoundError(char)
        name = self._cmap.get(ord(char))
        if name is None:
            raise GlyphNotFoundError(char)
        return name

    def char_to_outline(self, char: str) -> GlyphOutline:
        """Get the outline of a character in font units.

        Composite glyphs are decomposed into plain outlines.

        Args:
            char: A single character

        Returns:
            GlyphOutline with commands and advance width

        Raises:
            GlyphNotFoundError: If the font has no glyph for the character
        """
        name = self.glyph_name(char)
        pen = DecomposingRecordingPen(self._glyph_set)
        self._glyph_set[name].draw(pen)
        advance_width, _lsb = self._metrics[name]
        return GlyphOutline(commands=recording_to_commands(pen.value), advance_width=advance_width)

    def kerning(self, prev: str, curr: str) -> float:
        """Kerning adjustment between two characters in font units.

        Characters missing from the cmap have no kerning.
        """
        left = self._cmap.get(ord(prev)) if len(prev) == 1 else None
        right = self._cmap.get(ord(curr)) if len(curr) == 1 else None
        if left is None or right is None:
            return 0.0

        key = (left, right)
        if key not in self._kern_cache:
            value = _gpos_pair_value(self._pair_subtables, left, right)
            if value is None:
                value = self._kern_pairs.get(key, 0)
            self._kern_cache[key] = float(value)
        return self._kern_cache[key]

    def close(self) -> None:
        """Close the font file and free resources."""
        self._font.close()

    def __enter__(self) -> "FontOutlineProvider":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def _kern_table_pairs(font: TTFont) -> dict[tuple[str, str], int]:
    """Collect format 0 pairs from the legacy 'kern' table."""
    pairs: dict[tuple[str, str], int] = {}
    if "kern" not in font:
        return pairs
    for subtable in font["kern"].kernTables:
        if getattr(subtable, "format", None) != 0:
            continue
        for pair, value in subtable.kernTable.items():
            pairs.setdefault(pair, value)
    return pairs


def _gpos_kern_subtables(font: TTFont) -> list[Any]:
    """Pair adjustment subtables of lookups used by the GPOS 'kern' feature."""
    if "GPOS" not in font:
        return []
    table = font["GPOS"].table
    if table.FeatureList is None or table.LookupList is None:
        return []

    indices: set[int] = set()
    for record in table.FeatureList.FeatureRecord:
        if record.FeatureTag == "kern":
            indices.update(record.Feature.LookupListIndex)

    subtables = []
    for index in sorted(indices):
        lookup = table.LookupList.Lookup[index]
        for subtable in lookup.SubTable:
            if lookup.LookupType == 9:
                if subtable.ExtensionLookupType != 2:
                    continue
                subtable = subtable.ExtSubTable
            elif lookup.LookupType != 2:
                continue
            subtables.append(subtable)
    return subtables


def _x_advance(value_record: Any) -> int:
    if value_record is None:
        return 0
    return getattr(value_record, "XAdvance", 0) or 0


def _gpos_pair_value(subtables: list[Any], left: str, right: str) -> int | None:
    """First matching pair adjustment, or None if no subtable covers the pair."""
    for subtable in subtables:
        coverage = subtable.Coverage.glyphs
        if left not in coverage:
            continue

        if subtable.Format == 1:
            pair_set = subtable.PairSet[coverage.index(left)]
            for record in pair_set.PairValueRecord:
                if record.SecondGlyph == right:
                    return _x_advance(record.Value1)

        elif subtable.Format == 2:
            class1 = subtable.ClassDef1.classDefs.get(left, 0) if subtable.ClassDef1 else 0
            class2 = subtable.ClassDef2.classDefs.get(right, 0) if subtable.ClassDef2 else 0
            record = subtable.Class1Record[class1].Class2Record[class2]
            return _x_advance(record.Value1)

    return None


# 5x7 block letters; row 0 is the top row
BLOCK_GLYPHS: dict[str, tuple[str, ...]] = {
    "A": (".###.", "#...#", "#...#", "#####", "#...#", "#...#", "#...#"),
    "B": ("####.", "#...#", "#...#", "####.", "#...#", "#...#", "####."),
    "C": (".###.", "#...#", "#....", "#....", "#....", "#...#", ".###."),
    "D": ("####.", "#...#", "#...#", "#...#", "#...#", "#...#", "####."),
    "E": ("#####", "#....", "#....", "####.", "#....", "#....", "#####"),
    "F": ("#####", "#....", "#....", "####.", "#....", "#....", "#...."),
    "G": (".###.", "#...#", "#....", "#.###", "#...#", "#...#", ".####"),
    "H": ("#...#", "#...#", "#...#", "#####", "#...#", "#...#", "#...#"),
    "I": (".###.", "..#..", "..#..", "..#..", "..#..", "..#..", ".###."),
    "J": ("..###", "...#.", "...#.", "...#.", "...#.", "#..#.", ".##.."),
    "K": ("#...#", "#..#.", "#.#..", "##...", "#.#..", "#..#.", "#...#"),
    "L": ("#....", "#....", "#....", "#....", "#....", "#....", "#####"),
    "M": ("#...#", "##.##", "#.#.#", "#.#.#", "#...#", "#...#", "#...#"),
    "N": ("#...#", "#...#", "##..#", "#.#.#", "#..##", "#...#", "#...#"),
    "O": (".###.", "#...#", "#...#", "#...#", "#...#", "#...#", ".###."),
    "P": ("####.", "#...#", "#...#", "####.", "#....", "#....", "#...."),
    "Q": (".###.", "#...#", "#...#", "#...#", "#.#.#", "#..#.", ".##.#"),
    "R": ("####.", "#...#", "#...#", "####.", "#.#..", "#..#.", "#...#"),
    "S": (".####", "#....", "#....", ".###.", "....#", "....#", "####."),
    "T": ("#####", "..#..", "..#..", "..#..", "..#..", "..#..", "..#.."),
    "U": ("#...#", "#...#", "#...#", "#...#", "#...#", "#...#", ".###."),
    "V": ("#...#", "#...#", "#...#", "#...#", "#...#", ".#.#.", "..#.."),
    "W": ("#...#", "#...#", "#...#", "#.#.#", "#.#.#", "#.#.#", ".#.#."),
    "X": ("#...#", "#...#", ".#.#.", "..#..", ".#.#.", "#...#", "#...#"),
    "Y": ("#...#", "#...#", ".#.#.", "..#..", "..#..", "..#..", "..#.."),
    "Z": ("#####", "....#", "...#.", "..#..", ".#...", "#....", "#####"),
    "0": (".###.", "#...#", "#..##", "#.#.#", "##..#", "#...#", ".###."),
    "1": ("..#..", ".##..", "..#..", "..#..", "..#..", "..#..", ".###."),
    "2": (".###.", "#...#", "....#", "...#.", "..#..", ".#...", "#####"),
    "3": ("#####", "...#.", "..#..", "...#.", "....#", "#...#", ".###."),
    "4": ("...#.", "..##.", ".#.#.", "#..#.", "#####", "...#.", "...#."),
    "5": ("#####", "#....", "####.", "....#", "....#", "#...#", ".###."),
    "6": ("..##.", ".#...", "#....", "####.", "#...#", "#...#", ".###."),
    "7": ("#####", "....#", "...#.", "..#..", ".#...", ".#...", ".#..."),
    "8": (".###.", "#...#", "#...#", ".###.", "#...#", "#...#", ".###."),
    "9": (".###.", "#...#", "#...#", ".####", "....#", "...#.", ".##.."),
    ".": (".....", ".....", ".....", ".....", ".....", ".....", "..#.."),
    ",": (".....", ".....", ".....", ".....", ".....", "..#..", ".#..."),
    ":": (".....", ".....", "..#..", ".....", ".....", "..#..", "....."),
    "-": (".....", ".....", ".....", ".###.", ".....", ".....", "....."),
    "!": ("..#..", "..#..", "..#..", "..#..", "..#..", ".....", "..#.."),
    "?": (".###.", "#...#", "....#", "...#.", "..#..", ".....", "..#.."),
    "'": ("..#..", "..#..", ".....", ".....", ".....", ".....", "....."),
}


class BlockOutlineProvider:
    """Built-in block letters for rendering without a font file.

    Each lit cell of a 5x7 grid becomes part of a rectangle; horizontal runs
    within a row are merged into one rectangle. Lowercase letters use the
    uppercase shapes. There is no kerning.
    """

    UNITS_PER_EM = 1000
    CELL = 100
    ROWS = 7
    ADVANCE = 600
    SPACE_ADVANCE = 400

    def __init__(self, glyphs: dict[str, tuple[str, ...]] | None = None) -> None:
        self._glyphs = glyphs if glyphs is not None else BLOCK_GLYPHS
        self._cache: dict[str, GlyphOutline] = {}

    @property
    def units_per_em(self) -> int:
        return self.UNITS_PER_EM

    def char_to_outline(self, char: str) -> GlyphOutline:
        """Get the block outline of a character.

        Raises:
            GlyphNotFoundError: If there is no block shape for the character
        """
        if char in self._cache:
            return self._cache[char]

        if len(char) == 1 and char.isspace():
            outline = GlyphOutline(commands=(), advance_width=self.SPACE_ADVANCE)
        else:
            rows = self._glyphs.get(char) or self._glyphs.get(char.upper())
            if rows is None:
                raise GlyphNotFoundError(char)
            outline = GlyphOutline(commands=self._rows_to_commands(rows), advance_width=self.ADVANCE)

        self._cache[char] = outline
        return outline

    def kerning(self, prev: str, curr: str) -> float:  # noqa: ARG002
        return 0.0

    def close(self) -> None:
        self._cache.clear()

    def __enter__(self) -> "BlockOutlineProvider":
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        self.close()

    def _rows_to_commands(self, rows: tuple[str, ...]) -> tuple[PathCommand, ...]:
        commands: list[PathCommand] = []
        for row_index, row in enumerate(rows):
            bottom = (self.ROWS - 1 - row_index) * self.CELL
            top = bottom + self.CELL
            column = 0
            while column < len(row):
                if row[column] != "#":
                    column += 1
                    continue
                start = column
                while column < len(row) and row[column] == "#":
                    column += 1
                left = start * self.CELL
                right = column * self.CELL
                commands.extend(
                    [
                        MoveTo(Point(left, bottom)),
                        LineTo(Point(left, top)),
                        LineTo(Point(right, top)),
                        LineTo(Point(right, bottom)),
                        Close(),
                    ]
                )
        return tuple(commands)


def open_outline_provider(font_path: Path | None) -> FontOutlineProvider | BlockOutlineProvider:
    """Open the configured outline source.

    Args:
        font_path: Font file, or None for the built-in block letters

    Returns:
        An outline provider

    Raises:
        FontLoadError: If the font cannot be loaded
    """
    if font_path is None:
        return BlockOutlineProvider()
    return FontOutlineProvider.from_path(font_path)
