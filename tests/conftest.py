"""Shared fixtures: small variable icon fonts built with fontTools.

Each font has lowercase letter glyphs, icon glyphs reachable through `liga`
ligatures and Private Use Area codepoints, a wght and a FILL axis, and a gvar
variation that grows every icon towards wght max.
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables._g_v_a_r import TupleVariation

UNITS_PER_EM = 1000

SQUARE = [(100, 100), (900, 100), (900, 900), (100, 900)]
TRIANGLE = [(100, 100), (900, 100), (500, 900)]
DIAMOND = [(500, 50), (950, 500), (500, 950), (50, 500)]

DEFAULT_AXES = [
    ("wght", 100, 400, 700, "Weight"),
    ("FILL", 0, 0, 1, "Fill"),
]

# wght max moved from 700 to 900
WIDER_AXES = [
    ("wght", 100, 400, 900, "Weight"),
    ("FILL", 0, 0, 1, "Fill"),
]

DEFAULT_ICONS = {
    "home": SQUARE,
    "star": DIAMOND,
}

DEFAULT_CODEPOINTS = {
    "home": 0xE900,
    "star": 0xE901,
}


def rotate(points: list, n: int) -> list:
    """Start a contour n points later."""
    return points[n:] + points[:n]


def polygon(points: list[tuple[int, int]]):
    pen = TTGlyphPen(None)
    start, *rest = points
    pen.moveTo(start)
    for point in rest:
        pen.lineTo(point)
    pen.closePath()
    return pen.glyph()


def grow(point: tuple[int, int]) -> tuple[int, int]:
    """Delta pushing a point away from the em center."""
    x, y = point
    dx = 40 if x > 500 else -40 if x < 500 else 0
    dy = 40 if y > 500 else -40 if y < 500 else 0
    return (dx, dy)


def build_icon_font(
    path: Path,
    icons: dict[str, list[tuple[int, int]]] | None = None,
    codepoints: dict[str, int] | None = None,
    axes: list[tuple] | None = None,
    ligatures: bool = True,
) -> Path:
    """Build a variable icon font and save it to path.

    Args:
        path: Output file
        icons: Contour points per icon glyph
        codepoints: PUA codepoint per icon glyph
        axes: fvar axes as (tag, min, default, max, name)
        ligatures: Add a liga feature spelling each icon name

    Returns:
        path
    """
    icons = DEFAULT_ICONS if icons is None else icons
    codepoints = DEFAULT_CODEPOINTS if codepoints is None else codepoints
    axes = DEFAULT_AXES if axes is None else axes

    letters = sorted({c for name in icons for c in name if c.isalpha()}) if ligatures else []
    glyph_order = [".notdef", *letters, *icons]

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    cmap = {ord(letter): letter for letter in letters}
    cmap.update({cp: name for name, cp in codepoints.items() if name in icons})
    fb.setupCharacterMap(cmap)

    outlines = {".notdef": [(50, 0), (450, 0), (450, 700), (50, 700)]}
    outlines.update({letter: [(50, 0), (450, 0), (250, 500)] for letter in letters})
    outlines.update(icons)

    fb.setupGlyf({name: polygon(points) for name, points in outlines.items()})
    # lsb must equal xMin or drawing moves the outline onto it
    fb.setupHorizontalMetrics(
        {name: (UNITS_PER_EM, min(x for x, _ in outlines[name])) for name in glyph_order}
    )
    fb.setupHorizontalHeader(ascent=900, descent=-100)
    fb.setupNameTable(
        {
            "familyName": "Icon Diff Test",
            "styleName": "Regular",
        }
    )
    fb.setupOS2(sTypoAscender=900, sTypoDescender=-100, usWinAscent=900, usWinDescent=100)
    fb.setupPost()

    if ligatures and icons:
        rules = "\n".join(f"    sub {' '.join(name)} by {name};" for name in icons)
        fb.addOpenTypeFeatures(
            f"languagesystem DFLT dflt;\nfeature liga {{\n{rules}\n}} liga;\n"
        )

    if axes:
        fb.setupFvar(axes=axes, instances=[])
        variations = {name: [] for name in glyph_order}
        if any(axis[0] == "wght" for axis in axes):
            for name, points in icons.items():
                deltas = [grow(p) for p in points] + [(0, 0)] * 4  # +4 phantom points
                variations[name] = [TupleVariation({"wght": (0.0, 1.0, 1.0)}, deltas)]
        fb.setupGvar(variations)

    fb.save(str(path))
    return path


@pytest.fixture
def font_factory(tmp_path: Path):
    """Build icon fonts under a temporary directory."""

    def factory(name: str, **kwargs) -> Path:
        return build_icon_font(tmp_path / f"{name}.ttf", **kwargs)

    return factory


@pytest.fixture
def left_font_path(font_factory) -> Path:
    return font_factory("left")


@pytest.fixture
def right_font_path(font_factory) -> Path:
    return font_factory("right")
