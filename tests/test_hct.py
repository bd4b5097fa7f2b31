import pytest

from matcolors.cam16 import Cam16
from matcolors.hct import Hct
from matcolors.solver import lstar_from_argb
from matcolors.viewing_conditions import (
    default_viewing_conditions,
    make_viewing_conditions,
    y_from_lstar,
)

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
MIDGRAY = 0xFF777777


def _on_boundary(argb: int) -> bool:
    channels = ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF)
    return any(channel in (0, 255) for channel in channels)


def test_hash_code():
    a = Hct.from_argb(123)
    b = Hct.from_argb(123)
    assert a == b
    assert hash(a) == hash(b)


def test_conversions_are_reflexive():
    cam = Cam16.from_argb(RED)
    assert cam.viewed(default_viewing_conditions()) == RED


def test_y_midgray():
    assert y_from_lstar(50.0) == pytest.approx(18.418, abs=0.001)


def test_y_black():
    assert y_from_lstar(0.0) == pytest.approx(0.0, abs=0.001)


def test_y_white():
    assert y_from_lstar(100.0) == pytest.approx(100.0, abs=0.001)


@pytest.mark.parametrize(
    ("argb", "j", "chroma", "hue", "m", "s", "q"),
    [
        (RED, 46.445, 113.357, 27.408, 89.494, 91.889, 105.988),
        (GREEN, 79.331, 108.410, 142.139, 85.587, 78.604, 138.520),
        (BLUE, 25.465, 87.230, 282.788, 68.867, 93.674, 78.481),
        (BLACK, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (WHITE, 100.0, 2.869, 209.492, 2.265, 12.068, 155.521),
    ],
)
def test_cam_values(argb, j, chroma, hue, m, s, q):
    cam = Cam16.from_argb(argb)
    assert cam.j == pytest.approx(j, abs=0.001)
    assert cam.chroma == pytest.approx(chroma, abs=0.001)
    assert cam.hue == pytest.approx(hue, abs=0.001)
    assert cam.m == pytest.approx(m, abs=0.001)
    assert cam.s == pytest.approx(s, abs=0.001)
    assert cam.q == pytest.approx(q, abs=0.001)


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, WHITE, MIDGRAY, BLACK])
def test_gamut_map(argb):
    cam = Cam16.from_argb(argb)
    assert Hct.of(cam.hue, cam.chroma, lstar_from_argb(argb)).argb == argb


def test_hct_returns_sufficiently_close_color():
    for hue in range(15, 361, 30):
        for chroma in range(0, 100, 10):
            for tone in range(20, 80, 10):
                description = f"H{hue} C{chroma} T{tone}"
                color = Hct.of(float(hue), float(chroma), float(tone))

                if chroma > 0:
                    assert abs(color.hue - hue) <= 4.0, description

                assert 0.0 <= color.chroma < chroma + 2.5, description

                if color.chroma < chroma - 2.5:
                    assert _on_boundary(color.argb), description

                assert abs(color.tone - tone) <= 0.5, description


def test_cam16_to_xyz_without_array():
    cam = Cam16.from_argb(RED)
    x, y, z = cam.xyz_in_viewing_conditions(default_viewing_conditions())
    assert x == pytest.approx(41.23, abs=0.01)
    assert y == pytest.approx(21.26, abs=0.01)
    assert z == pytest.approx(1.93, abs=0.01)


@pytest.mark.parametrize(
    ("argb", "background", "expected"),
    [
        (RED, 0.0, 0xFF9F5C51),
        (RED, 100.0, 0xFFFF5D48),
        (GREEN, 0.0, 0xFFACD69D),
        (GREEN, 100.0, 0xFF8EFF77),
        (BLUE, 0.0, 0xFF343654),
        (BLUE, 100.0, 0xFF3F49FF),
        (WHITE, 0.0, 0xFFFFFFFF),
        (WHITE, 100.0, 0xFFFFFFFF),
        (MIDGRAY, 0.0, 0xFF605F5F),
        (MIDGRAY, 100.0, 0xFF8E8E8E),
        (BLACK, 0.0, 0xFF000000),
        (BLACK, 100.0, 0xFF000000),
    ],
)
def test_color_relativity(argb, background, expected):
    vc = make_viewing_conditions(background_lstar=background)
    result = Hct.from_argb(argb).in_viewing_conditions(vc)
    assert result.argb == expected


def test_str_rounds_components():
    assert str(Hct.from_argb(BLUE)) == "H283 C87 T32"


def test_tone_setter_keeps_hue_and_moves_tone():
    color = Hct.from_argb(BLUE)
    original_hue = color.hue
    color.tone = 70.0
    assert color.tone == pytest.approx(70.0, abs=0.5)
    assert color.hue == pytest.approx(original_hue, abs=4.0)
    assert color.argb == Hct.of(color.hue, color.chroma, color.tone).argb


def test_chroma_setter_to_zero_gives_grey():
    color = Hct.from_argb(RED)
    color.chroma = 0.0
    red = (color.argb >> 16) & 0xFF
    green = (color.argb >> 8) & 0xFF
    blue = color.argb & 0xFF
    assert red == green == blue


def test_hue_setter_changes_hue():
    color = Hct.of(30.0, 40.0, 50.0)
    color.hue = 210.0
    assert color.hue == pytest.approx(210.0, abs=4.0)
    assert color.tone == pytest.approx(50.0, abs=0.5)


def test_int_and_ordering():
    black = Hct.from_argb(BLACK)
    blue = Hct.from_argb(BLUE)
    assert int(blue) == BLUE
    assert black < blue
    assert sorted([blue, black]) == [black, blue]