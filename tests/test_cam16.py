import pytest

from matcolors.cam16 import Cam16, argb_from_xyz, xyz_from_argb
from matcolors.viewing_conditions import default_viewing_conditions

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF

FIELDS = ("hue", "j", "q", "m", "s", "jstar", "astar", "bstar")

REFERENCE = [
    (0x449B3BEE, (311.42806917590127, 39.80957637025326, 98.12583617460575,
                  64.10143150621671, 80.82434221770161, 52.927210914635715,
                  26.14144025259719, -29.622376253821233)),
    (0x9AF54BA2, (355.0503461678604, 52.56866623390567, 112.75948188554017,
                  64.2339418261725, 75.4754569748874, 65.32748230521139,
                  39.413992608446186, -3.413381791164169)),
    (0x0C56B056, (145.62456894249067, 53.54270205682524, 113.79933774011006,
                  45.67944977111023, 63.35641059229854, 66.20793233348957,
                  -25.83510432830831, 17.67339768662175)),
    (0x81D2AE51, (89.18218954198817, 64.64864806089051, 125.04585955071941,
                  31.023158944993195, 49.809060584658496, 75.66239905009027,
                  0.3348706268561027, 23.45943416825876)),
    (0x88B0E2B9, (154.90292039856698, 79.40954826675019, 138.58810463022758,
                  24.01419462632291, 41.62660916534058, 86.76592929927428,
                  -17.343486416766375, 8.123204738848699)),
    (0x7ECCD39F, (119.29861501791848, 76.65379834326399, 136.16216008227642,
                  18.68775872501647, 37.04677374071979, 84.80635340083987,
                  -7.617941092812117, 13.575780288737059)),
    (0xA07D168E, (327.9022451708669, 25.207401197509327, 78.0824855218106,
                  53.16273184281286, 82.51384599304502, 36.425276182524954,
                  29.499403055932383, -18.50332986780255)),
    (0x1CB60B70, (355.279570048603, 33.2614419664756, 89.69332605634818,
                  64.28874467824023, 84.6617825549819, 45.865567063105644,
                  39.449488663086846, -3.257500355999049)),
    (0x400279E4, (261.1968416808902, 40.7183615122085, 99.23953929867855,
                  49.66881860103603, 70.74561810312906, 53.86745346363419,
                  -5.083026592209834, -32.82238686945024)),
    (0xDE9DA476, (119.84832142132542, 56.17844931089786, 116.56669043770763,
                  17.906925043592874, 39.19433269789186, 68.547225856322,
                  -7.47360894560527, 13.024174399350978)),
]


@pytest.mark.parametrize("argb, expected", REFERENCE)
def test_cam16_reference_values(argb, expected):
    cam = Cam16.from_argb(argb)
    for name, value in zip(FIELDS, expected):
        assert getattr(cam, name) == pytest.approx(value, abs=1e-7), name


@pytest.mark.parametrize(
    "argb, j, chroma, hue, m, s, q",
    [
        (RED, 46.445, 113.357, 27.408, 89.494, 91.889, 105.988),
        (GREEN, 79.331, 108.410, 142.139, 85.587, 78.604, 138.520),
        (BLUE, 25.465, 87.230, 282.788, 68.867, 93.674, 78.481),
        (BLACK, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (WHITE, 100.0, 2.869, 209.492, 2.265, 12.068, 155.521),
    ],
)
def test_cam_primaries(argb, j, chroma, hue, m, s, q):
    cam = Cam16.from_argb(argb)
    assert cam.j == pytest.approx(j, abs=0.001)
    assert cam.chroma == pytest.approx(chroma, abs=0.001)
    assert cam.hue == pytest.approx(hue, abs=0.001)
    assert cam.m == pytest.approx(m, abs=0.001)
    assert cam.s == pytest.approx(s, abs=0.001)
    assert cam.q == pytest.approx(q, abs=0.001)


def test_conversions_are_reflexive():
    cam = Cam16.from_argb(RED)
    assert cam.viewed(default_viewing_conditions()) == RED


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, WHITE, BLACK, 0xFF777777, 0xFF123456])
def test_to_argb_round_trip(argb):
    assert Cam16.from_argb(argb).to_argb() == argb


def test_cam16_to_xyz():
    cam = Cam16.from_argb(RED)
    x, y, z = cam.xyz_in_viewing_conditions(default_viewing_conditions())
    assert x == pytest.approx(41.23, abs=0.01)
    assert y == pytest.approx(21.26, abs=0.01)
    assert z == pytest.approx(1.93, abs=0.01)


def test_xyz_of_white_is_d65():
    x, y, z = xyz_from_argb(WHITE)
    assert x == pytest.approx(95.047, abs=0.01)
    assert y == pytest.approx(100.0, abs=0.01)
    assert z == pytest.approx(108.883, abs=0.01)


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, WHITE, BLACK, 0xFF426088])
def test_xyz_round_trip(argb):
    assert argb_from_xyz(*xyz_from_argb(argb)) == argb


def test_argb_from_xyz_is_opaque_and_clamped():
    assert argb_from_xyz(-10.0, -10.0, -10.0) == BLACK
    assert argb_from_xyz(500.0, 500.0, 500.0) == WHITE


def test_distance_to_self_is_zero_and_symmetric():
    red = Cam16.from_argb(RED)
    blue = Cam16.from_argb(BLUE)
    assert red.distance(red) == 0.0
    assert red.distance(blue) == pytest.approx(blue.distance(red))
    assert red.distance(blue) > 0.0


def test_from_jch_matches_appearance_of_source():
    cam = Cam16.from_argb(BLUE)
    rebuilt = Cam16.from_jch(cam.j, cam.chroma, cam.hue)
    assert rebuilt.to_argb() == BLUE
    assert rebuilt.jstar == pytest.approx(cam.jstar, abs=1e-9)
    assert rebuilt.m == pytest.approx(cam.m, abs=1e-9)


def test_from_ucs_round_trip():
    cam = Cam16.from_argb(0xFF9B3BEE)
    rebuilt = Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar)
    assert rebuilt.j == pytest.approx(cam.j, abs=1e-7)
    assert rebuilt.chroma == pytest.approx(cam.chroma, abs=1e-7)
    assert rebuilt.hue == pytest.approx(cam.hue, abs=1e-7)
    assert rebuilt.to_argb() == 0xFF9B3BEE


def test_from_argb_ignores_alpha():
    assert Cam16.from_argb(0x00FF0000) == Cam16.from_argb(RED)