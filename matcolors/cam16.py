"""CAM16 colour appearance model and the XYZ conversions it relies on."""

from __future__ import annotations

import math
from dataclasses import dataclass

from matcolors.viewing_conditions import ViewingConditions, default_viewing_conditions

Xyz = tuple[float, float, float]

_SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

_XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111020335),
)


def _signum(value: float) -> float:
    if value < 0.0:
        return -1.0
    if value > 0.0:
        return 1.0
    return 0.0


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _linearized(component: int) -> float:
    normalized = component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def _delinearized(component: float) -> int:
    normalized = component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    scaled = min(max(value * 255.0, 0.0), 255.0)
    return min(int(math.floor(scaled + 0.5)), 255)


def _apply(matrix: tuple[tuple[float, ...], ...], vector: tuple[float, ...]) -> Xyz:
    x, y, z = (sum(m * v for m, v in zip(row, vector)) for row in matrix)
    return (x, y, z)


def xyz_from_argb(argb: int) -> Xyz:
    """Convert an ARGB integer to XYZ coordinates on a 0-100 scale."""
    rgb = ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF)
    return _apply(_SRGB_TO_XYZ, tuple(_linearized(channel) for channel in rgb))


def argb_from_xyz(x: float, y: float, z: float) -> int:
    """Convert XYZ coordinates to an opaque ARGB integer, clamped to sRGB."""
    red, green, blue = (_delinearized(value) for value in _apply(_XYZ_TO_SRGB, (x, y, z)))
    return 0xFF000000 | (red << 16) | (green << 8) | blue


def _ucs_jstar(j: float) -> float:
    return (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)


@dataclass(frozen=True)
class Cam16:
    """A colour in the CAM16 appearance model, with its CAM16-UCS coordinates.

    ``hue`` is in degrees, ``chroma`` is colourfulness relative to grey,
    ``j`` lightness, ``q`` brightness, ``m`` colourfulness and ``s``
    saturation. ``jstar``, ``astar`` and ``bstar`` are the CAM16-UCS
    coordinates, to be used when measuring distances between colours.
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: Cam16) -> float:
        """Perceptual distance between two colours in CAM16-UCS."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_eprime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_eprime**0.63

    @classmethod
    def from_argb(cls, argb: int) -> Cam16:
        """CAM16 of ``argb`` seen in the default sRGB viewing conditions."""
        return cls.from_argb_in_viewing_conditions(argb, default_viewing_conditions())

    @classmethod
    def from_argb_in_viewing_conditions(
        cls, argb: int, viewing_conditions: ViewingConditions
    ) -> Cam16:
        """CAM16 of ``argb`` seen in ``viewing_conditions``."""
        return cls.from_xyz(*xyz_from_argb(argb), viewing_conditions)

    @classmethod
    def from_xyz(
        cls,
        x: float,
        y: float,
        z: float,
        viewing_conditions: ViewingConditions | None = None,
    ) -> Cam16:
        """CAM16 of a colour given in XYZ and seen in ``viewing_conditions``."""
        vc = viewing_conditions or default_viewing_conditions()

        r_c = 0.401288 * x + 0.650173 * y - 0.051461 * z
        g_c = -0.250268 * x + 1.204414 * y + 0.045854 * z
        b_c = -0.002079 * x + 0.048952 * y + 0.953127 * z

        # Discount the illuminant, then apply chromatic adaptation.
        discounted = (vc.rgb_d[0] * r_c, vc.rgb_d[1] * g_c, vc.rgb_d[2] * b_c)
        adapted = []
        for component in discounted:
            af = math.pow(vc.fl * abs(component) / 100.0, 0.42)
            adapted.append(_signum(component) * 400.0 * af / (af + 27.13))
        r_a, g_a, b_a = adapted

        a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        hue = math.degrees(math.atan2(b, a))
        if hue < 0.0:
            hue += 360.0
        elif hue >= 360.0:
            hue -= 360.0
        if not 0.0 <= hue < 360.0:
            raise ValueError(f"hue was really {hue}")
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * math.pow(ac / vc.aw, vc.c * vc.z)
        q = (4.0 / vc.c) * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = math.pow(t, 0.9) * math.pow(
            1.64 - math.pow(0.29, vc.background_y_to_white_point_y), 0.73
        )

        c = alpha * math.sqrt(j / 100.0)
        m = c * vc.fl_root
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        jstar = _ucs_jstar(j)
        mstar = math.log1p(0.0228 * m) / 0.0228

        return cls(
            hue=hue,
            chroma=c,
            j=j,
            q=q,
            m=m,
            s=s,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_jch(
        cls,
        j: float,
        c: float,
        h: float,
        viewing_conditions: ViewingConditions | None = None,
    ) -> Cam16:
        """CAM16 from lightness ``j``, chroma ``c`` and hue ``h`` in degrees."""
        vc = viewing_conditions or default_viewing_conditions()

        q = (4.0 / vc.c) * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = _divide(c, math.sqrt(j / 100.0))
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = _ucs_jstar(j)
        mstar = 1.0 / 0.0228 * math.log(1.0 + 0.0228 * m)

        return cls(
            hue=h,
            chroma=c,
            j=j,
            q=q,
            m=m,
            s=s,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_ucs(
        cls,
        jstar: float,
        astar: float,
        bstar: float,
        viewing_conditions: ViewingConditions | None = None,
    ) -> Cam16:
        """CAM16 from CAM16-UCS coordinates ``jstar``, ``astar``, ``bstar``."""
        vc = viewing_conditions or default_viewing_conditions()

        m = math.expm1(math.hypot(astar, bstar) * 0.0228) / 0.0228
        c = m / vc.fl_root
        h = math.atan2(bstar, astar) * (180.0 / math.pi)
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch(j, c, h, vc)

    def viewed(self, viewing_conditions: ViewingConditions | None = None) -> int:
        """ARGB of this colour, given it was seen in ``viewing_conditions``."""
        return argb_from_xyz(*self.xyz_in_viewing_conditions(viewing_conditions))

    def xyz_in_viewing_conditions(
        self, viewing_conditions: ViewingConditions | None = None
    ) -> Xyz:
        """XYZ coordinates of this colour seen in ``viewing_conditions``."""
        vc = viewing_conditions or default_viewing_conditions()

        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = math.pow(
            alpha / math.pow(1.64 - math.pow(0.29, vc.background_y_to_white_point_y), 0.73),
            1.0 / 0.9,
        )
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * math.pow(self.j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin, h_cos = math.sin(h_rad), math.cos(h_rad)
        gamma = (
            23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        )
        a = gamma * h_cos
        b = gamma * h_sin

        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        unadapted = []
        for component, factor in zip((r_a, g_a, b_a), vc.rgb_d):
            component_abs = abs(component)
            base = max(0.0, (27.13 * component_abs) / (400.0 - component_abs))
            scaled = _signum(component) * (100.0 / vc.fl) * math.pow(base, 1.0 / 0.42)
            unadapted.append(scaled / factor)
        r_f, g_f, b_f = unadapted

        x = 1.86206786 * r_f - 1.01125463 * g_f + 0.14918677 * b_f
        y = 0.38752654 * r_f + 0.62144744 * g_f - 0.00897398 * b_f
        z = -0.01584150 * r_f - 0.03412294 * g_f + 1.04996444 * b_f
        return (x, y, z)

    def to_argb(self) -> int:
        """ARGB of this colour in the default sRGB viewing conditions."""
        return self.viewed(default_viewing_conditions())