"""Viewing conditions for the CAM16 colour appearance model, and L*/Y helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

WHITE_POINT_D65: tuple[float, float, float] = (95.047, 100.0, 108.883)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _lerp(start: float, stop: float, amount: float) -> float:
    return (1.0 - amount) * start + amount * stop


def y_from_lstar(lstar: float) -> float:
    """Convert an L* value to the Y of XYZ, on a 0-100 scale."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert the Y of XYZ, on a 0-100 scale, to an L* value."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


@dataclass(frozen=True)
class ViewingConditions:
    """The environment a colour is seen in, with derived CAM16 factors cached.

    White under a midday-sun white point, for instance, is measured by CAM16
    as a slightly chromatic blue. These values depend only on the viewing
    conditions, so they are computed once.
    """

    white_point: tuple[float, float, float]
    adapting_luminance: float
    background_lstar: float
    surround: float
    discounting_illuminant: bool
    background_y_to_white_point_y: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    drgb_inverse: tuple[float, float, float]
    rgb_d: tuple[float, float, float]
    fl: float
    fl_root: float
    z: float


def make_viewing_conditions(
    white_point: tuple[float, float, float] | None = None,
    adapting_luminance: float | None = None,
    background_lstar: float | None = None,
    surround: float | None = None,
    discounting_illuminant: bool | None = None,
) -> ViewingConditions:
    """Build viewing conditions; omitted parameters take the sRGB defaults.

    ``surround`` must lie in [0, 2]; ``ValueError`` is raised otherwise.
    """
    white_point = tuple(WHITE_POINT_D65 if white_point is None else white_point)
    adapting_luminance = -1.0 if adapting_luminance is None else float(adapting_luminance)
    background_lstar = 50.0 if background_lstar is None else float(background_lstar)
    surround = 2.0 if surround is None else float(surround)
    discounting_illuminant = bool(discounting_illuminant)

    if not 0.0 <= surround <= 2.0:
        raise ValueError(f"surround must be between 0 and 2, got {surround}")

    if adapting_luminance <= 0.0:
        adapting_luminance = 200.0 / math.pi * y_from_lstar(50.0) / 100.0
    # A pure black background is non-physical and leads to infinities.
    background_lstar = max(0.1, background_lstar)

    x, y, z_white = white_point
    r_w = x * 0.401288 + y * 0.650173 + z_white * -0.051461
    g_w = x * -0.250268 + y * 1.204414 + z_white * 0.045854
    b_w = x * -0.002079 + y * 0.048952 + z_white * 0.953127

    f = 0.8 + surround / 10.0
    if f >= 0.9:
        c = _lerp(0.59, 0.69, (f - 0.9) * 10.0)
    else:
        c = _lerp(0.525, 0.59, (f - 0.8) * 10.0)

    if discounting_illuminant:
        d = 1.0
    else:
        d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
    d = min(max(d, 0.0), 1.0)
    nc = f

    rgb_d = tuple(d * (100.0 / w) + 1.0 - d for w in (r_w, g_w, b_w))

    k = 1.0 / (5.0 * adapting_luminance + 1.0)
    k4 = k * k * k * k
    k4_f = 1.0 - k4
    fl = k4 * adapting_luminance + 0.1 * k4_f * k4_f * _cbrt(5.0 * adapting_luminance)

    n = y_from_lstar(background_lstar) / white_point[1]
    z = 1.48 + math.sqrt(n)
    nbb = 0.725 / n**0.2
    ncb = nbb

    rgb_a_factors = [
        (fl * factor * w / 100.0) ** 0.42 for factor, w in zip(rgb_d, (r_w, g_w, b_w))
    ]
    rgb_a = [400.0 * af / (af + 27.13) for af in rgb_a_factors]
    aw = (40.0 * rgb_a[0] + 20.0 * rgb_a[1] + rgb_a[2]) / 20.0 * nbb

    return ViewingConditions(
        white_point=white_point,
        adapting_luminance=adapting_luminance,
        background_lstar=background_lstar,
        surround=surround,
        discounting_illuminant=discounting_illuminant,
        background_y_to_white_point_y=n,
        aw=aw,
        nbb=nbb,
        ncb=ncb,
        c=c,
        nc=nc,
        drgb_inverse=(0.0, 0.0, 0.0),
        rgb_d=rgb_d,
        fl=fl,
        fl_root=fl**0.25,
        z=z,
    )


@lru_cache(maxsize=None)
def default_viewing_conditions() -> ViewingConditions:
    """The standard sRGB viewing conditions."""
    return make_viewing_conditions()