"""Conversions between ARGB integers and CIE L*a*b*, and Lab distances."""

from __future__ import annotations

import math

from matcolors.viewing_conditions import WHITE_POINT_D65

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0

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

Lab = tuple[float, float, float]


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


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


def _apply(matrix: tuple[tuple[float, ...], ...], vector: tuple[float, ...]) -> list[float]:
    return [sum(m * v for m, v in zip(row, vector)) for row in matrix]


def lab_from_argb(argb: int) -> Lab:
    """Convert an ARGB integer to an (L*, a*, b*) triple."""
    rgb = ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF)
    linear = tuple(_linearized(channel) for channel in rgb)
    xyz = _apply(_SRGB_TO_XYZ, linear)
    fx, fy, fz = (_lab_f(value / white) for value, white in zip(xyz, WHITE_POINT_D65))
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lab(l: float, a: float, b: float) -> int:
    """Convert L*, a*, b* to an opaque ARGB integer, clamped to the sRGB gamut."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    xyz = tuple(_lab_invf(f) * white for f, white in zip((fx, fy, fz), WHITE_POINT_D65))
    red, green, blue = (_delinearized(value) for value in _apply(_XYZ_TO_SRGB, xyz))
    return 0xFF000000 | (red << 16) | (green << 8) | blue


def lab_distance(one: Lab, two: Lab) -> float:
    """Squared Euclidean distance between two Lab colours.

    The square root of CIE 1976 delta E is left out: quantizers only compare
    distances, and the ordering is the same without it.
    """
    return sum((x - y) ** 2 for x, y in zip(one, two))