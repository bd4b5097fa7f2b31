"""Solve for the sRGB colour with a given HCT hue, chroma and tone.

The solver first tries Newton iteration on CAM16 lightness. If no in-gamut
colour has the requested chroma, it bisects along the boundary of the RGB
cube for the colour with the requested hue and tone and the most chroma.
"""

from __future__ import annotations

import math
import sys

from matcolors.cam16 import Cam16, xyz_from_argb
from matcolors.viewing_conditions import (
    default_viewing_conditions,
    lstar_from_y,
    y_from_lstar,
)

Vector = tuple[float, float, float]

_SCALED_DISCOUNT_FROM_LINRGB = (
    (0.001200833568784504, 0.002389694492170889, 0.0002795742885861124),
    (0.0005891086651375999, 0.0029785502573438758, 0.0003270666104008398),
    (0.00010146692491640572, 0.0005364214359186694, 0.0032979401770712076),
)

_LINRGB_FROM_SCALED_DISCOUNT = (
    (1373.2198709594231, -1100.4251190754821, -7.278681089101213),
    (-271.815969077903, 559.6580465940733, -32.46047482791194),
    (1.9622899599665666, -57.173814538844006, 308.7233197812385),
)

_Y_FROM_LINRGB = (0.2126, 0.7152, 0.0722)


def _linearized(component: float) -> float:
    normalized = component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


# Linear RGB values halfway between consecutive 8-bit sRGB levels.
_CRITICAL_PLANES = tuple(_linearized(level + 0.5) for level in range(255))


def _delinearized(component: float) -> int:
    normalized = component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    scaled = min(max(value * 255.0, 0.0), 255.0)
    return min(int(math.floor(scaled + 0.5)), 255)


def _signum(value: float) -> float:
    if value < 0.0:
        return -1.0
    if value > 0.0:
        return 1.0
    return 0.0


def _multiply(vector: Vector, matrix: tuple[Vector, ...]) -> Vector:
    x, y, z = (row[0] * vector[0] + row[1] * vector[1] + row[2] * vector[2] for row in matrix)
    return (x, y, z)


def argb_from_linrgb(red: float, green: float, blue: float) -> int:
    """Convert linear RGB components on a 0-100 scale to an opaque ARGB integer."""
    r, g, b = (_delinearized(channel) for channel in (red, green, blue))
    return 0xFF000000 | (r << 16) | (g << 8) | b


def argb_from_lstar(lstar: float) -> int:
    """The grey ARGB colour with the given L*."""
    component = _delinearized(y_from_lstar(lstar))
    return 0xFF000000 | (component << 16) | (component << 8) | component


def lstar_from_argb(argb: int) -> float:
    """The L* (tone) of an ARGB colour."""
    return lstar_from_y(xyz_from_argb(argb)[1])


def _sanitize_radians(angle: float) -> float:
    return math.fmod(angle + math.pi * 8.0, math.pi * 2.0)


def _true_delinearized(component: float) -> float:
    normalized = component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return value * 255.0


def _chromatic_adaptation(component: float) -> float:
    af = abs(component) ** 0.42
    return _signum(component) * 400.0 * af / (af + 27.13)


def _hue_of(linrgb: Vector) -> float:
    """CAM16 hue, in radians, of a linear RGB colour."""
    r_a, g_a, b_a = (
        _chromatic_adaptation(value)
        for value in _multiply(linrgb, _SCALED_DISCOUNT_FROM_LINRGB)
    )
    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    return _sanitize_radians(b - a) < _sanitize_radians(c - a)


def _set_coordinate(source: Vector, coordinate: float, target: Vector, axis: int) -> Vector:
    """Intersect the segment from ``source`` to ``target`` with a plane on ``axis``."""
    t = (coordinate - source[axis]) / (target[axis] - source[axis])
    x, y, z = (s + (e - s) * t for s, e in zip(source, target))
    return (x, y, z)


def _is_bounded(value: float) -> bool:
    return 0.0 <= value <= 100.0


def _nth_vertex(y: float, n: int) -> Vector | None:
    """The nth possible vertex of the plane Y = ``y`` cut through the RGB cube."""
    k_r, k_g, k_b = _Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0

    if n < 4:
        g, b = coord_a, coord_b
        r = (y - g * k_g - b * k_b) / k_r
        return (r, g, b) if _is_bounded(r) else None
    if n < 8:
        b, r = coord_a, coord_b
        g = (y - r * k_r - b * k_b) / k_g
        return (r, g, b) if _is_bounded(g) else None
    r, g = coord_a, coord_b
    b = (y - r * k_r - g * k_g) / k_b
    return (r, g, b) if _is_bounded(b) else None


def _bisect_to_segment(y: float, target_hue: float) -> tuple[Vector, Vector]:
    """Endpoints of the boundary segment on plane Y = ``y`` holding ``target_hue``."""
    left: Vector = (-1.0, -1.0, -1.0)
    right = left
    left_hue = right_hue = 0.0
    initialized = False
    uncut = True

    for n in range(12):
        mid = _nth_vertex(y, n)
        if mid is None:
            continue
        mid_hue = _hue_of(mid)
        if not initialized:
            left = right = mid
            left_hue = right_hue = mid_hue
            initialized = True
            continue
        if uncut or _are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right, right_hue = mid, mid_hue
            else:
                left, left_hue = mid, mid_hue

    return left, right


def _critical_plane_below(x: float) -> int:
    return math.floor(x - 0.5)


def _critical_plane_above(x: float) -> int:
    return math.ceil(x - 0.5)


def _bisect_to_limit(y: float, target_hue: float) -> Vector:
    """The colour on the cube boundary with Y = ``y`` and hue ``target_hue``."""
    left, right = _bisect_to_segment(y, target_hue)
    left_hue = _hue_of(left)

    for axis in range(3):
        if abs(left[axis] - right[axis]) <= sys.float_info.epsilon:
            continue
        if left[axis] < right[axis]:
            l_plane = _critical_plane_below(_true_delinearized(left[axis]))
            r_plane = _critical_plane_above(_true_delinearized(right[axis]))
        else:
            l_plane = _critical_plane_above(_true_delinearized(left[axis]))
            r_plane = _critical_plane_below(_true_delinearized(right[axis]))

        for _ in range(8):
            if abs(r_plane - l_plane) <= 1:
                break
            m_plane = math.floor((l_plane + r_plane) / 2.0)
            mid = _set_coordinate(left, _CRITICAL_PLANES[m_plane], right, axis)
            mid_hue = _hue_of(mid)
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                r_plane = m_plane
            else:
                left = mid
                left_hue = mid_hue
                l_plane = m_plane

    x, y_mid, z = ((a + b) / 2.0 for a, b in zip(left, right))
    return (x, y_mid, z)


def _inverse_chromatic_adaptation(adapted: float) -> float:
    adapted_abs = abs(adapted)
    base = max(27.13 * adapted_abs / (400.0 - adapted_abs), 0.0)
    return _signum(adapted) * base ** (1.0 / 0.42)


def _find_result_by_j(hue_radians: float, chroma: float, y: float) -> int | None:
    """An in-gamut ARGB colour with the given hue, chroma and Y, if one exists."""
    j = math.sqrt(y) * 11.0
    vc = default_viewing_conditions()
    t_inner_coeff = 1.0 / (1.64 - 0.29**vc.background_y_to_white_point_y) ** 0.73
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
    h_sin, h_cos = math.sin(hue_radians), math.cos(hue_radians)
    k_r, k_g, k_b = _Y_FROM_LINRGB

    for iteration_round in range(5):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = (alpha * t_inner_coeff) ** (1.0 / 0.9)
        ac = vc.aw * j_normalized ** (1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        scaled = (
            _inverse_chromatic_adaptation(r_a),
            _inverse_chromatic_adaptation(g_a),
            _inverse_chromatic_adaptation(b_a),
        )
        red, green, blue = _multiply(scaled, _LINRGB_FROM_SCALED_DISCOUNT)
        if red < 0.0 or green < 0.0 or blue < 0.0:
            return None

        fnj = k_r * red + k_g * green + k_b * blue
        if fnj <= 0.0:
            return None

        if iteration_round == 4 or abs(fnj - y) < 0.002:
            if red > 100.01 or green > 100.01 or blue > 100.01:
                return None
            return argb_from_linrgb(red, green, blue)

        # Newton step, approximating fn'(j) by 2 * fn(j) / j.
        j -= (fnj - y) * j / (2.0 * fnj)

    return None


def solve_to_argb(hue_degrees: float, chroma: float, lstar: float) -> int:
    """The sRGB colour closest to ``hue_degrees``, ``chroma`` and ``lstar``.

    When all three cannot be met, hue and L* are kept close and chroma is
    made as large as the gamut allows.
    """
    if chroma < 0.0001 or not 0.0001 <= lstar <= 99.9999:
        return argb_from_lstar(lstar)

    hue_radians = math.radians(hue_degrees % 360.0)
    y = y_from_lstar(lstar)

    exact_answer = _find_result_by_j(hue_radians, chroma, y)
    if exact_answer is not None:
        return exact_answer

    return argb_from_linrgb(*_bisect_to_limit(y, hue_radians))


def solve_to_cam(hue_degrees: float, chroma: float, lstar: float) -> Cam16:
    """Like :func:`solve_to_argb`, returning the CAM16 of the solved colour."""
    return Cam16.from_argb(solve_to_argb(hue_degrees, chroma, lstar))