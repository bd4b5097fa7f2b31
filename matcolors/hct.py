"""HCT colours: CAM16 hue and chroma combined with L* tone."""

from __future__ import annotations

import math
from functools import total_ordering

from matcolors.cam16 import Cam16
from matcolors.solver import lstar_from_argb, solve_to_argb
from matcolors.viewing_conditions import (
    ViewingConditions,
    default_viewing_conditions,
    lstar_from_y,
)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@total_ordering
class Hct:
    """A colour described by hue, chroma and tone, always kept inside sRGB.

    ``hue`` is in degrees, 0 <= hue < 360. ``chroma`` is colourfulness, with a
    maximum that depends on hue and tone. ``tone`` is lightness, 0 to 100.
    Assigning any of the three maps the colour back into the sRGB gamut,
    lowering chroma where needed, and updates ``argb``.
    """

    __slots__ = ("_hue", "_chroma", "_tone", "_argb")

    def __init__(self, argb: int) -> None:
        self._set_argb(argb)

    def _set_argb(self, argb: int) -> None:
        cam = Cam16.from_argb(argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(argb)
        self._argb = argb

    @classmethod
    def from_argb(cls, argb: int) -> Hct:
        """The HCT of an ARGB integer."""
        return cls(argb)

    @classmethod
    def of(cls, hue: float, chroma: float, tone: float) -> Hct:
        """The in-gamut colour closest to ``hue``, ``chroma`` and ``tone``.

        The chroma returned may be lower than requested; out-of-range hue and
        tone values are corrected.
        """
        return cls(solve_to_argb(hue, chroma, tone))

    @property
    def argb(self) -> int:
        return self._argb

    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, value: float) -> None:
        self._set_argb(solve_to_argb(value, self._chroma, self._tone))

    @property
    def chroma(self) -> float:
        return self._chroma

    @chroma.setter
    def chroma(self, value: float) -> None:
        self._set_argb(solve_to_argb(self._hue, value, self._tone))

    @property
    def tone(self) -> float:
        return self._tone

    @tone.setter
    def tone(self, value: float) -> None:
        self._set_argb(solve_to_argb(self._hue, self._chroma, value))

    def in_viewing_conditions(self, viewing_conditions: ViewingConditions) -> Hct:
        """How this colour appears when seen in ``viewing_conditions``.

        The colour is placed in the given conditions through CAM16, then
        re-expressed as HCT in the default conditions.
        """
        cam = Cam16.from_argb(self._argb)
        x, y, z = cam.xyz_in_viewing_conditions(viewing_conditions)
        recast = Cam16.from_xyz(x, y, z, default_viewing_conditions())
        return Hct.of(recast.hue, recast.chroma, lstar_from_y(y))

    def _key(self) -> tuple[float, float, float, int]:
        return (self._hue, self._chroma, self._tone, self._argb)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __lt__(self, other: Hct) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._argb)

    def __int__(self) -> int:
        return self._argb

    def __str__(self) -> str:
        return (
            f"H{_round_half_away(self._hue)} "
            f"C{_round_half_away(self._chroma)} "
            f"T{_round_half_away(self._tone)}"
        )

    def __repr__(self) -> str:
        return f"Hct(0x{self._argb:08X})"