"""Tonal palettes: colours of one hue and chroma across every tone."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from matcolors.hct import Hct


class Palette(Enum):
    """The roles a tonal palette can play in a colour scheme."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    ERROR = "error"
    NEUTRAL = "neutral"
    NEUTRAL_VARIANT = "neutral_variant"


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class KeyColor:
    """Finds the tone that best represents a hue and a requested chroma."""

    MAX_CHROMA_VALUE = 200.0

    def __init__(self, hue: float, requested_chroma: float) -> None:
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache: dict[int, float] = {}

    def create(self) -> Hct:
        """The first tone, searching out from T50, that offers the requested chroma."""
        # T50 has the most chroma available on average, so it is the pivot.
        pivot_tone = 50
        tone_step_size = 1
        # Accept values slightly below the requested chroma.
        epsilon = 0.01

        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self._max_chroma(mid_tone) < self._max_chroma(
                mid_tone + tone_step_size
            )
            sufficient_chroma = self._max_chroma(mid_tone) >= self.requested_chroma - epsilon

            if sufficient_chroma:
                # Both halves hold an answer; search the one closer to the pivot.
                if abs(lower_tone - pivot_tone) < abs(upper_tone - pivot_tone):
                    upper_tone = mid_tone
                elif lower_tone == mid_tone:
                    return Hct.of(self.hue, self.requested_chroma, float(lower_tone))
                else:
                    lower_tone = mid_tone
            elif is_ascending:
                # Head towards the chroma peak.
                lower_tone = mid_tone + tone_step_size
            else:
                # Keep mid_tone as a potential chroma peak.
                upper_tone = mid_tone

        return Hct.of(self.hue, self.requested_chroma, float(lower_tone))

    def _max_chroma(self, tone: int) -> float:
        chroma = self._chroma_cache.get(tone)
        if chroma is None:
            chroma = Hct.of(self.hue, self.MAX_CHROMA_VALUE, float(tone)).chroma
            self._chroma_cache[tone] = chroma
        return chroma


@total_ordering
class TonalPalette:
    """Colours constant in hue and chroma that vary only in tone."""

    COMMON_TONES: tuple[int, ...] = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)

    __slots__ = ("_hue", "_chroma", "_key_color")

    def __init__(self, hue: float, chroma: float, key_color: Hct) -> None:
        self._hue = hue
        self._chroma = chroma
        self._key_color = key_color

    @classmethod
    def common_size(cls) -> int:
        return len(cls.COMMON_TONES)

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def key_color(self) -> Hct:
        return self._key_color

    @classmethod
    def from_hct(cls, hct: Hct) -> TonalPalette:
        """A palette with the hue and chroma of ``hct``, which is its key colour."""
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def of(cls, hue: float, chroma: float) -> TonalPalette:
        """A palette from ``hue`` and ``chroma``, generating its key colour."""
        return cls(hue, chroma, KeyColor(hue, chroma).create())

    def tone(self, tone: float) -> int:
        """ARGB of the palette's colour at ``tone``."""
        return Hct.of(self._hue, self._chroma, float(tone)).argb

    def get_hct(self, tone: float) -> Hct:
        """HCT of the palette's colour at ``tone``."""
        return Hct.of(self._hue, self._chroma, float(tone))

    def _key(self) -> tuple[float, float]:
        return (self._hue, self._chroma)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TonalPalette):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: TonalPalette) -> bool:
        if not isinstance(other, TonalPalette):
            return NotImplemented
        if self._key() != other._key():
            return self._key() < other._key()
        return self._key_color < other._key_color

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"TonalPalette.of({_format_number(self._hue)}, {_format_number(self._chroma)})"

    def __repr__(self) -> str:
        return f"TonalPalette({self._hue!r}, {self._chroma!r}, {self._key_color!r})"