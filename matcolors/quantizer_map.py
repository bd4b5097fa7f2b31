"""Exact colour counting and the result type shared by the quantizers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class QuantizerResult:
    """Outcome of a quantization run.

    ``color_to_count`` maps each resulting ARGB colour to its population, in
    the order the quantizer produced them. ``input_pixel_to_cluster_pixel``
    maps input colours to the cluster colour they were assigned to, when the
    quantizer tracks that.
    """

    color_to_count: dict[int, int] = field(default_factory=dict)
    input_pixel_to_cluster_pixel: dict[int, int] = field(default_factory=dict)


def quantize_map(pixels: Iterable[int]) -> QuantizerResult:
    """Count every distinct ARGB pixel, keeping first-seen order."""
    return QuantizerResult(color_to_count=dict(Counter(pixels)))