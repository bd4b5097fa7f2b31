"""Material color utilities: CAM16, HCT, tonal palettes and map and k-means quantizers."""

__version__ = "0.4.2"