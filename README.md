# matcolors

Color science utilities for building Material-style color schemes, with no
third-party dependencies:

- the **CAM16** color appearance model and configurable **viewing conditions**
- the **HCT** (hue, chroma, tone) color space
- an HCT **solver** that maps a hue/chroma/tone request back into the sRGB gamut
- **tonal palettes** with constant hue and chroma across tones
- color **quantization** by exact counting and by weighted k-means in L\*a\*b\*

Colors are plain integers in `0xAARRGGBB` form.

## Usage

### HCT colors

```python
from matcolors.hct import Hct

blue = Hct.from_argb(0xFF0000FF)
print(blue.hue, blue.chroma, blue.tone)

# Request a color by hue, chroma and tone; chroma is lowered to stay in gamut.
color = Hct.of(120.0, 40.0, 60.0)
print(hex(color.argb))

# Assigning hue, chroma or tone re-solves the color inside sRGB.
color.tone = 80.0
print(color)          # e.g. "H120 C40 T80"
```

`Hct` objects compare equal when their ARGB values are equal, and `int(hct)`
gives the ARGB value.

### Solving directly

```python
from matcolors.solver import solve_to_argb, solve_to_cam, argb_from_lstar, lstar_from_argb

argb = solve_to_argb(282.8, 87.2, 40.0)
cam = solve_to_cam(282.8, 87.2, 40.0)
grey = argb_from_lstar(50.0)
tone = lstar_from_argb(0xFF777777)
```

When the requested chroma is out of reach, the solver keeps hue and tone close
and returns the color with the most chroma the gamut allows.

### Viewing conditions

```python
from matcolors.hct import Hct
from matcolors.viewing_conditions import make_viewing_conditions, y_from_lstar, lstar_from_y

on_black = make_viewing_conditions(None, None, 0.0, None, None)
red_on_black = Hct.from_argb(0xFFFF0000).in_viewing_conditions(on_black)
print(hex(red_on_black.argb))   # 0xff9f5c51
```

Parameters left as `None` take the sRGB defaults (D65 white point, background
L\* 50, surround 2). A surround outside 0 to 2 raises `ValueError`.
`default_viewing_conditions()` returns the standard conditions.

### CAM16

```python
from matcolors.cam16 import Cam16

cam = Cam16.from_argb(0xFFFF0000)
print(cam.j, cam.chroma, cam.hue, cam.m, cam.s, cam.q)
print(cam.distance(Cam16.from_argb(0xFF00FF00)))
print(hex(cam.to_argb()))
```

`Cam16.from_jch`, `Cam16.from_ucs` and `Cam16.from_xyz` build colors from
other coordinates; `xyz_in_viewing_conditions` and `viewed` convert back.
The module also offers `xyz_from_argb` and `argb_from_xyz`.

### Tonal palettes

```python
from matcolors.tonal_palette import TonalPalette

palette = TonalPalette.of(282.8, 87.2)
print(hex(palette.tone(40)))
print(palette.get_hct(90.0))
print(palette.key_color)
```

The key color is found by `KeyColor(hue, chroma).create()`: the tone nearest
T50 that can carry the requested chroma. `Palette` names the roles a palette
can play (primary, secondary, tertiary, error, neutral, neutral variant).

### Quantizing pixels

```python
from matcolors.quantizer_map import quantize_map
from matcolors.quantizer_wsmeans import quantize_wsmeans

pixels = [0xFFFF0000, 0xFFFF0000, 0xFF00FF00, 0xFF00FF00, 0xFF00FF00]

counts = quantize_map(pixels)
print(counts.color_to_count)        # {0xffff0000: 2, 0xff00ff00: 3}

clusters = quantize_wsmeans(pixels, 128)
print(clusters.color_to_count)
print(clusters.input_pixel_to_cluster_pixel)
```

`quantize_wsmeans` accepts `starting_clusters` to seed the centroids; any
further centroids it needs are drawn from distinct input pixels with a fixed
seed, so results are repeatable.

The L\*a\*b\* helpers it uses are in `matcolors.point_provider_lab`:
`lab_from_argb`, `argb_from_lab` and `lab_distance`.

## What this package does not do

- It does not decode images; pass it pixels as ARGB integers.
- It has no box-cutting quantizer to produce starting clusters and no
  one-call "source color from an image" step: k-means seeds come from
  `starting_clusters` you supply or from the pixels themselves, and ranking
  the resulting colors for a theme is left to the caller.
- It does not build full color schemes; it stops at tonal palettes.

## Tests

The test suite uses pytest, available through the `test` extra.