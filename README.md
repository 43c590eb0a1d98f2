# pixelstrip

An in-memory model of addressable LED strips. It encodes and decodes pixel colors
for common clocked chips (APA102/DotStar, LPD6803, LPD8806 and P9813), models
seven-segment digits as a color object, and builds the start, data and end frames
that a two-wire strip expects.

## Modules

- `pixelstrip.features`: the color types `Rgb` and `Rgbw` (frozen dataclasses whose
  channels must be integers in 0..255), the base class `ColorFeature`, and the
  DotStar encodings `DotStarFeature` (full global brightness) and
  `DotStarLuminanceFeature` (the white channel drives the 5-bit global brightness,
  capped at 31). The channel order is given as a string such as `"bgr"` or `"GRB"`.
  `ColorFeature` also offers `pixel_offset`, `replicate_pixel` and `copy_pixels`
  for working directly on a `bytearray`.
- `pixelstrip.chipfeatures`: `Lpd6803Feature` (two bytes per pixel, 5-5-5 packed
  with a start bit), `Lpd8806Feature` (three 7-bit channels with the high bit set)
  and `P9813Feature` (a flag byte then blue, green, red), plus the helpers
  `encode_555` and `decode_555`.
- `pixelstrip.segment`: `SevenSegDigit` holds the brightness of the nine segments
  of a digit (`LedSegment.A` to `G`, `DECIMAL` and `CUSTOM`). It is built with
  `uniform`, `from_bitmask` or `from_char`, and offers `darken`, `lighten`,
  `linear_blend`, `calculate_brightness` and `calc_total_tenth_milliampere` (with
  `SevenSegCurrentSettings`). `SevenSegDigit.set_string` writes text right to left
  into any object with a `set_pixel_color(index, digit)` method, merging decimal
  points and colons into neighbouring digits.
- `pixelstrip.methods`: `TwoWireMethod` owns the data stream. `DotStarMethod`,
  `Lpd6803Method` and `Lpd8806Method` frame it on `update()` and write it to a wire
  object. `RecordingWire` is such a wire: it keeps each finished transaction in
  `transactions`. `BusChannel` lists the selectable output channels.

## Example

```python
from pixelstrip.features import DotStarFeature, Rgb
from pixelstrip.methods import DotStarMethod, RecordingWire

feature = DotStarFeature("BGR")
wire = RecordingWire()
method = DotStarMethod(8, feature.pixel_size, feature.settings_size, wire)

pixels = feature.pixels(method.data())
feature.apply_pixel_color(pixels, 0, Rgb(255, 0, 0))
assert feature.retrieve_pixel_color(pixels, 0) == Rgb(255, 0, 0)

method.update()
frame = wire.transactions[0]
# 4 start bytes, 8 * 4 pixel bytes, 4 reset bytes, 1 end byte
assert len(frame) == 41
```

Seven-segment text:

```python
from pixelstrip.segment import SevenSegDigit

class Display:
    def __init__(self):
        self.digits = {}

    def set_pixel_color(self, index, digit):
        self.digits[index] = digit

display = Display()
SevenSegDigit.set_string(display, 0, "12:34", 255)
# display.digits[0] is "4", display.digits[1] is "3" with the decimal and
# custom segments lit for the colon, and so on.
```

## What it does not do

The package has no strip object that ties a feature to a method and tracks
changes. There is no brightness scaling, rotating or shifting of a whole strip,
no mapping of 2-D panel coordinates to strip indices, no off-screen 2-D buffer
and no image file reading. It drives no hardware either. Frames go to whatever
wire object you pass in, and `RecordingWire` only keeps them in memory.

## Tests

```
pip install -e .[test]
pytest
```