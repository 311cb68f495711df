# swiftqr

A QR code generator written in plain Python, with no dependencies.

swiftqr picks the most compact encoding for your data (numeric,
alphanumeric or byte), the smallest version that holds it at the chosen
error correction level, and the mask pattern with the lowest penalty
score. Any of the level, version and mask can be forced by hand.

## Installation

```
pip install swiftqr
```

## Command line

Print a QR code for some text straight to the terminal, drawn with
Unicode half-block characters:

```
swiftqr "https://example.com/"
```

Options:

- `-e`, `--ecl {L,M,Q,H}`: error correction level (default `Q`).
- `-v`, `--version 1-40`: force the symbol version.
- `-m`, `--mask 0-7`: force the mask pattern.

If the code cannot be built (the text is too long, or a forced version is
too small), an error message is written to standard error and the exit
status is 1.

## Library

```python
from swiftqr.builder import QRBuilder
from swiftqr.options import ECL
from swiftqr.version import Version

qrcode = (
    QRBuilder("https://example.com/")
    .ecl(ECL.H)
    .version(Version.V03)
    .build()
)

qrcode.print()          # write it to the terminal
text = qrcode.to_str()  # or keep the rendering as a string
```

`QRBuilder` accepts `str` (encoded as UTF-8), `bytes` or `bytearray`.
The same thing is available as a single call:
`swiftqr.builder.create_qrcode(data, ecl=None, version=None, mask=None)`.

### Options

- `ecl(...)` sets the error correction level: `ECL.L` (7 %), `ECL.M`
  (15 %), `ECL.Q` (25 %, the default) or `ECL.H` (30 %).
- `version(...)` forces a version from `Version.V01` (21×21 modules) to
  `Version.V40` (177×177). Without it the smallest version that fits is
  chosen.
- `mask(...)` forces one of the eight patterns in `swiftqr.options.Mask`
  (`CHECKERBOARD`, `HORIZONTAL_LINES`, `VERTICAL_LINES`, `DIAGONAL_LINES`,
  `LARGE_CHECKERBOARD`, `FIELDS`, `DIAMONDS`, `MEADOW`). This is rarely
  needed; by default every mask is scored and the best one is used.

The built `QRCode` records what was used in its `version`, `ecl`, `mask`
and `mode` attributes.

### Errors

`build()` raises a subclass of `QRCodeError`:

- `EncodedDataError` when the data is too large for any version at the
  chosen level;
- `SpecifiedVersionError` when a forced version is too small for the data.

```python
from swiftqr.builder import QRBuilder, QRCodeError
from swiftqr.version import Version

try:
    QRBuilder("a rather long piece of text").version(Version.V01).build()
except QRCodeError as error:
    print(f"cannot build: {error}")
```

### Reading the matrix

A built `QRCode` has a `size` (modules per side) and is indexed by row;
each row is a list of `Module` objects with a boolean `value` (dark is
`True`) and a `module_type` (`swiftqr.module.ModuleType`) telling finder,
timing, alignment, format, version and data modules apart.

```python
for row in range(qrcode.size):
    print("".join("#" if module.value else "." for module in qrcode[row]))
```

## What it does not do

swiftqr renders codes only as text for a terminal. It does not write
image files such as PNG or SVG; to get an image, draw the modules from the
matrix yourself. Kanji mode and mixed-mode segments are not supported.

## Running the tests

```
pip install "swiftqr[test]"
pytest
```