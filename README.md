# hidpp10

A pure-Python library for the data formats of the HID++ 1.0 protocol used by
older gaming mice. It turns the raw bytes kept in a mouse's on-board memory
into Python objects and back.

## What is in it

- `hidpp10.defs`: protocol constants (`SubID`, `RegisterAddress`,
  `SHORT_PARAM_LENGTH`, `LONG_PARAM_LENGTH`, `PAGE_SIZE`, `RAM_SIZE`) and the
  `Address` type (memory type, page, and offset in 16-bit words).
- `hidpp10.sensor`: conversion between DPI and a sensor's internal resolution
  values. `ListSensor` maps DPI to an index into a list of resolutions
  (flagged with `0x80`); `RangeSensor` scales DPI by a fixed ratio and clamps
  it to its range. Ready-made sensors: `S6006`, `S6090`, `S9500`, `S9808`.
- `hidpp10.macro_format`: `MacroFormat` encodes and decodes macro
  instructions (`MacroItem`, `Instruction`). Combined modifier-and-key items
  are split into two instructions, short delays are rounded to the nearest
  one-byte code, and instructions without an encoding raise
  `UnsupportedInstruction`. `get_macro_format()` returns a `MacroFormat`.
- `hidpp10.profile_common`: the pieces the profile formats share: `Profile`,
  `Button` and `ButtonKind`, `Color`, `SpecialAction`, `SettingDesc`,
  `lookup_setting`, and the three-byte button encoding `parse_button` /
  `encode_button`.
- `hidpp10.profile_directory`: `ProfileDirectoryFormat` reads and writes the
  list of stored profiles (page, offset and LED bits per entry, ended by a
  `0xFF` page). `get_profile_directory_format()` returns one with four LEDs.
- `hidpp10.profile_format_g9`, `hidpp10.profile_format_g500`,
  `hidpp10.profile_format_g700`: `ProfileFormatG9` (56 bytes),
  `ProfileFormatG500` (78 bytes) and `ProfileFormatG700` (74 bytes). Each is
  built from a sensor and offers `read`, `write`, `general_settings`,
  `mode_settings` and `special_actions`.

## Installation

```
pip install .
```

## Examples

Sensor resolutions:

```python
from hidpp10.sensor import S9808

S9808.from_dpi(800)   # 16
S9808.to_dpi(16)      # 800
```

Profiles:

```python
from hidpp10.profile_format_g500 import ProfileFormatG500
from hidpp10.sensor import S9808

fmt = ProfileFormatG500(S9808)
profile = fmt.read(raw_bytes)          # at least 78 bytes
profile.settings["report_rate"] = 2
raw_bytes = fmt.write(profile)         # exactly 78 bytes
```

Settings missing from a `Profile` take the defaults given by
`general_settings()` and `mode_settings()`; unknown setting names raise
`KeyError` and out-of-range values raise `ValueError`.

Macros:

```python
from hidpp10.macro_format import Instruction, MacroFormat, MacroItem

fmt = MacroFormat()
code, jump_pos = fmt.encode_item(MacroItem(Instruction.KEY_PRESS, key_code=4))
item, next_pos, jump = fmt.parse_item(code, 0)
```

## What it does not do

The package does not talk to devices. It opens no HID device, sends no
reports, reads or writes no registers, and does not transfer pages to or from
a mouse's memory; the bytes it reads and produces have to be moved by other
means. Nor does it pick a profile format from a product ID: choose
`ProfileFormatG9`, `ProfileFormatG500` or `ProfileFormatG700` and the sensor
yourself.

## Running the tests

```
pip install .[test]
pytest
```