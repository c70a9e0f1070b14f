# mxw

A command-line tool for Glorious mice: Model O, Model D, Model O-, Model D-,
Series One Pro and Model D2 Pro, in their wireless and wired variants. It
reads the battery level and the firmware version, and it changes the mouse's
settings: active profile, LED effect and brightness, sleep delay, DPI stages
and colours, lift-off distance, polling rate, debounce time, button bindings
and scroll direction.

The mouse is found through the Linux hidraw interface (`/sys/class/hidraw`
and `/dev/hidraw*`). When more than one supported device is connected, the
one with the lowest product id is used, which prefers the wired receiver.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

Your user needs read and write access to the mouse's `/dev/hidraw*` node,
which usually means a udev rule or running as root.

## Usage

Reports:

```
mxw report battery
mxw report firmware
```

`battery` prints the charge in percent. A wired connection also shows
whether the mouse is charging or fully charged. A sleeping mouse is reported
as `(asleep)`, one that is waking up as `(waking up)`, and any other state as
the raw status bytes followed by `(unknown status)`. `firmware` prints the
version as four dotted numbers.

Settings:

```
mxw config profile 2
mxw config sleep 5 30
mxw config led-brightness 128 64
mxw config led-effect solid FF8800
mxw config led-effect --profile 2 pulse --rate 60 FF0000 00FF00 0000FF
mxw config led-effect off
mxw config dpi-stage 3
mxw config dpi-stages 400 800 1600 3200
mxw config dpi-colors FFFF00 0000FF FF0000 00FF00
mxw config lift-off 2
mxw config polling-rate 1
mxw config debounce 4
mxw config scroll invert
```

- `profile ID`: active profile, 1 to 3.
- `sleep MINUTES [SECONDS]`: idle time before sleeping; a total of zero
  disables sleeping.
- `led-brightness WIRED [WIRELESS]`: 0 to 255; the wireless value defaults
  to the wired one.
- `led-effect EFFECT`: one of `glorious`, `cycle`, `pulse` (2 to 6 colours),
  `solid` (one colour), `pulse-one` (one colour), `tail`, `rave` (1 or 2
  colours), `wave` and `off`. Effects other than `solid` and `off` take
  `-r/--rate` from 0 to 100, default 40.
- `dpi-stage ID`: active DPI stage, 1 to 4.
- `dpi-stages [STAGE ...]`: exactly four values from 100 to 19000; with none
  given, `400 800 1600 3200`.
- `dpi-colors [COLOR ...]`: exactly four colours; with none given,
  `FFFF00 0000FF FF0000 00FF00`.
- `lift-off MM`: 1 or 2.
- `polling-rate MS`: 1, 2, 4 or 8.
- `debounce MS`: 0 to 16.
- `scroll default|invert`: keeps or swaps scroll up and down in all three
  profiles.

`led-effect`, `dpi-stage`, `dpi-stages`, `dpi-colors`, `debounce` and `bind`
take `-p/--profile` (1 to 3, default 1). Colours are six hexadecimal digits.

Button bindings:

```
mxw config bind forward media play-pause
mxw config bind back dpi cycle-up
mxw config bind --profile 3 dpi-btn mouse battery-status
mxw config bind scroll key code ShiftRight --modifier ControlLeft
mxw config bind right none
```

Buttons: `left`, `right`, `scroll`, `forward`, `back`, `dpi-btn`, `scroll-up`
and `scroll-down`. Binding kinds:

- `mouse`: `left`, `right`, `scroll`, `forward`, `back`, `scroll-up`,
  `scroll-down`, `profile-cycle-up`, `profile-cycle-down`, `battery-status`.
- `keyboard`: `profile-cycle-up`, `profile-cycle-down`, `layer-cycle-up`,
  `layer-cycle-down`.
- `dpi`: `stage-up`, `stage-down`, `cycle-up`, `cycle-down`.
- `media`: `player`, `play-pause`, `next`, `previous`, `stop`, `mute`,
  `volume-up`, `volume-down`.
- `key scan-code|key-code|code KEY [-m MODIFIER]`: a key given as a hardware
  scan code, a JavaScript-style key code or a JavaScript-style code name.
- `none`: the button does nothing.

Settings other than `dpi-stages` are refused with `device is sleeping` while
the mouse is asleep; move it to wake it up and try again.

`mxw --help`, or `--help` after any subcommand, lists every option;
`mxw --version` prints the version. The command exits with status 1 when no
mouse is found or a request fails.

## Use from Python

The pieces behind the command can be used directly:

```python
from mxw.hid import enumerate_devices, find_device, open_device
from mxw.glorious import is_wired
from mxw import config, report

info = find_device(enumerate_devices())
with open_device(info) as device:
    print(report.battery_text(device, is_wired(info.product_id)))
    config.set_dpi_stage(device, None, 2)
```

`mxw.hid.find_device` raises `NoDeviceError` when no supported mouse is
present, and `mxw.status.check_sleep` raises `DeviceSleepingError` when the
mouse is asleep. Report builders such as `mxw.bindings.bind_report` and
`mxw.effects.effect_report` return the raw feature report bytes without
talking to a device.

## Limitations

- Only Linux is supported; devices are found and addressed through hidraw.
- `key` bindings accept only the modifier keys `ControlLeft`, `ShiftRight`,
  `AltRight`, `MetaLeft` and `MetaRight` (as key or as modifier); other keys
  are rejected with `key code is invalid`.
- `macro` and `shortcut` bindings are listed but not supported; choosing them
  ends with an error.
- Current settings cannot be read back from the mouse; only the battery level
  and firmware version are reported.