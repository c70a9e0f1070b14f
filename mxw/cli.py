"""Command line interface: parse arguments, find the mouse and apply the request."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from termcolor import colored

from mxw import config, report
from mxw.bindings import (
    Binding,
    Button,
    DPIFn,
    KeyBinding,
    KeyboardFn,
    MediaFn,
    MouseFn,
    NoBinding,
    bind,
)
from mxw.color import parse_hex
from mxw.config import ScrollDirection
from mxw.effects import Effect, EffectKind, set_led_effect
from mxw.glorious import is_wired
from mxw.hid import NoDeviceError, enumerate_devices, find_device, open_device
from mxw.keys import parse_code, parse_key_code, parse_scan_code
from mxw.ranges import contains
from mxw.status import FeatureDevice

VERSION = "0.1.2"
DEFAULT_STAGES = (400, 800, 1600, 3200)
DEFAULT_DPI_COLORS = ("FFFF00", "0000FF", "FF0000", "00FF00")

Handler = Callable[[argparse.Namespace, FeatureDevice, bool], None]


def _arg_type(parse: Callable[[str], Any], name: str) -> Callable[[str], Any]:
    """Wrap a parser so that its ValueError becomes an argparse error message."""

    def convert(text: str) -> Any:
        try:
            return parse(text)
        except ValueError as error:
            raise argparse.ArgumentTypeError(str(error)) from None

    convert.__name__ = name
    return convert


_U8 = _arg_type(contains(0, 0xFF), "u8")
_PROFILE = _arg_type(contains(1, 3), "profile")
_RATE = _arg_type(contains(0, 100), "rate")
_DPI_STAGE_ID = _arg_type(contains(1, 4), "stage id")
_DPI_VALUE = _arg_type(contains(100, 19000), "dpi")
_DEBOUNCE = _arg_type(contains(0, 16), "debounce")
_COLOR = _arg_type(parse_hex, "color")


def _cli_name(member: Enum) -> str:
    return member.name.lower().replace("_", "-")


_BUTTONS = {_cli_name(button): button for button in Button}


class _Count(argparse.Action):
    """Store a list of values whose length must lie in ``low..high``."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        low: int,
        high: int,
        fallback: Iterable[Any] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.low = low
        self.high = high
        self.fallback = tuple(fallback)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        items = list(values or ())
        if not items and self.fallback:
            items = list(self.fallback)
        elif not self.low <= len(items) <= self.high:
            if self.low == self.high:
                message = f"expected {self.low} values"
            else:
                message = f"expected from {self.low} to {self.high} values"
            raise argparse.ArgumentError(self, message)
        setattr(namespace, self.dest, items)


# Handlers, each called with the parsed arguments, the open device and
# whether the connection is wired.


def _report_battery(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    text = report.battery_text(device, wired)
    print(text, end="" if text == "(waking up)" else "\n")


def _report_firmware(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    print(report.firmware_version(device, wired))


def _profile(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_profile(device, args.id)


def _led_effect(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    colors = getattr(args, "colors", None) or []
    single = getattr(args, "color", None)
    if single is not None:
        colors = [single]
    effect = Effect(args.effect_kind, getattr(args, "rate", None), colors)
    set_led_effect(device, args.profile, effect)


def _led_brightness(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_led_brightness(device, args.wired, args.wireless)


def _sleep(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_sleep(device, args.minutes, args.seconds)


def _dpi_stage(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_dpi_stage(device, args.profile, args.id)


def _dpi_stages(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_dpi_stages(device, args.profile, args.stages or list(DEFAULT_STAGES))


def _dpi_colors(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    colors = args.colors or [parse_hex(text) for text in DEFAULT_DPI_COLORS]
    config.set_dpi_colors(device, args.profile, colors)


def _lift_off(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_lift_off(device, args.mm)


def _polling_rate(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_polling_rate(device, args.ms)


def _debounce(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_debounce(device, args.profile, args.ms)


def _bind(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    binding = args.make_binding(args)
    bind(device, args.profile, _BUTTONS[args.button], binding)


def _scroll(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    config.set_scroll(device, ScrollDirection(args.direction))


# Binding factories stored on the parsed arguments.


def _constant(value: Binding) -> Callable[[argparse.Namespace], Binding]:
    return lambda _args: value


def _key_binding(args: argparse.Namespace) -> Binding:
    return KeyBinding(args.key, args.modifier)


def _unsupported(name: str) -> Callable[[argparse.Namespace], Binding]:
    def fail(_args: argparse.Namespace) -> Binding:
        raise ValueError(f"{name} bindings are not supported")

    return fail


def _add_profile_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-p", "--profile", type=_PROFILE, help="Profile id (1-3) [default: 1]")


def _add_rate_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--rate", type=_RATE, help="Effect rate, 0-100 [default: 40]")


_EFFECT_HELP = {
    EffectKind.GLORIOUS: "Name says it all",
    EffectKind.CYCLE: "Cycle through all colors",
    EffectKind.PULSE: "Pulse on/off through given colors",
    EffectKind.SOLID: "Solid color",
    EffectKind.PULSE_ONE: "Pulse on/off one color",
    EffectKind.TAIL: 'Glorious, but colors don\'t "move"',
    EffectKind.RAVE: "Strobe-like effect",
    EffectKind.WAVE: "Glorious, but more circus",
    EffectKind.OFF: "No effect, LED off",
}

_EFFECT_ORDER = (
    EffectKind.GLORIOUS,
    EffectKind.CYCLE,
    EffectKind.PULSE,
    EffectKind.SOLID,
    EffectKind.PULSE_ONE,
    EffectKind.TAIL,
    EffectKind.RAVE,
    EffectKind.WAVE,
    EffectKind.OFF,
)


def _add_led_effect(settings: Any) -> None:
    parser = settings.add_parser("led-effect", help="LED Effect")
    _add_profile_option(parser)
    kinds = parser.add_subparsers(dest="effect", required=True, metavar="EFFECT")
    for kind in _EFFECT_ORDER:
        leaf = kinds.add_parser(_cli_name(kind), help=_EFFECT_HELP[kind])
        if kind not in (EffectKind.SOLID, EffectKind.OFF):
            _add_rate_option(leaf)
        if kind is EffectKind.PULSE:
            leaf.add_argument(
                "colors", nargs="+", type=_COLOR, action=_Count, low=2, high=6,
                metavar="COLOR", help="From 2 to 6 colors in hex format",
            )
        elif kind is EffectKind.RAVE:
            leaf.add_argument(
                "colors", nargs="+", type=_COLOR, action=_Count, low=1, high=2,
                metavar="COLOR", help="1 or 2 colors in hex format",
            )
        elif kind in (EffectKind.SOLID, EffectKind.PULSE_ONE):
            leaf.add_argument("color", type=_COLOR, help="Color in hex format")
        leaf.set_defaults(handler=_led_effect, effect_kind=kind)


def _add_bind(settings: Any) -> None:
    parser = settings.add_parser("bind", help="Key binding")
    _add_profile_option(parser)
    parser.add_argument("button", choices=list(_BUTTONS), help="Mouse button")
    parser.set_defaults(handler=_bind)
    bindings = parser.add_subparsers(dest="binding", required=True, metavar="BINDING")

    key = bindings.add_parser("key", help="Single key")
    key_kinds = key.add_subparsers(dest="key_kind", required=True, metavar="KIND")
    for name, parse, help_text in (
        ("scan-code", parse_scan_code, "Hardware scan code"),
        ("key-code", parse_key_code, "JS-style KeyCode"),
        ("code", parse_code, "JS-style Code"),
    ):
        convert = _arg_type(parse, name)
        leaf = key_kinds.add_parser(name, help=help_text)
        leaf.add_argument("key", type=convert)
        leaf.add_argument("-m", "--modifier", type=convert, help="Optional modifier")
        leaf.set_defaults(make_binding=_key_binding)

    function_groups: tuple[tuple[str, type[Enum], str], ...] = (
        ("keyboard", KeyboardFn, "Keyboard function"),
        ("mouse", MouseFn, "Mouse function"),
        ("dpi", DPIFn, "DPI modifier"),
    )
    for name, enum, help_text in function_groups:
        _add_function_group(bindings, name, enum, help_text)

    bindings.add_parser("macro", help="Macro").set_defaults(make_binding=_unsupported("macro"))
    _add_function_group(bindings, "media", MediaFn, "Multimedia")
    bindings.add_parser("shortcut", help="Launch applications etc.").set_defaults(
        make_binding=_unsupported("shortcut")
    )
    bindings.add_parser("none", help="Do nothing").set_defaults(
        make_binding=_constant(NoBinding())
    )


def _add_function_group(bindings: Any, name: str, enum: type[Enum], help_text: str) -> None:
    group = bindings.add_parser(name, help=help_text)
    functions = group.add_subparsers(dest=f"{name}_fn", required=True, metavar="FUNCTION")
    for member in enum:
        functions.add_parser(_cli_name(member)).set_defaults(make_binding=_constant(member))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every report and setting."""
    parser = argparse.ArgumentParser(
        prog="mxw", description="Cross platform CLI tool for Glorious' wireless mice."
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    kinds = parser.add_subparsers(dest="kind", required=True, metavar="COMMAND")

    report_parser = kinds.add_parser("report", help="Retrieve information about the device")
    reports = report_parser.add_subparsers(dest="report", required=True, metavar="REPORT")
    reports.add_parser("battery", help="Battery percentage (if available)").set_defaults(
        handler=_report_battery
    )
    reports.add_parser("firmware", help="Device firmware version").set_defaults(
        handler=_report_firmware
    )

    config_parser = kinds.add_parser("config", help="Change the device's various settings")
    settings = config_parser.add_subparsers(dest="setting", required=True, metavar="SETTING")

    profile = settings.add_parser("profile", help="Active profile by id")
    profile.add_argument("id", type=_PROFILE)
    profile.set_defaults(handler=_profile)

    _add_led_effect(settings)

    brightness = settings.add_parser("led-brightness", help="LED brightness value[s] (0-255)")
    brightness.add_argument("wired", type=_U8)
    brightness.add_argument("wireless", type=_U8, nargs="?", help="[default: <WIRED>]")
    brightness.set_defaults(handler=_led_brightness)

    sleep = settings.add_parser("sleep", help="Sleep delay in minutes [and seconds]")
    sleep.add_argument("minutes", type=_U8)
    sleep.add_argument("seconds", type=_U8, nargs="?", help="[default: 0]")
    sleep.set_defaults(handler=_sleep)

    stage = settings.add_parser("dpi-stage", help="Active DPI stage by id")
    _add_profile_option(stage)
    stage.add_argument("id", type=_DPI_STAGE_ID)
    stage.set_defaults(handler=_dpi_stage)

    stages = settings.add_parser("dpi-stages", help="Set DPI stages (200-19000)")
    _add_profile_option(stages)
    stages.add_argument(
        "stages", nargs="*", type=_DPI_VALUE, action=_Count, low=4, high=4,
        fallback=DEFAULT_STAGES, metavar="STAGE",
        help="[default: " + " ".join(str(value) for value in DEFAULT_STAGES) + "]",
    )
    stages.set_defaults(handler=_dpi_stages)

    colors = settings.add_parser("dpi-colors", help="Set DPI stage colors")
    _add_profile_option(colors)
    colors.add_argument(
        "colors", nargs="*", type=_COLOR, action=_Count, low=4, high=4,
        fallback=tuple(parse_hex(text) for text in DEFAULT_DPI_COLORS), metavar="COLOR",
        help="[default: " + " ".join(DEFAULT_DPI_COLORS) + "]",
    )
    colors.set_defaults(handler=_dpi_colors)

    lift_off = settings.add_parser("lift-off", help="Lift-off distance in mm")
    lift_off.add_argument("mm", choices=["1", "2"])
    lift_off.set_defaults(handler=_lift_off)

    polling = settings.add_parser("polling-rate", help="Polling rate in ms")
    polling.add_argument("ms", choices=["1", "2", "4", "8"])
    polling.set_defaults(handler=_polling_rate)

    debounce = settings.add_parser("debounce", help="Debounce in ms (0-16)")
    _add_profile_option(debounce)
    debounce.add_argument("ms", type=_DEBOUNCE)
    debounce.set_defaults(handler=_debounce)

    _add_bind(settings)

    scroll = settings.add_parser("scroll", help="Scroll inversion")
    scroll.add_argument("direction", choices=[direction.value for direction in ScrollDirection])
    scroll.set_defaults(handler=_scroll)

    return parser


def run(args: argparse.Namespace, device: FeatureDevice, wired: bool) -> None:
    """Carry out the parsed command on an open device."""
    handler: Handler | None = getattr(args, "handler", None)
    if handler is None:
        raise ValueError("no command given")
    handler(args, device, wired)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        info = find_device(enumerate_devices())
    except NoDeviceError as error:
        print(f"{colored('error', 'red', attrs=['bold'])}: {error}")
        return 1
    try:
        with open_device(info) as device:
            run(args, device, is_wired(info.product_id))
    except (OSError, ValueError, RuntimeError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())