"""Profile layout of G700-family mice."""

from __future__ import annotations

from typing import Any

from .profile_common import (
    BUTTON_SIZE,
    Button,
    Profile,
    SettingDesc,
    SpecialAction,
    encode_button,
    lookup_setting,
    parse_button,
)
from .sensor import Sensor

_MODE_SIZE = 4
_MODES = 0
_DEFAULT_DPI = 20
_ANGLE = 21
_ANGLE_SNAPPING = 22
_BUTTONS = 35

_MAX_MODE_COUNT = 5

# Single-byte integer settings, in the order of their offsets from 23 onwards.
_BYTE_SETTINGS = (
    ("unknown0", 23),
    ("report_rate", 24),
    ("unknown1", 25),
    ("unknown2", 26),
    ("unknown3", 27),
    ("unknown4", 28),
    ("power_mode", 29),
    ("unknown5", 30),
    ("unknown6", 31),
    ("unknown7", 32),
    ("unknown8", 33),
    ("unknown9", 34),
)

_GENERAL_SETTINGS = {
    "default_dpi": SettingDesc(0, 0, _MAX_MODE_COUNT - 1),
    "angle": SettingDesc(0x80, 0x00, 0xFF),
    "angle_snapping": SettingDesc(False),
    "unknown0": SettingDesc(0x10, 0x00, 0xFF),
    "report_rate": SettingDesc(4, 1, 8),
    "unknown1": SettingDesc(0x00, 0x00, 0xFF),  # 0x00 or 0x01
    "unknown2": SettingDesc(0x2C, 0x00, 0xFF),  # 0x2c or 0x0a
    "unknown3": SettingDesc(0x00, 0x00, 0xFF),  # 0x00, 0x02 or 0x04
    "unknown4": SettingDesc(0x58, 0x00, 0xFF),  # 0x58, 0xb0 or 0x3c
    "power_mode": SettingDesc(100, 50, 200),
    "unknown5": SettingDesc(0xFF, 0x00, 0xFF),  # 0xff or 0x1f
    "unknown6": SettingDesc(0xBC, 0x00, 0xFF),
    "unknown7": SettingDesc(0x00, 0x00, 0xFF),
    "unknown8": SettingDesc(0x09, 0x00, 0xFF),
    "unknown9": SettingDesc(0x31, 0x00, 0xFF),
}

_SPECIAL_ACTIONS = {
    "WheelLeft": int(SpecialAction.WHEEL_LEFT),
    "WheelRight": int(SpecialAction.WHEEL_RIGHT),
    "BatteryLevel": int(SpecialAction.BATTERY_LEVEL),
    "ResolutionNext": int(SpecialAction.RESOLUTION_NEXT),
    "ResolutionCycleNext": int(SpecialAction.RESOLUTION_CYCLE_NEXT),
    "ResolutionPrev": int(SpecialAction.RESOLUTION_PREV),
    "ResolutionCyclePrev": int(SpecialAction.RESOLUTION_CYCLE_PREV),
    "ProfileNext": int(SpecialAction.PROFILE_NEXT),
    "ProfileCycleNext": int(SpecialAction.PROFILE_CYCLE_NEXT),
    "ProfilePrev": int(SpecialAction.PROFILE_PREV),
    "ProfileCyclePrev": int(SpecialAction.PROFILE_CYCLE_PREV),
    **{
        f"ProfileSwitch{n}": int(SpecialAction.PROFILE_SWITCH) + (n << 8)
        for n in range(5)
    },
}


def _decode_leds(led_flags: int, count: int) -> tuple[bool, ...]:
    leds = []
    for j in range(count):
        led = (led_flags >> (4 * j)) & 0x0F
        if led == 0:
            break
        leds.append(led == 0x02)
    return tuple(leds)


def _encode_leds(leds: Any, count: int) -> int:
    flags = 0
    for j, on in enumerate(leds[:count]):
        flags |= (0x02 if on else 0x01) << (4 * j)
    return flags


class ProfileFormatG700:
    """Encoding of a 74-byte G700 profile."""

    PROFILE_SIZE = 74
    MAX_BUTTON_COUNT = 13
    MAX_MODE_COUNT = _MAX_MODE_COUNT
    LED_COUNT = 4

    def __init__(self, sensor: Sensor) -> None:
        self._sensor = sensor
        maximum = sensor.maximum_resolution()
        dpi_setting = SettingDesc(
            min(800, maximum), sensor.minimum_resolution(), maximum
        )
        self._mode_settings = {
            "dpi_x": dpi_setting,
            "dpi_y": dpi_setting,
            "leds": SettingDesc((False,) * self.LED_COUNT),
        }

    def general_settings(self) -> dict[str, SettingDesc]:
        return _GENERAL_SETTINGS

    def mode_settings(self) -> dict[str, SettingDesc]:
        return self._mode_settings

    def special_actions(self) -> dict[str, int]:
        return _SPECIAL_ACTIONS

    def read(self, data: bytes) -> Profile:
        """Decode a profile from the start of *data*."""
        data = bytes(data)
        if len(data) < self.PROFILE_SIZE:
            raise ValueError("Truncated G700 profile")
        profile = Profile()
        for i in range(self.MAX_MODE_COUNT):
            start = _MODES + i * _MODE_SIZE
            mode = data[start : start + _MODE_SIZE]
            dpi_x = mode[0]
            if i > 0 and dpi_x == 0:
                break
            dpi_y = mode[1]
            led_flags = int.from_bytes(mode[2:4], "little")
            profile.modes.append(
                {
                    "dpi_x": self._sensor.to_dpi(dpi_x),
                    "dpi_y": self._sensor.to_dpi(dpi_y),
                    "leds": _decode_leds(led_flags, self.LED_COUNT),
                }
            )

        settings = profile.settings
        settings["default_dpi"] = data[_DEFAULT_DPI]
        settings["angle"] = data[_ANGLE]
        settings["angle_snapping"] = data[_ANGLE_SNAPPING] == 0x02
        for name, offset in _BYTE_SETTINGS:
            settings[name] = data[offset]

        for i in range(self.MAX_BUTTON_COUNT):
            start = _BUTTONS + i * BUTTON_SIZE
            profile.buttons.append(parse_button(data[start : start + BUTTON_SIZE]))
        return profile

    def _encode_mode(self, mode: dict[str, Any]) -> bytes:
        dpi_x = lookup_setting(mode, self._mode_settings, "dpi_x")
        if "dpi_y" in mode:
            dpi_y = lookup_setting(mode, self._mode_settings, "dpi_y")
        else:
            dpi_y = dpi_x
        leds = lookup_setting(mode, self._mode_settings, "leds")
        return bytes(
            (
                self._sensor.from_dpi(dpi_x) & 0xFF,
                self._sensor.from_dpi(dpi_y) & 0xFF,
            )
        ) + _encode_leds(leds, self.LED_COUNT).to_bytes(2, "little")

    def write(self, profile: Profile) -> bytes:
        """Encode *profile* into PROFILE_SIZE bytes."""
        general = profile.settings
        out = bytearray(self.PROFILE_SIZE)

        def setting(name: str) -> Any:
            return lookup_setting(general, _GENERAL_SETTINGS, name)

        for i in range(self.MAX_MODE_COUNT):
            start = _MODES + i * _MODE_SIZE
            if i < len(profile.modes):
                out[start : start + _MODE_SIZE] = self._encode_mode(profile.modes[i])

        default_dpi = setting("default_dpi")
        if default_dpi >= len(profile.modes):
            default_dpi = len(profile.modes) - 1
        out[_DEFAULT_DPI] = default_dpi & 0xFF

        out[_ANGLE] = setting("angle") & 0xFF
        out[_ANGLE_SNAPPING] = 0x01 if setting("angle_snapping") else 0x02

        for name, offset in _BYTE_SETTINGS:
            out[offset] = setting(name) & 0xFF

        for i in range(self.MAX_BUTTON_COUNT):
            button = profile.buttons[i] if i < len(profile.buttons) else Button()
            start = _BUTTONS + i * BUTTON_SIZE
            out[start : start + BUTTON_SIZE] = encode_button(button)
        return bytes(out)