"""Profile layout of G9-family mice."""

from __future__ import annotations

from typing import Any

from .profile_common import (
    BUTTON_SIZE,
    Button,
    Color,
    Profile,
    SettingDesc,
    SpecialAction,
    encode_button,
    lookup_setting,
    parse_button,
)
from .sensor import Sensor

_MODE_SIZE = 3
_COLOR = 0
_UNKNOWN0 = 1
_MODES = 2
_DEFAULT_DPI = 19
_UNKNOWN1 = 20
_UNKNOWN2 = 21
_REPORT_RATE = 22
_BUTTONS = 23
_UNKNOWN3 = 53
_UNKNOWN4 = 54
_UNKNOWN5 = 55

_DEFAULT_DPI_BIT7 = 0x80

_MAX_MODE_COUNT = 5

_GENERAL_SETTINGS = {
    "color": SettingDesc(Color(255, 0, 0)),
    "unknown0": SettingDesc(0x10, 0x00, 0xFF),
    "default_dpi": SettingDesc(0, 0, _MAX_MODE_COUNT - 1),
    "default_dpi_bit7": SettingDesc(False),
    "unknown1": SettingDesc(0x21, 0x00, 0xFF),
    "unknown2": SettingDesc(0xA2, 0x00, 0xFF),
    "report_rate": SettingDesc(4, 1, 8),
    "unknown3": SettingDesc(0x8F, 0x00, 0xFF),
    "unknown4": SettingDesc(0x00, 0x00, 0xFF),
    "unknown5": SettingDesc(0x00, 0x00, 0xFF),
}

# The G9 set of special actions is not known; the G500 one stands in for it.
_SPECIAL_ACTIONS = {
    "WheelLeft": int(SpecialAction.WHEEL_LEFT),
    "WheelRight": int(SpecialAction.WHEEL_RIGHT),
    "ResolutionNext": int(SpecialAction.RESOLUTION_NEXT),
    "ResolutionPrev": int(SpecialAction.RESOLUTION_PREV),
    "ProfileNext": int(SpecialAction.PROFILE_NEXT),
    "ProfilePrev": int(SpecialAction.PROFILE_PREV),
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


class ProfileFormatG9:
    """Encoding of a 56-byte G9 profile.

    The colour field overlaps the bytes that follow it, so only its red
    component survives a write.
    """

    PROFILE_SIZE = 56
    MAX_BUTTON_COUNT = 10
    MAX_MODE_COUNT = _MAX_MODE_COUNT
    LED_COUNT = 4

    def __init__(self, sensor: Sensor) -> None:
        self._sensor = sensor
        maximum = sensor.maximum_resolution()
        dpi_setting = SettingDesc(
            min(800, maximum), sensor.minimum_resolution(), maximum
        )
        self._mode_settings = {
            "dpi": dpi_setting,
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
            raise ValueError("Truncated G9 profile")
        profile = Profile()
        settings = profile.settings
        settings["color"] = Color(*data[_COLOR : _COLOR + 3])
        settings["unknown0"] = data[_UNKNOWN0]

        for i in range(self.MAX_MODE_COUNT):
            start = _MODES + i * _MODE_SIZE
            mode = data[start : start + _MODE_SIZE]
            dpi = mode[0]
            if i > 0 and dpi == 0:
                break
            led_flags = int.from_bytes(mode[1:3], "little")
            profile.modes.append(
                {
                    "dpi": self._sensor.to_dpi(dpi),
                    "leds": _decode_leds(led_flags, self.LED_COUNT),
                }
            )

        default_dpi = data[_DEFAULT_DPI]
        settings["default_dpi"] = default_dpi & ~_DEFAULT_DPI_BIT7
        settings["default_dpi_bit7"] = bool(default_dpi & _DEFAULT_DPI_BIT7)

        settings["unknown1"] = data[_UNKNOWN1]
        settings["unknown2"] = data[_UNKNOWN2]
        settings["report_rate"] = data[_REPORT_RATE]

        for i in range(self.MAX_BUTTON_COUNT):
            start = _BUTTONS + i * BUTTON_SIZE
            profile.buttons.append(parse_button(data[start : start + BUTTON_SIZE]))

        settings["unknown3"] = data[_UNKNOWN3]
        settings["unknown4"] = data[_UNKNOWN4]
        settings["unknown5"] = data[_UNKNOWN5]
        return profile

    def _encode_mode(self, mode: dict[str, Any]) -> bytes:
        dpi = lookup_setting(mode, self._mode_settings, "dpi")
        leds = lookup_setting(mode, self._mode_settings, "leds")
        return bytes((self._sensor.from_dpi(dpi) & 0xFF,)) + _encode_leds(
            leds, self.LED_COUNT
        ).to_bytes(2, "little")

    def write(self, profile: Profile) -> bytes:
        """Encode *profile* into PROFILE_SIZE bytes."""
        general = profile.settings
        out = bytearray(self.PROFILE_SIZE)

        def setting(name: str) -> Any:
            return lookup_setting(general, _GENERAL_SETTINGS, name)

        # Fields are written in layout order; later ones overwrite the colour.
        out[_COLOR : _COLOR + 3] = setting("color").to_bytes()
        out[_UNKNOWN0] = setting("unknown0") & 0xFF

        for i in range(self.MAX_MODE_COUNT):
            start = _MODES + i * _MODE_SIZE
            if i < len(profile.modes):
                out[start : start + _MODE_SIZE] = self._encode_mode(profile.modes[i])
            else:
                out[start : start + _MODE_SIZE] = bytes(_MODE_SIZE)

        default_dpi = setting("default_dpi")
        if default_dpi >= len(profile.modes):
            default_dpi = len(profile.modes) - 1
        if setting("default_dpi_bit7"):
            default_dpi |= _DEFAULT_DPI_BIT7
        out[_DEFAULT_DPI] = default_dpi & 0xFF

        out[_UNKNOWN1] = setting("unknown1") & 0xFF
        out[_UNKNOWN2] = setting("unknown2") & 0xFF
        out[_REPORT_RATE] = setting("report_rate") & 0xFF

        for i in range(self.MAX_BUTTON_COUNT):
            button = profile.buttons[i] if i < len(profile.buttons) else Button()
            start = _BUTTONS + i * BUTTON_SIZE
            out[start : start + BUTTON_SIZE] = encode_button(button)

        out[_UNKNOWN3] = setting("unknown3") & 0xFF
        out[_UNKNOWN4] = setting("unknown4") & 0xFF
        out[_UNKNOWN5] = setting("unknown5") & 0xFF
        return bytes(out)