"""Profile layout of G500-family mice."""

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

_MODE_SIZE = 6
_COLOR = 0
_ANGLE = 3
_MODES = 4
_ANGLE_SNAPPING = 34
_DEFAULT_DPI = 35
_LIFT_THRESHOLD = 36
_UNKNOWN = 37
_REPORT_RATE = 38
_BUTTONS = 39

_MAX_MODE_COUNT = 5

_GENERAL_SETTINGS = {
    "color": SettingDesc(Color(255, 0, 0)),
    "angle": SettingDesc(0x80, 0x00, 0xFF),
    "angle_snapping": SettingDesc(False),
    "default_dpi": SettingDesc(0, 0, _MAX_MODE_COUNT - 1),
    "lift_threshold": SettingDesc(0, -15, 15),
    "unknown": SettingDesc(0x10, 0x00, 0xFF),
    "report_rate": SettingDesc(4, 1, 8),
}

_SPECIAL_ACTIONS = {
    "WheelLeft": int(SpecialAction.WHEEL_LEFT),
    "WheelRight": int(SpecialAction.WHEEL_RIGHT),
    "ResolutionNext": int(SpecialAction.RESOLUTION_NEXT),
    "ResolutionPrev": int(SpecialAction.RESOLUTION_PREV),
    "ProfileNext": int(SpecialAction.PROFILE_NEXT),
    "ProfilePrev": int(SpecialAction.PROFILE_PREV),
    **{
        f"ProfileSwitch{n}": SpecialAction.PROFILE_SWITCH + (n << 8)
        for n in range(5)
    },
}


class ProfileFormatG500:
    """Encoding of a 78-byte G500 profile."""

    PROFILE_SIZE = 78
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
            raise ValueError("Truncated G500 profile")
        profile = Profile()
        settings = profile.settings
        settings["color"] = Color(*data[_COLOR : _COLOR + 3])
        settings["angle"] = data[_ANGLE]
        for i in range(self.MAX_MODE_COUNT):
            mode = data[_MODES + i * _MODE_SIZE : _MODES + (i + 1) * _MODE_SIZE]
            dpi_x = int.from_bytes(mode[0:2], "big")
            if i > 0 and dpi_x == 0:
                break
            dpi_y = int.from_bytes(mode[2:4], "big")
            led_flags = int.from_bytes(mode[4:6], "little")
            leds = []
            for j in range(self.LED_COUNT):
                led = (led_flags >> (4 * j)) & 0x0F
                if led == 0:
                    break
                leds.append(led == 0x02)
            profile.modes.append(
                {
                    "dpi_x": self._sensor.to_dpi(dpi_x),
                    "dpi_y": self._sensor.to_dpi(dpi_y),
                    "leds": tuple(leds),
                }
            )
        settings["angle_snapping"] = data[_ANGLE_SNAPPING] == 0x02
        settings["default_dpi"] = data[_DEFAULT_DPI]
        settings["lift_threshold"] = data[_LIFT_THRESHOLD] - 16
        settings["unknown"] = data[_UNKNOWN]
        settings["report_rate"] = data[_REPORT_RATE]
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
        led_flags = 0
        for j, on in enumerate(leds[: self.LED_COUNT]):
            led_flags |= (0x02 if on else 0x01) << (4 * j)
        return (
            (self._sensor.from_dpi(dpi_x) & 0xFFFF).to_bytes(2, "big")
            + (self._sensor.from_dpi(dpi_y) & 0xFFFF).to_bytes(2, "big")
            + led_flags.to_bytes(2, "little")
        )

    def write(self, profile: Profile) -> bytes:
        """Encode *profile* into PROFILE_SIZE bytes."""
        general = profile.settings
        out = bytearray(self.PROFILE_SIZE)

        def setting(name: str) -> Any:
            return lookup_setting(general, _GENERAL_SETTINGS, name)

        out[_COLOR : _COLOR + 3] = setting("color").to_bytes()
        out[_ANGLE] = setting("angle") & 0xFF

        for i in range(self.MAX_MODE_COUNT):
            start = _MODES + i * _MODE_SIZE
            if i < len(profile.modes):
                out[start : start + _MODE_SIZE] = self._encode_mode(profile.modes[i])

        out[_ANGLE_SNAPPING] = 0x01 if setting("angle_snapping") else 0x02

        default_dpi = setting("default_dpi")
        if default_dpi >= len(profile.modes):
            default_dpi = len(profile.modes) - 1
        out[_DEFAULT_DPI] = default_dpi & 0xFF

        out[_LIFT_THRESHOLD] = (16 + setting("lift_threshold")) & 0xFF
        out[_UNKNOWN] = setting("unknown") & 0xFF
        out[_REPORT_RATE] = setting("report_rate") & 0xFF

        for i in range(self.MAX_BUTTON_COUNT):
            button = profile.buttons[i] if i < len(profile.buttons) else Button()
            start = _BUTTONS + i * BUTTON_SIZE
            out[start : start + BUTTON_SIZE] = encode_button(button)
        return bytes(out)