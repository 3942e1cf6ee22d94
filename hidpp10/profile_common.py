"""Settings, buttons and profiles shared by the HID++ 1.0 profile formats."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from .defs import Address

BUTTON_SIZE = 3


class SpecialAction(IntEnum):
    """Special functions a profile button can be bound to."""

    WHEEL_LEFT = 0x01
    WHEEL_RIGHT = 0x02
    BATTERY_LEVEL = 0x03
    RESOLUTION_NEXT = 0x04
    RESOLUTION_CYCLE_NEXT = 0x05
    RESOLUTION_PREV = 0x08
    RESOLUTION_CYCLE_PREV = 0x09
    PROFILE_NEXT = 0x10
    PROFILE_CYCLE_NEXT = 0x11
    PROFILE_PREV = 0x20
    PROFILE_CYCLE_PREV = 0x21
    PROFILE_SWITCH = 0x40


@dataclass(frozen=True)
class Color:
    """An RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"colour component {name} out of range: {value}")

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))


class ButtonKind(Enum):
    """What a profile button does."""

    DISABLED = "disabled"
    MOUSE_BUTTONS = "mouse_buttons"
    KEY = "key"
    SPECIAL = "special"
    CONSUMER_CONTROL = "consumer_control"
    MACRO = "macro"


@dataclass(frozen=True)
class Button:
    """A button binding; only the fields matching its kind are meaningful."""

    kind: ButtonKind = ButtonKind.DISABLED
    mouse_buttons: int = 0
    modifiers: int = 0
    key: int = 0
    special: int = 0
    consumer_control: int = 0
    macro: Address = Address()


@dataclass(frozen=True)
class SettingDesc:
    """Description of a setting: its default value and, for integers, its range."""

    default: Any
    minimum: int | None = None
    maximum: int | None = None

    def check(self, value: Any) -> bool:
        """Return whether *value* is acceptable for this setting."""
        default = self.default
        if isinstance(default, bool):
            return isinstance(value, bool)
        if isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            if self.minimum is not None and value < self.minimum:
                return False
            if self.maximum is not None and value > self.maximum:
                return False
            return True
        if isinstance(default, Color):
            return isinstance(value, Color)
        if isinstance(default, (tuple, list)):
            return isinstance(value, (tuple, list)) and all(
                isinstance(v, bool) for v in value
            )
        return isinstance(value, type(default))


@dataclass
class Profile:
    """A profile: general settings, per-mode settings and button bindings."""

    settings: dict[str, Any] = field(default_factory=dict)
    modes: list[dict[str, Any]] = field(default_factory=list)
    buttons: list[Button] = field(default_factory=list)


def lookup_setting(
    values: Mapping[str, Any], descs: Mapping[str, SettingDesc], name: str
) -> Any:
    """Return the value of setting *name*, or its default when not set.

    Raises KeyError for an unknown setting and ValueError for a bad value.
    """
    try:
        desc = descs[name]
    except KeyError:
        raise KeyError(f"Unknown setting: {name}") from None
    if name not in values:
        return desc.default
    value = values[name]
    if not desc.check(value):
        raise ValueError(f"Invalid value for setting {name}: {value!r}")
    return value


class _ButtonCode(IntEnum):
    MOUSE = 0x81
    KEY = 0x82
    SPECIAL = 0x83
    CONSUMER_CONTROL = 0x84
    DISABLED = 0x8F


def _u16_le(data: bytes) -> int:
    return int.from_bytes(data[1:3], "little")


def parse_button(data: bytes) -> Button:
    """Decode a three-byte button binding."""
    data = bytes(data)
    if len(data) < BUTTON_SIZE:
        raise ValueError("Truncated button binding")
    code = data[0]
    if code == _ButtonCode.MOUSE:
        return Button(ButtonKind.MOUSE_BUTTONS, mouse_buttons=_u16_le(data))
    if code == _ButtonCode.KEY:
        return Button(ButtonKind.KEY, modifiers=data[1], key=data[2])
    if code == _ButtonCode.SPECIAL:
        return Button(ButtonKind.SPECIAL, special=_u16_le(data))
    if code == _ButtonCode.CONSUMER_CONTROL:
        return Button(ButtonKind.CONSUMER_CONTROL, consumer_control=_u16_le(data))
    if code == _ButtonCode.DISABLED:
        return Button()
    return Button(ButtonKind.MACRO, macro=Address(0, data[0], data[1]))


def encode_button(button: Button) -> bytes:
    """Encode a button binding into three bytes."""
    kind = button.kind
    if kind is ButtonKind.DISABLED:
        return bytes((_ButtonCode.DISABLED, 0, 0))
    if kind is ButtonKind.MOUSE_BUTTONS:
        return bytes((_ButtonCode.MOUSE,)) + (button.mouse_buttons & 0xFFFF).to_bytes(
            2, "little"
        )
    if kind is ButtonKind.KEY:
        return bytes((_ButtonCode.KEY, button.modifiers & 0xFF, button.key & 0xFF))
    if kind is ButtonKind.CONSUMER_CONTROL:
        return bytes((_ButtonCode.CONSUMER_CONTROL,)) + (
            button.consumer_control & 0xFFFF
        ).to_bytes(2, "little")
    if kind is ButtonKind.SPECIAL:
        return bytes((_ButtonCode.SPECIAL,)) + (button.special & 0xFFFF).to_bytes(
            2, "little"
        )
    return bytes((button.macro.page, button.macro.offset, 0))