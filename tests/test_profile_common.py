import pytest

from hidpp10.defs import Address
from hidpp10.profile_common import (
    Button,
    ButtonKind,
    Color,
    Profile,
    SettingDesc,
    encode_button,
    lookup_setting,
    parse_button,
)


def test_parse_mouse_button_little_endian():
    button = parse_button(bytes([0x81, 0x01, 0x00]))
    assert button == Button(ButtonKind.MOUSE_BUTTONS, mouse_buttons=1)


def test_parse_key_button():
    button = parse_button(bytes([0x82, 0x02, 0x04]))
    assert button.kind is ButtonKind.KEY
    assert (button.modifiers, button.key) == (2, 4)


def test_parse_disabled_button():
    assert parse_button(bytes([0x8F, 0, 0])) == Button()


def test_parse_macro_button():
    button = parse_button(bytes([0x05, 0x10, 0x00]))
    assert button.kind is ButtonKind.MACRO
    assert button.macro == Address(0, 5, 0x10)


def test_encode_disabled():
    assert encode_button(Button()) == bytes([0x8F, 0, 0])


def test_encode_mouse_buttons_little_endian():
    data = encode_button(Button(ButtonKind.MOUSE_BUTTONS, mouse_buttons=0x0102))
    assert data == bytes([0x81, 0x02, 0x01])


def test_encode_macro():
    data = encode_button(Button(ButtonKind.MACRO, macro=Address(0, 3, 7)))
    assert data == bytes([3, 7, 0])


@pytest.mark.parametrize(
    "button",
    [
        Button(),
        Button(ButtonKind.MOUSE_BUTTONS, mouse_buttons=0x0004),
        Button(ButtonKind.KEY, modifiers=0x01, key=0x2C),
        Button(ButtonKind.SPECIAL, special=0x0240),
        Button(ButtonKind.CONSUMER_CONTROL, consumer_control=0x00E9),
        Button(ButtonKind.MACRO, macro=Address(0, 4, 0x20)),
    ],
)
def test_button_round_trip(button):
    encoded = encode_button(button)
    assert len(encoded) == 3
    assert parse_button(encoded) == button


def test_parse_truncated_raises():
    with pytest.raises(ValueError):
        parse_button(bytes([0x81]))


def test_setting_desc_range_check():
    desc = SettingDesc(4, 1, 8)
    assert desc.check(1)
    assert desc.check(8)
    assert not desc.check(0)
    assert not desc.check(9)
    assert not desc.check(True)


def test_setting_desc_bool_and_color_and_leds():
    assert SettingDesc(False).check(True)
    assert not SettingDesc(False).check(1)
    assert SettingDesc(Color(255, 0, 0)).check(Color(1, 2, 3))
    assert not SettingDesc(Color(255, 0, 0)).check((1, 2, 3))
    assert SettingDesc((False,) * 4).check([True, False])
    assert not SettingDesc((False,) * 4).check([1, 0])


def test_lookup_setting_default_and_value():
    descs = {"rate": SettingDesc(4, 1, 8)}
    assert lookup_setting({}, descs, "rate") == 4
    assert lookup_setting({"rate": 6}, descs, "rate") == 6


def test_lookup_setting_invalid_value():
    with pytest.raises(ValueError):
        lookup_setting({"rate": 9}, {"rate": SettingDesc(4, 1, 8)}, "rate")


def test_lookup_setting_unknown_name():
    with pytest.raises(KeyError):
        lookup_setting({}, {}, "rate")


def test_color_range_checked():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_profile_defaults_are_independent():
    a, b = Profile(), Profile()
    a.buttons.append(Button())
    assert b.buttons == []