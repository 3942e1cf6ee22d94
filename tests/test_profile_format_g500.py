import pytest

from hidpp10.defs import Address
from hidpp10.profile_common import Button, ButtonKind, Color, Profile, SpecialAction
from hidpp10.profile_format_g500 import ProfileFormatG500
from hidpp10.sensor import S9500


@pytest.fixture
def fmt():
    return ProfileFormatG500(S9500)


def _sample_profile():
    return Profile(
        settings={
            "color": Color(0, 128, 255),
            "angle": 0x90,
            "default_dpi": 1,
            "lift_threshold": -3,
            "unknown": 0x20,
            "report_rate": 2,
        },
        modes=[
            {"dpi_x": 800, "dpi_y": 1600, "leds": (True, False, False, False)},
            {"dpi_x": 1600, "dpi_y": 800, "leds": (False, True, True, False)},
        ],
        buttons=[
            Button(ButtonKind.MOUSE_BUTTONS, mouse_buttons=1),
            Button(ButtonKind.KEY, modifiers=2, key=4),
            Button(ButtonKind.MACRO, macro=Address(0, 5, 0)),
        ],
    )


def test_write_size(fmt):
    assert len(fmt.write(Profile())) == ProfileFormatG500.PROFILE_SIZE


def test_round_trip(fmt):
    profile = _sample_profile()
    result = fmt.read(fmt.write(profile))
    assert result.modes == profile.modes
    for name, value in profile.settings.items():
        assert result.settings[name] == value
    assert result.buttons[: len(profile.buttons)] == profile.buttons
    assert all(b == Button() for b in result.buttons[len(profile.buttons) :])
    assert len(result.buttons) == ProfileFormatG500.MAX_BUTTON_COUNT


def test_empty_profile_defaults(fmt):
    result = fmt.read(fmt.write(Profile()))
    assert result.settings["color"] == Color(255, 0, 0)
    assert result.settings["angle"] == 0x80
    assert result.settings["report_rate"] == 4
    assert result.settings["lift_threshold"] == 0
    assert result.modes == [{"dpi_x": 0, "dpi_y": 0, "leds": ()}]


def test_color_bytes_at_start(fmt):
    data = fmt.write(Profile(settings={"color": Color(1, 2, 3)}))
    assert data[0:3] == bytes([1, 2, 3])


def test_lift_threshold_offset(fmt):
    data = fmt.write(Profile(settings={"lift_threshold": -15}))
    assert data[36] == 16 - 15


def test_angle_snapping_bytes(fmt):
    assert fmt.write(Profile(settings={"angle_snapping": True}))[34] == 0x01
    assert fmt.write(Profile(settings={"angle_snapping": False}))[34] == 0x02
    data = bytearray(fmt.write(Profile()))
    data[34] = 0x02
    assert fmt.read(bytes(data)).settings["angle_snapping"] is True


def test_default_dpi_clamped_to_modes(fmt):
    profile = Profile(
        settings={"default_dpi": 4},
        modes=[{"dpi_x": 800}, {"dpi_x": 1600}],
    )
    result = fmt.read(fmt.write(profile))
    assert result.settings["default_dpi"] == len(profile.modes) - 1


def test_dpi_y_defaults_to_dpi_x(fmt):
    result = fmt.read(fmt.write(Profile(modes=[{"dpi_x": 1600}])))
    assert result.modes[0]["dpi_y"] == result.modes[0]["dpi_x"] == 1600


def test_unused_buttons_are_disabled(fmt):
    data = fmt.write(Profile())
    last = 39 + 3 * (ProfileFormatG500.MAX_BUTTON_COUNT - 1)
    assert data[last] == 0x8F


def test_invalid_setting_raises(fmt):
    with pytest.raises(ValueError):
        fmt.write(Profile(settings={"report_rate": 9}))


def test_invalid_mode_dpi_raises(fmt):
    with pytest.raises(ValueError):
        fmt.write(Profile(modes=[{"dpi_x": S9500.maximum_resolution() + 1}]))


def test_read_truncated_raises(fmt):
    with pytest.raises(ValueError):
        fmt.read(bytes(10))


def test_settings_descriptions(fmt):
    assert fmt.mode_settings()["dpi_x"].default == 800
    assert fmt.mode_settings()["leds"].default == (False,) * ProfileFormatG500.LED_COUNT
    assert fmt.general_settings()["lift_threshold"].minimum == -15


def test_special_actions(fmt):
    actions = fmt.special_actions()
    assert actions["ProfileSwitch2"] == SpecialAction.PROFILE_SWITCH + (2 << 8)
    assert actions["WheelLeft"] == SpecialAction.WHEEL_LEFT
    assert "BatteryLevel" not in actions