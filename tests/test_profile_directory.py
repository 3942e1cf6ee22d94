import pytest

from hidpp10.defs import Address
from hidpp10.profile_directory import (
    DirectoryEntry,
    ProfileDirectory,
    ProfileDirectoryFormat,
    get_profile_directory_format,
)


def test_read_single_entry_with_leds():
    fmt = ProfileDirectoryFormat(4)
    directory = fmt.read(bytes([1, 2, 0b0101, 0xFF]))
    assert len(directory.entries) == 1
    entry = directory.entries[0]
    assert entry.profile_address == Address(0, 1, 2)
    assert entry.settings["leds"] == (True, False, True, False)


def test_read_empty_directory():
    assert ProfileDirectoryFormat(4).read(bytes([0xFF, 0, 0])).entries == []


def test_write_empty_directory_is_end_mark():
    assert ProfileDirectoryFormat(4).write(ProfileDirectory()) == b"\xff"


def test_write_uses_led_default():
    fmt = ProfileDirectoryFormat(4)
    data = fmt.write(ProfileDirectory([DirectoryEntry(Address(0, 3, 0))]))
    assert data == bytes([3, 0, 0, 0xFF])


def test_round_trip():
    fmt = ProfileDirectoryFormat(4)
    directory = ProfileDirectory(
        [
            DirectoryEntry(Address(0, 2, 0), {"leds": (True, True, False, False)}),
            DirectoryEntry(Address(0, 3, 0x40), {"leds": (False, False, False, True)}),
        ]
    )
    assert fmt.read(fmt.write(directory)) == directory


def test_no_leds_format():
    fmt = ProfileDirectoryFormat(0)
    assert fmt.settings() == {}
    directory = fmt.read(bytes([2, 0, 0x0F, 0xFF]))
    assert directory.entries[0].settings == {}
    assert fmt.write(directory) == bytes([2, 0, 0, 0xFF])


def test_invalid_leds_raise():
    fmt = ProfileDirectoryFormat(4)
    directory = ProfileDirectory([DirectoryEntry(Address(0, 2, 0), {"leds": [1, 0]})])
    with pytest.raises(ValueError):
        fmt.write(directory)


def test_missing_end_mark_raises():
    with pytest.raises(ValueError):
        ProfileDirectoryFormat(4).read(bytes([1, 2, 0]))


def test_default_format_has_four_leds():
    fmt = get_profile_directory_format(None)
    assert fmt.settings()["leds"].default == (False, False, False, False)