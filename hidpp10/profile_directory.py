"""The directory of profiles stored in HID++ 1.0 device memory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .defs import Address
from .profile_common import SettingDesc, lookup_setting

_ENTRY_SIZE = 3
_END_MARK = 0xFF


@dataclass
class DirectoryEntry:
    """One profile of the directory: where it is and its own settings."""

    profile_address: Address
    settings: dict[str, Any] = field(default_factory=dict)


@dataclass
class ProfileDirectory:
    entries: list[DirectoryEntry] = field(default_factory=list)


class ProfileDirectoryFormat:
    """Three-byte entries (page, offset, LED bits) ended by a 0xFF page."""

    def __init__(self, led_count: int) -> None:
        self._led_count = led_count
        self._settings: dict[str, SettingDesc] = {}
        if led_count > 0:
            self._settings["leds"] = SettingDesc((False,) * led_count)

    def settings(self) -> dict[str, SettingDesc]:
        return self._settings

    def read(self, data: bytes) -> ProfileDirectory:
        """Decode a directory from the start of *data*."""
        data = bytes(data)
        directory = ProfileDirectory()
        pos = 0
        while True:
            if pos >= len(data):
                raise ValueError("Profile directory has no end mark")
            page = data[pos]
            if page == _END_MARK:
                break
            if pos + _ENTRY_SIZE > len(data):
                raise ValueError("Truncated profile directory entry")
            entry = DirectoryEntry(Address(0, page, data[pos + 1]))
            if self._led_count > 0:
                bits = data[pos + 2]
                entry.settings["leds"] = tuple(
                    bool(bits & (1 << i)) for i in range(self._led_count)
                )
            directory.entries.append(entry)
            pos += _ENTRY_SIZE
        return directory

    def write(self, directory: ProfileDirectory) -> bytes:
        """Encode *directory*, end mark included."""
        out = bytearray()
        for entry in directory.entries:
            bits = 0
            if self._led_count > 0:
                leds = lookup_setting(entry.settings, self._settings, "leds")
                for i, on in enumerate(leds[: self._led_count]):
                    if on:
                        bits |= 1 << i
            address = entry.profile_address
            out += bytes((address.page, address.offset, bits))
        out.append(_END_MARK)
        return bytes(out)


def get_profile_directory_format(device: Any = None) -> ProfileDirectoryFormat:
    """Return the directory format used by HID++ 1.0 mice."""
    return ProfileDirectoryFormat(4)