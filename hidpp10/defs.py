"""Protocol constants and the memory address type shared by the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SHORT_PARAM_LENGTH = 3
LONG_PARAM_LENGTH = 16

DEFAULT_DEVICE = 0xFF

PAGE_SIZE = 512
RAM_SIZE = 400


class SubID(IntEnum):
    """Sub IDs of HID++ 1.0 reports."""

    DEVICE_DISCONNECTION = 0x40
    DEVICE_CONNECTION = 0x41
    SEND_DATA_ACKNOWLEDGEMENT = 0x50
    SET_REGISTER_SHORT = 0x80
    GET_REGISTER_SHORT = 0x81
    SET_REGISTER_LONG = 0x82
    GET_REGISTER_LONG = 0x83
    ERROR_MESSAGE = 0x8F
    SEND_DATA_BEGIN = 0x90
    SEND_DATA_CONTINUE = 0x91
    SEND_DATA_BEGIN_ACK = 0x92
    SEND_DATA_CONTINUE_ACK = 0x93


class RegisterAddress(IntEnum):
    """Addresses of HID++ 1.0 registers."""

    ENABLE_NOTIFICATIONS = 0x00
    ENABLE_INDIVIDUAL_FEATURES = 0x01
    CONNECTION_STATE = 0x02
    BATTERY_STATUS = 0x07
    BATTERY_MILEAGE = 0x0D
    CURRENT_PROFILE = 0x0F
    LED_STATUS = 0x51
    LED_INTENSITY = 0x54
    LED_COLOR = 0x57
    SENSOR_SETTINGS = 0x61
    SENSOR_RESOLUTION = 0x63
    USB_POLL_RATE = 0x64
    MEMORY_OPERATION = 0xA0
    RESET_SEQ_NUM = 0xA1
    MEMORY_READ = 0xA2
    DEVICE_PAIRING = 0xB2
    DEVICE_ACTIVITY = 0xB3
    DEVICE_PAIRING_INFO = 0xB5
    FIRMWARE_INFO = 0xF1


@dataclass(frozen=True)
class Address:
    """A location in device memory; the offset counts 16-bit words."""

    mem_type: int = 0
    page: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        for name in ("mem_type", "page", "offset"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} out of range: {value}")