"""HID++ 1.0 constants, sensor resolution conversion, and macro and profile formats."""

__version__ = "0.1.0"