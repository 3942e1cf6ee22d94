"""Encoding and decoding of macro instructions in HID++ 1.0 device memory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from .defs import Address

_log = logging.getLogger("hidpp10.macro")


class Instruction(Enum):
    """Macro instructions, independent of their encoding."""

    NO_OP = auto()
    WAIT_RELEASE = auto()
    REPEAT_UNTIL_RELEASE = auto()
    REPEAT_FOREVER = auto()
    KEY_PRESS = auto()
    KEY_RELEASE = auto()
    MODIFIERS_PRESS = auto()
    MODIFIERS_RELEASE = auto()
    MODIFIERS_KEY_PRESS = auto()
    MODIFIERS_KEY_RELEASE = auto()
    MOUSE_WHEEL = auto()
    MOUSE_HWHEEL = auto()
    MOUSE_BUTTON_PRESS = auto()
    MOUSE_BUTTON_RELEASE = auto()
    CONSUMER_CONTROL = auto()
    DELAY = auto()
    SHORT_DELAY = auto()
    JUMP = auto()
    JUMP_IF_PRESSED = auto()
    MOUSE_POINTER = auto()
    JUMP_IF_RELEASED = auto()
    END = auto()


@dataclass(frozen=True)
class MacroItem:
    """One macro instruction with its operands; unused operands stay zero."""

    instruction: Instruction
    key_code: int = 0
    modifiers: int = 0
    wheel: int = 0
    buttons: int = 0
    consumer_control: int = 0
    delay: int = 0
    mouse_x: int = 0
    mouse_y: int = 0


class UnsupportedInstruction(Exception):
    """The instruction has no encoding in this macro format."""

    def __init__(self, instruction: Instruction) -> None:
        self.instruction = instruction
        super().__init__(f"Unsupported macro instruction: {instruction.name}")


_OP_CODES = {
    Instruction.NO_OP: 0x00,
    Instruction.WAIT_RELEASE: 0x01,
    Instruction.REPEAT_UNTIL_RELEASE: 0x02,
    Instruction.REPEAT_FOREVER: 0x03,
    Instruction.KEY_PRESS: 0x20,
    Instruction.KEY_RELEASE: 0x21,
    Instruction.MODIFIERS_PRESS: 0x22,
    Instruction.MODIFIERS_RELEASE: 0x23,
    Instruction.MOUSE_WHEEL: 0x24,
    Instruction.MOUSE_BUTTON_PRESS: 0x40,
    Instruction.MOUSE_BUTTON_RELEASE: 0x41,
    Instruction.CONSUMER_CONTROL: 0x42,
    Instruction.DELAY: 0x43,
    Instruction.JUMP: 0x44,
    Instruction.JUMP_IF_PRESSED: 0x45,
    Instruction.MOUSE_POINTER: 0x60,
    Instruction.JUMP_IF_RELEASED: 0x61,
    Instruction.END: 0xFF,
}

_INSTRUCTIONS = {code: instr for instr, code in _OP_CODES.items()}

_SPLIT = {
    Instruction.MODIFIERS_KEY_PRESS: (Instruction.MODIFIERS_PRESS, Instruction.KEY_PRESS),
    Instruction.MODIFIERS_KEY_RELEASE: (
        Instruction.MODIFIERS_RELEASE,
        Instruction.KEY_RELEASE,
    ),
}


def _op_length(op_code: int) -> int:
    return {0x00: 1, 0x20: 2, 0x40: 3, 0x60: 5}.get(op_code & 0xE0, 1)


def _short_delay_code(delay: int) -> int:
    if delay < 8:
        return 0x80  # minimum short delay of 8 ms
    if delay < 132:
        return 0x80 + (delay - 8 + 2) // 4
    if delay < 388:
        return 0x9F + (delay - 132 + 4) // 8
    if delay < 900:
        return 0xBF + (delay - 388 + 8) // 16
    if delay < 1892:
        return 0xDF + (delay - 900 + 16) // 32
    return 0xFE  # maximum short delay of 1.892 s


def _short_delay_duration(op_code: int) -> int:
    if op_code < 0x80:
        return 0
    if op_code <= 0x9F:
        return 8 + (op_code - 0x80) * 4
    if op_code <= 0xBF:
        return 132 + (op_code - 0x9F) * 8
    if op_code <= 0xDF:
        return 388 + (op_code - 0xBF) * 16
    if op_code <= 0xFE:
        return 900 + (op_code - 0xDF) * 32
    return 0


def _u16_be(value: int) -> bytes:
    return (value & 0xFFFF).to_bytes(2, "big")


def _u16_le(value: int) -> bytes:
    return (value & 0xFFFF).to_bytes(2, "little")


class MacroFormat:
    """The HID++ 1.0 macro encoding."""

    def length(self, item: MacroItem) -> int:
        """Return the number of bytes *item* takes once encoded."""
        instr = item.instruction
        if instr in _SPLIT:
            if item.modifiers == 0 or item.key_code == 0:
                return 2  # a single modifier or key instruction
            return 4
        if instr is Instruction.SHORT_DELAY:
            return 1
        try:
            return _op_length(_OP_CODES[instr])
        except KeyError:
            raise UnsupportedInstruction(instr) from None

    def encode_address(self, address: Address) -> bytes:
        """Return the two bytes that designate *address* as a jump target."""
        return bytes((address.page, address.offset))

    def encode_item(self, item: MacroItem) -> tuple[bytes, int | None]:
        """Encode *item*.

        Returns the bytes and, for jumps, the position within them where the
        encoded target address belongs (it is left as zeros).
        """
        instr = item.instruction

        if instr in _SPLIT:
            mod_instr, key_instr = _SPLIT[instr]
            out = b""
            if item.modifiers != 0:
                out += self.encode_item(
                    MacroItem(mod_instr, modifiers=item.modifiers)
                )[0]
            if item.key_code != 0 or item.modifiers == 0:
                out += self.encode_item(MacroItem(key_instr, key_code=item.key_code))[0]
            return out, None

        if instr is Instruction.SHORT_DELAY:
            return bytes((_short_delay_code(item.delay),)), None

        try:
            op = bytes((_OP_CODES[instr],))
        except KeyError:
            raise UnsupportedInstruction(instr) from None

        if instr in (Instruction.KEY_PRESS, Instruction.KEY_RELEASE):
            return op + bytes((item.key_code & 0xFF,)), None
        if instr in (Instruction.MODIFIERS_PRESS, Instruction.MODIFIERS_RELEASE):
            return op + bytes((item.modifiers & 0xFF,)), None
        if instr is Instruction.MOUSE_WHEEL:
            return op + bytes((item.wheel & 0xFF,)), None
        if instr in (Instruction.MOUSE_BUTTON_PRESS, Instruction.MOUSE_BUTTON_RELEASE):
            return op + _u16_le(item.buttons), None
        if instr is Instruction.CONSUMER_CONTROL:
            return op + _u16_be(item.consumer_control), None
        if instr is Instruction.DELAY:
            return op + _u16_be(item.delay), None
        if instr in (Instruction.JUMP, Instruction.JUMP_IF_PRESSED):
            return op + b"\0\0", 1
        if instr is Instruction.MOUSE_POINTER:
            return op + _u16_be(item.mouse_x) + _u16_be(item.mouse_y), None
        if instr is Instruction.JUMP_IF_RELEASED:
            return op + _u16_be(item.delay) + b"\0\0", 3
        return op, None

    def parse_item(
        self, data: bytes, pos: int = 0
    ) -> tuple[MacroItem, int, Address | None]:
        """Decode the item at *pos* in *data*.

        Returns the item, the position following it and the jump target
        address when the item is a jump.
        """
        if pos >= len(data):
            raise ValueError("Truncated HID++1.0 macro")
        op_code = data[pos]
        instr = _INSTRUCTIONS.get(op_code)
        if instr is None:
            delay = _short_delay_duration(op_code)
            if delay != 0:
                return MacroItem(Instruction.SHORT_DELAY, delay=delay), pos + 1, None
            _log.error("Invalid op-code: %02x", op_code)
            raise ValueError("Invalid op-code in HID++1.0 macro")

        end = pos + _op_length(op_code)
        if end > len(data):
            raise ValueError("Truncated HID++1.0 macro")
        args = bytes(data[pos + 1 : end])

        fields: dict[str, Any] = {}
        jump = None
        if instr in (Instruction.KEY_PRESS, Instruction.KEY_RELEASE):
            fields["key_code"] = args[0]
        elif instr in (Instruction.MODIFIERS_PRESS, Instruction.MODIFIERS_RELEASE):
            fields["modifiers"] = args[0]
        elif instr is Instruction.MOUSE_WHEEL:
            fields["wheel"] = int.from_bytes(args[0:1], "big", signed=True)
        elif instr in (Instruction.MOUSE_BUTTON_PRESS, Instruction.MOUSE_BUTTON_RELEASE):
            fields["buttons"] = int.from_bytes(args[0:2], "little")
        elif instr is Instruction.CONSUMER_CONTROL:
            fields["consumer_control"] = int.from_bytes(args[0:2], "big")
        elif instr is Instruction.DELAY:
            fields["delay"] = int.from_bytes(args[0:2], "big")
        elif instr in (Instruction.JUMP, Instruction.JUMP_IF_PRESSED):
            jump = Address(0, args[0], args[1])
        elif instr is Instruction.MOUSE_POINTER:
            fields["mouse_x"] = int.from_bytes(args[0:2], "big", signed=True)
            fields["mouse_y"] = int.from_bytes(args[2:4], "big", signed=True)
        elif instr is Instruction.JUMP_IF_RELEASED:
            fields["delay"] = int.from_bytes(args[0:2], "big")
            jump = Address(0, args[2], args[3])
        return MacroItem(instr, **fields), end, jump


def get_macro_format(device: Any = None) -> MacroFormat:
    """Return the macro format used by HID++ 1.0 devices."""
    return MacroFormat()