"""Disassembler for Knight instruction-set binaries."""

from __future__ import annotations

import sys
from collections.abc import Callable

from stagezero.opcodes import (
    name_0op,
    name_0opi,
    name_1op,
    name_1opi,
    name_2op,
    name_2opi,
    name_3op,
    name_4op,
    name_halcode,
)


class TruncatedInstructionError(ValueError):
    """The binary ended in the middle of a four-byte word.

    ``partial`` holds the listing produced before the word was reached.
    """

    def __init__(self, address: int, partial: str) -> None:
        super().__init__(f"incomplete instruction at address {address:08X}")
        self.address = address
        self.partial = partial


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _visible(raw: bytes) -> str:
    parts = []
    for byte in raw:
        if byte == 0:
            continue
        if 32 <= byte <= 126:
            parts.append(chr(byte))
        else:
            parts.append(f"0x{byte:X} ")
    return "".join(parts)


class _Disassembler:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0
        self._address = 0
        self._out: list[str] = []
        self._groups: dict[int, tuple[Callable[[bytes], None], int]] = {
            0x01: (self._op4, 4),
            0x05: (self._op3, 4),
            0x09: (self._op2, 4),
            0x0D: (self._op1, 4),
            0x3C: (self._opi0, 4),
            0x42: (self._halcode, 4),
            0xE1: (self._opi2, 6),
            0xE0: (self._opi1, 6),
            0x00: (self._op0, 4),
            0xFF: (self._op0, 4),
        }

    def run(self) -> str:
        while self._pos < len(self._data):
            self._evaluate(self._read_word())
        return "".join(self._out)

    def _read_word(self) -> bytes:
        word = self._data[self._pos:self._pos + 4]
        if len(word) < 4:
            raise TruncatedInstructionError(self._address, "".join(self._out))
        self._pos += 4
        return word

    def _getc(self) -> int:
        if self._pos < len(self._data):
            byte = self._data[self._pos]
            self._pos += 1
            return byte
        return -1

    def _evaluate(self, raw: bytes) -> None:
        self._out.append(f"{self._address:08X}\t")
        handler, size = self._groups.get(raw[0], (self._string, 4))
        handler(raw)
        self._address += size

    def _string(self, raw: bytes) -> None:
        self._out.append('"')
        extra = 0
        while True:
            self._out.append(_visible(raw))
            if raw[3] == 0:
                break
            raw = self._read_word()
            extra += 4
        self._out.append('"\t #STRING\n')
        self._address += extra

    def _emit(self, name: str | None, raw: bytes, text: str, operation: str) -> bool:
        if name is None:
            self._string(raw)
            return False
        self._out.append(f"{text}\t# {operation}\n")
        return True

    def _op4(self, raw: bytes) -> None:
        name = name_4op(raw[1])
        text = (
            f"{name} reg{raw[2] >> 4} reg{raw[2] & 15} "
            f"reg{raw[3] >> 4} reg{raw[3] & 15}"
        )
        self._emit(name, raw, text, raw.hex().upper())

    def _op3(self, raw: bytes) -> None:
        name = name_3op(raw[1] * 0x10 + (raw[2] >> 4))
        text = f"{name} reg{raw[2] & 15} reg{raw[3] >> 4} reg{raw[3] & 15}"
        self._emit(name, raw, text, raw.hex().upper())

    def _op2(self, raw: bytes) -> None:
        name = name_2op(raw[1] * 0x100 + raw[2])
        text = f"{name} reg{raw[3] >> 4} reg{raw[3] & 15}"
        self._emit(name, raw, text, raw.hex().upper())

    def _op1(self, raw: bytes) -> None:
        name = name_1op(raw[1] * 0x1000 + raw[2] * 0x10 + (raw[3] >> 4))
        self._emit(name, raw, f"{name} reg{raw[3] & 15}", raw.hex().upper())

    def _op0(self, raw: bytes) -> None:
        name = name_0op(int.from_bytes(raw, "big"))
        self._emit(name, raw, f"{name}", raw.hex().upper())

    def _immediate(self, raw: bytes) -> tuple[int, str]:
        high = self._getc()
        low = self._getc()
        operation = raw.hex().upper() + f"{high & 0xFF:02X}{low & 0xFF:02X}"
        return _int16(high * 0x100 + low), operation

    def _opi2(self, raw: bytes) -> None:
        immediate, operation = self._immediate(raw)
        name = name_2opi(raw[1] * 0x100 + raw[2])
        text = (
            f"{name} reg{raw[3] >> 4} reg{raw[3] & 15} "
            f"0x{immediate & 0xFFFFFFFF:x}"
        )
        self._emit(name, raw, text, operation)

    def _opi1(self, raw: bytes) -> None:
        immediate, operation = self._immediate(raw)
        name = name_1opi(raw[1] * 0x1000 + raw[2] * 0x10 + (raw[3] >> 4))
        self._emit(name, raw, f"{name} reg{raw[3] & 15} {immediate}", operation)

    def _opi0(self, raw: bytes) -> None:
        immediate = _int16(raw[2] * 0x100 + raw[3])
        name = name_0opi(raw[1])
        if self._emit(name, raw, f"{name} {immediate}", raw.hex().upper()):
            if immediate == 4:
                constant = self._read_word()
                self._address += 4
                self._out.append(
                    f"{self._address:08X}\t{constant.hex().upper()}"
                    "\t # M2 Large const\n"
                )

    def _halcode(self, raw: bytes) -> None:
        name = name_halcode(raw[1] * 0x10000 + raw[2] * 0x100 + raw[3])
        self._emit(name, raw, f"{name}", raw.hex().upper())


def disassemble(data: bytes) -> str:
    """Return an addressed listing of *data*.

    Words that are not instructions are shown as strings. Raises
    TruncatedInstructionError when the data ends inside a word.
    """
    return _Disassembler(data).run()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write(
            "Usage: disasm $FileName\n"
            "Where $FileName is the name of program being disassembled\n"
        )
        return 1
    try:
        with open(args[0], "rb") as handle:
            data = handle.read()
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    try:
        listing = disassemble(data)
    except TruncatedInstructionError as exc:
        sys.stdout.write(exc.partial)
        sys.stdout.flush()
        return 1
    sys.stdout.write(listing)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())