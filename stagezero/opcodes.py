"""Instruction names of the Knight instruction set, looked up by opcode field.

Each function takes the extended-opcode value of one instruction group
and returns the mnemonic, or None when the value names no instruction
of that group.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_4OP: Mapping[int, str] = MappingProxyType({
    0x00: "ADD.CI", 0x01: "ADD.CO", 0x02: "ADD.CIO",
    0x03: "ADDU.CI", 0x04: "ADDU.CO", 0x05: "ADDU.CIO",
    0x06: "SUB.BI", 0x07: "SUB.BO", 0x08: "SUB.BIO",
    0x09: "SUBU.BI", 0x0A: "SUBU.BO", 0x0B: "SUBU.BIO",
    0x0C: "MULTIPLY", 0x0D: "MULTIPLYU", 0x0E: "DIVIDE", 0x0F: "DIVIDEU",
    0x10: "MUX", 0x11: "NMUX", 0x12: "SORT", 0x13: "SORTU",
})

_3OP: Mapping[int, str] = MappingProxyType({
    0x000: "ADD", 0x001: "ADDU", 0x002: "SUB", 0x003: "SUBU",
    0x004: "CMP", 0x005: "CMPU", 0x006: "MUL", 0x007: "MULH",
    0x008: "MULU", 0x009: "MULUH", 0x00A: "DIV", 0x00B: "MOD",
    0x00C: "DIVU", 0x00D: "MODU",
    0x010: "MAX", 0x011: "MAXU", 0x012: "MIN", 0x013: "MINU",
    # PACK, UNPACK and the PACK*.CO family are reserved.
    **{xop: "ILLEGAL_INSTRUCTION" for xop in range(0x014, 0x01C)},
    0x020: "AND", 0x021: "OR", 0x022: "XOR", 0x023: "NAND",
    0x024: "NOR", 0x025: "XNOR", 0x026: "MPQ", 0x027: "LPQ",
    0x028: "CPQ", 0x029: "BPQ",
    0x030: "SAL", 0x031: "SAR", 0x032: "SL0", 0x033: "SR0",
    0x034: "SL1", 0x035: "SR1", 0x036: "ROL", 0x037: "ROR",
    0x038: "LOADX", 0x039: "LOADX8", 0x03A: "LOADXU8", 0x03B: "LOADX16",
    0x03C: "LOADXU16", 0x03D: "LOADX32", 0x03E: "LOADXU32",
    0x048: "STOREX", 0x049: "STOREX8", 0x04A: "STOREX16", 0x04B: "STOREX32",
    0x050: "CMPJUMP.G", 0x051: "CMPJUMP.GE", 0x052: "CMPJUMP.E",
    0x053: "CMPJUMP.NE", 0x054: "CMPJUMP.LE", 0x055: "CMPJUMP.L",
    0x060: "CMPJUMPU.G", 0x061: "CMPJUMPU.GE",
    0x064: "CMPJUMPU.LE", 0x065: "CMPJUMPU.L",
})

_2OP: Mapping[int, str] = MappingProxyType({
    0x0000: "NEG", 0x0001: "ABS", 0x0002: "NABS", 0x0003: "SWAP",
    0x0004: "COPY", 0x0005: "MOVE", 0x0006: "NOT",
    0x0100: "BRANCH", 0x0101: "CALL",
    0x0200: "PUSHR", 0x0201: "PUSH8", 0x0202: "PUSH16", 0x0203: "PUSH32",
    0x0280: "POPR", 0x0281: "POP8", 0x0282: "POPU8", 0x0283: "POP16",
    0x0284: "POPU16", 0x0285: "POP32", 0x0286: "POPU32",
    0x0300: "CMPSKIP.G", 0x0301: "CMPSKIP.GE", 0x0302: "CMPSKIP.E",
    0x0303: "CMPSKIP.NE", 0x0304: "CMPSKIP.LE", 0x0305: "CMPSKIP.L",
    0x0380: "CMPSKIPU.G", 0x0381: "CMPSKIPU.GE",
    0x0384: "CMPSKIPU.LE", 0x0385: "CMPSKIPU.L",
})

_1OP: Mapping[int, str] = MappingProxyType({
    0x00000: "READPC", 0x00001: "READSCID", 0x00002: "FALSE", 0x00003: "TRUE",
    0x01000: "JSR_COROUTINE", 0x01001: "RET",
    0x02000: "PUSHPC", 0x02001: "POPPC",
})

_2OPI: Mapping[int, str] = MappingProxyType({
    0x0E: "ADDI", 0x0F: "ADDUI", 0x10: "SUBI", 0x11: "SUBUI",
    0x12: "CMPI", 0x13: "LOAD", 0x14: "LOAD8", 0x15: "LOADU8",
    0x16: "LOAD16", 0x17: "LOADU16", 0x18: "LOAD32", 0x19: "LOADU32",
    0x1F: "CMPUI", 0x20: "STORE", 0x21: "STORE8", 0x22: "STORE16",
    0x23: "STORE32",
    0xB0: "ANDI", 0xB1: "ORI", 0xB2: "XORI", 0xB3: "NANDI",
    0xB4: "NORI", 0xB5: "XNORI",
    0xC0: "CMPJUMPI.G", 0xC1: "CMPJUMPI.GE", 0xC2: "CMPJUMPI.E",
    0xC3: "CMPJUMPI.NE", 0xC4: "CMPJUMPI.LE", 0xC5: "CMPJUMPI.L",
    0xD0: "CMPJUMPUI.G", 0xD1: "CMPJUMPUI.GE",
    0xD4: "CMPJUMPUI.LE", 0xD5: "CMPJUMPUI.L",
})

_1OPI: Mapping[int, str] = MappingProxyType({
    0x2C0: "JUMP.C", 0x2C1: "JUMP.B", 0x2C2: "JUMP.O", 0x2C3: "JUMP.G",
    0x2C4: "JUMP.GE", 0x2C5: "JUMP.E", 0x2C6: "JUMP.NE", 0x2C7: "JUMP.LE",
    0x2C8: "JUMP.L", 0x2C9: "JUMP.Z", 0x2CA: "JUMP.NZ", 0x2CB: "JUMP.P",
    0x2CC: "JUMP.NP",
    0x2D0: "CALLI", 0x2D1: "LOADI", 0x2D2: "LOADUI", 0x2D3: "SALI",
    0x2D4: "SARI", 0x2D5: "SL0I", 0x2D6: "SR0I", 0x2D7: "SL1I",
    0x2D8: "SR1I",
    0x2E0: "LOADR", 0x2E1: "LOADR8", 0x2E2: "LOADRU8", 0x2E3: "LOADR16",
    0x2E4: "LOADRU16", 0x2E5: "LOADR32", 0x2E6: "LOADRU32",
    0x2F0: "STORER", 0x2F1: "STORER8", 0x2F2: "STORER16", 0x2F3: "STORER32",
    0xA00: "CMPSKIPI.G", 0xA01: "CMPSKIPI.GE", 0xA02: "CMPSKIPI.E",
    0xA03: "CMPSKIPI.NE", 0xA04: "CMPSKIPI.LE", 0xA05: "CMPSKIPI.L",
    0xA10: "CMPSKIPUI.G", 0xA11: "CMPSKIPUI.GE",
    0xA14: "CMPSKIPUI.LE", 0xA15: "CMPSKIPUI.L",
})

_0OPI: Mapping[int, str] = MappingProxyType({0x00: "JUMP"})

_HALCODE: Mapping[int, str] = MappingProxyType({
    0x000002: "FOPEN",
    0x000003: "FCLOSE",
    0x000008: "FSEEK",
    # The ACCESS entry shares its name with EXIT.
    0x000015: "EXIT",
    0x00003C: "EXIT",
    0x00003F: "UNAME",
    0x00004F: "GETCWD",
    0x000050: "CHDIR",
    0x000051: "FCHDIR",
    0x00005A: "CHMOD",
    0x100000: "FOPEN_READ",
    0x100001: "FOPEN_WRITE",
    0x100002: "FCLOSE",
    0x100003: "REWIND",
    0x100004: "FSEEK",
    0x100100: "FGETC",
    0x100200: "FPUTC",
    0x110000: "HAL_MEM",
})


def name_4op(xop: int) -> str | None:
    """Name of a 4OP instruction; *xop* is the second byte."""
    return _4OP.get(xop)


def name_3op(xop: int) -> str | None:
    """Name of a 3OP instruction; *xop* is the 12 bits after the opcode byte."""
    return _3OP.get(xop)


def name_2op(xop: int) -> str | None:
    """Name of a 2OP instruction; *xop* is the 16 bits after the opcode byte."""
    return _2OP.get(xop)


def name_1op(xop: int) -> str | None:
    """Name of a 1OP instruction; *xop* is the 20 bits after the opcode byte."""
    return _1OP.get(xop)


def name_0op(full_op: int) -> str | None:
    """Name of a 0OP instruction from its full 32-bit word."""
    if full_op == 0:
        return "NOP"
    if 0x00000001 <= full_op <= 0x00FFFFFF:
        return "IMPROPER_NOP"
    if 0xFF000000 <= full_op <= 0xFFFFFFFE:
        return "IMPROPER_HALT"
    if full_op == 0xFFFFFFFF:
        return "HALT"
    return None


def name_2opi(xop: int) -> str | None:
    """Name of a 2OPI instruction; *xop* is the 16 bits after the opcode byte.

    Only values whose high byte is zero name an instruction.
    """
    return _2OPI.get(xop)


def name_1opi(xop: int) -> str | None:
    """Name of a 1OPI instruction; *xop* is the 20 bits after the opcode byte.

    Only values whose top byte is zero name an instruction.
    """
    return _1OPI.get(xop)


def name_0opi(xop: int) -> str | None:
    """Name of a 0OPI instruction; *xop* is the second byte."""
    return _0OPI.get(xop)


def name_halcode(code: int) -> str | None:
    """Name of a HALCODE call; *code* is the 24 bits after the opcode byte."""
    return _HALCODE.get(code)