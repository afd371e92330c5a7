import pytest

from stagezero.disasm import TruncatedInstructionError, disassemble, main

NOP_LINE = "NOP\t# 00000000\n"


def test_nop():
    assert disassemble(bytes(4)) == "00000000\t" + NOP_LINE


def test_halt():
    assert disassemble(b"\xff" * 4) == "00000000\tHALT\t# FFFFFFFF\n"


def test_improper_nop():
    assert disassemble(bytes.fromhex("00000001")) == (
        "00000000\tIMPROPER_NOP\t# 00000001\n"
    )


def test_three_operand_instruction():
    assert disassemble(bytes.fromhex("05000012")) == (
        "00000000\tADD reg0 reg1 reg2\t# 05000012\n"
    )


def test_addresses_advance_by_four():
    lines = disassemble(bytes(4) + b"\xff" * 4).splitlines()
    assert lines[1].startswith("00000004\tHALT")


def test_halcode():
    assert disassemble(bytes.fromhex("42100000")) == (
        "00000000\tFOPEN_READ\t# 42100000\n"
    )


def test_two_operand_immediate_and_six_byte_size():
    lines = disassemble(bytes.fromhex("E1000E010005") + bytes(4)).splitlines(True)
    assert lines[0] == "00000000\tADDI reg0 reg1 0x5\t# E1000E010005\n"
    assert lines[1] == "00000006\t" + NOP_LINE


def test_negative_2opi_immediate_is_sign_extended():
    listing = disassemble(bytes.fromhex("E1000E01FFFF"))
    assert "ADDI reg0 reg1 0xffffffff\t" in listing


def test_one_operand_immediate_is_signed():
    assert disassemble(bytes.fromhex("E0002C95FFFF")) == (
        "00000000\tJUMP.Z reg5 -1\t# E0002C95FFFF\n"
    )


def test_jump_over_large_constant():
    data = bytes.fromhex("3C000004DEADBEEF") + bytes(4)
    assert disassemble(data) == (
        "00000000\tJUMP 4\t# 3C000004\n"
        "00000004\tDEADBEEF\t # M2 Large const\n"
        "00000008\t" + NOP_LINE
    )


def test_string_spanning_words():
    data = b"Hello\x00\x00\x00" + bytes(4)
    assert disassemble(data) == (
        '00000000\t"Hello"\t #STRING\n' "00000008\t" + NOP_LINE
    )


def test_unknown_4op_shown_as_string():
    assert disassemble(bytes.fromhex("01FF0000")) == (
        '00000000\t"0x1 0xFF "\t #STRING\n'
    )


def test_truncated_input_keeps_partial_listing():
    with pytest.raises(TruncatedInstructionError) as info:
        disassemble(bytes(6))
    assert info.value.partial == "00000000\t" + NOP_LINE


def test_unterminated_string_is_truncated():
    with pytest.raises(TruncatedInstructionError):
        disassemble(b"Hell")


def test_main_prints_listing(tmp_path, capsys):
    data = bytes.fromhex("05000012") + b"\xff" * 4
    path = tmp_path / "prog.bin"
    path.write_bytes(data)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == disassemble(data)


def test_main_requires_argument(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err