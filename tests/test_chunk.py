import pytest

from sexc.chunk import Chunk
from sexc.opcode import Instruction, OpCode


def test_write_value_returns_sequential_indices():
    chunk = Chunk()
    indices = [chunk.write_value(v) for v in (1.0, 2.5, -3.0)]
    assert indices == [0, 1, 2]


def test_get_value_round_trip():
    chunk = Chunk()
    idx = chunk.write_value(2.5)
    assert chunk.get_value(idx) == 2.5


def test_get_value_missing_raises():
    chunk = Chunk()
    chunk.write_value(1.0)
    with pytest.raises(IndexError, match="Value not found!"):
        chunk.get_value(1)
    with pytest.raises(IndexError):
        chunk.get_value(-1)


def test_write_code_appends_in_order():
    chunk = Chunk()
    chunk.write_code(Instruction(OpCode.NEGATE))
    chunk.write_code(Instruction(OpCode.RETURN))
    assert [i.op for i in chunk.code] == [OpCode.NEGATE, OpCode.RETURN]


def test_disassemble_listing(capsys):
    chunk = Chunk()
    idx = chunk.write_value(2.0)
    chunk.write_code(Instruction(OpCode.CONSTANT, idx))
    chunk.write_code(Instruction(OpCode.NEGATE))
    chunk.write_code(Instruction(OpCode.RETURN))
    lines = chunk.disassemble()
    assert lines == ["0000 const 0 (2)", "0002 -", "0003 return"]
    assert capsys.readouterr().out.splitlines() == lines


def test_disassemble_invalid_constant_index():
    chunk = Chunk()
    chunk.write_code(Instruction(OpCode.CONSTANT, 5))
    chunk.write_code(Instruction(OpCode.ADD))
    lines = chunk.disassemble()
    assert lines == ["0000 const 5 (Invalid Index)", "0001 +"]


def test_disassemble_fractional_value():
    chunk = Chunk()
    chunk.write_code(Instruction(OpCode.CONSTANT, chunk.write_value(1.5)))
    assert chunk.disassemble() == ["0000 const 0 (1.5)"]


def test_disassemble_empty_chunk(capsys):
    assert Chunk().disassemble() == []
    assert capsys.readouterr().out == ""