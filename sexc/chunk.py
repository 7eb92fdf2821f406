"""A chunk of bytecode together with its constant table."""

from __future__ import annotations

from sexc.opcode import Instruction, OpCode, Value, _format_value


class Chunk:
    """A sequence of instructions and the constants they refer to."""

    def __init__(self) -> None:
        self.code: list[Instruction] = []
        self._values: list[Value] = []

    def write_code(self, instruction: Instruction) -> None:
        """Append an instruction."""
        self.code.append(instruction)

    def write_value(self, value: Value) -> int:
        """Store a constant and return its index."""
        self._values.append(float(value))
        return len(self._values) - 1

    def get_value(self, idx: int) -> Value:
        """Return the constant at ``idx``."""
        if 0 <= idx < len(self._values):
            return self._values[idx]
        raise IndexError("Value not found!")

    def disassemble(self) -> list[str]:
        """Print a listing of the chunk and return its lines."""
        lines = []
        offset = 0
        for instruction in self.code:
            text, width = self._format(instruction)
            line = f"{offset:04} {text}"
            print(line)
            lines.append(line)
            offset += width
        return lines

    def _format(self, instruction: Instruction) -> tuple[str, int]:
        if instruction.op is OpCode.CONSTANT:
            idx = instruction.index
            if idx is not None and idx < len(self._values):
                value = _format_value(self._values[idx])
                return f"{instruction} {idx} ({value})", 2
            return f"{instruction} {idx} (Invalid Index)", 1
        return str(instruction), 1