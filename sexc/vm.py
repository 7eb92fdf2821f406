"""Stack-based virtual machine that executes a chunk."""

from __future__ import annotations

import math
import operator
from enum import Enum, auto

from sexc.chunk import Chunk
from sexc.opcode import Instruction, OpCode, Value, _format_value


class InterpretResult(Enum):
    """Outcome of running a chunk."""

    OK = auto()
    FAILED = auto()


class VmError(Exception):
    """Raised when execution cannot continue."""


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


_BINARY = {
    OpCode.ADD: operator.add,
    OpCode.SUB: operator.sub,
    OpCode.MULT: operator.mul,
    OpCode.DIV: _divide,
}


class Vm:
    """Executes the instructions of a chunk against a value stack."""

    def __init__(self, chunk: Chunk) -> None:
        self.chunk = chunk
        self.stack: list[Value] = []
        self.ip = 0

    def interpret(self) -> InterpretResult:
        """Run every instruction of the chunk in order."""
        while self.ip < len(self.chunk.code):
            self._run(self.chunk.code[self.ip])
            self.ip += 1
        return InterpretResult.OK

    def _pop(self) -> Value:
        try:
            return self.stack.pop()
        except IndexError:
            raise VmError("Stack underflow!") from None

    def _run(self, instruction: Instruction) -> None:
        op = instruction.op
        if op is OpCode.RETURN:
            return
        if op is OpCode.CONSTANT:
            try:
                value = self.chunk.get_value(instruction.index)
            except IndexError as exc:
                raise VmError(str(exc)) from exc
            self.stack.append(value)
            print(f"Constant {_format_value(value)}")
        elif op is OpCode.NEGATE:
            self.stack.append(-1.0 * self._pop())
        else:
            b = self._pop()
            a = self._pop()
            self.stack.append(_BINARY[op](a, b))