"""Bytecode operations understood by the virtual machine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

Value = float


class OpCode(Enum):
    """Kinds of instruction a chunk can hold."""

    CONSTANT = auto()
    NEGATE = auto()
    RETURN = auto()

    # binary operations
    ADD = auto()
    SUB = auto()
    MULT = auto()
    DIV = auto()

    def __str__(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    OpCode.RETURN: "return",
    OpCode.NEGATE: "-",
    OpCode.ADD: "+",
    OpCode.SUB: "-",
    OpCode.MULT: "*",
    OpCode.DIV: "/",
    OpCode.CONSTANT: "const",
}


@dataclass(frozen=True)
class Instruction:
    """One operation; CONSTANT instructions carry an index into the value table."""

    op: OpCode
    index: int | None = None

    def __post_init__(self) -> None:
        if self.op is OpCode.CONSTANT:
            if (
                not isinstance(self.index, int)
                or isinstance(self.index, bool)
                or self.index < 0
            ):
                raise ValueError(
                    f"CONSTANT needs a non-negative integer index, got {self.index!r}"
                )
        elif self.index is not None:
            raise ValueError(f"{self.op.name} takes no index")

    def __str__(self) -> str:
        return str(self.op)


def _format_value(value: float) -> str:
    """Render a value in plain decimal notation, without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")