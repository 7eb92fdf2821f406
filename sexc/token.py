"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the lexer can produce."""

    # operators and punctuation
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    EQUAL = auto()
    DOUBLE_EQUAL = auto()
    NOT = auto()
    BANG_EQUAL = auto()
    LESS_THAN = auto()
    LESS_EQUAL = auto()
    GREATER_THAN = auto()
    GREATER_EQUAL = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_CURLY = auto()
    RIGHT_CURLY = auto()
    LEFT_SQUARE = auto()
    RIGHT_SQUARE = auto()
    COMMA = auto()
    SEMICOLON = auto()

    # keywords
    LET = auto()
    CONST = auto()
    FUNC = auto()
    IF = auto()
    FOR = auto()
    WHILE = auto()

    # types
    STRUCT = auto()
    INT_TYPE = auto()
    FLOAT_TYPE = auto()
    STRING_TYPE = auto()
    CHAR_TYPE = auto()
    BOOL_TYPE = auto()

    # literals
    INT = auto()
    FLOAT = auto()
    STRING = auto()
    IDENTIFIER = auto()

    @property
    def is_literal(self) -> bool:
        """True for kinds that carry a value."""
        return self in _LITERAL_TYPES


_LITERAL_TYPES = {
    TokenType.INT: int,
    TokenType.FLOAT: float,
    TokenType.STRING: str,
    TokenType.IDENTIFIER: str,
}


@dataclass(frozen=True)
class Token:
    """A token kind, with a value for literals and identifiers."""

    kind: TokenType
    value: int | float | str | None = None

    def __post_init__(self) -> None:
        expected = _LITERAL_TYPES.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise ValueError(f"{self.kind.name} tokens carry no value")
        elif not isinstance(self.value, expected) or isinstance(self.value, bool):
            raise TypeError(
                f"{self.kind.name} token needs a {expected.__name__} value, "
                f"got {self.value!r}"
            )

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"