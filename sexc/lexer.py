"""Lexer turning source text into a list of tokens."""

from __future__ import annotations

from sexc.common import SourceFile
from sexc.errors import LexerError
from sexc.token import Token, TokenType

_INT_MAX = 2**31 - 1

_KEYWORDS = {
    "let": TokenType.LET,
    "const": TokenType.CONST,
    "fn": TokenType.FUNC,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "while": TokenType.WHILE,
    "struct": TokenType.STRUCT,
    "int": TokenType.INT_TYPE,
    "double": TokenType.FLOAT_TYPE,
    "char": TokenType.CHAR_TYPE,
    "string": TokenType.STRING_TYPE,
}

_SINGLE = {
    ord("+"): TokenType.PLUS,
    ord("-"): TokenType.MINUS,
    ord("*"): TokenType.MULTIPLY,
    ord("("): TokenType.LEFT_PAREN,
    ord(")"): TokenType.RIGHT_PAREN,
    ord("{"): TokenType.LEFT_CURLY,
    ord("}"): TokenType.RIGHT_CURLY,
    ord("["): TokenType.LEFT_SQUARE,
    ord("]"): TokenType.RIGHT_SQUARE,
    ord(","): TokenType.COMMA,
    ord(";"): TokenType.SEMICOLON,
}

# symbol -> (kind when followed by '=', kind otherwise)
_WITH_EQUAL = {
    ord("="): (TokenType.DOUBLE_EQUAL, TokenType.EQUAL),
    ord("!"): (TokenType.BANG_EQUAL, TokenType.NOT),
    ord("<"): (TokenType.LESS_EQUAL, TokenType.LESS_THAN),
    ord(">"): (TokenType.GREATER_EQUAL, TokenType.GREATER_THAN),
}

_EQ = ord("=")
_SLASH = ord("/")
_STAR = ord("*")
_QUOTE = ord('"')
_DOT = ord(".")
_UNDERSCORE = ord("_")
_ZERO = ord("0")
_WHITESPACE = frozenset(b" \t\n\r\x0c")
_NEWLINES = frozenset(b"\n\r")


def _is_alpha(ch: int) -> bool:
    return bytes((ch,)).isalpha() or ch == _UNDERSCORE


def _is_digit(ch: int) -> bool:
    return bytes((ch,)).isdigit()


class Lexer:
    """Scans a source file byte by byte, collecting tokens."""

    def __init__(self, file: SourceFile) -> None:
        self.file = file
        self.line_number = 1
        self.pos = 0
        self.tokens: list[Token] = []
        self.keywords = dict(_KEYWORDS)

    def peek(self) -> int | None:
        """Return the current byte without consuming it."""
        return self.file.get_ch(self.pos)

    def peek_next(self) -> int | None:
        """Return the byte after the current one without consuming anything."""
        return self.file.get_ch(self.pos + 1)

    def advance(self) -> int | None:
        """Consume and return the current byte, or None at the end."""
        ch = self.file.get_ch(self.pos)
        if ch is not None:
            self.pos += 1
        return ch

    def _alphabet(self) -> None:
        start = self.pos
        while (ch := self.peek()) is not None and _is_alpha(ch):
            self.advance()
        lexeme = self.file.slice(start, self.pos)
        kind = self.keywords.get(lexeme)
        if kind is not None:
            self.tokens.append(Token(kind))
        else:
            self.tokens.append(Token(TokenType.IDENTIFIER, lexeme))

    def _numeric(self) -> None:
        is_float = False
        digit = 0
        mantissa = 0.0
        while (ch := self.peek()) is not None and (_is_digit(ch) or ch == _DOT):
            self.advance()
            if ch == _DOT:
                if is_float:
                    raise LexerError("Unknown symbol '.' expected a digit!")
                is_float = True
            elif is_float:
                # Only the last fractional digit is kept, as tenths.
                mantissa = (ch - _ZERO) / 10.0
            else:
                digit = digit * 10 + (ch - _ZERO)
                if digit > _INT_MAX:
                    raise LexerError("Integer literal out of range!")

        if is_float:
            self.tokens.append(Token(TokenType.FLOAT, float(digit) + mantissa))
        else:
            self.tokens.append(Token(TokenType.INT, digit))

    def _string_literal(self) -> Token:
        start = self.pos
        while True:
            ch = self.advance()
            if ch is None:
                raise LexerError(f"Expected '\"' in line {self.line_number}")
            if ch == _QUOTE:
                break
        return Token(TokenType.STRING, self.file.slice(start, self.pos - 1))

    def _symbol(self) -> None:
        ch = self.advance()
        if ch is None:
            raise LexerError("Expected Symbol: Found Nothing!")

        if ch in _SINGLE:
            token = Token(_SINGLE[ch])
        elif ch in _WITH_EQUAL:
            double, single = _WITH_EQUAL[ch]
            if self.peek() == _EQ:
                self.advance()
                token = Token(double)
            else:
                token = Token(single)
        elif ch == _SLASH:
            if self.peek() in (_SLASH, _STAR):
                raise LexerError(f"Comments are not supported in line {self.line_number}!")
            token = Token(TokenType.DIVIDE)
        elif ch == _QUOTE:
            token = self._string_literal()
        else:
            raise LexerError(f"Unknown Symbol {chr(ch)}!")

        self.tokens.append(token)

    def handle_whitespace(self) -> None:
        """Consume one whitespace byte, counting line breaks."""
        ch = self.advance()
        if ch is not None and ch in _NEWLINES:
            self.line_number += 1

    def parse(self) -> list[Token]:
        """Tokenize the rest of the file and return all tokens so far."""
        while (ch := self.peek()) is not None:
            if _is_alpha(ch):
                self._alphabet()
            elif _is_digit(ch):
                self._numeric()
            elif ch in _WHITESPACE:
                self.handle_whitespace()
            else:
                self._symbol()
        return list(self.tokens)