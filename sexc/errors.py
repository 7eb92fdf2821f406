"""Errors raised while turning source text into tokens."""


class LexerError(Exception):
    """Raised when the lexer meets input it cannot tokenize."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message