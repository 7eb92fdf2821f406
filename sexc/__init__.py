"""A lexer and a stack-based bytecode virtual machine for a toy language."""

__version__ = "0.1.0"