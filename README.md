# sexc

A small toolkit for a toy programming language: a lexer that turns source
text into tokens, and a stack-based bytecode virtual machine.

## Installation

```
pip install .
```

## Command line

Tokenize a source file and print the resulting tokens, one per line:

```
sexc program.sx
```

The command first reports the file it reads and how many bytes it read.
If the file cannot be read, or the lexer rejects its contents, a message is
written to standard error and the command exits with status 1.

## Library use

### Lexing

```python
from sexc.common import SourceFile
from sexc.lexer import Lexer

lexer = Lexer(SourceFile.mock('let name = "test";'))
tokens = lexer.parse()
# [Token(LET), Token(IDENTIFIER, 'name'), Token(EQUAL),
#  Token(STRING, 'test'), Token(SEMICOLON)]
```

Tokens are `sexc.token.Token` values: a `TokenType` kind, plus a value for
`INT`, `FLOAT`, `STRING` and `IDENTIFIER` tokens.

The lexer recognises:

- the keywords `let`, `const`, `fn`, `for`, `if`, `while` and `struct`;
- the type names `int`, `double`, `char` and `string`;
- identifiers made of ASCII letters and underscores;
- integer literals up to 2^31 - 1;
- floating-point literals such as `72.8` (only the last digit after the
  point is kept, as tenths);
- double-quoted strings;
- the operators `+ - * / = == ! != < <= > >=`, brackets `() {} []`,
  commas and semicolons.

`Lexer.line_number` counts the line breaks seen so far. Malformed input
raises `sexc.errors.LexerError`: unknown symbols, a second `.` in a number,
an unterminated string, an integer out of range, or a comment (`//` or
`/*`), which is not supported.

Use `sexc.common.read_file(path)` to load a UTF-8 file from disk as a
`SourceFile`.

### Bytecode

```python
from sexc.chunk import Chunk
from sexc.opcode import Instruction, OpCode
from sexc.vm import Vm

chunk = Chunk()
idx = chunk.write_value(2.0)
chunk.write_code(Instruction(OpCode.CONSTANT, idx))
chunk.write_code(Instruction(OpCode.NEGATE))
chunk.write_code(Instruction(OpCode.RETURN))
chunk.disassemble()          # prints and returns the listing

vm = Vm(chunk)
result = vm.interpret()      # InterpretResult.OK
vm.stack                     # [-2.0]
```

The machine supports `CONSTANT`, `NEGATE`, `RETURN`, `ADD`, `SUB`, `MULT`
and `DIV`. `Vm.interpret` runs every instruction in order (`RETURN` does
not stop execution) and returns `InterpretResult.OK`. A reference to a
constant that does not exist, or popping from an empty stack, raises
`VmError`.

## What it does not do

There is no parser or compiler: tokens from the lexer cannot be turned into
bytecode, so source programs cannot be run. Chunks for the virtual machine
must be built by hand through the `Chunk` API.

## Running the tests

```
pip install .[test]
pytest
```