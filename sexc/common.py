"""Source files as seen by the lexer: byte-addressed text with a path."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from os import PathLike
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """Text of a program together with the path it was read from."""

    content: str
    path: str = ""

    @cached_property
    def data(self) -> bytes:
        """The content encoded as UTF-8 bytes."""
        return self.content.encode("utf-8")

    def get_ch(self, idx: int) -> int | None:
        """Return the byte at ``idx``, or None when past the end."""
        if 0 <= idx < len(self.data):
            return self.data[idx]
        return None

    def slice(self, start: int, end: int) -> str:
        """Return the text between byte offsets ``start`` and ``end``."""
        if not 0 <= start <= end <= len(self.data):
            raise IndexError(
                f"byte range {start}..{end} out of bounds for length {len(self.data)}"
            )
        return self.data[start:end].decode("utf-8")

    @classmethod
    def mock(cls, content: str) -> SourceFile:
        """Build an in-memory file with no path."""
        return cls(content, "")


def read_file(path: str | PathLike[str]) -> SourceFile:
    """Read a UTF-8 source file, reporting progress on stdout."""
    print(f"Tried to Read {path}")
    data = Path(path).read_bytes()
    content = data.decode("utf-8")
    print(f"Read Bytes {len(data)}")
    return SourceFile(content, str(path))