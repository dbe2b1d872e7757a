"""A writer that bzip2-compresses what is written to it."""

from __future__ import annotations

import bz2
from types import TracebackType
from typing import BinaryIO

BLOCK_SIZE = 9


class Writer:
    """Compresses written data onto an underlying binary stream."""

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        return self._compressor is None

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Compress ``data``, passing any output on; return the bytes consumed."""
        if self._compressor is None:
            raise ValueError("closed")
        view = memoryview(data)
        chunk = self._compressor.compress(view)
        if chunk:
            self._out.write(chunk)
        return view.nbytes

    def close(self) -> None:
        """Flush the compressed stream; the underlying stream stays open."""
        if self._compressor is None:
            raise ValueError("closed")
        compressor, self._compressor = self._compressor, None
        tail = compressor.flush()
        if tail:
            self._out.write(tail)

    def __enter__(self) -> Writer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._compressor is None:
            return
        if exc_type is None:
            self.close()
        else:
            self._compressor = None


def new_writer(out: BinaryIO) -> Writer:
    """Return a writer for bzip2-compressed streams."""
    return Writer(out)