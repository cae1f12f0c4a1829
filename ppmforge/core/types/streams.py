# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge Types Streams Module

Byte source and byte sink abstractions used by the codec. The decoder only
needs ``read(n)`` and the encoder only needs ``write(data)``; anything that
provides those two methods with the same contract can be plugged in.

Source contract:
    read(num_bytes) -> (data, is_complete)

    If fewer than ``num_bytes`` bytes are available we return what we could
    read and ``is_complete`` is False. An empty read at end of stream is the
    typical case. Reading zero bytes is a neutral operation.

Sink contract:
    write(data) -> (num_bytes_written, is_completed)
"""

from __future__ import annotations

import io
import logging
from typing import IO, Union

logger = logging.getLogger(__name__)


class Source:
    """Base class for byte sources."""

    name = "<source>"

    def read(self, num_bytes: int) -> tuple[bytes, bool]:
        raise NotImplementedError("Subclasses must implement read")

    def close(self) -> None:
        pass

    def __enter__(self) -> Source:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Sink:
    """Base class for byte sinks."""

    name = "<sink>"

    def write(self, data: Union[bytes, str]) -> tuple[int, bool]:
        raise NotImplementedError("Subclasses must implement write")

    def close(self) -> None:
        pass

    def __enter__(self) -> Sink:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _binary(stream: IO) -> IO:
    # text streams such as sys.stdin/sys.stdout expose their bytes via .buffer
    return getattr(stream, "buffer", stream)


class FileSource(Source):
    """Reads bytes from a binary file object."""

    def __init__(self, stream: IO[bytes], name: str | None = None, owns_stream: bool = False) -> None:
        self.stream = _binary(stream)
        self.name = name or getattr(stream, "name", "<stream>")
        self.owns_stream = owns_stream
        self.closed = False

    @classmethod
    def open(cls, path: str) -> FileSource:
        """Open a file by name for reading. The source owns the handle."""
        logger.debug("Opening %s for reading", path)
        return cls(open(path, "rb"), name=path, owns_stream=True)

    def read(self, num_bytes: int) -> tuple[bytes, bool]:
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")
        if self.closed:
            return b"", num_bytes == 0
        data = self.stream.read(num_bytes)
        # No end-of-file state in the contract: None/empty is just a short read
        if data is None:
            data = b""
        return data, len(data) == num_bytes

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            if self.owns_stream:
                self.stream.close()


class BytesSource(FileSource):
    """Reads bytes from an in-memory buffer."""

    def __init__(self, data: Union[bytes, bytearray, str], name: str = "<bytes>") -> None:
        if isinstance(data, str):
            data = data.encode("latin-1")
        super().__init__(io.BytesIO(bytes(data)), name=name, owns_stream=True)


class FileSink(Sink):
    """Writes bytes to a binary file object."""

    def __init__(self, stream: IO[bytes], name: str | None = None, owns_stream: bool = False) -> None:
        self.stream = _binary(stream)
        self.name = name or getattr(stream, "name", "<stream>")
        self.owns_stream = owns_stream
        self.closed = False

    @classmethod
    def open(cls, path: str) -> FileSink:
        """Create (or truncate) a file by name for writing."""
        logger.debug("Opening %s for writing", path)
        return cls(open(path, "wb"), name=path, owns_stream=True)

    def write(self, data: Union[bytes, str]) -> tuple[int, bool]:
        if isinstance(data, str):
            data = data.encode("ascii")
        if self.closed:
            return 0, len(data) == 0
        written = self.stream.write(data)
        # raw streams may report short writes; buffered ones return None or len
        if written is None:
            written = len(data)
        return written, written == len(data)

    def flush(self) -> None:
        if not self.closed and hasattr(self.stream, "flush"):
            self.stream.flush()

    def close(self) -> None:
        if not self.closed:
            self.flush()
            self.closed = True
            if self.owns_stream:
                self.stream.close()


class BytesSink(FileSink):
    """Collects written bytes in memory."""

    def __init__(self, name: str = "<bytes>") -> None:
        self._buffer = io.BytesIO()
        super().__init__(self._buffer, name=name, owns_stream=False)

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()
