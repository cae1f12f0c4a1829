# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from . import types as ppm
from .error import TruncatedStream


class Tokenizer:
    """
    Splits a byte stream into whitespace-delimited tokens.

    Line comments are skipped:

        P3
        1920 1080 # Width Height
        255

    yields "P3", "1920", "1080", "255".

    The stream cannot be moved back. The only buffer is the one-character
    lookahead in ``next_char``, so callers must be done with the current
    character before calling ``read_char`` again.
    """

    def __init__(self, source: ppm.Source) -> None:
        self.source = source
        self.next_char: str | None = None
        self.line_num = 1
        # line on which the most recent token started
        self.token_line = 1
        self._prev_char: str | None = None

    def read_char(self) -> bool:
        """
        Load the next character into ``next_char``.

        Returns:
            bool: False (and ``next_char`` = None) at end of stream.
        """
        data, is_complete = self.source.read(1)
        if not is_complete:
            self.next_char = None
            return False

        char = data.decode("latin-1")
        # CR, LF and CR-LF each count as one newline
        if char == ppm.LINE_FEED and self._prev_char != ppm.RETURN:
            self.line_num += 1
        elif char == ppm.RETURN:
            self.line_num += 1
        self._prev_char = char

        self.next_char = char
        return True

    def _skip_line(self) -> None:
        # read until end of stream or until end of line
        while self.read_char():
            if self.next_char in ppm.new_line:
                break

    def next_token(self) -> str | None:
        """
        Get the next token.

        Returns:
            str: Non-empty token, or None if the stream holds no more tokens.
        """
        while True:
            # space eating cycle
            while self.read_char():
                if self.next_char not in ppm.delimiters:
                    break

            if self.next_char is None:
                return None

            if self.next_char == ppm.COMMENT:
                self._skip_line()
                continue

            self.token_line = self.line_num
            token = [self.next_char]
            while self.read_char():
                if self.next_char in ppm.delimiters:
                    break
                token.append(self.next_char)

            return "".join(token)

    def next_chunk(self, count: int) -> list[str]:
        """
        Get ``count`` tokens.

        Raises:
            TruncatedStream: If input ends first. The partial chunk is dropped.
        """
        chunk = []
        for _ in range(count):
            token = self.next_token()
            if token is None:
                raise TruncatedStream(
                    f"expected {count} tokens, stream ended after {len(chunk)}",
                    line=self.line_num,
                )
            chunk.append(token)
        return chunk
