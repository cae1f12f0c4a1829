# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge Types Package - Public API

Re-exports every codec type through one namespace so the rest of the package
can use the ``from .core import types as ppm`` pattern:

- constants.py: format constants and character classes
- streams.py: byte source / byte sink abstractions
- color.py: Color record with positional and named component access
- pixmap.py: rectangular pixel matrix
- tokens.py: intermediate textual form, decoded header, format options

**Usage:**
```python
from ..core import types as ppm

color = ppm.Color(0.0, 0.5, 1.0)
pixmap = ppm.Pixmap([[color]])
source = ppm.BytesSource(b"P3 1 1 255 0 0 0")
```
"""

from .constants import *
from .streams import Source, Sink, FileSource, BytesSource, FileSink, BytesSink
from .color import Color
from .pixmap import Pixmap
from .tokens import Header, PixelTokens, PixmapTokens, FormatOptions
