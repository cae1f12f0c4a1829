# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge Types Constants Module

Format constants and character classes shared by the decoder and encoder.
"""

# Plain portable pixmap magic label. Matched exactly: no trimming, no case folding.
FORMAT_LABEL = "P3"

# Max color component value. The format allows any integer in [1, 65535];
# we fix it to 255 and reject every other declared value.
MAX_COLOR_VALUE = 255

# Number of color components per pixel (red, green, blue)
NUM_COLOR_COMPONENTS = 3

# Number of tokens in the header (width, height, max color value)
NUM_HEADER_ITEMS = 3

# Character classes
TAB = "\t"
LINE_FEED = "\n"
RETURN = "\r"
SPACE = " "
COMMENT = "#"

# the white_space set
white_space = frozenset([SPACE, TAB])

# the new_line set
new_line = frozenset([LINE_FEED, RETURN])

# token delimiters: any run of these separates tokens
delimiters = white_space | new_line

# Component names in storage order, used for name-based color access
COMPONENT_NAMES = ("red", "green", "blue")
