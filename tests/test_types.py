# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import pytest

from ppmforge.core import types as ppm
from ppmforge.core.error import NonRectangularMatrix


class TestColor:

    def test_index_and_name_share_storage(self):
        color = ppm.Color(0.1, 0.2, 0.3)
        assert (color[1], color[2], color[3]) == (0.1, 0.2, 0.3)
        assert (color["red"], color["Green"], color["BLUE"]) == (0.1, 0.2, 0.3)

    def test_write_by_index_reads_by_name(self):
        color = ppm.Color()
        color[1] = 0.25
        color.put(2, 0.5)
        color["blue"] = 0.75
        assert (color.red, color.green, color.blue) == (0.25, 0.5, 0.75)

    def test_write_by_name_reads_by_index(self):
        color = ppm.Color()
        color.green = 1.0
        assert color[2] == color.get("green") == 1.0

    @pytest.mark.parametrize("index", [0, 4, -1])
    def test_index_out_of_range(self, index):
        with pytest.raises(IndexError):
            ppm.Color()[index]

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            ppm.Color()["alpha"]

    @pytest.mark.parametrize("index", [1.0, None, True])
    def test_bad_index_type(self, index):
        with pytest.raises(TypeError):
            ppm.Color()[index]

    def test_iterates_in_component_order(self):
        assert list(ppm.Color(0.1, 0.2, 0.3)) == [0.1, 0.2, 0.3]
        assert len(ppm.Color()) == 3

    def test_copy_is_independent(self):
        color = ppm.Color(1.0, 1.0, 1.0)
        other = color.copy()
        other.red = 0.0
        assert color.red == 1.0


class TestPixmap:

    def test_dimensions_are_derived(self):
        pixmap = ppm.Pixmap.filled(3, 2)
        assert (pixmap.width, pixmap.height) == (3, 2)
        assert len(pixmap) == 2
        assert len(pixmap[0]) == 3

    def test_ragged_rows_are_rejected(self):
        with pytest.raises(NonRectangularMatrix, match="row 2"):
            ppm.Pixmap([[ppm.Color(), ppm.Color()], [ppm.Color()]])

    @pytest.mark.parametrize("rows", [[], [[]], [[], []]])
    def test_empty_matrix_is_rejected(self, rows):
        with pytest.raises(NonRectangularMatrix):
            ppm.Pixmap(rows)

    def test_pixels_must_be_colors(self):
        with pytest.raises(TypeError):
            ppm.Pixmap([[(0.0, 0.0, 0.0)]])

    def test_rows_are_copied(self):
        row = [ppm.Color()]
        pixmap = ppm.Pixmap([row])
        row.append(ppm.Color())
        assert pixmap.width == 1

    def test_filled_pixels_are_distinct(self):
        pixmap = ppm.Pixmap.filled(2, 1, ppm.Color(1.0, 0.0, 0.0))
        pixmap[0][0].red = 0.5
        assert pixmap[0][1].red == 1.0

    def test_equality(self):
        assert ppm.Pixmap.filled(2, 2) == ppm.Pixmap.filled(2, 2)
        assert ppm.Pixmap.filled(2, 2) != ppm.Pixmap.filled(2, 1)


class TestStreams:

    def test_source_reports_short_reads(self):
        source = ppm.BytesSource(b"abc")
        assert source.read(2) == (b"ab", True)
        assert source.read(2) == (b"c", False)
        assert source.read(1) == (b"", False)

    def test_zero_byte_read_is_neutral(self):
        assert ppm.BytesSource(b"").read(0) == (b"", True)

    def test_negative_read(self):
        with pytest.raises(ValueError):
            ppm.BytesSource(b"x").read(-1)

    def test_file_source_and_sink(self, tmp_path):
        path = str(tmp_path / "data.bin")
        with ppm.FileSink.open(path) as sink:
            assert sink.write("P3 ") == (3, True)
            assert sink.write(b"1") == (1, True)
        with ppm.FileSource.open(path) as source:
            assert source.read(10) == (b"P3 1", False)
        assert source.closed

    def test_wraps_caller_stream_without_closing_it(self):
        stream = io.BytesIO()
        with ppm.FileSink(stream) as sink:
            sink.write("x")
        assert not stream.closed
        assert stream.getvalue() == b"x"

    def test_text_stream_uses_underlying_buffer(self):
        stream = io.TextIOWrapper(io.BytesIO(b"P3"), encoding="ascii")
        assert ppm.FileSource(stream).read(2) == (b"P3", True)

    def test_closed_sink_writes_nothing(self):
        sink = ppm.BytesSink()
        sink.close()
        assert sink.write("x") == (0, False)
