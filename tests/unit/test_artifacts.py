"""Tests for failure artifact writing."""

import pytest

from icondiff.core.artifacts import (
    DirectorySink,
    FailureArtifactWriter,
    MemorySink,
    reformat_svg,
    segment_dump,
)
from icondiff.exceptions import ArtifactWriteError

SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
    '<path d="M0 0L10 0L10 10Z M20 20L30 20L30 30Z"/></svg>'
)


class TestReformat:
    """Tests for the human readable SVG layout."""

    def test_one_command_per_line(self):
        text = reformat_svg("home", SVG)
        lines = text.splitlines()
        assert lines[0].startswith("<svg")
        assert lines[1] == '  <path d="'
        assert lines[2:10] == ["M0 0", "L10 0", "L10 10", "Z", "M20 20", "L30 20", "L30 30", "Z"]
        assert lines[-2] == '"/>'
        assert lines[-1] == "</svg>"

    def test_segment_dump(self):
        text = segment_dump("home", SVG)
        blocks = text.strip("\n").split("\n\n")
        assert len(blocks) == 2
        assert blocks[0].splitlines() == [
            "Line((0.0, 0.0), (10.0, 0.0))",
            "Line((10.0, 0.0), (10.0, 10.0))",
            "Line((10.0, 10.0), (0.0, 0.0))",
        ]
        assert blocks[1].splitlines()[0] == "Line((20.0, 20.0), (30.0, 20.0))"


class TestFailureArtifactWriter:
    """Tests for artifact naming and persistence."""

    def test_artifact_key(self):
        key = FailureArtifactWriter.artifact_key("home", "left", 3, "svg")
        assert key == "failure.home.left.3.svg"

    def test_write_outline(self):
        sink = MemorySink()
        keys = FailureArtifactWriter(sink).write_outline("home", "right", SVG, 1)

        assert keys == ["failure.home.right.1.svg", "failure.home.right.1.segments"]
        assert sink.keys() == sorted(keys)
        assert b"L10 0\n" in sink.artifacts["failure.home.right.1.svg"]
        assert sink.artifacts["failure.home.right.1.segments"].startswith(b"Line(")

    def test_write_raster(self):
        sink = MemorySink()
        keys = FailureArtifactWriter(sink).write_raster("home", "left", b"\x89PNG", 2)

        assert keys == ["failure.home.left.2.png"]
        assert sink.artifacts["failure.home.left.2.png"] == b"\x89PNG"

    def test_distinct_keys(self):
        sink = MemorySink()
        writer = FailureArtifactWriter(sink)
        for icon in ("home", "star"):
            for side in ("left", "right"):
                for ordinal in (1, 2):
                    writer.write_raster(icon, side, b"", ordinal)
        assert len(sink.keys()) == 8


class TestDirectorySink:
    """Tests for file based artifacts."""

    def test_creates_directory(self, tmp_path):
        root = tmp_path / "artifacts" / "nested"
        DirectorySink(root).write("failure.home.left.1.png", b"abc")
        assert (root / "failure.home.left.1.png").read_bytes() == b"abc"

    def test_overwrites(self, tmp_path):
        sink = DirectorySink(tmp_path)
        sink.write("failure.home.left.1.png", b"first")
        sink.write("failure.home.left.1.png", b"second")
        assert (tmp_path / "failure.home.left.1.png").read_bytes() == b"second"

    def test_write_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_bytes(b"")
        with pytest.raises(ArtifactWriteError):
            DirectorySink(blocker / "sub").write("failure.home.left.1.png", b"abc")
