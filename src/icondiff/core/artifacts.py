"""Failure artifacts for offline inspection.

When two renderings disagree both sides are persisted under keys derived
from (icon, side, ordinal), so reruns overwrite earlier artifacts and
different icons or ordinals never collide. Where the bytes go is decided by
an ArtifactSink: a directory for real runs, memory for tests.
"""

from pathlib import Path
from typing import Protocol

from icondiff.core.compare import extract_path
from icondiff.domain import parse_outline
from icondiff.exceptions import ArtifactWriteError

PATH_COMMANDS = frozenset("MmLlHhVvCcSsQqTtAaZz")


class ArtifactSink(Protocol):
    """Destination for failure artifacts."""

    def write(self, key: str, data: bytes) -> None: ...


class DirectorySink:
    """Writes artifacts as files in a directory, replacing existing ones."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def write(self, key: str, data: bytes) -> None:
        path = self.root / key
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise ArtifactWriteError(str(path), str(e)) from e


class MemorySink:
    """Keeps artifacts in a dict, keyed like DirectorySink file names."""

    def __init__(self) -> None:
        self.artifacts: dict[str, bytes] = {}

    def write(self, key: str, data: bytes) -> None:
        self.artifacts[key] = data

    def keys(self) -> list[str]:
        return sorted(self.artifacts)


def reformat_svg(icon_name: str, svg: str) -> str:
    """Put the path element and every path command on its own line."""
    svg = svg.replace("<path", "\n  <path").replace("</svg>", "\n</svg>")
    preamble, path_data, suffix = extract_path(icon_name, svg)

    lines = [preamble]
    command_starts = [i for i, c in enumerate(path_data) if c in PATH_COMMANDS]
    ends = command_starts[1:] + [len(path_data)]
    for start, end in zip(command_starts, ends):
        lines.append(path_data[start:end].strip())
    return "\n".join(lines) + "\n" + suffix


def segment_dump(icon_name: str, svg: str) -> str:
    """One parsed segment per line, subpaths separated by a blank line."""
    outline = parse_outline(icon_name, extract_path(icon_name, svg)[1])
    text = ""
    for subpath in outline:
        for segment in subpath.segments:
            text += segment.describe() + "\n"
        text += "\n"
    return text


class FailureArtifactWriter:
    """Persists both sides of a mismatching rendering.

    Example:
        writer = FailureArtifactWriter(DirectorySink(Path("/tmp")))
        writer.write_outline("home", "left", svg, 1)
        # /tmp/failure.home.left.1.svg and /tmp/failure.home.left.1.segments
    """

    def __init__(self, sink: ArtifactSink) -> None:
        self.sink = sink

    @staticmethod
    def artifact_key(icon_name: str, side: str, ordinal: int, suffix: str) -> str:
        return f"failure.{icon_name}.{side}.{ordinal}.{suffix}"

    def write_outline(self, icon_name: str, side: str, svg: str, ordinal: int) -> list[str]:
        """Write the reformatted SVG and its segment dump.

        Returns:
            Keys written
        """
        keys = [
            self.artifact_key(icon_name, side, ordinal, "svg"),
            self.artifact_key(icon_name, side, ordinal, "segments"),
        ]
        self.sink.write(keys[0], reformat_svg(icon_name, svg).encode("utf-8"))
        self.sink.write(keys[1], segment_dump(icon_name, svg).encode("utf-8"))
        return keys

    def write_raster(self, icon_name: str, side: str, png: bytes, ordinal: int) -> list[str]:
        """Write the raw pixel buffer.

        Returns:
            Keys written
        """
        key = self.artifact_key(icon_name, side, ordinal, "png")
        self.sink.write(key, png)
        return [key]
