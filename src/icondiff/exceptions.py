"""Exception hierarchy for icondiff."""

from collections.abc import Iterable


class IconDiffError(Exception):
    """Base exception for all icondiff errors."""

    pass


class FontError(IconDiffError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class MissingTableError(FontError):
    """A table required for the diff is absent from the font."""

    def __init__(self, path: str, tag: str) -> None:
        self.path = path
        self.tag = tag
        super().__init__(f"Font '{path}' has no '{tag}' table")


class GlyphNotFoundError(FontError):
    """Requested icon has no glyph in the font."""

    def __init__(self, icon_name: str) -> None:
        self.icon_name = icon_name
        super().__init__(f"No glyph for icon '{icon_name}'")


class AxisError(IconDiffError):
    """Errors related to variation axes."""

    pass


class UnknownAxisError(AxisError):
    """Axis tag has no sampling policy and strict sampling is on."""

    def __init__(self, tag: str, known_tags: Iterable[str]) -> None:
        self.tag = tag
        self.known_tags = sorted(known_tags)
        super().__init__(
            f"No sampling policy for axis '{tag}'; known axes: {', '.join(self.known_tags)}"
        )


class AxisRangeError(AxisError):
    """Axis record violates min <= default <= max."""

    def __init__(self, tag: str, minimum: int, default: int, maximum: int) -> None:
        self.tag = tag
        super().__init__(
            f"Axis '{tag}' has inconsistent range: min={minimum}, "
            f"default={default}, max={maximum}"
        )


class OutlineParseError(IconDiffError):
    """Rendered outline could not be parsed."""

    def __init__(self, icon_name: str, reason: str) -> None:
        self.icon_name = icon_name
        self.reason = reason
        super().__init__(f"Invalid path for {icon_name}: {reason}")


class InvalidFilterError(IconDiffError):
    """Icon name filter is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid filter '{pattern}': {reason}")


class ArtifactWriteError(IconDiffError):
    """Failure artifact could not be persisted."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Unable to write {key}: {reason}")
