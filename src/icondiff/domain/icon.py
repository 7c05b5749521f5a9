"""Icon identity, independent of glyph indexing."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IconIdentifier:
    """The names and codepoints identifying one icon.

    Glyph indices differ arbitrarily between builds so they are never part
    of the identity. Both fields are kept sorted; use `create` to build one
    from unordered input.

    Attributes:
        names: Sorted ligature names (e.g., ("home",))
        codepoints: Sorted codepoints mapped to the icon
    """

    names: tuple[str, ...]
    codepoints: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("An icon needs at least one name")

    @classmethod
    def create(cls, names: Iterable[str], codepoints: Iterable[int] = ()) -> "IconIdentifier":
        """Build an identifier, sorting and deduplicating its parts."""
        return cls(
            names=tuple(sorted(set(names))),
            codepoints=tuple(sorted(set(codepoints))),
        )

    @property
    def key(self) -> str:
        """Canonical report key: the comma-joined sorted names."""
        return ",".join(self.names)

    @property
    def primary_name(self) -> str:
        """Name used to render the icon and label its artifacts."""
        return self.names[0]
