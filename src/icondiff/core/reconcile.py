"""Reconciliation of the icon and location sets of two fonts."""

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from icondiff.domain import IconIdentifier, Location

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class Reconciliation(Generic[T]):
    """Partition of the union of two sets.

    Attributes:
        only_left: Items missing from the right set, in canonical order
        only_right: Items missing from the left set, in canonical order
        common: Items in both sets, in canonical order
    """

    only_left: list[T]
    only_right: list[T]
    common: list[T]

    @property
    def is_consistent(self) -> bool:
        """True when both sets were equal."""
        return not self.only_left and not self.only_right

    @property
    def defect_count(self) -> int:
        return len(self.only_left) + len(self.only_right)


def reconcile(
    left: Iterable[T],
    right: Iterable[T],
    key: Callable[[T], Any],
) -> Reconciliation[T]:
    """Split two sets into left-only, right-only and common items.

    Args:
        left: Items of the left font
        right: Items of the right font
        key: Canonical sort key for reporting order

    Returns:
        Reconciliation with every list sorted by key
    """
    left_set = set(left)
    right_set = set(right)
    return Reconciliation(
        only_left=sorted(left_set - right_set, key=key),
        only_right=sorted(right_set - left_set, key=key),
        common=sorted(left_set & right_set, key=key),
    )


def icon_key(icon: IconIdentifier) -> tuple[str, tuple[int, ...]]:
    # Codepoints break ties between icons sharing their names
    return (icon.key, icon.codepoints)


def reconcile_icons(
    left: Iterable[IconIdentifier], right: Iterable[IconIdentifier]
) -> Reconciliation[IconIdentifier]:
    """Reconcile icon sets, ordered by comma-joined sorted names."""
    return reconcile(left, right, key=icon_key)


def reconcile_locations(
    left: Iterable[Location], right: Iterable[Location]
) -> Reconciliation[Location]:
    """Reconcile constellations, ordered by canonical coordinates."""
    return reconcile(left, right, key=Location.sort_key)
