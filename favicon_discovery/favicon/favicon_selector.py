"""Favicon ranking logic for ordering verified candidates best first"""

from functools import cmp_to_key
from typing import Iterable

from favicon_discovery.models import Icon, IconKind


def _shorter_url_first(icon: Icon, other: Icon) -> int:
    """Strictly shorter URL wins, otherwise the second operand wins."""
    return -1 if len(icon.url) < len(other.url) else 1


def compare_icons(icon: Icon, other: Icon) -> int:
    """Compare two icons, returning a negative number if `icon` ranks first."""
    icon_is_vector = icon.kind is IconKind.VECTOR
    other_is_vector = other.kind is IconKind.VECTOR

    # If both are vector graphics, use URL length as tie-breaker
    if icon_is_vector and other_is_vector:
        return _shorter_url_first(icon, other)

    # Sort vector graphics before bitmaps
    if icon_is_vector:
        return -1
    if other_is_vector:
        return 1

    # If bitmap size is the same, use URL length as tie-breaker
    if icon.area == other.area:
        return _shorter_url_first(icon, other)

    return -1 if icon.area > other.area else 1


def rank_icons(icons: Iterable[Icon]) -> list[Icon]:
    """Return the icons sorted best first.

    The sort is stable, so icons the comparator cannot separate keep their input order.
    """
    return sorted(icons, key=cmp_to_key(compare_icons))
