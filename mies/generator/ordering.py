"""Processing order for loaded pages.

Index pages summarize the rest of the site, so they are rendered only after
every other page's model is complete.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import PageResult


def move_index_pages_to_end(
    pages: cabc.Iterable[PageResult],
) -> list[PageResult]:
    """Return ``pages`` with non-index pages first and index pages last.

    Relative order within each group is preserved.

    Raises
    ------
    ValueError
        If any page has not been loaded yet.
    """
    others: list[PageResult] = []
    indices: list[PageResult] = []
    for page in pages:
        if page.require_model().is_index:
            indices.append(page)
        else:
            others.append(page)
    return others + indices


__all__ = ["move_index_pages_to_end"]
