from __future__ import annotations

from typing import Collection, Iterable, List

from learning.errors import InvalidArgument
from learning.models import ModuleCatalogEntry


def recommend(
    catalog: Iterable[ModuleCatalogEntry],
    interests: Collection[str],
    completed: Collection[str],
    limit: int = 5,
) -> List[ModuleCatalogEntry]:
    """
    Modules tagged with one of the learner's interests and not yet completed.

    Catalog order is kept; no interests means no recommendations.
    """
    if limit < 0:
        raise InvalidArgument(f"limit must be >= 0, got {limit}")
    if not interests or limit == 0:
        return []

    wanted = set(interests)
    done = set(completed)
    out: List[ModuleCatalogEntry] = []
    for module in catalog:
        if module.interest_tag not in wanted or module.module_id in done:
            continue
        out.append(module)
        if len(out) >= limit:
            break
    return out
