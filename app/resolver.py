from typing import Iterable, Optional

from app.tiers import TierDefinition


def resolve_tier(quantity: int, tiers: Iterable[TierDefinition]) -> Optional[TierDefinition]:
    """Pick the tier with the highest threshold the quantity reaches.

    Selection is by threshold only, never by discount size. On equal
    thresholds the first tier in schedule order is kept.
    """
    best = None
    for tier in tiers:
        if quantity < tier.threshold:
            continue
        if best is None or tier.threshold > best.threshold:
            best = tier
    return best
